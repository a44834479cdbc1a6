from dataclasses import dataclass


@dataclass(frozen=True)
class Greeting:
    """Represents the message returned by the message endpoint."""

    message: str

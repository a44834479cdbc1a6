"""Use case producing the backend greeting."""

from app.domain.entities.greeting import Greeting


DEFAULT_GREETING = "Hello from backend server"


def create_greeting() -> Greeting:
    """Return the fixed greeting served by the API."""

    return Greeting(message=DEFAULT_GREETING)

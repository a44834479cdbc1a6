"""Pydantic models describing the greeting payload."""

from __future__ import annotations

from pydantic import BaseModel


class MessageRead(BaseModel):
    """Greeting delivered to the client."""

    message: str

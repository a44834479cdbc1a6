"""Aggregate application use cases."""

from .create_greeting import create_greeting

__all__ = ["create_greeting"]

from fastapi import FastAPI

from .message import router as message_router


def register_routes(app: FastAPI) -> None:
    """Register the API routers on the FastAPI application."""

    app.include_router(message_router)

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure.logging_setup import configure_logging
from app.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH"]
ALLOWED_HEADERS = ["Content-Type", "Authorization"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and announce the listening port once the server is up."""

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Server is running at %s", settings.api_port)
    yield


def create_app() -> FastAPI:
    """Create and configure the API application."""

    settings = get_settings()
    app = FastAPI(title="Greeting API", lifespan=lifespan)

    # Only the listed front-end origins may read responses, with cookies and auth headers.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )

    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)

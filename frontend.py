import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI

from app.config import get_settings
from app.infrastructure.logging_setup import configure_logging
from app.interfaces.web.routes import router as pages_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and announce which API the pages read from."""

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Client is running at %s using API %s", settings.web_port, app.state.server_url)
    yield


def create_web_app(
    server_url: str | None = None, http_client: httpx.AsyncClient | None = None
) -> FastAPI:
    """Create the page server that displays the API greeting.

    The API base URL is fixed when the app is built and never re-read.
    """

    app = FastAPI(title="Greeting client", lifespan=lifespan)
    app.state.server_url = server_url or get_settings().server_url
    app.state.http_client = http_client
    app.include_router(pages_router)
    return app


app = create_web_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.web_host, port=settings.web_port)

"""Page component that shows the greeting fetched from the API."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import httpx
from fastapi.templating import Jinja2Templates

from app.infrastructure.message_client import fetch_message

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
PAGE_TITLE = "This time will never come back"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


class GreetingView:
    """Holds the display state of the greeting page.

    ``mount`` performs the fetch exactly once per instance; failures are logged
    and leave ``message`` unset so the page renders without it.
    """

    def __init__(self, server_url: str, client: httpx.AsyncClient | None = None) -> None:
        self.server_url = server_url
        self.message: Any = None
        self._client = client
        self._mounted = False

    @property
    def mounted(self) -> bool:
        return self._mounted

    async def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True
        try:
            self.message = await fetch_message(self.server_url, client=self._client)
        except Exception as exc:
            logger.error("%s", exc)

    def render(self) -> str:
        template = templates.get_template("index.html")
        return template.render(title=PAGE_TITLE, message=self.message)

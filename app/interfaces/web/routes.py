from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.interfaces.web.view import GreetingView

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """Mount a fresh greeting view and return the rendered page."""

    view = GreetingView(
        request.app.state.server_url,
        client=getattr(request.app.state, "http_client", None),
    )
    await view.mount()
    return HTMLResponse(view.render())

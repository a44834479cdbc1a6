"""HTTP client for the greeting endpoint."""

from __future__ import annotations

from typing import Any

import httpx

MESSAGE_PATH = "/api/message"


def _extract_message(payload: Any) -> Any:
    if isinstance(payload, dict):
        return payload.get("message")
    return None


async def fetch_message(
    base_url: str, client: httpx.AsyncClient | None = None
) -> Any:
    """Fetch the greeting from the API at ``base_url``.

    The response status is not inspected: whatever JSON comes back is searched
    for a ``message`` field, returned as decoded (string or not), and ``None``
    is returned when it is missing.
    Transport errors and undecodable bodies propagate to the caller.
    """

    url = f"{base_url.rstrip('/')}{MESSAGE_PATH}"
    if client is not None:
        response = await client.get(url)
    else:
        async with httpx.AsyncClient(timeout=None) as owned_client:
            response = await owned_client.get(url)
    return _extract_message(response.json())

"""HTTP client factory for the Notion API."""

from __future__ import annotations

import httpx

from .config import Settings


def create_http_client(token: str, settings: Settings) -> httpx.AsyncClient:
    """Instantiate an asynchronous client authenticated with a ``token_v2`` cookie."""
    return httpx.AsyncClient(
        base_url=str(settings.base_url),
        headers={"Cookie": f"token_v2={token}; "},
        timeout=settings.request_timeout,
        follow_redirects=True,
    )


__all__ = ["create_http_client"]

"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and logging for every request.
- Translates httpx/pydantic failures into the domain error taxonomy, so the
  core never sees library exceptions.
- Eases testing: the client can be built on a `httpx.MockTransport`.
"""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from core.config import AppSettings
from core.errors import DecodeError, FetchError

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with safe defaults.

    Why a builder:
    - Centralizes timeouts/headers so every request behaves the same.
    - `transport` lets tests plug in a `httpx.MockTransport`.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpResourceFetcher:
    """`ResourceFetcher` backed by an open `httpx.AsyncClient`.

    The client is owned by the caller; this class never closes it.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(self, url: str, model: type[ModelT]) -> ModelT:
        logger.debug("GET %s", url)
        try:
            resp = await self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(url, reason=str(exc) or exc.__class__.__name__) from exc

        if not resp.is_success:
            raise FetchError(url, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            raise DecodeError(url, entity=model.__name__, reason="body is not valid JSON") from exc

        try:
            entity = model.model_validate(data)
        except ValidationError as exc:
            raise DecodeError(url, entity=model.__name__, reason=str(exc)) from exc

        logger.debug("GET %s -> %s %s", url, resp.status_code, model.__name__)
        return entity

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .config import resolve_api_key
from .consts import BASE_URL, DEFAULT_TIMEOUT, LOGGER_NAME
from .endpoints import CongressEndpointsMixin
from .request import ERROR_BODY_CHARS, build_request, raise_for_status
from .utils import logger_setup


class AsyncCongressAPIClient(CongressEndpointsMixin):
    """
    Awaitable client for the Congress.gov v3 API.

    Same methods as ``CongressAPIClient``; each returns an awaitable of the
    parsed document. Calls share nothing but the read-only key and the
    connection pool, so any number may run together under ``asyncio.gather``.
    Argument errors (day without month on the bound record) are raised when the
    method is called, before anything is awaited.

        async with AsyncCongressAPIClient() as client:
            bills, members = await asyncio.gather(
                client.get_bills(congress=118),
                client.get_members(),
            )
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        log_level: int = logging.INFO,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = resolve_api_key(api_key)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = httpx.AsyncClient(timeout=timeout, follow_redirects=True, transport=transport)
        self.logger = logger_setup(logger_name=f"{LOGGER_NAME}.{id(self):x}", log_level=log_level)

    @property
    def api_key(self) -> str:
        return self._api_key

    # ------------- lifecycle -------------
    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "AsyncCongressAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ------------- core request helper -------------
    async def _request(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        req = build_request(self.base_url, path, params, self._api_key)
        self.logger.debug(f"GET {req.url}")
        resp = await self.client.get(req.url, headers=req.headers)
        if not 200 <= resp.status_code < 300:
            self.logger.warning(
                f"API request to {req.url} failed with status {resp.status_code}: {resp.text[:ERROR_BODY_CHARS]}"
            )
            raise_for_status(resp.status_code, req.url, resp.text)
        return resp.json()

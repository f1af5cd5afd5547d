from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .config import resolve_api_key
from .consts import BASE_URL, DEFAULT_TIMEOUT, LOGGER_NAME
from .endpoints import CongressEndpointsMixin
from .request import ERROR_BODY_CHARS, build_request, raise_for_status
from .utils import logger_setup


class CongressAPIClient(CongressEndpointsMixin):
    """
    Blocking client for the Congress.gov v3 API.

    Every endpoint method sends exactly one GET and returns the parsed JSON
    document unchanged. There are no retries, no throttling and no pagination
    following; a failure status raises ``CongressHTTPError`` and transport
    failures surface as ``requests`` exceptions.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        log_level: int = logging.INFO,
    ):
        self._api_key = resolve_api_key(api_key)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.logger = logger_setup(logger_name=f"{LOGGER_NAME}.{id(self):x}", log_level=log_level)

    @property
    def api_key(self) -> str:
        return self._api_key

    # ------------- lifecycle -------------
    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "CongressAPIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------- core request helper -------------
    def _request(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        req = build_request(self.base_url, path, params, self._api_key)
        self.logger.debug(f"GET {req.url}")
        resp = self.session.get(req.url, headers=req.headers, timeout=self.timeout)
        if not 200 <= resp.status_code < 300:
            self.logger.warning(
                f"API request to {req.url} failed with status {resp.status_code}: {resp.text[:ERROR_BODY_CHARS]}"
            )
            raise_for_status(resp.status_code, req.url, resp.text)
        return resp.json()

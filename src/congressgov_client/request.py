from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

from .consts import API_KEY_HEADER
from .errors import CongressHTTPError
from .utils import stringify_param

# Longest slice of an error body kept on the exception and in log lines
ERROR_BODY_CHARS = 200


@dataclass(frozen=True)
class PreparedRequest:
    url: str
    headers: Dict[str, str] = field(default_factory=dict)


def build_query(params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Serialize query parameters in insertion order, dropping ``None`` values.

    ``format=json`` is always the final pair; a caller-supplied ``format`` is
    discarded so the pair appears exactly once.
    """
    merged: Dict[str, Any] = dict(params or {})
    merged.pop("format", None)
    merged["format"] = "json"
    pairs = [(k, stringify_param(v)) for k, v in merged.items() if v is not None]
    return urlencode(pairs)


def build_request(
    base_url: str,
    path: str,
    params: Optional[Mapping[str, Any]],
    api_key: str,
) -> PreparedRequest:
    """
    Turn a relative resource path and its query parameters into a full GET request.

    The path is appended to ``base_url`` as-is; identifiers already interpolated
    into it are not escaped or rewritten.
    """
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}?{build_query(params)}"
    headers = {
        API_KEY_HEADER: api_key,
        "Accept": "application/json",
    }
    return PreparedRequest(url=url, headers=headers)


def raise_for_status(status_code: int, url: str, body: str = "") -> None:
    """Raise CongressHTTPError unless the final (post-redirect) status is 2xx."""
    if not 200 <= status_code < 300:
        raise CongressHTTPError(status_code, url=url, body=(body or "")[:ERROR_BODY_CHARS])

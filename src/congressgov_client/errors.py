from typing import Optional


class CongressAPIError(Exception):
    """Base class for errors raised by the Congress.gov client."""


class InvalidParameterError(CongressAPIError, ValueError):
    """Arguments that can never form a valid request; raised before any network call."""


class CongressHTTPError(CongressAPIError):
    """
    The API answered with a failure status.

    Every status produces the same message; the status code is kept as data so
    callers can branch on it without parsing the message.
    """

    def __init__(self, status_code: int, url: Optional[str] = None, body: str = ""):
        self.status_code = int(status_code)
        self.url = url
        self.body = body
        super().__init__(f"Request failed with status {self.status_code}")

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429

from .async_client import AsyncCongressAPIClient
from .congressgov_client import CongressAPIClient  # re-export public class
from .consts import ACTIVE_CONGRESS, BASE_URL
from .errors import CongressAPIError, CongressHTTPError, InvalidParameterError
from .request import PreparedRequest, build_request

__all__ = [
    "CongressAPIClient",
    "AsyncCongressAPIClient",
    "ACTIVE_CONGRESS",
    "BASE_URL",
    "CongressAPIError",
    "CongressHTTPError",
    "InvalidParameterError",
    "PreparedRequest",
    "build_request",
]

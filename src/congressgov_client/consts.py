BASE_URL = "https://api.congress.gov/v3"
API_KEY_HEADER = "X-Api-Key"
API_KEY_ENV_VARS = ("CONGRESS_API_KEY", "CONGRESS_DOT_GOV_API_KEY")

# Congress used when an endpoint needs one and the caller leaves it out
ACTIVE_CONGRESS = 119

DEFAULT_LIMIT = 20
DEFAULT_OFFSET = 0
DEFAULT_BILL_SORT = "updateDate+desc"
DEFAULT_TIMEOUT = 60

# Each client logs under its own child of this name
LOGGER_NAME = "Congress API Client"

import os
from typing import Optional

from dotenv import load_dotenv

from .consts import API_KEY_ENV_VARS


def resolve_api_key(api_key: Optional[str] = None) -> str:
    """
    Return the explicit key, else the first of CONGRESS_API_KEY /
    CONGRESS_DOT_GOV_API_KEY found in the environment or a local .env file.
    """
    if api_key:
        return api_key
    # existing environment values take precedence over .env
    load_dotenv(override=False)
    for var in API_KEY_ENV_VARS:
        value = os.getenv(var)
        if value:
            return value
    raise ValueError("Congress.gov API key not provided. Set CONGRESS_API_KEY env var or pass api_key=...")

import logging
from datetime import date, datetime, timezone
from typing import Any, Optional, Union


def logger_setup(logger_name="Congress API Client", log_level=logging.INFO, propagate=False):
    """
    Return a named logger with a single console handler.

    Args:
        logger_name (str): The name of the logger.
        log_level (int): The logging level (e.g., logging.INFO, logging.DEBUG).
        propagate (bool): Whether records also go to ancestor loggers.

    Returns:
        logger (logging.Logger): Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Re-running setup on a configured logger only moves the levels
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(log_level)
    else:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s - raised_by: %(name)s',
            datefmt='%Y-%m-%d %H:%M:%S'
            )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.setLevel(log_level)
    logger.propagate = propagate

    return logger


def to_iso8601(value: Union[date, datetime]) -> str:
    """
    Format a date or datetime the way Congress.gov expects date filters:
    ``YYYY-MM-DDTHH:MM:SSZ`` in UTC.

    Naive datetimes are taken to be UTC already. A bare ``date`` means
    midnight UTC of that day.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        else:
            value = value.astimezone(timezone.utc)
    else:
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def stringify_param(value: Any) -> str:
    """Serialize one query parameter value."""
    # bool before anything else: str(True) would give "True"
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (datetime, date)):
        return to_iso8601(value)
    return str(value)


def join_path(*segments: Optional[Any]) -> str:
    """Join path segments with '/', skipping any segment that was not supplied."""
    return "/".join(str(s) for s in segments if s)

"""Helper utilities for the URL registry.

Functions:
    get_short_url(base_origin, shortcode) -> str
        Get string representation of short URL for a given shortcode
    utc_now() -> datetime
        Current time as a timezone-aware UTC datetime
    as_utc(value) -> datetime
        Read a naive datetime as UTC, leave aware ones untouched
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present

Example:
    >>> from urlregistry.utils.helpers import get_short_url
    >>> get_short_url('https://sho.rt/', 'abc123')
    'https://sho.rt/abc123'
"""

import os
import functools
from datetime import datetime, UTC
from collections.abc import Callable

from urlregistry.exceptions import MissingEnvironmentVariableError


def get_short_url(base_origin: str, shortcode: str) -> str:
    """Get string representation of shortened URL

    Args:
        base_origin (str): public origin the registry is served from, e.g. 'https://sho.rt'
        shortcode (str): shortcode

    Returns:
        str: short url string representation
    """
    return f'{base_origin.rstrip("/")}/{shortcode}'


def utc_now() -> datetime:
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Return `value` as a timezone-aware datetime, reading naive values as UTC"""
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator

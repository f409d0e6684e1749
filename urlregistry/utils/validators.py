"""Input validation for the URL registry

Functions:
    is_valid_url(url) -> bool
        True for absolute URLs with both a scheme and a host.
    is_valid_shortcode(shortcode) -> bool
        True for 3 to 20 ASCII alphanumeric characters.
"""

import re
from urllib.parse import urlparse

from urlregistry.constants import SHORTCODE_PATTERN


_SHORTCODE_RE = re.compile(SHORTCODE_PATTERN, re.ASCII)


def is_valid_url(url: str) -> bool:
    """Check that `url` is a well-formed absolute URL

    Example:
        >>> is_valid_url('https://example.com/page')
        True
        >>> is_valid_url('not-a-url')
        False
    """
    if not isinstance(url, str) or not url.strip():
        return False
    try:
        components = urlparse(url)
        # Accessing .port validates the port component
        components.port
    except ValueError:
        return False
    return bool(components.scheme) and bool(components.hostname)


def is_valid_shortcode(shortcode: str) -> bool:
    """Check that `shortcode` matches [A-Za-z0-9]{3,20}

    Example:
        >>> is_valid_shortcode('abc123')
        True
        >>> is_valid_shortcode('ab')
        False
    """
    return isinstance(shortcode, str) and _SHORTCODE_RE.fullmatch(shortcode) is not None

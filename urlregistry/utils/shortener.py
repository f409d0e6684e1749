"""Shortcode generation utility

This module provides a helper function for generating random candidate short
codes. Uniqueness is not the generator's concern: the Registry checks every
candidate against the stored entries and retries on collision.

Functions:
    generate_shortcode(length=6):
        Generate a random Base62 string suitable for use as a URL slug.

Example:
    >>> from urlregistry.utils import generate_shortcode
    >>> code = generate_shortcode()
    >>> len(code)
    6
"""

import random

from urlregistry.constants import SHORTCODE_ALPHABET, DEFAULT_SHORTCODE_LENGTH


def generate_shortcode(length: int = DEFAULT_SHORTCODE_LENGTH) -> str:
    """Generate a random short code of `length` Base62 characters.

    Each character is drawn uniformly from the 62-character alphabet
    (a-z, A-Z, 0-9).

    Args:
        length (int, optional):
            Number of characters in the short code. Defaults to 6.

    Returns:
        str: A random alphanumeric short code.

    Raises:
        TypeError: If length is not an integer.
        ValueError: If length is smaller than 1.

    NOTE:
        - Not cryptographically secure. Short codes are identifiers, not secrets.
        - With 62**6 possible codes, collisions are rare at realistic registry
          sizes; the caller is still responsible for rejecting taken codes.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    return ''.join(random.choices(SHORTCODE_ALPHABET, k=length))  # noqa: S311

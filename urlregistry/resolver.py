"""Short code resolution state machine

Resolution of a requested short code moves from RESOLVING into exactly one
terminal state:

    RESOLVING --lookup() returned None------------> NOT_FOUND
    RESOLVING --entry found, now > expires_at-----> EXPIRED
    RESOLVING --entry found, not expired----------> ACTIVE (one click recorded)

Nothing leaves NOT_FOUND or EXPIRED. ACTIVE hands the target URL to the caller,
which navigates there after `redirect_after` seconds; the navigation itself is
outside the registry.

Example:
    >>> resolution = resolve(registry, 'abc123', referrer='https://example.org')
    >>> resolution.state
    <ResolutionState.ACTIVE: 'active'>
    >>> resolution.target
    'https://example.com'
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from urlregistry.constants import REDIRECT_COUNTDOWN_SECONDS
from urlregistry.models import EntryModel
from urlregistry.registry import Registry
from urlregistry.dao.exceptions import StoreWriteError
from urlregistry.utils.helpers import as_utc


logger = logging.getLogger(__name__)


class ResolutionState(StrEnum):
    RESOLVING = 'resolving'
    NOT_FOUND = 'not_found'
    EXPIRED = 'expired'
    ACTIVE = 'active'


@dataclass(frozen=True)
class Resolution:
    """Terminal outcome of resolving a short code.

    Attributes:
        state (ResolutionState):
            Terminal state reached for the short code.
        shortcode (str):
            Requested short code.
        entry (Optional[EntryModel]):
            Entry as looked up, None when NOT_FOUND.
        redirect_after (int):
            Seconds the caller waits before navigating (ACTIVE only).
    """
    state: ResolutionState
    shortcode: str
    entry: EntryModel | None = None
    redirect_after: int = REDIRECT_COUNTDOWN_SECONDS

    @property
    def target(self) -> str | None:
        """Original URL to navigate to, only for ACTIVE resolutions"""
        if self.state is ResolutionState.ACTIVE and self.entry is not None:
            return self.entry.original_url
        return None


def resolve(registry: Registry, shortcode: str, referrer: str | None = None, now: datetime | None = None) -> Resolution:
    """Resolve `shortcode` to a terminal resolution state

    Exactly one click is recorded, and only when the entry is found and not
    expired. A rejected click write is logged and doesn't block the redirect.

    Args:
        registry (Registry):
            Registry holding the entries.
        shortcode (str):
            Requested short code.
        referrer (str | None):
            Source of the request, recorded with the click ("Direct" if empty).
        now (datetime | None):
            Reference time for the expiry check, naive values are read as UTC.
            Defaults to the registry clock.

    Returns:
        Resolution: The terminal state with the looked up entry.
    """
    state = ResolutionState.RESOLVING
    now = as_utc(registry.clock() if now is None else now)

    entry = registry.lookup(shortcode)
    if entry is None:
        state = ResolutionState.NOT_FOUND
        logger.info('Short code not found.', extra={'shortcode': shortcode, 'event': state})
        return Resolution(state=state, shortcode=shortcode)

    if entry.is_expired(now):
        state = ResolutionState.EXPIRED
        logger.info('Short code expired.', extra={'shortcode': shortcode, 'event': state, 'expires_at': entry.expires_at})
        return Resolution(state=state, shortcode=shortcode, entry=entry)

    try:
        registry.record_click(shortcode, referrer=referrer)
    except StoreWriteError:
        logger.exception('Failed to record click. Redirecting anyway.', extra={'shortcode': shortcode})

    state = ResolutionState.ACTIVE
    logger.info('Redirecting client to target URL.', extra={'shortcode': shortcode, 'event': state})
    return Resolution(state=state, shortcode=shortcode, entry=entry)

"""URL registry: short-code allocation, uniqueness and expiry lifecycle

The Registry sits on top of an injected entry store (EntryBaseDAO) and a short
code generator. It is the only place where entries are created, clicked and
purged, and it enforces the registry invariants:

    - short codes are unique among every entry held in the store, expired or not;
    - expires_at == created_at + validity_minutes, with validity_minutes > 0;
    - entries are write-once except for their append-only click log.

Every public operation loads the whole collection from the store and, when it
changes something, writes the whole collection back (one write per call).

NOTE:
    Uniqueness is checked against a snapshot loaded at the start of create().
    Two writers creating the same custom code concurrently can both pass the
    check, and the later write wins. The registry assumes a single writer per
    store.

Example:
    >>> from urlregistry.dao.memory import EntryMemoryDAO
    >>> registry = Registry(dao=EntryMemoryDAO())
    >>> entry = registry.create('https://example.com', custom_code='example', validity_minutes=5)
    >>> registry.lookup('example').original_url
    'https://example.com'
    >>> registry.record_click('example', referrer='https://news.ycombinator.com')
    >>> registry.lookup('example').click_count
    1
"""

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from beartype import beartype

from urlregistry.types import Clock, IdFactory, ShortcodeGenerator
from urlregistry.constants import (
    DEFAULT_SHORTCODE_LENGTH,
    DEFAULT_VALIDITY_MINUTES,
    DIRECT_REFERRER,
    MAX_SHORTCODE_ATTEMPTS,
    UNKNOWN_LOCATION,
)
from urlregistry.models import ClickModel, EntryModel
from urlregistry.dao.base import EntryBaseDAO
from urlregistry.dao.exceptions import StoreWriteError
from urlregistry.exceptions import (
    InvalidShortCodeError,
    InvalidURLError,
    InvalidValidityError,
    ShortCodeExhaustedError,
    ShortCodeTakenError,
)
from urlregistry.utils.helpers import as_utc, utc_now
from urlregistry.utils.shortener import generate_shortcode
from urlregistry.utils.validators import is_valid_shortcode, is_valid_url


logger = logging.getLogger(__name__)


def _uuid_hex() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class RegistryStats:
    """Aggregate numbers over the registry at a point in time."""
    total_links: int
    active_links: int
    expired_links: int
    total_clicks: int


class Registry:
    """Orchestrate creation, lookup, click recording and purging of short URLs

    Attributes:
        dao (EntryBaseDAO):
            Store holding the entry collection.
        generator (Callable[[int], str]):
            Produces candidate short codes of a given length.
        clock (Callable[[], datetime]):
            Returns the current time (timezone-aware UTC).
        id_factory (Callable[[], str]):
            Returns a fresh opaque entry id.
        max_attempts (int):
            Upper bound on generated candidates per create() call.
        shortcode_length (int):
            Length of generated short codes.
    """

    def __init__(
        self,
        dao: EntryBaseDAO,
        generator: ShortcodeGenerator = generate_shortcode,
        clock: Clock = utc_now,
        id_factory: IdFactory = _uuid_hex,
        max_attempts: int = MAX_SHORTCODE_ATTEMPTS,
        shortcode_length: int = DEFAULT_SHORTCODE_LENGTH,
    ):
        if max_attempts < 1:
            raise ValueError(f'max_attempts must be a positive integer (given value: {max_attempts}).')

        self.dao = dao
        self.generator = generator
        self.clock = clock
        self.id_factory = id_factory
        self.max_attempts = max_attempts
        self.shortcode_length = shortcode_length

    @beartype
    def create(
        self,
        original_url: str,
        custom_code: str | None = None,
        validity_minutes: int = DEFAULT_VALIDITY_MINUTES,
    ) -> EntryModel:
        """Register a new short URL

        Steps:
            - Validate the original URL and the validity window.
            - Validate the custom code (if given) or generate a fresh one.
            - Build the entry, append it to the collection and save once.

        Args:
            original_url (str):
                Absolute URL (scheme and host required) to shorten.
            custom_code (str | None):
                User-supplied short code. Any value other than None is validated,
                including the empty string. None generates a code.
            validity_minutes (int):
                Minutes until the entry expires. Defaults to 30.

        Returns:
            EntryModel: The newly stored entry.

        Raises:
            InvalidURLError:
                If original_url is not a well-formed absolute URL.
            InvalidValidityError:
                If validity_minutes is not a positive integer or pushes the
                expiry time past datetime.max.
            InvalidShortCodeError:
                If custom_code doesn't match [A-Za-z0-9]{3,20}.
            ShortCodeTakenError:
                If an entry (expired or not) already uses custom_code.
            ShortCodeExhaustedError:
                If no unused code was generated within max_attempts candidates.
            StoreWriteError:
                If the store rejects the write. Nothing is retried.
        """
        if not is_valid_url(original_url):
            raise InvalidURLError(f"'{original_url}' is not a valid URL (scheme and host are required).")
        # bool is an int subclass; True minutes is not a validity window
        if isinstance(validity_minutes, bool) or validity_minutes < 1:
            raise InvalidValidityError(f'Validity must be a positive number of minutes (given value: {validity_minutes}).')

        now = as_utc(self.clock())
        try:
            expires_at = now + timedelta(minutes=validity_minutes)
        except OverflowError as e:
            raise InvalidValidityError(f'Validity of {validity_minutes} minutes is out of the representable date range.') from e

        entries = self.dao.load()
        taken = {entry.shortcode for entry in entries}

        if custom_code is not None:
            if not is_valid_shortcode(custom_code):
                raise InvalidShortCodeError(f"Custom short code '{custom_code}' must be 3-20 alphanumeric characters.")
            if custom_code in taken:
                raise ShortCodeTakenError(f"Short code '{custom_code}' is already taken.")
            shortcode = custom_code
        else:
            shortcode = self._generate_unique(taken)

        entry = EntryModel(
            id=self.id_factory(),
            original_url=original_url,
            shortcode=shortcode,
            custom_code=custom_code,
            created_at=now,
            expires_at=expires_at,
            validity_minutes=validity_minutes,
        )

        try:
            self.dao.save([*entries, entry])
        except StoreWriteError:
            logger.exception('Failed to persist new short URL.', extra={'shortcode': shortcode})
            raise

        logger.info(
            'Created short URL.',
            extra={'shortcode': shortcode, 'custom': custom_code is not None, 'validity_minutes': validity_minutes},
        )
        return entry

    @beartype
    def lookup(self, shortcode: str) -> EntryModel | None:
        """Return the entry using `shortcode`, None if there is none

        Expired entries are returned as well; callers decide what expiry means.
        """
        for entry in self.dao.load():
            if entry.shortcode == shortcode:
                return entry
        return None

    @beartype
    def record_click(self, shortcode: str, referrer: str | None = None) -> None:
        """Append a click to the entry using `shortcode` and persist it

        Unknown short codes are ignored without touching the store. Expiry is
        not checked here: callers must stop recording once they see the entry
        expired (see urlregistry.resolver).

        Args:
            shortcode (str):
                Short code that was resolved.
            referrer (str | None):
                Source of the click. Empty or None is recorded as "Direct".

        Raises:
            StoreWriteError:
                If the store rejects the write.
        """
        entries = self.dao.load()
        for index, entry in enumerate(entries):
            if entry.shortcode == shortcode:
                break
        else:
            logger.debug('Ignoring click for unknown short code.', extra={'shortcode': shortcode})
            return

        click = ClickModel(
            timestamp=as_utc(self.clock()),
            referrer=referrer or DIRECT_REFERRER,
            location=UNKNOWN_LOCATION,
        )
        entries[index] = replace(entry, clicks=(*entry.clicks, click))
        self.dao.save(entries)

        logger.debug('Recorded click.', extra={'shortcode': shortcode, 'referrer': click.referrer})

    @beartype
    def purge_expired(self, now: datetime | None = None) -> int:
        """Remove every entry whose expiry time is not after `now`

        The collection is saved only when at least one entry was removed.

        Args:
            now (datetime | None):
                Reference time, naive values are read as UTC. Defaults to the
                registry clock.

        Returns:
            int: Number of entries removed.

        Raises:
            StoreWriteError:
                If the store rejects the write.
        """
        now = as_utc(self.clock() if now is None else now)

        entries = self.dao.load()
        retained = [entry for entry in entries if entry.expires_at > now]
        removed = len(entries) - len(retained)

        if removed:
            self.dao.save(retained)
            logger.info('Purged expired short URLs.', extra={'removed': removed, 'retained': len(retained)})
        return removed

    def entries(self) -> list[EntryModel]:
        """Return every stored entry in creation order"""
        return self.dao.load()

    @beartype
    def search(self, term: str) -> list[EntryModel]:
        """Return entries whose original URL or short code contains `term`

        Matching is case-insensitive. An empty term matches every entry.
        """
        needle = term.casefold()
        return [
            entry
            for entry in self.dao.load()
            if needle in entry.original_url.casefold() or needle in entry.shortcode.casefold()
        ]

    @beartype
    def is_shortcode_available(self, shortcode: str) -> bool:
        return is_valid_shortcode(shortcode) and self.lookup(shortcode) is None

    @beartype
    def stats(self, now: datetime | None = None) -> RegistryStats:
        now = as_utc(self.clock() if now is None else now)
        entries = self.dao.load()
        active = sum(1 for entry in entries if not entry.is_expired(now))
        return RegistryStats(
            total_links=len(entries),
            active_links=active,
            expired_links=len(entries) - active,
            total_clicks=sum(entry.click_count for entry in entries),
        )

    def _generate_unique(self, taken: set[str]) -> str:
        for attempt in range(1, self.max_attempts + 1):
            candidate = self.generator(self.shortcode_length)
            if candidate not in taken:
                return candidate
            logger.debug('Generated short code collides with an existing entry.', extra={'attempt': attempt})

        logger.error('Exhausted short code generation attempts.', extra={'attempts': self.max_attempts})
        raise ShortCodeExhaustedError(f'No unused short code found after {self.max_attempts} attempts.')

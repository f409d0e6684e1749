"""In-memory Data Access Object (DAO) for registry entries

Keeps the serialized JSON document in a Python attribute, so the same
(de)serialization path as the Redis store is exercised. Intended for tests
and for single-process runs where durability doesn't matter.

Example:
    >>> dao = EntryMemoryDAO()
    >>> dao.load()
    []
    >>> dao.fail_writes = True
    >>> dao.save([])
    Traceback (most recent call last):
        ...
    urlregistry.dao.exceptions.StoreWriteError: In-memory store rejected the write.
"""

import logging
from collections.abc import Sequence

from beartype import beartype

from urlregistry.models import EntryModel, entries_from_json, entries_to_json
from urlregistry.dao.base import EntryBaseDAO
from urlregistry.dao.exceptions import StoreWriteError


logger = logging.getLogger(__name__)


class EntryMemoryDAO(EntryBaseDAO):
    """Entry store backed by a JSON string held in memory

    Attributes:
        payload (str | None):
            The persisted document, None until the first save.
        fail_writes (bool):
            When True, every save raises StoreWriteError.
        writes (int):
            Number of successful saves.
    """

    def __init__(self, payload: str | None = None, fail_writes: bool = False):
        self.payload = payload
        self.fail_writes = fail_writes
        self.writes = 0

    @beartype
    def load(self, **kwargs) -> list[EntryModel]:
        if self.payload is None:
            return []

        try:
            return entries_from_json(self.payload)
        except (ValueError, KeyError, TypeError):
            logger.warning('Stored entry collection is unreadable. Falling back to an empty collection.', exc_info=True)
            return []

    @beartype
    def save(self, entries: Sequence[EntryModel], **kwargs) -> 'EntryMemoryDAO':
        if self.fail_writes:
            raise StoreWriteError('In-memory store rejected the write.')

        self.payload = entries_to_json(entries)
        self.writes += 1
        return self

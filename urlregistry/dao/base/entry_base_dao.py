"""Abstract base class for registry entry data access objects (DAOs).

This class establishes a consistent contract for all entry store implementations,
regardless of the underlying storage mechanism (e.g., Redis, in-memory).

Responsibilities:
    - Load and replace the full collection of EntryModel objects.
    - Standardize error handling across multiple data store implementations.
    - Enforce a consistent API for use by the Registry.

Durability model:
    Single writer, synchronous, whole-collection overwrite. There are no
    incremental updates and no locking: the last writer wins.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from urlregistry.dao.redis import EntryRedisDAO

        >>> dao = EntryRedisDAO(prefix='urlregistry:dev')
        >>> entries = dao.load()
        >>> dao.save(entries)
        <EntryRedisDAO>
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from urlregistry.models import EntryModel


class EntryBaseDAO(ABC):
    """Interface for registry entry data access objects (DAOs).

    Methods:
        load(**kwargs) -> list[EntryModel]:
            Retrieve the persisted entry collection.
            Returns an empty list if nothing is stored or the stored data is corrupt.

        save(entries: Sequence[EntryModel], **kwargs) -> EntryBaseDAO:
            Replace the persisted entry collection.
            Raises StoreWriteError if the data store rejects the write.

    Subclassing:
        Datastore-specific implementations (e.g., EntryRedisDAO or
        EntryMemoryDAO) must extend this class and implement all
        abstract methods.
    """

    @abstractmethod
    def load(self, **kwargs) -> list[EntryModel]:
        """Retrieve the persisted entry collection.

        Corrupt or unreadable stored data degrades to an empty collection
        instead of raising.

        Args:
            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            list[EntryModel]: The stored entries in insertion order.

        Raises:
            DataStoreError:
                If the data store can't be reached.
        """
        pass

    @abstractmethod
    def save(self, entries: Sequence[EntryModel], **kwargs) -> 'EntryBaseDAO':
        """Replace the persisted entry collection.

        Args:
            entries (Sequence[EntryModel]):
                The complete entry collection to persist.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            EntryBaseDAO: self (for method chaining)

        Raises:
            StoreWriteError:
                If the data store rejects the write (e.g. quota exceeded).
        """
        pass

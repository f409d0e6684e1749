"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

    StoreWriteError:
        Raised when the data store rejects a write of the entry collection
        (e.g., quota exceeded, OOM, read-only replica).

Example:
    >>> from urlregistry.dao.exceptions import StoreWriteError
    >>> raise StoreWriteError("Redis rejected write of 'registry:entries'.")
    Traceback (most recent call last):
        ...
    urlregistry.dao.exceptions.StoreWriteError: Redis rejected write of 'registry:entries'.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    pass


class StoreWriteError(DataStoreError):
    """Exception raised when the data store rejects a write of the entry collection."""

    pass

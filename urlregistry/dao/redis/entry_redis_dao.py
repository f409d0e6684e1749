"""Data Access Object (DAO) implementation for persisting registry entries in Redis

This module provides a Redis-based implementation of EntryBaseDAO. The whole entry
collection is stored as a single JSON document under one namespaced key:

    <prefix>:registry:entries -> JSON array of entries (string, no TTL)

Responsibilities:
    - Load the entry collection, degrading corrupt documents to an empty collection;
    - Replace the entry collection in a single SET;
    - Translate Redis failures into DAO exceptions.

Classes:
    EntryRedisDAO:
        DAO for storing and retrieving the EntryModel collection in a Redis datastore.

Example:
    >>> from urlregistry.dao.redis import EntryRedisDAO

    >>> dao = EntryRedisDAO(prefix='urlregistry:dev')
    >>> dao.load()
    []
    >>> dao.save([entry])
    <EntryRedisDAO>
    >>> dao.load()[0].shortcode
    'abc123'
"""

import logging
from collections.abc import Sequence

import redis
from beartype import beartype

from urlregistry.models import EntryModel, entries_from_json, entries_to_json
from urlregistry.dao.base import EntryBaseDAO
from urlregistry.dao.redis.mixins import RedisClientMixin
from urlregistry.dao.redis.helpers import handle_redis_connection_error, describe_connection
from urlregistry.dao.exceptions import StoreWriteError


logger = logging.getLogger(__name__)


class EntryRedisDAO(RedisClientMixin, EntryBaseDAO):
    """Redis-based Data Access Object (DAO) for the registry's entry collection

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        load(**kwargs) -> list[EntryModel]:
            Retrieve the entry collection. Missing or corrupt documents yield [].
            Raises DataStoreError on connectivity issues with Redis.

        save(entries: Sequence[EntryModel], **kwargs) -> EntryRedisDAO:
            Overwrite the entry collection.
            Raises StoreWriteError when Redis rejects or can't receive the write.
    """

    @handle_redis_connection_error
    @beartype
    def load(self, **kwargs) -> list[EntryModel]:
        """Retrieve the persisted entry collection from Redis

        Returns:
            list[EntryModel]:
                Stored entries in insertion order, [] if the key doesn't exist
                or holds an unreadable document or a non-string value.

        Raises:
            DataStoreError:
                If Redis connectivity issues or timeouts occur.
        """
        entries_key = self.keys.entries_key()
        # ResponseError covers WRONGTYPE, i.e. the key holds a non-string value
        try:
            payload = self.redis.get(entries_key)
            return [] if payload is None else entries_from_json(payload)
        except (redis.exceptions.ResponseError, ValueError, KeyError, TypeError):
            logger.warning(
                'Stored entry collection is unreadable. Falling back to an empty collection.',
                extra={'key': entries_key},
                exc_info=True,
            )
            return []

    @beartype
    def save(self, entries: Sequence[EntryModel], **kwargs) -> 'EntryRedisDAO':
        """Overwrite the persisted entry collection in Redis

        NOTE: the whole collection is written with a single SET. Concurrent
              writers are not coordinated; the last SET wins.

        Args:
            entries (Sequence[EntryModel]):
                The complete entry collection.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            EntryRedisDAO: self (for method chaining)

        Raises:
            StoreWriteError:
                If Redis rejects the write (e.g. OOM under maxmemory) or is unreachable.
        """
        entries_key = self.keys.entries_key()
        payload = entries_to_json(entries)

        try:
            self.redis.set(entries_key, payload)
        except redis.exceptions.RedisError as e:
            raise StoreWriteError(f"Redis at {describe_connection(self.redis)} rejected write of '{entries_key}'.") from e
        return self

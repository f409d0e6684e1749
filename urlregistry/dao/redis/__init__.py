from urlregistry.dao.redis.redis_key_schema import RedisKeySchema
from urlregistry.dao.redis.mixins import RedisClientMixin
from urlregistry.dao.redis.entry_redis_dao import EntryRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'EntryRedisDAO',
]

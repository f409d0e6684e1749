"""Wire configuration, entry store and Registry together

Example:
    >>> from urlregistry.factory import build_registry
    >>> registry = build_registry()                                   # config from load_config('registry')
    >>> registry = build_registry(config={'memory': {}})              # explicit in-memory store
    >>> registry = build_registry(config={'redis': {'host': 'redis', 'port': 6379, 'db': 0}})
"""

import logging

from urlregistry.types import RegistryConfiguration
from urlregistry.constants import Backend
from urlregistry.registry import Registry
from urlregistry.dao.base import EntryBaseDAO
from urlregistry.dao.memory import EntryMemoryDAO
from urlregistry.dao.redis import EntryRedisDAO
from urlregistry.exceptions import BadConfigurationError
from urlregistry.utils.config import app_prefix, load_config


logger = logging.getLogger(__name__)


def build_dao(config: RegistryConfiguration) -> EntryBaseDAO:
    """Create the entry store named by the configuration's single backend key

    Raises:
        BadConfigurationError:
            If the configuration doesn't name exactly one supported backend.
        DataStoreError:
            If the Redis store fails its healthcheck.
    """
    if len(config) != 1:
        raise BadConfigurationError(f'Expected exactly one active backend (given: {sorted(config)}).')

    [(backend, backend_config)] = config.items()
    backend_config = backend_config or {}

    if backend == Backend.REDIS:
        redis_config = {f'redis_{k}': v for k, v in backend_config.items()}
        logger.debug('Using Redis as the backend for registry entries.', extra={'prefix': app_prefix()})
        return EntryRedisDAO(**redis_config, prefix=app_prefix())
    if backend == Backend.MEMORY:
        logger.debug('Using in-memory backend for registry entries.')
        return EntryMemoryDAO()

    raise BadConfigurationError(f"Unsupported registry backend '{backend}'.")


def build_registry(component: str = 'registry', config: RegistryConfiguration | None = None, **registry_kwargs) -> Registry:
    """Build a Registry from configuration

    Args:
        component (str):
            Configuration section to load when `config` isn't given.
        config (RegistryConfiguration | None):
            Pre-loaded `{backend: {...}}` configuration.
        **registry_kwargs:
            Passed through to Registry (generator, clock, id_factory, ...).

    Returns:
        Registry: Registry backed by the configured entry store.
    """
    if config is None:
        config = load_config(component)
    return Registry(dao=build_dao(config), **registry_kwargs)

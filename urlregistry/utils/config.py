"""Utility functions for application configuration management.

This module provides a standardized interface for registry components to
access their configuration. Deployed environments read it from **AWS AppConfig**:
each environment (`APP_ENV`) has a dedicated AppConfig *Environment* within the
shared AppConfig *Application*, and the configuration JSON follows this
structure:

    {
        "active_backend": "redis",
        "configs": {
            "registry": {
                "redis": { "host": "...", "port": 6379, "db": 0 },
                "memory": {}
            }
        }
    }

Local runs (`APP_ENV=local`) skip AppConfig entirely and build the same shape
from `REGISTRY_BACKEND` and the `REDIS_*` environment variables.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), `'local'` by default.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return key prefix for DAOs, or None if `APP_NAME` is not set.

    load_config(component: str) -> dict
        Load configuration for a registry component and return it as
        `{<active backend>: {...backend config...}}`.

Example:
    >>> from urlregistry.utils.config import load_config
    >>> config = load_config('registry')
    >>> print(config['redis']['host'])
    localhost
"""

import os
import json
import functools
import logging
from collections.abc import Callable

import boto3

from urlregistry.types import RegistryConfiguration
from urlregistry.constants import ENV, Backend
from urlregistry.exceptions import BadConfigurationError
from urlregistry.utils.helpers import require_environment
from urlregistry.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'urlregistry'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'urlregistry:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _local_backend_config(backend: str) -> dict:
    if backend == Backend.MEMORY:
        return {}
    return {
        'host': os.getenv(ENV.Redis.HOST, 'localhost'),
        'port': int(os.getenv(ENV.Redis.PORT, '6379')),
        'db': int(os.getenv(ENV.Redis.DB, '0')),
        'username': os.getenv(ENV.Redis.USERNAME),
        'password': os.getenv(ENV.Redis.PASSWORD),
    }


def _load_local_config(func: Callable) -> Callable:
    """Decorator: build configuration from environment variables when running locally.

    Behavior:
        - If the application is running locally, read the backend from
          `REGISTRY_BACKEND` (default: "redis") and its parameters from `REDIS_*`.
        - Else, call the wrapped function (which pulls from AWS AppConfig via boto3).

    Raises:
        BadConfigurationError:
            If `REGISTRY_BACKEND` names an unsupported backend or a `REDIS_*`
            number can't be parsed.
    """

    @functools.wraps(func)
    def wrapper(component: str) -> RegistryConfiguration:
        if not running_locally():
            return func(component)

        backend = os.getenv(ENV.App.REGISTRY_BACKEND, Backend.REDIS).lower()
        if backend not in set(Backend):
            raise BadConfigurationError(f"Unsupported registry backend '{backend}'.")

        try:
            data = {backend: _local_backend_config(backend)}
        except ValueError as e:
            raise BadConfigurationError(f'Bad Redis configuration in environment: {e}') from e

        logger.debug('Loaded configuration from environment.', extra={'component': component, 'backend': backend})
        return data

    return wrapper


@_load_local_config
@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def load_config(component: str) -> RegistryConfiguration:
    """Load configuration for a given component from AWS AppConfig.

    Fetches the AppConfig JSON once and returns the section relevant
    to the requested component (e.g., 'registry').

    Environment variables required:
        APPCONFIG_APP_ID       – AppConfig Application ID
        APPCONFIG_ENV_ID       – AppConfig Environment ID
        APPCONFIG_PROFILE_ID   – AppConfig Configuration Profile ID

    Raises:
        MissingEnvironmentVariableError:
            If any AppConfig identifier is missing.
        BadConfigurationError:
            If the AppConfig document lacks the active backend section for the component.
        botocore.exceptions.ClientError:
            If AppConfig rejects the request.
    """
    logger.debug('Trying to load AppConfig from AWS AppConfig.', extra={'component': component})

    appconfig = boto3.client('appconfigdata')

    # Start an AppConfig data session
    session_token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']

    # Fetch the configuration
    response = appconfig.get_latest_configuration(ConfigurationToken=session_token)
    content = response['Configuration'].read()
    config = json.loads(content.decode('utf-8'))

    # Extract the active backend config for this component
    try:
        backend = config['active_backend']
        data = {backend: config['configs'][component][backend]}
    except (KeyError, TypeError) as e:
        raise BadConfigurationError(f"AppConfig document has no active backend section for '{component}'.") from e

    logger.debug('Loaded AppConfig from AWS AppConfig.', extra={'component': component, 'build': config.get('build')})
    return data

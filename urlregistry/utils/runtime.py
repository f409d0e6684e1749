"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if the registry runs in a local environment, False otherwise.

Example:
    >>> from urlregistry.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
    >>> os.environ['APP_ENV'] = 'dev'
    >>> running_locally()
    False
"""

import os

from urlregistry.constants import ENV


def running_locally() -> bool:
    env = os.getenv(ENV.App.APP_ENV, 'local').lower()
    return env == 'local' or os.getenv(ENV.App.AWS_SAM_LOCAL) == 'true'

import string
from enum import StrEnum


# Short code alphabet: 26 lowercase + 26 uppercase + 10 digits
SHORTCODE_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
SHORTCODE_PATTERN = r'[A-Za-z0-9]{3,20}'
DEFAULT_SHORTCODE_LENGTH = 6

# Upper bound for generate-and-check attempts before giving up on a fresh code
MAX_SHORTCODE_ATTEMPTS = 10

# Default validity window of a short URL (minutes)
DEFAULT_VALIDITY_MINUTES = 30

# Click record placeholders
DIRECT_REFERRER = 'Direct'
UNKNOWN_LOCATION = 'Unknown'

# Seconds the redirect collaborator waits before navigating to the target URL
REDIRECT_COUNTDOWN_SECONDS = 3


class Backend(StrEnum):
    """Supported registry storage backends."""

    REDIS = 'redis'
    MEMORY = 'memory'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'
        REGISTRY_BACKEND = 'REGISTRY_BACKEND'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105

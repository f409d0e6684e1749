from urlregistry.utils.config import app_env, app_name, app_prefix, load_config
from urlregistry.utils.helpers import get_short_url, utc_now, as_utc, require_environment
from urlregistry.utils.shortener import generate_shortcode
from urlregistry.utils.validators import is_valid_url, is_valid_shortcode
from urlregistry.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'is_valid_url',
    'is_valid_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'get_short_url',
    'utc_now',
    'as_utc',
    'require_environment',
    'initialize_logging',
]

class URLRegistryError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:url_registry_error'


class ValidationError(URLRegistryError):
    """Base exception for rejected registry input. Resubmitting corrected input recovers."""

    error_code = 'validation:validation_error'


class InvalidURLError(ValidationError):
    """Raised when the original URL is not a well-formed absolute URL."""

    error_code = 'validation:invalid_url'


class InvalidShortCodeError(ValidationError):
    """Raised when a custom short code doesn't match [A-Za-z0-9]{3,20}."""

    error_code = 'validation:invalid_code'


class ShortCodeTakenError(ValidationError):
    """Raised when a custom short code is already used by an entry (expired or not)."""

    error_code = 'validation:code_taken'


class InvalidValidityError(ValidationError):
    """Raised when the validity window is not a positive integer amount of minutes."""

    error_code = 'validation:invalid_validity'


class ShortCodeExhaustedError(URLRegistryError):
    """Raised when the generator keeps producing taken codes past the attempt limit."""

    error_code = 'app:shortcode_exhausted'


class ConfigurationError(URLRegistryError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'

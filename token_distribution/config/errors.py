"""Exceptions for configuration loading."""


class ConfigurationError(Exception):
    """
    Raised when job configuration is missing or invalid.

    This can happen when:
    - Required flag or environment variable is not set
    - Exchange registry file not found
    - Invalid YAML syntax or missing 'exchanges' key
    """

    pass

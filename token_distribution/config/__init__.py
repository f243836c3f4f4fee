"""Job configuration: CLI/env settings, exchange registry and logging."""

from .errors import ConfigurationError
from .registry import ExchangeRegistry
from .settings import (
    add_args,
    check_config,
    config_to_dict,
    get_config,
    option_from_config,
    setup_logging,
)

__all__ = [
    "ConfigurationError",
    "ExchangeRegistry",
    "add_args",
    "check_config",
    "config_to_dict",
    "get_config",
    "option_from_config",
    "setup_logging",
]

"""Registry of exchanges whose activity is tracked for rewards."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import yaml

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class ExchangeRegistry:
    """
    Set of recognized exchange identifiers.

    Lookups are case-insensitive since exchanges are usually contract
    addresses written in either checksum or lower case.

    Expected YAML format:
        exchanges:
          - "0x049DdC3CD20aC7a2F6C867680F7E21De70ACA9C3"
          - "0x1d6b5a9a0b7d5a2c2b1b3b2e0c0a0e2c1c9f4f00"

    Unquoted hex addresses are read by YAML as integers and converted back.
    """

    def __init__(self, exchanges: Iterable[str]):
        self._exchanges = frozenset(e.strip().lower() for e in exchanges if e.strip())

    def __len__(self) -> int:
        return len(self._exchanges)

    def __contains__(self, exchange: object) -> bool:
        return isinstance(exchange, str) and self.is_configured(exchange)

    def is_configured(self, exchange: str) -> bool:
        """Check if exchange is in the registry."""
        return exchange.strip().lower() in self._exchanges

    @classmethod
    def from_yaml(cls, path: Path) -> ExchangeRegistry:
        """
        Load registry from a YAML file.

        Raises:
            ConfigurationError: If the file is missing or malformed
        """
        if not path.exists():
            raise ConfigurationError(f"Exchange config not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read exchange config {path}: {e}") from e

        exchanges = data.get("exchanges") if isinstance(data, dict) else None
        if not isinstance(exchanges, list):
            raise ConfigurationError(f"'exchanges' list missing in {path}")

        registry = cls(_exchange_id(e) for e in exchanges)
        logger.info(f"Loaded {len(registry)} exchanges from {path}")
        return registry


def _exchange_id(value: object) -> str:
    # YAML 1.1 loads unquoted 0x... as int
    if isinstance(value, int) and not isinstance(value, bool):
        return f"0x{value:040x}"
    return str(value)

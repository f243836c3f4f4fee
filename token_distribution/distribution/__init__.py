"""
Distribution module for validating options and ingesting recipients.

This module handles:
- Option validation against chain state (height, token, sender balance)
- Recipient ingestion from the activity store or an input file

Main components:
- OptionValidator: Validates a DistributionOption and owns the output file
- RecipientIngestor: Returns accounts, or accounts with volumes

Usage:
    from token_distribution.distribution import (
        DistributionOption,
        OptionValidator,
        RecipientIngestor,
    )

    with OptionValidator(chain, sender, registry) as validator:
        await validator.check_and_init(option)
        account_volumes = RecipientIngestor(option, store).get_accounts_and_volumes()
"""

from .errors import (
    BalanceUnavailableError,
    DistributionError,
    InsufficientBalanceError,
    InvalidConfigError,
    MalformedInputError,
    ResourceError,
    StaleRangeError,
)
from .ingestor import RecipientIngestor
from .models import AccountVolumes, DistributionOption
from .sources import (
    FileRecipientSource,
    RecipientSource,
    StoreRecipientSource,
    parse_account_line,
    parse_volume_line,
    select_source,
)
from .validator import BalanceGuardConfig, OptionValidator

__all__ = [
    # Main components
    "OptionValidator",
    "RecipientIngestor",
    # Configuration
    "BalanceGuardConfig",
    "DistributionOption",
    # Sources
    "RecipientSource",
    "StoreRecipientSource",
    "FileRecipientSource",
    "parse_account_line",
    "parse_volume_line",
    "select_source",
    # Result models
    "AccountVolumes",
    # Errors
    "DistributionError",
    "InvalidConfigError",
    "StaleRangeError",
    "InsufficientBalanceError",
    "BalanceUnavailableError",
    "ResourceError",
    "MalformedInputError",
]

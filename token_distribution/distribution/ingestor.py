"""Recipient ingestion for a validated distribution option."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .models import AccountVolumes, DistributionOption
from .sources import RecipientSource, select_source

if TYPE_CHECKING:
    from ..store.store import ActivityStore

logger = logging.getLogger(__name__)


class RecipientIngestor:
    """
    Produce the recipient set of a distribution.

    Recipients come from the input file when the option names one,
    otherwise from the activity store. A single call never mixes the two.

    Usage:
        ingestor = RecipientIngestor(option, store)
        accounts = ingestor.get_accounts()
        # or, for volume-weighted rewards
        account_volumes = ingestor.get_accounts_and_volumes()
    """

    def __init__(self, option: DistributionOption, store: ActivityStore | None):
        """
        Initialize ingestor.

        Args:
            option: Validated distribution option
            store: Activity store, required when option has no input file
        """
        self._option = option
        self._source: RecipientSource = select_source(option, store)

    @property
    def source(self) -> RecipientSource:
        """Source recipients are read from."""
        return self._source

    def get_accounts(self) -> list[str]:
        """Get eligible accounts, in source order, duplicates kept."""
        accounts = self._source.accounts()
        logger.info(f"Ingested {len(accounts)} accounts for {self._option.exchange}")
        return accounts

    def get_accounts_and_volumes(self) -> AccountVolumes:
        """Get accounts with their volume in the option's height window."""
        account_volumes = self._source.account_volumes()
        logger.info(
            f"Ingested {len(account_volumes)} account volumes for "
            f"{self._option.exchange}, total volume {account_volumes.total_volume}"
        )
        return account_volumes

"""MongoDB activity store with per-exchange accounts and trade volumes."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass

from pymongo import MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)

ACCOUNTS_COLLECTION = "Accounts"
VOLUMES_COLLECTION = "Volumes"


@dataclass(frozen=True)
class MongoConfig:
    """Configuration for the activity store connection."""

    url: str  # e.g., "mongodb://localhost:27017"
    db_name: str = "distribution"
    timeout_ms: int = 30000


class ActivityStore:
    """
    Read-only view of tracked exchange activity.

    Documents:
    - Accounts: {"exchange": "0x...", "account": "0x..."}
    - Volumes:  {"exchange": "0x...", "account": "0x...",
                 "blockNumber": 123, "volume": "1000"}

    Exchange identifiers are stored lower-case. Volumes are decimal
    strings since they overflow BSON int64. Query errors are raised
    as-is from pymongo.
    """

    def __init__(self, database: Database, client: MongoClient | None = None):
        """
        Initialize store.

        Args:
            database: pymongo database handle
            client: Owning client, closed by close(). None if owned elsewhere.
        """
        self._db = database
        self._client = client

    @classmethod
    def from_config(cls, config: MongoConfig) -> ActivityStore:
        """Connect to MongoDB and return a store for the configured database."""
        client: MongoClient = MongoClient(
            config.url, serverSelectionTimeoutMS=config.timeout_ms
        )
        return cls(client[config.db_name], client=client)

    def close(self) -> None:
        """Close the owned MongoDB client. Safe to call more than once."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def find_all_accounts(self, exchange: str) -> list[str]:
        """
        Get every account that traded on exchange.

        Returns:
            Distinct accounts, sorted
        """
        accounts = self._db[ACCOUNTS_COLLECTION].distinct(
            "account", {"exchange": exchange.lower()}
        )
        logger.debug(f"Found {len(accounts)} accounts for exchange {exchange}")
        return sorted(accounts)

    def find_account_volumes(
        self, exchange: str, start_height: int, end_height: int
    ) -> tuple[list[str], list[int]]:
        """
        Sum each account's volume in [start_height, end_height).

        Args:
            exchange: Exchange identifier
            start_height: First block, inclusive
            end_height: Last block, exclusive

        Returns:
            Parallel (accounts, volumes) lists sorted by account.
            Accounts with zero total volume are omitted.
        """
        cursor = self._db[VOLUMES_COLLECTION].find(
            {
                "exchange": exchange.lower(),
                "blockNumber": {"$gte": start_height, "$lt": end_height},
            },
            projection={"_id": False, "account": True, "volume": True},
        )

        totals: dict[str, int] = defaultdict(int)
        for doc in cursor:
            totals[doc["account"]] += int(doc["volume"])

        accounts: list[str] = []
        volumes: list[int] = []
        for account in sorted(totals):
            if totals[account] == 0:
                continue
            accounts.append(account)
            volumes.append(totals[account])

        logger.debug(
            f"Found volumes for {len(accounts)} accounts on {exchange} "
            f"in blocks [{start_height}, {end_height})"
        )
        return accounts, volumes

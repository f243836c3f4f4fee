"""
Distribution job: validate options, then ingest recipients.

Payout execution is not part of this job. When an output file is
configured the recipient set is written to it in the input file format,
so a dry-run report can be fed back with --input_file.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import IO

from .chain import ChainClient, RPCConfig
from .config import (
    ConfigurationError,
    ExchangeRegistry,
    check_config,
    config_to_dict,
    get_config,
    option_from_config,
    setup_logging,
)
from .distribution import (
    AccountVolumes,
    BalanceGuardConfig,
    DistributionError,
    DistributionOption,
    OptionValidator,
    RecipientIngestor,
)
from .store import ActivityStore, MongoConfig

logger = logging.getLogger(__name__)


def write_accounts(output: IO[str], accounts: list[str]) -> None:
    """Write one account per line."""
    for account in accounts:
        output.write(f"{account}\n")


def write_account_volumes(output: IO[str], account_volumes: AccountVolumes) -> None:
    """Write one "<account> <volume>" pair per line."""
    for account, volume in account_volumes.items():
        output.write(f"{account} {volume}\n")


class DistributionJob:
    """
    One distribution run.

    Responsibilities:
    - Validate the option against chain state
    - Ingest recipients from the store or input file
    - Write the dry-run report when an output file is configured
    """

    def __init__(
        self,
        option: DistributionOption,
        validator: OptionValidator,
        store: ActivityStore | None,
        with_volumes: bool = False,
    ):
        self.option = option
        self.validator = validator
        self.store = store
        self.with_volumes = with_volumes

    @classmethod
    def from_config(cls, config: argparse.Namespace) -> DistributionJob:
        """Wire clients from parsed configuration."""
        check_config(config)
        logger.info(f"Config: {config_to_dict(config)}")

        chain = ChainClient(RPCConfig(url=config.rpc_url, timeout=config.rpc_timeout))
        validator = OptionValidator(
            chain,
            sender=config.sender,
            exchanges=ExchangeRegistry.from_yaml(config.exchanges_config),
            balance_config=BalanceGuardConfig(
                retry_interval=config.balance_retry_interval,
                timeout=config.balance_timeout,
            ),
        )
        # No Mongo connection when recipients come from a file
        store = None
        if not config.input_file:
            store = ActivityStore.from_config(
                MongoConfig(url=config.mongo_url, db_name=config.mongo_db)
            )
        return cls(option_from_config(config), validator, store, config.volumes)

    async def run(self) -> list[str] | AccountVolumes:
        """
        Validate, ingest and report. The store is closed when the run ends.

        Returns:
            Accounts, or AccountVolumes when run with volumes
        """
        try:
            return await self._run()
        finally:
            if self.store is not None:
                self.store.close()

    async def _run(self) -> list[str] | AccountVolumes:
        with self.validator:
            await self.validator.check_and_init(self.option)

            ingestor = RecipientIngestor(self.option, self.store)
            output = self.validator.output_file

            if self.with_volumes:
                recipients: list[str] | AccountVolumes = (
                    ingestor.get_accounts_and_volumes()
                )
                if output is not None:
                    write_account_volumes(output, recipients)
            else:
                recipients = ingestor.get_accounts()
                if output is not None:
                    write_accounts(output, recipients)

            if output is not None:
                logger.info(f"Wrote {len(recipients)} recipients to {output.name}")
            if self.option.dry_run:
                logger.info("Dry run, skipping payout")

        return recipients


async def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    config = get_config(argv)
    setup_logging(config.log_level)

    try:
        job = DistributionJob.from_config(config)
        await job.run()
    except (ConfigurationError, DistributionError) as e:
        logger.error(f"Distribution aborted: {e}")
        return 1
    return 0


def run_cli() -> None:
    """Console script entry point."""
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    run_cli()

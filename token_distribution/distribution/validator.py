"""Distribution option validation against live chain state."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import IO, TYPE_CHECKING

from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception_type,
    stop_after_delay,
    stop_never,
    wait_fixed,
)

from ..chain.errors import ChainError
from ..utils import is_hex_address, normalize_address
from .errors import (
    BalanceUnavailableError,
    InsufficientBalanceError,
    InvalidConfigError,
    ResourceError,
    StaleRangeError,
)
from .models import DistributionOption

if TYPE_CHECKING:
    from ..chain.client import ChainClient
    from ..config.registry import ExchangeRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BalanceGuardConfig:
    """Configuration for the sender balance check."""

    retry_interval: float = 1.0
    """Seconds to wait after a failed balance query."""

    timeout: float | None = None
    """Give up after this many seconds of failed queries. None retries forever."""


class OptionValidator:
    """
    Validate a DistributionOption and acquire the dry-run output file.

    Checks run cheapest first: arithmetic, then registry, then chain
    height, then the sender balance (which may block indefinitely while
    the node is unreachable), then the output file.

    Usage:
        with OptionValidator(chain, sender, registry) as validator:
            await validator.check_and_init(option)
            ...
            if validator.output_file:
                validator.output_file.write(...)

    The output file is closed when the with-block exits, on success or error.
    """

    def __init__(
        self,
        chain: ChainClient,
        sender: str,
        exchanges: ExchangeRegistry,
        balance_config: BalanceGuardConfig | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ):
        """
        Initialize validator.

        Args:
            chain: Chain client for block height and balance queries
            sender: Account that funds the distribution
            exchanges: Registry of recognized exchanges
            balance_config: Balance guard retry settings. Uses defaults if None.
            sleep: Coroutine used to wait between balance retries
        """
        self._chain = chain
        self._sender = sender
        self._exchanges = exchanges
        self._balance_config = balance_config or BalanceGuardConfig()
        self._sleep = sleep or asyncio.sleep
        self._output_file: IO[str] | None = None

    def __enter__(self) -> OptionValidator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.deinit()

    @property
    def output_file(self) -> IO[str] | None:
        """Open dry-run output file, or None if not configured or not opened yet."""
        return self._output_file

    async def check_and_init(self, option: DistributionOption) -> None:
        """
        Validate option and open its output file.

        Raises:
            InvalidConfigError: Bad total value, height range, exchange or token
            StaleRangeError: End height is above the latest block
            InsufficientBalanceError: Sender cannot fund total value
            BalanceUnavailableError: Balance guard timed out (only with a timeout)
            ResourceError: Output file could not be opened
        """
        if option.total_value is None or option.total_value <= 0:
            raise InvalidConfigError(f"wrong total value {option.total_value}")

        if option.start_height < 0 or option.end_height < 0:
            raise InvalidConfigError(
                f"negative height, start height {option.start_height}, "
                f"end height {option.end_height}"
            )

        if option.start_height >= option.end_height:
            raise InvalidConfigError(
                f"empty range, start height {option.start_height} >= "
                f"end height {option.end_height}"
            )

        if not self._exchanges.is_configured(option.exchange):
            raise InvalidConfigError(f"exchange {option.exchange} is not configured")

        latest = await self._chain.loop_get_latest_block_header()
        if latest.number < option.end_height:
            raise StaleRangeError(
                f"latest height {latest.number} is lower than "
                f"end height {option.end_height}",
                latest_height=latest.number,
                end_height=option.end_height,
            )

        if not is_hex_address(option.reward_token):
            raise InvalidConfigError(f"wrong reward token: '{option.reward_token}'")

        await self.check_sender_balance(option)
        self._open_output_file(option)

        logger.info(
            f"Distribution option validated: exchange={option.exchange}, "
            f"range=[{option.start_height}, {option.end_height}), "
            f"total_value={option.total_value}, latest_block={latest.number}"
        )

    async def check_sender_balance(self, option: DistributionOption) -> int:
        """
        Wait until the sender balance can be read and compare it to total value.

        Chain errors are retried every retry_interval seconds with no
        attempt limit. Only a successful read that is too low fails.

        Returns:
            Sender balance
        """
        token = normalize_address(option.reward_token)
        config = self._balance_config
        stop = stop_never if config.timeout is None else stop_after_delay(config.timeout)

        try:
            async for attempt in AsyncRetrying(
                sleep=self._sleep,
                wait=wait_fixed(config.retry_interval),
                stop=stop,
                retry=retry_if_exception_type(ChainError),
                before_sleep=self._log_balance_retry,
            ):
                with attempt:
                    balance = await self._chain.get_token_balance(token, self._sender)
        except RetryError as e:
            raise BalanceUnavailableError(
                f"could not read balance of {token} for {self._sender} "
                f"within {config.timeout}s: {e.last_attempt.exception()}"
            ) from e

        if balance < option.total_value:
            raise InsufficientBalanceError(
                f"not enough reward token balance, {balance} < {option.total_value}",
                balance=balance,
                required=option.total_value,
            )

        logger.info(f"Sender {self._sender} holds {balance} of reward token {token}")
        return balance

    @staticmethod
    def _log_balance_retry(retry_state) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            f"Balance query failed (attempt {retry_state.attempt_number}), "
            f"retrying: {exc}"
        )

    def _open_output_file(self, option: DistributionOption) -> None:
        if not option.output_file:
            return
        self.deinit()
        try:
            self._output_file = open(option.output_file, "w", encoding="utf-8")  # noqa: SIM115
        except OSError as e:
            raise ResourceError(
                f"open {option.output_file} failed: {e}", path=option.output_file
            ) from e
        logger.info(f"Opened output file {option.output_file}")

    def deinit(self) -> None:
        """Close the output file if one is open. Safe to call more than once."""
        if self._output_file is not None:
            self._output_file.close()
            self._output_file = None

"""JSON-RPC chain client for distribution checks."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    stop_never,
    wait_exponential,
    wait_fixed,
    wait_random,
)

from .errors import ChainConnectionError, ChainError, ChainRPCError
from .models import BlockHeader, hex_to_int

logger = logging.getLogger(__name__)

# ERC-20 balanceOf(address)
BALANCE_OF_SELECTOR = "0x70a08231"

# Retry decorator for single RPC reads: 3 attempts with exponential backoff + jitter
_retry_on_connection_error = retry(
    wait=wait_exponential(multiplier=0.1, max=2) + wait_random(0, 0.2),
    stop=stop_after_attempt(3),
    retry=retry_if_exception_type(ChainConnectionError),
    reraise=True,
)


@dataclass(frozen=True)
class RPCConfig:
    """Configuration for the chain RPC client."""

    url: str  # e.g., "http://localhost:8545"
    timeout: float = 30.0  # Request timeout in seconds


def encode_balance_of(owner: str) -> str:
    """Build calldata for ERC-20 balanceOf(owner)."""
    owner_hex = owner[2:] if owner.lower().startswith("0x") else owner
    return BALANCE_OF_SELECTOR + owner_hex.lower().rjust(64, "0")


class ChainClient:
    """
    Async JSON-RPC client for the chain node.

    Handles:
    - Fetching the latest block header
    - Reading ERC-20 token balances

    Each method creates its own connection - safe for long-running jobs.
    """

    def __init__(self, config: RPCConfig):
        """
        Initialize chain client.

        Args:
            config: RPC connection configuration
        """
        self._config = config
        self._ids = itertools.count(1)

    def _client(self) -> httpx.AsyncClient:
        """Create a new HTTP client for a request."""
        return httpx.AsyncClient(
            headers={"Content-Type": "application/json"},
            timeout=self._config.timeout,
        )

    async def _call(self, method: str, params: list[Any]) -> Any:
        """
        Send a JSON-RPC request and return its result.

        Raises:
            ChainConnectionError: On transport or HTTP status errors
            ChainRPCError: If the node returns an error object or no result
        """
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        async with self._client() as client:
            try:
                response = await client.post(self._config.url, json=payload)
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPStatusError as e:
                raise ChainConnectionError(f"{method} failed: {e}") from e
            except httpx.RequestError as e:
                raise ChainConnectionError(f"Connection error: {e}") from e
            except ValueError as e:
                raise ChainRPCError(f"Invalid JSON in {method} response: {e}") from e

        if not isinstance(data, dict):
            raise ChainRPCError(f"Malformed {method} response: {data!r}")

        error = data.get("error")
        if error and not isinstance(error, dict):
            raise ChainRPCError(f"{method} returned error: {error}")
        if error:
            raise ChainRPCError(
                f"{method} returned error: {error.get('message', error)}",
                code=error.get("code"),
            )
        if data.get("result") is None:
            raise ChainRPCError(f"{method} returned no result")
        return data["result"]

    @_retry_on_connection_error
    async def get_latest_block_header(self) -> BlockHeader:
        """
        Fetch the latest block header.

        Retries on transient connection errors (3 attempts with exponential backoff).
        """
        result = await self._call("eth_getBlockByNumber", ["latest", False])
        try:
            header = BlockHeader.from_rpc_response(result)
        except (KeyError, TypeError, ValueError) as e:
            raise ChainRPCError(f"Malformed block header: {e}") from e

        logger.debug(f"Latest block is {header.number}")
        return header

    async def loop_get_latest_block_header(self, interval: float = 1.0) -> BlockHeader:
        """
        Fetch the latest block header, retrying until it succeeds.

        Args:
            interval: Seconds to wait between failed attempts

        Returns:
            Latest block header
        """
        async for attempt in AsyncRetrying(
            wait=wait_fixed(interval),
            stop=stop_never,
            retry=retry_if_exception_type(ChainError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                header = await self.get_latest_block_header()
        return header

    async def get_token_balance(self, token: str, owner: str) -> int:
        """
        Read the ERC-20 balance of owner for token at the latest block.

        Args:
            token: Token contract address
            owner: Account whose balance is read

        Returns:
            Balance in the token's smallest unit

        Raises:
            ChainConnectionError: If the node cannot be reached
            ChainRPCError: If the call fails or returns malformed data
        """
        result = await self._call(
            "eth_call",
            [{"to": token, "data": encode_balance_of(owner)}, "latest"],
        )
        # Non-contract addresses answer "0x"
        if result == "0x":
            raise ChainRPCError(f"Token {token} returned empty balanceOf result")
        try:
            return hex_to_int(result)
        except (TypeError, ValueError) as e:
            raise ChainRPCError(f"Malformed balanceOf result '{result}': {e}") from e

"""Shared fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from token_distribution.chain import BlockHeader
from token_distribution.config import ExchangeRegistry
from token_distribution.distribution import DistributionOption

# EIP-55 test vectors
ADDRESS_A = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
ADDRESS_B = "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359"
ADDRESS_C = "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB"
ADDRESS_D = "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb"

EXCHANGE = "0x049DdC3CD20aC7a2F6C867680F7E21De70ACA9C3"
REWARD_TOKEN = ADDRESS_D
SENDER = ADDRESS_C


@pytest.fixture
def registry() -> ExchangeRegistry:
    """Registry with a single known exchange."""
    return ExchangeRegistry([EXCHANGE])


@pytest.fixture
def mock_chain_client() -> MagicMock:
    """Chain client at block 2000 where the sender holds 10**21."""
    chain = MagicMock()
    chain.loop_get_latest_block_header = AsyncMock(
        return_value=BlockHeader(number=2000, hash="0xabc", timestamp=1700000000)
    )
    chain.get_token_balance = AsyncMock(return_value=10**21)
    return chain


@pytest.fixture
def mock_store() -> MagicMock:
    """Activity store returning two accounts."""
    store = MagicMock()
    store.find_all_accounts.return_value = [ADDRESS_A, ADDRESS_B]
    store.find_account_volumes.return_value = ([ADDRESS_A, ADDRESS_B], [1000, 2000])
    return store


@pytest.fixture
def make_option():
    """Factory for a valid DistributionOption with optional field overrides."""

    def _make(**overrides) -> DistributionOption:
        fields = {
            "total_value": 10**18,
            "start_height": 1000,
            "end_height": 2000,
            "exchange": EXCHANGE,
            "reward_token": REWARD_TOKEN,
        }
        fields.update(overrides)
        return DistributionOption(**fields)

    return _make

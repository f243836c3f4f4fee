"""Tests for RecipientIngestor."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from token_distribution.distribution import (
    FileRecipientSource,
    MalformedInputError,
    RecipientIngestor,
    StoreRecipientSource,
)

ADDRESS_A = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
ADDRESS_B = "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359"


class TestStoreBackedIngestion:
    """Tests for ingestion without an input file."""

    def test_get_accounts_uses_store(self, mock_store, make_option):
        """Accounts come from the store."""
        ingestor = RecipientIngestor(make_option(), mock_store)

        assert isinstance(ingestor.source, StoreRecipientSource)
        assert ingestor.get_accounts() == [ADDRESS_A, ADDRESS_B]

    def test_get_accounts_and_volumes_uses_store(self, mock_store, make_option):
        """Account volumes come from the store for the option's window."""
        option = make_option(start_height=100, end_height=200)

        result = RecipientIngestor(option, mock_store).get_accounts_and_volumes()

        assert result.accounts == (ADDRESS_A, ADDRESS_B)
        assert result.volumes == (1000, 2000)
        mock_store.find_account_volumes.assert_called_once_with(
            option.exchange, 100, 200
        )

    def test_never_touches_filesystem(self, mock_store, make_option):
        """Store path never opens a file."""
        ingestor = RecipientIngestor(make_option(), mock_store)

        with patch("builtins.open") as mock_open:
            ingestor.get_accounts()
            ingestor.get_accounts_and_volumes()

        mock_open.assert_not_called()


class TestFileBackedIngestion:
    """Tests for ingestion from an input file."""

    def test_get_accounts_from_file(self, mock_store, make_option, tmp_path: Path):
        """Accounts are read from the input file and the store is unused."""
        path = tmp_path / "accounts.txt"
        path.write_text(f"{ADDRESS_B.lower()}\n{ADDRESS_A}\n")

        ingestor = RecipientIngestor(make_option(input_file=str(path)), mock_store)

        assert isinstance(ingestor.source, FileRecipientSource)
        assert ingestor.get_accounts() == [ADDRESS_B, ADDRESS_A]
        mock_store.find_all_accounts.assert_not_called()

    def test_get_accounts_and_volumes_from_file(
        self, mock_store, make_option, tmp_path: Path
    ):
        """Two volume lines give parallel sequences in file order."""
        path = tmp_path / "volumes.txt"
        path.write_text(f"{ADDRESS_A} 1000\n{ADDRESS_B} 2000\n")

        result = RecipientIngestor(
            make_option(input_file=str(path)), mock_store
        ).get_accounts_and_volumes()

        assert list(result.accounts) == [ADDRESS_A, ADDRESS_B]
        assert list(result.volumes) == [1000, 2000]
        assert list(result.items()) == [(ADDRESS_A, 1000), (ADDRESS_B, 2000)]
        assert result.total_volume == 3000
        mock_store.find_account_volumes.assert_not_called()

    def test_invalid_line_returns_nothing(self, mock_store, make_option, tmp_path: Path):
        """An invalid line fails the call even after valid lines."""
        path = tmp_path / "volumes.txt"
        path.write_text(f"{ADDRESS_A} 1000\nnotanaddress 100\n")
        ingestor = RecipientIngestor(make_option(input_file=str(path)), mock_store)

        with pytest.raises(MalformedInputError):
            ingestor.get_accounts_and_volumes()

        mock_store.find_account_volumes.assert_not_called()

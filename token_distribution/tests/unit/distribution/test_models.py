"""Tests for distribution data models."""

import dataclasses

import pytest

from token_distribution.distribution import AccountVolumes, DistributionOption


class TestDistributionOption:
    """Tests for DistributionOption."""

    def test_defaults(self):
        """Input/output files are empty and dry run is off by default."""
        option = DistributionOption(
            total_value=1, start_height=0, end_height=1, exchange="x", reward_token="y"
        )

        assert option.input_file == ""
        assert option.output_file == ""
        assert option.dry_run is False
        assert option.uses_input_file is False

    def test_is_immutable(self, make_option):
        """Option cannot be modified after construction."""
        option = make_option()

        with pytest.raises(dataclasses.FrozenInstanceError):
            option.total_value = 0

    def test_height_range(self, make_option):
        """height_range returns (start, end)."""
        assert make_option(start_height=5, end_height=9).height_range == (5, 9)

    def test_uses_input_file(self, make_option):
        """Non-empty input file switches to file ingestion."""
        assert make_option(input_file="accounts.txt").uses_input_file is True

    def test_to_dict_stringifies_total_value(self, make_option):
        """Big total values are logged as strings."""
        result = make_option(total_value=10**30).to_dict()

        assert result["total_value"] == str(10**30)
        assert result["end_height"] == 2000


class TestAccountVolumes:
    """Tests for AccountVolumes."""

    def test_unequal_lengths_rejected(self):
        """Accounts and volumes must be parallel."""
        with pytest.raises(ValueError, match="differ in length"):
            AccountVolumes(accounts=("a", "b"), volumes=(1,))

    def test_empty(self):
        """Empty result has no entries and zero volume."""
        result = AccountVolumes()

        assert len(result) == 0
        assert result.total_volume == 0
        assert list(result.items()) == []

    def test_items_pairs_in_order(self):
        """items() pairs accounts with volumes by position."""
        result = AccountVolumes(accounts=("a", "b", "a"), volumes=(1, 2, 3))

        assert list(result.items()) == [("a", 1), ("b", 2), ("a", 3)]
        assert result.total_volume == 6

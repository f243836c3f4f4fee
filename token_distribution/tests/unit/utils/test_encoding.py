"""Tests for address and big integer helpers."""

import pytest

from token_distribution.utils import is_hex_address, normalize_address, parse_big_int

ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


class TestIsHexAddress:
    """Tests for is_hex_address."""

    @pytest.mark.parametrize(
        "value", [ADDRESS, ADDRESS.lower(), ADDRESS.upper().replace("0X", "0x"), ADDRESS[2:]]
    )
    def test_valid(self, value):
        """20-byte hex strings are addresses regardless of case or prefix."""
        assert is_hex_address(value)

    @pytest.mark.parametrize(
        "value", ["", "0x", "0x1234", ADDRESS + "ab", "0x" + "g" * 40, None, 123]
    )
    def test_invalid(self, value):
        """Anything else is not an address."""
        assert not is_hex_address(value)


class TestNormalizeAddress:
    """Tests for normalize_address."""

    def test_checksums(self):
        """Lower-case address is checksummed."""
        assert normalize_address(ADDRESS.lower()) == ADDRESS


class TestParseBigInt:
    """Tests for parse_big_int."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("0", 0),
            ("1000", 1000),
            ("0x3e8", 1000),
            ("0X3E8", 1000),
            ("-42", -42),
            (" 7 ", 7),
            (str(2**256 - 1), 2**256 - 1),
        ],
    )
    def test_valid(self, value, expected):
        """Decimal and hex strings are parsed."""
        assert parse_big_int(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "1.0", "1_000", "+5", "0x", str(2**256)])
    def test_invalid(self, value):
        """Non-integers and values over 256 bits raise ValueError."""
        with pytest.raises(ValueError):
            parse_big_int(value)

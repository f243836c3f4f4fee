"""Address and big-integer parsing helpers."""

from __future__ import annotations

import re

from eth_utils import is_hex_address as _is_hex_address
from eth_utils import to_checksum_address

# Decimal or 0x-prefixed hex, optional leading minus. No underscores or spaces.
_BIG_INT_PATTERN = re.compile(r"^-?(0[xX][0-9a-fA-F]+|[0-9]+)$")

MAX_BIG_INT_BITS = 256


def is_hex_address(value: object) -> bool:
    """
    Check that value is a 20-byte hex address.

    The 0x prefix is optional and mixed case is accepted without
    checksum verification.
    """
    if not isinstance(value, str):
        return False
    return _is_hex_address(value)


def normalize_address(value: str) -> str:
    """Return the EIP-55 checksummed form of a hex address."""
    return to_checksum_address(value)


def parse_big_int(value: str) -> int:
    """
    Parse a big integer from a decimal or 0x-prefixed hex string.

    Args:
        value: String such as "1000", "0x3e8" or "-5"

    Returns:
        Parsed integer

    Raises:
        ValueError: If the string is not a number or exceeds 256 bits
    """
    text = value.strip()
    if not _BIG_INT_PATTERN.match(text):
        raise ValueError(f"invalid big integer string: '{value}'")

    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if digits[:2].lower() == "0x":
        result = int(digits[2:], 16)
    else:
        result = int(digits, 10)

    if result.bit_length() > MAX_BIG_INT_BITS:
        raise ValueError(f"big integer exceeds {MAX_BIG_INT_BITS} bits: '{value}'")
    return -result if negative else result

"""Shared parsing helpers."""

from .encoding import is_hex_address, normalize_address, parse_big_int

__all__ = [
    "is_hex_address",
    "normalize_address",
    "parse_big_int",
]

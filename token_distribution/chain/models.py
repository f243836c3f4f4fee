"""Type-safe chain data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def hex_to_int(value: str | int) -> int:
    """Decode a JSON-RPC hex quantity ("0x1a") into an int."""
    if isinstance(value, int):
        return value
    return int(value, 16)


@dataclass(frozen=True)
class BlockHeader:
    """
    Header fields of a chain block.

    Immutable to prevent accidental modification.
    """

    number: int
    hash: str
    timestamp: int

    @classmethod
    def from_rpc_response(cls, data: dict[str, Any]) -> BlockHeader:
        """
        Parse a JSON-RPC block object into BlockHeader.

        Expected format (eth_getBlockByNumber):
        {
            "number": "0x10d4f",
            "hash": "0xabc...",
            "timestamp": "0x5f5e100",
            ...
        }
        """
        return cls(
            number=hex_to_int(data["number"]),
            hash=data.get("hash") or "",
            timestamp=hex_to_int(data.get("timestamp", "0x0")),
        )

"""Data models for distribution jobs."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DistributionOption:
    """
    Options of a single reward distribution job.

    Built once from configuration, validated once by OptionValidator,
    then read-only.
    """

    total_value: int | None
    """Total reward budget in the token's smallest unit. Must be > 0."""

    start_height: int
    """First block of the activity window, inclusive."""

    end_height: int
    """Last block of the activity window, exclusive."""

    exchange: str
    """Exchange identifier, must be in the exchange registry."""

    reward_token: str
    """Reward token contract address."""

    input_file: str = ""
    """Recipient list override. Empty means read from the activity store."""

    output_file: str = ""
    """Dry-run report path. Empty means no report."""

    dry_run: bool = False
    """Skip payout execution."""

    @property
    def height_range(self) -> tuple[int, int]:
        """Half-open activity window (start, end)."""
        return self.start_height, self.end_height

    @property
    def uses_input_file(self) -> bool:
        """True if recipients come from input_file instead of the store."""
        return bool(self.input_file)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "total_value": str(self.total_value),
            "start_height": self.start_height,
            "end_height": self.end_height,
            "exchange": self.exchange,
            "reward_token": self.reward_token,
            "input_file": self.input_file,
            "output_file": self.output_file,
            "dry_run": self.dry_run,
        }


@dataclass(frozen=True)
class AccountVolumes:
    """
    Accounts paired with their volume in the activity window.

    accounts[i] has weight volumes[i].
    """

    accounts: tuple[str, ...] = field(default_factory=tuple)
    volumes: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if len(self.accounts) != len(self.volumes):
            raise ValueError(
                f"accounts and volumes differ in length: "
                f"{len(self.accounts)} != {len(self.volumes)}"
            )

    def __len__(self) -> int:
        return len(self.accounts)

    @property
    def total_volume(self) -> int:
        """Sum of all volumes."""
        return sum(self.volumes)

    def items(self) -> Iterator[tuple[str, int]]:
        """Iterate (account, volume) pairs in order."""
        return zip(self.accounts, self.volumes)

"""Recipient sources: activity store or flat input file."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol

from ..utils import is_hex_address, normalize_address, parse_big_int
from .errors import MalformedInputError, ResourceError
from .models import AccountVolumes

if TYPE_CHECKING:
    from ..store.store import ActivityStore
    from .models import DistributionOption

logger = logging.getLogger(__name__)


class RecipientSource(Protocol):
    """Provider of the recipient set for a distribution."""

    def accounts(self) -> list[str]: ...

    def account_volumes(self) -> AccountVolumes: ...


def parse_account_line(line: str, line_number: int | None = None) -> str:
    """
    Parse one line of an account list file.

    Args:
        line: Raw line, surrounding whitespace allowed
        line_number: 1-based position, used in error messages

    Returns:
        Checksummed address

    Raises:
        MalformedInputError: If the line is not a hex address
    """
    text = line.strip()
    if not is_hex_address(text):
        raise MalformedInputError(
            f"found wrong address line {line_number}: '{text}'", text, line_number
        )
    return normalize_address(text)


def parse_volume_line(line: str, line_number: int | None = None) -> tuple[str, int]:
    """
    Parse one "<address> <volume>" line of an account volume file.

    Exactly two whitespace-separated tokens are required.

    Returns:
        (checksummed address, volume)

    Raises:
        MalformedInputError: On wrong token count, bad address or bad volume
    """
    text = line.strip()
    parts = text.split()
    if len(parts) != 2:
        raise MalformedInputError(
            f"expected '<address> <volume>' in line {line_number}, "
            f"got {len(parts)} tokens: '{text}'",
            text,
            line_number,
        )

    account_str, volume_str = parts
    if not is_hex_address(account_str):
        raise MalformedInputError(
            f"wrong address in line {line_number}: '{text}'", text, line_number
        )
    try:
        volume = parse_big_int(volume_str)
    except ValueError as e:
        raise MalformedInputError(
            f"wrong volume in line {line_number}: '{text}' ({e})", text, line_number
        ) from e

    return normalize_address(account_str), volume


class StoreRecipientSource:
    """Recipients taken from the activity store, without further checks."""

    def __init__(self, store: ActivityStore, option: DistributionOption):
        self._store = store
        self._option = option

    def accounts(self) -> list[str]:
        return self._store.find_all_accounts(self._option.exchange)

    def account_volumes(self) -> AccountVolumes:
        accounts, volumes = self._store.find_account_volumes(
            self._option.exchange,
            self._option.start_height,
            self._option.end_height,
        )
        return AccountVolumes(accounts=tuple(accounts), volumes=tuple(volumes))


class FileRecipientSource:
    """
    Recipients parsed from a text file.

    Parsing is all-or-nothing: the first malformed line aborts the read
    and nothing is returned. Order and duplicates are kept as in the file.
    """

    def __init__(self, path: str):
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def _lines(self) -> Iterator[tuple[int, str]]:
        try:
            with open(self._path, encoding="utf-8") as f:
                yield from enumerate(f, start=1)
        except OSError as e:
            raise ResourceError(f"open {self._path} failed: {e}", path=self._path) from e
        except UnicodeDecodeError as e:
            raise ResourceError(f"read {self._path} failed: {e}", path=self._path) from e

    def accounts(self) -> list[str]:
        accounts = [
            parse_account_line(line, line_number)
            for line_number, line in self._lines()
        ]
        logger.info(f"Read {len(accounts)} accounts from {self._path}")
        return accounts

    def account_volumes(self) -> AccountVolumes:
        accounts: list[str] = []
        volumes: list[int] = []
        for line_number, line in self._lines():
            account, volume = parse_volume_line(line, line_number)
            accounts.append(account)
            volumes.append(volume)

        logger.info(f"Read {len(accounts)} account volumes from {self._path}")
        return AccountVolumes(accounts=tuple(accounts), volumes=tuple(volumes))


def select_source(
    option: DistributionOption, store: ActivityStore | None
) -> RecipientSource:
    """
    Pick the file source if option has an input file, else the store.

    Raises:
        ValueError: If the store is needed but None
    """
    if option.uses_input_file:
        return FileRecipientSource(option.input_file)
    if store is None:
        raise ValueError("activity store required when no input file is set")
    return StoreRecipientSource(store, option)

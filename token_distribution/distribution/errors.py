"""Exceptions for distribution option validation and recipient ingestion."""


class DistributionError(Exception):
    """Base exception for distribution job errors."""

    pass


class InvalidConfigError(DistributionError):
    """
    Raised when a distribution option fails a static check.

    This can happen when:
    - Total value is missing or not positive
    - Height range is empty (start >= end)
    - Exchange is not in the registry
    - Reward token is not a hex address
    """

    pass


class StaleRangeError(DistributionError):
    """
    Raised when the height window extends past the latest chain block.

    The same option may pass later once the chain advances.
    """

    def __init__(self, message: str, latest_height: int, end_height: int):
        """
        Initialize StaleRangeError.

        Args:
            message: Error message
            latest_height: Latest block number reported by the chain
            end_height: Requested end height
        """
        super().__init__(message)
        self.latest_height = latest_height
        self.end_height = end_height


class InsufficientBalanceError(DistributionError):
    """Raised when the sender holds less reward token than the total value."""

    def __init__(self, message: str, balance: int, required: int):
        """
        Initialize InsufficientBalanceError.

        Args:
            message: Error message
            balance: Sender balance that was read
            required: Total value of the distribution
        """
        super().__init__(message)
        self.balance = balance
        self.required = required


class BalanceUnavailableError(DistributionError):
    """
    Raised when the balance could not be read before the guard timeout.

    Only possible when a balance timeout is configured; by default the
    guard retries forever.
    """

    pass


class ResourceError(DistributionError):
    """
    Raised when an input or output file cannot be opened or read.

    This can happen when:
    - Input file does not exist
    - Permission denied
    - Disk or encoding errors while reading
    """

    def __init__(self, message: str, path: str):
        """
        Initialize ResourceError.

        Args:
            message: Error message
            path: Offending file path
        """
        super().__init__(message)
        self.path = path


class MalformedInputError(DistributionError):
    """
    Raised when a line of a recipient file has the wrong shape.

    This can happen when:
    - Address is not a 20-byte hex string
    - Account+volume line does not have exactly two tokens
    - Volume is not an integer
    """

    def __init__(self, message: str, line: str, line_number: int | None = None):
        """
        Initialize MalformedInputError.

        Args:
            message: Error message
            line: Offending line content (stripped)
            line_number: 1-based line number, if read from a file
        """
        super().__init__(message)
        self.line = line
        self.line_number = line_number

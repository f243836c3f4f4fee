"""Custom exceptions for chain interactions."""


class ChainError(Exception):
    """Base exception for chain-related errors."""

    pass


class ChainConnectionError(ChainError):
    """
    Raised when the RPC endpoint cannot be reached or answers with an HTTP error.

    This can happen when:
    - Node is down or restarting
    - Network connectivity issues
    - Gateway returns 5xx or rate limits the client
    """

    pass


class ChainRPCError(ChainError):
    """
    Raised when the node answers but the JSON-RPC call fails.

    This can happen when:
    - Response carries a JSON-RPC error object
    - Result is missing or not valid hex
    - Node has not synced the requested block yet
    """

    def __init__(self, message: str, code: int | None = None):
        """
        Initialize ChainRPCError.

        Args:
            message: Error message
            code: JSON-RPC error code, if the node returned one
        """
        super().__init__(message)
        self.code = code

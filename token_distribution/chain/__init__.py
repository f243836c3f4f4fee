"""Chain interaction layer via JSON-RPC."""

from .client import ChainClient, RPCConfig
from .errors import ChainConnectionError, ChainError, ChainRPCError
from .models import BlockHeader

__all__ = [
    # Client
    "ChainClient",
    "RPCConfig",
    # Errors
    "ChainConnectionError",
    "ChainError",
    "ChainRPCError",
    # Models
    "BlockHeader",
]

from .client import ChainClient
from .errors import ChainError, ContractCallReverted, RPCError

__all__ = [
    "ChainClient",
    "ChainError",
    "RPCError",
    "ContractCallReverted",
]

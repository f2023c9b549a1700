from .amm_math import get_amount_out
from .errors import PoolLoadError, PricingError, ReserveUnavailable
from .explorer import ExplorationStats, RouteExplorer, find_arbitrage_routes
from .graph import PoolGraph
from .pool import Pool, Reserves
from .pool_loader import load_pools
from .reporter import RouteReporter
from .reserves import ChainReserveProvider, ReserveProvider, StaticReserveProvider
from .route import HopDetail, Route

__all__ = [
    "get_amount_out",
    "Pool",
    "Reserves",
    "PoolGraph",
    "load_pools",
    "ReserveProvider",
    "ChainReserveProvider",
    "StaticReserveProvider",
    "HopDetail",
    "Route",
    "RouteExplorer",
    "ExplorationStats",
    "find_arbitrage_routes",
    "RouteReporter",
    "PricingError",
    "ReserveUnavailable",
    "PoolLoadError",
]

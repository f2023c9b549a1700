"""CLI entrypoint for the multi-hop arbitrage scanner."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import Optional

from chain import ChainClient
from config import SCAN_DEFAULTS, get_rpc_urls
from core.base_types import TokenAmount
from pricing.errors import PoolLoadError
from pricing.explorer import find_arbitrage_routes
from pricing.pool_loader import load_pools
from pricing.reporter import RouteReporter
from pricing.reserves import (
    ChainReserveProvider,
    ReserveProvider,
    StaticReserveProvider,
)

logger = logging.getLogger(__name__)


@dataclass
class ScanConfig:
    pools_csv: str
    start_token: str
    amount_in: int
    decimals: int = 18
    max_hops: int = 6
    rpc_urls: list[str] = field(default_factory=list)
    rpc_timeout: int = 30
    rpc_max_retries: int = 3
    reserves_json: Optional[str] = None
    show_all: bool = False
    as_json: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ScanConfig":
        if args.max_hops < 2:
            raise ValueError("--max-hops must be at least 2")
        amount = TokenAmount.from_human(args.amount, args.decimals, args.start)
        if amount.raw <= 0:
            raise ValueError("--amount must be positive")
        return cls(
            pools_csv=args.pools,
            start_token=args.start,
            amount_in=amount.raw,
            decimals=args.decimals,
            max_hops=args.max_hops,
            rpc_urls=args.rpc_url or get_rpc_urls(),
            rpc_timeout=SCAN_DEFAULTS["rpc_timeout"],
            rpc_max_retries=SCAN_DEFAULTS["rpc_max_retries"],
            reserves_json=args.reserves,
            show_all=args.all,
            as_json=args.json,
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find cyclic multi-hop swap routes across DEX pairs"
    )
    parser.add_argument(
        "--pools", default=SCAN_DEFAULTS["pools_csv"], help="Path to pairs CSV"
    )
    parser.add_argument(
        "--start",
        default=SCAN_DEFAULTS["start_token"],
        help="Token symbol the route starts and ends with",
    )
    parser.add_argument(
        "--amount",
        default=SCAN_DEFAULTS["amount_in"],
        help="Input amount in human units (e.g. 1000)",
    )
    parser.add_argument(
        "--decimals",
        type=int,
        default=SCAN_DEFAULTS["decimals"],
        help="Decimals used to scale amounts",
    )
    parser.add_argument(
        "--max-hops",
        type=int,
        default=SCAN_DEFAULTS["max_hops"],
        help="Maximum swaps per route",
    )
    parser.add_argument(
        "--rpc-url",
        action="append",
        help="RPC endpoint; repeat for fallbacks (default: RPC_URLS env var)",
    )
    parser.add_argument(
        "--reserves",
        help="Reserves snapshot JSON to use instead of querying the chain",
    )
    parser.add_argument(
        "--all", action="store_true", help="Also show unprofitable cycles"
    )
    parser.add_argument("--json", action="store_true", help="Print routes as JSON")
    parser.add_argument(
        "--log-level", default=SCAN_DEFAULTS["log_level"], help="Logging level"
    )
    return parser


def build_reserve_provider(config: ScanConfig) -> ReserveProvider:
    if config.reserves_json:
        return StaticReserveProvider.from_json(config.reserves_json)
    client = ChainClient(
        config.rpc_urls,
        timeout=config.rpc_timeout,
        max_retries=config.rpc_max_retries,
    )
    return ChainReserveProvider(client)


def run_scan(config: ScanConfig, provider: ReserveProvider | None = None) -> str:
    pools = load_pools(config.pools_csv)
    if provider is None:
        provider = build_reserve_provider(config)
    logger.info(
        "searching %d pools from %s, max %d hops",
        len(pools),
        config.start_token,
        config.max_hops,
    )
    routes = find_arbitrage_routes(
        pools,
        provider,
        start_token=config.start_token,
        amount_in=config.amount_in,
        max_hops=config.max_hops,
    )
    reporter = RouteReporter(config.start_token, config.decimals)
    if config.as_json:
        return reporter.render_json(routes)
    return reporter.render_text(routes, profitable_only=not config.show_all)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=str(args.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ScanConfig.from_args(args)
        print(run_scan(config))
    except (ValueError, PoolLoadError) as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()

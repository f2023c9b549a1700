from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = ROOT / "src"
for path in (ROOT, SRC_PATH):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from core.base_types import TokenAmount  # noqa: E402
from pricing.explorer import RouteExplorer  # noqa: E402
from pricing.graph import PoolGraph  # noqa: E402
from pricing.pool_loader import load_pools  # noqa: E402
from pricing.reporter import RouteReporter  # noqa: E402
from pricing.reserves import StaticReserveProvider  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Demo: offline route scan")
    parser.add_argument(
        "--pools", default="docs/examples/pairs.csv", help="Path to pairs CSV"
    )
    parser.add_argument(
        "--reserves",
        default="docs/examples/reserves.json",
        help="Path to reserves snapshot JSON",
    )
    parser.add_argument("--start", default="WBNB", help="Start token symbol")
    parser.add_argument("--amount", default="1", help="Input amount (human units)")
    parser.add_argument("--max-hops", type=int, default=4, help="Maximum swaps")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    graph = PoolGraph(load_pools(ROOT / args.pools))
    provider = StaticReserveProvider.from_json(ROOT / args.reserves)
    explorer = RouteExplorer(graph, provider, max_hops=args.max_hops)
    amount = TokenAmount.from_human(args.amount, 18, args.start)

    routes = explorer.explore(args.start, amount.raw)
    stats = explorer.last_stats

    print(f"Pools: {len(graph)}  Tokens: {', '.join(sorted(graph.tokens))}")
    print(
        f"Reserve reads: {stats.reserve_fetches}  "
        f"Cycles: {stats.cycles}  Skipped edges: "
        f"{stats.unavailable_edges + stats.empty_edges}"
    )
    print("-" * 60)
    print(RouteReporter(args.start, 18).render_text(routes, profitable_only=False))


if __name__ == "__main__":
    main()

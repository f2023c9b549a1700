"""Console and JSON rendering of search results."""

from __future__ import annotations

import json
from typing import Sequence

from core.base_types import TokenAmount

from .route import Route


class RouteReporter:
    """
    Formats routes for display. Every amount is scaled by the same `decimals`,
    since the pool list carries no per-token decimals.
    """

    def __init__(self, start_token: str, decimals: int = 18):
        self.start_token = start_token
        self.decimals = decimals

    def render_text(
        self, routes: Sequence[Route], profitable_only: bool = True
    ) -> str:
        if profitable_only:
            shown = [route for route in routes if route.is_profitable]
        else:
            shown = list(routes)
        if not shown:
            qualifier = "profitable " if profitable_only else ""
            return (
                f"No {qualifier}arbitrage routes found ending with {self.start_token}."
            )

        lines: list[str] = []
        for index, route in enumerate(shown, start=1):
            lines.append(f"Route {index}: {route}")
            for step, hop in enumerate(route.hops, start=1):
                pool = hop.pool
                lines.append(f"  Step {step}:")
                lines.append(
                    f"    Swap: {pool.token_a_symbol} -> {pool.token_b_symbol} "
                    f"on {pool.exchange_id}"
                )
                lines.append(
                    f"    Amount In: {self._fmt(hop.amount_in, pool.token_a_symbol)}"
                )
                lines.append(
                    f"    Amount Out: {self._fmt(hop.amount_out, pool.token_b_symbol)}"
                )
                lines.append(
                    f"    Reserves: "
                    f"{self._fmt(hop.reserves.reserve_in, pool.token_a_symbol)}, "
                    f"{self._fmt(hop.reserves.reserve_out, pool.token_b_symbol)}"
                )
            lines.append(f"  Profit: {self._fmt(route.profit, self.start_token)}")
        summary = f"{len(shown)} route(s)"
        if profitable_only and len(shown) != len(routes):
            summary += f" shown, {len(routes) - len(shown)} unprofitable hidden"
        lines.append(summary)
        return "\n".join(lines)

    def render_json(self, routes: Sequence[Route]) -> str:
        """Raw integer amounts are emitted as strings to keep full precision."""
        payload = {
            "start_token": self.start_token,
            "decimals": self.decimals,
            "routes": [self._route_to_dict(route) for route in routes],
        }
        return json.dumps(payload, indent=2)

    def _route_to_dict(self, route: Route) -> dict:
        return {
            "path": route.tokens,
            "amount_in": str(route.amount_in),
            "amount_out": str(route.amount_out),
            "profit": str(route.profit),
            "profit_human": f"{TokenAmount(route.profit, self.decimals).human:f}",
            "hops": [
                {
                    "dex": hop.pool.exchange_id,
                    "pair": hop.pool.pair_address.checksum,
                    "token_in": hop.pool.token_a_symbol,
                    "token_out": hop.pool.token_b_symbol,
                    "amount_in": str(hop.amount_in),
                    "amount_out": str(hop.amount_out),
                    "reserves": [
                        str(hop.reserves.reserve_in),
                        str(hop.reserves.reserve_out),
                    ],
                }
                for hop in route.hops
            ],
        }

    def _fmt(self, raw: int, symbol: str) -> str:
        return str(TokenAmount(raw=raw, decimals=self.decimals, symbol=symbol))

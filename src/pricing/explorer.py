"""Depth-first search for cyclic swap routes through a pool graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .amm_math import get_amount_out
from .errors import ReserveUnavailable
from .graph import PoolGraph
from .pool import Pool
from .reserves import ReserveProvider
from .route import HopDetail, Route

logger = logging.getLogger(__name__)

DEFAULT_MAX_HOPS = 6


@dataclass
class ExplorationStats:
    reserve_fetches: int = 0
    unavailable_edges: int = 0
    empty_edges: int = 0
    cycles: int = 0


class RouteExplorer:
    """
    Enumerates every path that leaves `start_token` and returns to it within
    `max_hops` swaps, pricing each hop with freshly fetched reserves.

    A token may be spent as swap input at most once per path. The start token
    is the only token that may be received again, and receiving it ends the path.
    """

    def __init__(
        self,
        graph: PoolGraph,
        reserve_provider: ReserveProvider,
        max_hops: int = DEFAULT_MAX_HOPS,
    ):
        if max_hops < 2:
            raise ValueError("max_hops must be at least 2")
        self.graph = graph
        self.reserve_provider = reserve_provider
        self.max_hops = max_hops
        self.last_stats = ExplorationStats()
        self._start_token = ""
        self._amount_in = 0

    def explore(self, start_token: str, amount_in: int) -> list[Route]:
        if not isinstance(amount_in, int):
            raise TypeError("amount_in must be int")
        if amount_in <= 0:
            raise ValueError("amount_in must be positive")

        self._start_token = start_token
        self._amount_in = amount_in
        self.last_stats = ExplorationStats()
        routes: list[Route] = []

        self._explore(routes, amount_in, (), (), frozenset(), 0)

        stats = self.last_stats
        logger.info(
            "search from %s done: %d cycles, %d reserve fetches, "
            "%d unavailable edges, %d empty edges",
            start_token,
            stats.cycles,
            stats.reserve_fetches,
            stats.unavailable_edges,
            stats.empty_edges,
        )
        return routes

    def _explore(
        self,
        routes: list[Route],
        current_amount: int,
        path: tuple[Pool, ...],
        details: tuple[HopDetail, ...],
        visited: frozenset[str],
        hop_count: int,
    ) -> None:
        if hop_count > self.max_hops:
            return

        if hop_count > 1 and path and path[-1].token_b_symbol == self._start_token:
            route = Route(
                pools=path,
                hops=details,
                amount_in=self._amount_in,
                amount_out=current_amount,
            )
            logger.debug("cycle %s profit %d", route, route.profit)
            self.last_stats.cycles += 1
            routes.append(route)
            return

        # any child of a node at the hop limit would be pruned above
        if hop_count == self.max_hops:
            return

        last_token = path[-1].token_b_symbol if path else self._start_token
        for pool in self._candidates(last_token, visited):
            hop = self._price_hop(pool, current_amount)
            if hop is None:
                continue
            logger.debug(
                "hop %d %s in=%d out=%d",
                hop_count + 1,
                pool,
                current_amount,
                hop.amount_out,
            )
            self._explore(
                routes,
                hop.amount_out,
                path + (pool,),
                details + (hop,),
                visited | {pool.token_a_symbol},
                hop_count + 1,
            )

    def _candidates(self, token: str, visited: frozenset[str]) -> Iterable[Pool]:
        for pool in self.graph.edges_from(token):
            if pool.token_a_symbol in visited:
                continue
            if (
                pool.token_b_symbol in visited
                and pool.token_b_symbol != self._start_token
            ):
                continue
            yield pool

    def _price_hop(self, pool: Pool, amount_in: int) -> HopDetail | None:
        self.last_stats.reserve_fetches += 1
        try:
            reserves = self.reserve_provider.get_reserves(pool.pair_address)
        except ReserveUnavailable as exc:
            self.last_stats.unavailable_edges += 1
            logger.warning("skipping %s: %s", pool, exc)
            return None
        if not reserves.has_liquidity:
            self.last_stats.empty_edges += 1
            logger.warning("skipping %s: no liquidity", pool)
            return None
        amount_out = get_amount_out(
            amount_in, reserves.reserve_in, reserves.reserve_out
        )
        return HopDetail(
            pool=pool, amount_in=amount_in, amount_out=amount_out, reserves=reserves
        )


def find_arbitrage_routes(
    pools: Iterable[Pool],
    reserve_provider: ReserveProvider,
    start_token: str,
    amount_in: int,
    max_hops: int = DEFAULT_MAX_HOPS,
) -> list[Route]:
    """All cycles through `start_token`, in discovery order, profitable or not."""
    explorer = RouteExplorer(PoolGraph(pools), reserve_provider, max_hops=max_hops)
    return explorer.explore(start_token, amount_in)

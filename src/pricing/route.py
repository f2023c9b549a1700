from __future__ import annotations

from dataclasses import dataclass

from .pool import Pool, Reserves


@dataclass(frozen=True)
class HopDetail:
    """One swap along a route, with the reserves it was priced against."""

    pool: Pool
    amount_in: int
    amount_out: int
    reserves: Reserves


@dataclass(frozen=True)
class Route:
    """A completed cycle that starts and ends at the same token."""

    pools: tuple[Pool, ...]
    hops: tuple[HopDetail, ...]
    amount_in: int
    amount_out: int

    @property
    def profit(self) -> int:
        """Final amount minus initial amount, in start-token base units."""
        return self.amount_out - self.amount_in

    @property
    def is_profitable(self) -> bool:
        return self.profit > 0

    @property
    def num_hops(self) -> int:
        return len(self.pools)

    @property
    def start_token(self) -> str:
        return self.pools[0].token_a_symbol

    @property
    def tokens(self) -> list[str]:
        """Token path: [start, intermediate..., start]."""
        return [self.start_token] + [pool.token_b_symbol for pool in self.pools]

    def __str__(self) -> str:
        return " -> ".join(self.tokens)

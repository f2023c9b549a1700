from __future__ import annotations

from typing import Iterable

from .pool import Pool


class PoolGraph:
    """Read-only adjacency view over a flat pool list."""

    def __init__(self, pools: Iterable[Pool]):
        self._pools = tuple(pools)

    @property
    def pools(self) -> tuple[Pool, ...]:
        return self._pools

    @property
    def tokens(self) -> set[str]:
        symbols: set[str] = set()
        for pool in self._pools:
            symbols.add(pool.token_a_symbol)
            symbols.add(pool.token_b_symbol)
        return symbols

    def edges_from(self, token: str) -> tuple[Pool, ...]:
        """Pools that swap `token` into something else, in pool-list order."""
        return tuple(pool for pool in self._pools if pool.token_a_symbol == token)

    def __len__(self) -> int:
        return len(self._pools)

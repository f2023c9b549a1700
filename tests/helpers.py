"""Shared builders for pool-graph tests."""

from __future__ import annotations

from core.base_types import Address
from pricing.errors import ReserveUnavailable
from pricing.pool import Pool, Reserves

DEX_ADDRESS = Address("0x10ED43C718714eb63d5aA57B78B54704E256024E")


def addr(n: int) -> Address:
    return Address(f"0x{n:040x}")


def make_pool(token_a: str, token_b: str, pair: int, dex: str = "DEX") -> Pool:
    return Pool(
        exchange_id=dex,
        exchange_address=DEX_ADDRESS,
        token_a_symbol=token_a,
        token_b_symbol=token_b,
        token_a_address=addr(0x1000 + sum(map(ord, token_a))),
        token_b_address=addr(0x1000 + sum(map(ord, token_b))),
        pair_address=addr(pair),
    )


class FakeReserveProvider:
    """Reserves keyed by pair number; records every lookup."""

    def __init__(self, reserves: dict[int, tuple[int, int]], failing=()):
        self._reserves = {addr(n): Reserves(*pair) for n, pair in reserves.items()}
        self._failing = {addr(n) for n in failing}
        self.calls: list[Address] = []

    def get_reserves(self, pair_address: Address) -> Reserves:
        self.calls.append(pair_address)
        if pair_address in self._failing:
            raise ReserveUnavailable(str(pair_address), "execution reverted")
        return self._reserves[pair_address]

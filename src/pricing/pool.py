from __future__ import annotations

from dataclasses import dataclass

from core.base_types import Address


@dataclass(frozen=True)
class Pool:
    """
    A trading pair listed on one DEX, usable in the token_a -> token_b direction.

    The reverse direction is a separate Pool and only exists if the pool list
    contains it.
    """

    exchange_id: str
    exchange_address: Address
    token_a_symbol: str
    token_b_symbol: str
    token_a_address: Address
    token_b_address: Address
    pair_address: Address

    def __str__(self) -> str:
        return f"{self.token_a_symbol}->{self.token_b_symbol}@{self.exchange_id}"


@dataclass(frozen=True)
class Reserves:
    """Pair balances at query time, oriented as (input side, output side)."""

    reserve_in: int
    reserve_out: int

    def __post_init__(self) -> None:
        for value in (self.reserve_in, self.reserve_out):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError("reserves must be int")
        if self.reserve_in < 0 or self.reserve_out < 0:
            raise ValueError("reserves must be non-negative")

    @property
    def has_liquidity(self) -> bool:
        return self.reserve_in > 0 and self.reserve_out > 0

    def as_tuple(self) -> tuple[int, int]:
        return self.reserve_in, self.reserve_out

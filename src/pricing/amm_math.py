"""Constant-product swap math with a fixed 0.3% fee."""

from __future__ import annotations

FEE_NUMERATOR = 997
FEE_DENOMINATOR = 1000


def get_amount_out(amount_in: int, reserve_in: int, reserve_out: int) -> int:
    """
    Output amount for one swap through a constant-product pool.

    The fee is taken off the input first, then the x*y=k formula is applied.
    Both divisions truncate:

    amount_in_with_fee = amount_in * 997 // 1000
    amount_out = amount_in_with_fee * reserve_out // (reserve_in + amount_in_with_fee)
    """
    for name, value in (
        ("amount_in", amount_in),
        ("reserve_in", reserve_in),
        ("reserve_out", reserve_out),
    ):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} must be int")
    if amount_in < 0:
        raise ValueError("amount_in must be non-negative")
    if reserve_in <= 0 or reserve_out <= 0:
        raise ValueError("reserves must be positive")

    amount_in_with_fee = amount_in * FEE_NUMERATOR // FEE_DENOMINATOR
    numerator = amount_in_with_fee * reserve_out
    denominator = reserve_in + amount_in_with_fee
    return numerator // denominator

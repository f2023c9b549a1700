"""Pricing and route-search exceptions."""

from __future__ import annotations

from typing import Optional


class PricingError(Exception):
    """Base class for pricing errors."""


class ReserveUnavailable(PricingError):
    """Reserves for a pair could not be read."""

    def __init__(self, pair_address: str, reason: str):
        self.pair_address = pair_address
        self.reason = reason
        super().__init__(f"Reserves unavailable for {pair_address}: {reason}")


class PoolLoadError(PricingError):
    """Pool list could not be read or contains a malformed row."""

    def __init__(self, message: str, row: Optional[int] = None):
        self.row = row
        if row is not None:
            message = f"row {row}: {message}"
        super().__init__(message)

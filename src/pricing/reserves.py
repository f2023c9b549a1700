"""Reserve sources for pair contracts."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Mapping, Protocol

from eth_abi import decode
from eth_abi.exceptions import DecodingError
from eth_utils.crypto import keccak

from chain.client import ChainClient
from chain.errors import ChainError
from core.base_types import Address, CallRequest

from .errors import ReserveUnavailable
from .pool import Reserves

logger = logging.getLogger(__name__)


class ReserveProvider(Protocol):
    def get_reserves(self, pair_address: Address) -> Reserves:
        """Current reserves of the pair, or raise ReserveUnavailable."""
        ...


class ChainReserveProvider:
    """
    Reads `getReserves()` from a Uniswap V2 style pair contract.

    reserve0 is returned as the input side and reserve1 as the output side,
    regardless of which token the caller is swapping in.
    """

    def __init__(self, client: ChainClient, block: str = "latest"):
        self.client = client
        self.block = block
        self._selector = _selector_hash("getReserves()")

    def get_reserves(self, pair_address: Address) -> Reserves:
        request = CallRequest(to=pair_address, data=self._selector)
        try:
            raw = self.client.call(request, block=self.block)
        except ChainError as exc:
            raise ReserveUnavailable(str(pair_address), str(exc)) from exc
        if not raw:
            raise ReserveUnavailable(str(pair_address), "empty call result")
        try:
            reserve0, reserve1, _ = decode(["uint112", "uint112", "uint32"], raw)
        except DecodingError as exc:
            raise ReserveUnavailable(str(pair_address), f"decode failed: {exc}") from exc
        return Reserves(reserve_in=int(reserve0), reserve_out=int(reserve1))


class StaticReserveProvider:
    """Reserves from a fixed snapshot keyed by pair address."""

    def __init__(self, reserves: Mapping[str | Address, tuple[int, int]]):
        self._reserves: dict[str, Reserves] = {}
        for address, (reserve0, reserve1) in reserves.items():
            key = str(address).lower()
            self._reserves[key] = Reserves(reserve_in=reserve0, reserve_out=reserve1)

    @classmethod
    def from_json(cls, path: str | Path) -> "StaticReserveProvider":
        """Load `{"0xpair": [reserve0, reserve1], ...}`; values may be int or str."""
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise ValueError(f"Reserves file not found: {path}") from exc
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {path}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"JSON in {path} must be an object")

        snapshot: dict[str, tuple[int, int]] = {}
        for address, pair in data.items():
            if not isinstance(pair, list) or len(pair) != 2:
                raise ValueError(f"Reserves for {address} must be [reserve0, reserve1]")
            snapshot[address] = (_to_int(pair[0]), _to_int(pair[1]))
        logger.info("loaded reserves for %d pairs from %s", len(snapshot), path)
        return cls(snapshot)

    def get_reserves(self, pair_address: Address) -> Reserves:
        reserves = self._reserves.get(str(pair_address).lower())
        if reserves is None:
            raise ReserveUnavailable(str(pair_address), "not in snapshot")
        return reserves


def _selector_hash(signature: str) -> bytes:
    return keccak(text=signature)[:4]


def _to_int(value: object) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        return int(value, 16) if value.startswith("0x") else int(value)
    raise ValueError("Expected integer-like value")

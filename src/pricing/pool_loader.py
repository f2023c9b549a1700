"""Load the pool list from a pairs CSV export."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from core.base_types import Address

from .errors import PoolLoadError
from .pool import Pool

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = (
    "DEX",
    "DEX_address",
    "TokenA",
    "TokenB",
    "TokenA_address",
    "TokenB_address",
    "PairAddress",
)


def load_pools(path: str | Path) -> list[Pool]:
    """
    Read pools in file order. Each row becomes one directional pool
    (TokenA -> TokenB); no reverse edge is added.
    """
    csv_path = Path(path)
    try:
        with open(csv_path, newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            missing = [
                column
                for column in REQUIRED_COLUMNS
                if column not in (reader.fieldnames or [])
            ]
            if missing:
                raise PoolLoadError(
                    f"{csv_path} is missing columns: {', '.join(missing)}"
                )
            # header is line 1
            pools = [
                _pool_from_row(row, line) for line, row in enumerate(reader, start=2)
            ]
    except FileNotFoundError as exc:
        raise PoolLoadError(f"Pool file not found: {csv_path}") from exc
    except csv.Error as exc:
        raise PoolLoadError(f"Invalid CSV in {csv_path}: {exc}") from exc

    logger.info("loaded %d pools from %s", len(pools), csv_path)
    return pools


def _pool_from_row(row: dict, line: int) -> Pool:
    token_a = _require_text(row, "TokenA", line)
    token_b = _require_text(row, "TokenB", line)
    return Pool(
        exchange_id=_require_text(row, "DEX", line),
        exchange_address=_parse_address(row, "DEX_address", line),
        token_a_symbol=token_a,
        token_b_symbol=token_b,
        token_a_address=_parse_address(row, "TokenA_address", line),
        token_b_address=_parse_address(row, "TokenB_address", line),
        pair_address=_parse_address(row, "PairAddress", line),
    )


def _require_text(row: dict, key: str, line: int) -> str:
    value = (row.get(key) or "").strip()
    if not value:
        raise PoolLoadError(f"{key} is empty", row=line)
    return value


def _parse_address(row: dict, key: str, line: int) -> Address:
    value = _require_text(row, key, line)
    try:
        return Address.from_string(value)
    except ValueError as exc:
        raise PoolLoadError(f"{key} is not a valid address: {value}", row=line) from exc

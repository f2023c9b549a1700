"""JSON-RPC client for read-only contract calls, with retries and fallback."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Optional

import requests

from core.base_types import CallRequest

from .errors import ChainError, ContractCallReverted, RPCError

logger = logging.getLogger(__name__)


class ChainClient:
    """
    EVM RPC client used to read pool state.

    Features:
    - Automatic retry with exponential backoff on timeouts and dropped connections
    - Multiple RPC endpoint fallback
    - Request timing/logging
    - Revert classification for eth_call
    """

    def __init__(
        self,
        rpc_urls: list[str],
        timeout: int = 30,
        max_retries: int = 3,
    ):
        if not rpc_urls:
            raise ValueError("rpc_urls must not be empty")
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self._rpc_urls = rpc_urls
        self._timeout = timeout
        self._max_retries = max_retries
        self._session = requests.Session()

    def call(self, request: CallRequest, block: str = "latest") -> bytes:
        result = self._rpc_call("eth_call", [request.to_dict(), block])
        return _hex_to_bytes(result)

    def _rpc_call(self, method: str, params: list[Any]) -> Any:
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        last_error: Optional[Exception] = None
        for url in self._rpc_urls:
            for attempt in range(self._max_retries):
                start = time.perf_counter()
                try:
                    response = self._session.post(
                        url,
                        json=payload,
                        timeout=self._timeout,
                    )
                    elapsed = time.perf_counter() - start
                    logger.info("rpc %s %s in %.3fs", method, url, elapsed)
                    if response.status_code >= 400:
                        raise RPCError(f"HTTP {response.status_code} from {url}")
                    data = response.json()
                    if not isinstance(data, dict):
                        raise RPCError(f"Invalid JSON-RPC response from {url}")
                    if "error" in data:
                        self._raise_rpc_error(data["error"])
                    return data.get("result")
                except RPCError:
                    raise
                except requests.RequestException as exc:
                    last_error = exc
                    logger.warning(
                        "rpc %s %s attempt %d failed: %s", method, url, attempt + 1, exc
                    )
                    self._sleep_backoff(attempt)
                except json.JSONDecodeError as exc:
                    last_error = exc
                    self._sleep_backoff(attempt)
        raise ChainError("RPC request failed") from last_error

    def _sleep_backoff(self, attempt: int) -> None:
        delay = 0.5 * (2**attempt)
        time.sleep(delay)

    def _raise_rpc_error(self, error: dict) -> None:
        message = str(error.get("message", "RPC error"))
        code = error.get("code")
        data = error.get("data")
        if "revert" in message.lower() or code == 3:
            raise ContractCallReverted(message, code=code, data=data)
        raise RPCError(message, code=code, data=data)


def _hex_to_bytes(value: str) -> bytes:
    if not isinstance(value, str):
        raise RPCError("Expected hex string result")
    normalized = value[2:] if value.startswith("0x") else value
    if normalized == "":
        return b""
    try:
        return bytes.fromhex(normalized)
    except ValueError as exc:
        raise RPCError(f"Invalid hex result: {value}") from exc

import importlib
import os
from pathlib import Path

_ENV_LOADED = False

DEFAULT_RPC_URL = "https://bsc-dataseed.bnbchain.org"


def _load_env() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    try:
        dotenv = importlib.import_module("dotenv")
    except Exception as exc:  # pragma: no cover - defensive
        raise SystemExit(
            "python-dotenv is required (pip install -e .)"
        ) from exc
    env_path = Path(__file__).resolve().parent / ".env"
    dotenv.load_dotenv(dotenv_path=env_path)
    _ENV_LOADED = True


def get_env(
    name: str, default: str | None = None, required: bool = False
) -> str | None:
    _load_env()
    value = os.environ.get(name, default)
    if required and (value is None or value == ""):
        raise SystemExit(f"{name} env var is required")
    return value


def get_env_int(name: str, default: int) -> int:
    value = get_env(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise SystemExit(f"{name} must be an integer, got {value!r}") from exc


def get_rpc_urls() -> list[str]:
    raw = get_env("RPC_URLS") or get_env("RPC_URL") or DEFAULT_RPC_URL
    return [url.strip() for url in raw.split(",") if url.strip()]


SCAN_DEFAULTS = {
    "pools_csv": get_env("POOLS_CSV", "pairs.csv"),
    "start_token": get_env("START_TOKEN", "WBNB"),
    "amount_in": get_env("AMOUNT_IN", "1000"),
    "decimals": get_env_int("TOKEN_DECIMALS", 18),
    "max_hops": get_env_int("MAX_HOPS", 6),
    "rpc_timeout": get_env_int("RPC_TIMEOUT", 30),
    "rpc_max_retries": get_env_int("RPC_MAX_RETRIES", 3),
    "log_level": get_env("LOG_LEVEL", "INFO"),
}

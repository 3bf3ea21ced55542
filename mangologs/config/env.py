"""
Environment variable loading for MangoLogs.

- SOLANA_RPC_URL: RPC endpoint used for getAccountInfo (default: ankr public RPC)
- MANGO_LOG_INDEX_URL: wallet -> mango accounts endpoint of the transaction-log service
- MANGO_PROGRAM_ID: Mango v3 program id (default: mainnet deployment)
- RPC_TIMEOUT_SEC / INDEX_TIMEOUT_SEC: per-request timeouts in seconds
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is mangologs/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_RPC_URL = "https://rpc.ankr.com/solana"
DEFAULT_LOG_INDEX_URL = (
    "https://mango-transaction-log.herokuapp.com/v3/user-data/wallet-mango-accounts"
)
# Mango Markets v3 mainnet program
DEFAULT_MANGO_PROGRAM_ID = "mv3ekLzLbnVPNxjSKvqBpU3ZeZXPQdEC3bp5MDEBG68"
SYSTEM_PROGRAM_ID = "11111111111111111111111111111111"
DEFAULT_TIMEOUT_SEC = 15.0


def load_mangologs_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides real env."""
    load_dotenv(_ENV_PATH, override=False)


def _float_env(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def get_solana_rpc_url() -> str:
    """Return SOLANA_RPC_URL or the ankr public endpoint."""
    load_mangologs_env()
    return (os.getenv("SOLANA_RPC_URL") or "").strip() or DEFAULT_RPC_URL


def get_log_index_url() -> str:
    """Return MANGO_LOG_INDEX_URL or the hosted transaction-log service endpoint."""
    load_mangologs_env()
    return (os.getenv("MANGO_LOG_INDEX_URL") or "").strip() or DEFAULT_LOG_INDEX_URL


def get_mango_program_id() -> str:
    load_mangologs_env()
    return (os.getenv("MANGO_PROGRAM_ID") or "").strip() or DEFAULT_MANGO_PROGRAM_ID


def get_rpc_timeout_sec() -> float:
    load_mangologs_env()
    return _float_env("RPC_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC)


def get_index_timeout_sec() -> float:
    load_mangologs_env()
    return _float_env("INDEX_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC)


def masked_url(url: str) -> str:
    """Mask API key query params (e.g. Helius ?api-key=) before logging an RPC URL."""
    if "api-key=" in url:
        return url.split("api-key=")[0] + "api-key=***"
    return url

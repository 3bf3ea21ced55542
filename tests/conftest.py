"""
Pytest fixtures for MangoLogs tests. Network clients are replaced by mocks;
settings are rebuilt from a clean environment for every test.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from solders.pubkey import Pubkey

from mangologs.config.settings import get_settings
from mangologs.log_index.client import LogIndexClient
from mangologs.solana_accounts.classifier import MANGO_V3_PROGRAM, SYSTEM_PROGRAM
from mangologs.solana_accounts.fetcher import AccountFetcher
from mangologs.solana_accounts.layout import MANGO_ACCOUNT_LEN
from mangologs.solana_accounts.models import AccountRecord

# Valid Solana pubkeys (base58, 32 bytes)
VALID_WALLET = "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka"
VALID_WALLET_2 = "7F1WzVNQ1Qpurqxxdyv3UrFQR3uoNepULVW9A4bAJ5nZ"
TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"

_ENV_VARS = (
    "SOLANA_RPC_URL",
    "MANGO_LOG_INDEX_URL",
    "MANGO_PROGRAM_ID",
    "RPC_TIMEOUT_SEC",
    "INDEX_TIMEOUT_SEC",
)


def mango_account_bytes(
    owner: Pubkey,
    *,
    group: Pubkey | None = None,
    data_type: int = 1,
    version: int = 1,
    length: int = MANGO_ACCOUNT_LEN,
) -> bytes:
    """Build MangoAccount data: meta_data, mango_group, owner, zero padding to length."""
    buf = bytearray(max(length, MANGO_ACCOUNT_LEN))
    buf[0] = data_type
    buf[1] = version
    buf[2] = 1
    buf[8:40] = bytes(group or Pubkey.new_unique())
    buf[40:72] = bytes(owner)
    return bytes(buf[:length])


def system_record() -> AccountRecord:
    return AccountRecord(owner=SYSTEM_PROGRAM, data=b"", exists=True, lamports=1_000_000)


def mango_record(data: bytes) -> AccountRecord:
    return AccountRecord(owner=MANGO_V3_PROGRAM, data=data, exists=True, lamports=30_000_000)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Unset config env vars and drop the cached Settings around each test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fetcher():
    """AccountFetcher stand-in; set fetcher.fetch.return_value / side_effect per test."""
    return MagicMock(spec=AccountFetcher)


@pytest.fixture
def index_client():
    """LogIndexClient stand-in returning no accounts by default."""
    client = MagicMock(spec=LogIndexClient)
    client.lookup.return_value = []
    return client

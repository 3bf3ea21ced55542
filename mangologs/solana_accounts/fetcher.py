"""
On-chain account reader: one getAccountInfo call per fetch.

Reads at "confirmed" commitment (recent, not necessarily finalized state) with
base64 encoding. A missing account is returned as AccountRecord.missing();
only transport problems raise FetchError. No retries; callers wrap fetch()
with their own policy if they need one.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
from typing import Any

from solana.rpc.api import Client
from solana.rpc.commitment import Commitment, Confirmed
from solders.pubkey import Pubkey

from mangologs.config.env import masked_url
from mangologs.core.exceptions import FetchError
from mangologs.mangologs_logging import get_logger
from mangologs.solana_accounts.models import AccountRecord

logger = get_logger(__name__)

DEFAULT_RPC_TIMEOUT_SEC = 15.0
_PASSTHROUGH = (KeyboardInterrupt, SystemExit, GeneratorExit, asyncio.CancelledError)


def _raw_bytes_from_account_data(data: object) -> bytes | None:
    """Normalize get_account_info() account.data to bytes. Handles bytes, base64 str, [b64, "base64"], list of ints."""
    if data is None:
        return None
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        try:
            return base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError):
            return None
    if isinstance(data, (list, tuple)):
        if not data:
            return b""
        first = data[0]
        if isinstance(first, str):
            return _raw_bytes_from_account_data(first)
        if all(isinstance(x, int) for x in data):
            try:
                return bytes(data)
            except ValueError:
                return None
        return None
    return None


def _resp_value(resp: Any) -> Any:
    if resp is None:
        return None
    if hasattr(resp, "value"):
        return resp.value
    result = getattr(resp, "result", None)
    return getattr(result, "value", None)


class AccountFetcher:
    """
    Fetch AccountRecords from a Solana RPC node.

    Wraps a solana-py Client; the client's HTTP timeout is the caller-supplied
    deadline, and a timeout surfaces as FetchError.
    """

    def __init__(
        self,
        rpc_url: str,
        *,
        timeout_sec: float = DEFAULT_RPC_TIMEOUT_SEC,
        commitment: Commitment = Confirmed,
        client: Client | None = None,
    ) -> None:
        if not rpc_url.strip():
            raise ValueError("rpc_url must be non-empty")
        if timeout_sec <= 0:
            raise ValueError("timeout_sec must be positive")
        self._rpc_url = rpc_url.strip()
        self._commitment = commitment
        self._owns_client = client is None
        self._client = client or Client(self._rpc_url, commitment=commitment, timeout=timeout_sec)

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    def close(self) -> None:
        """Close the HTTP session of a Client this fetcher created."""
        if not self._owns_client:
            return
        session = getattr(getattr(self._client, "_provider", None), "session", None)
        if session is not None:
            session.close()

    def fetch(self, address: Pubkey) -> AccountRecord:
        """
        Return the account stored at address.

        Raises:
            FetchError: the RPC call timed out, could not connect, returned an
                RPC error, or returned a payload that cannot be read.
        """
        try:
            resp = self._client.get_account_info(
                address, commitment=self._commitment, encoding="base64"
            )
        except _PASSTHROUGH:
            raise
        except BaseException as e:
            # solders panics (pyo3 PanicException, a BaseException) on some RPC error bodies
            logger.warning(
                "account_fetch_failed",
                address=str(address),
                rpc_url=masked_url(self._rpc_url),
                error=str(e),
            )
            raise FetchError(f"getAccountInfo failed: {e}", address=str(address)) from e

        value = _resp_value(resp)
        if value is None:
            logger.debug("account_not_found", address=str(address))
            return AccountRecord.missing()

        raw = _raw_bytes_from_account_data(getattr(value, "data", None))
        owner = getattr(value, "owner", None)
        if raw is None or owner is None:
            logger.warning("account_fetch_malformed", address=str(address))
            raise FetchError("getAccountInfo returned an unreadable account", address=str(address))
        if not isinstance(owner, Pubkey):
            try:
                owner = Pubkey.from_string(str(owner))
            except ValueError as e:
                raise FetchError(f"getAccountInfo returned invalid owner {owner!r}", address=str(address)) from e

        record = AccountRecord(
            owner=owner,
            data=raw,
            exists=True,
            lamports=int(getattr(value, "lamports", 0) or 0),
            executable=bool(getattr(value, "executable", False)),
        )
        logger.debug(
            "account_fetched",
            address=str(address),
            owner=str(owner),
            data_len=len(raw),
        )
        return record

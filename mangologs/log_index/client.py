"""
Mango transaction-log indexing service client.

GET <base_url>?wallet-pk=<base58 wallet> returns a JSON array of objects with a
"mango_account" field. Any body that is not a JSON array (error object,
malformed JSON, empty body) means "no logs" and yields []. Only transport
failures raise IndexLookupError.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
from solders.pubkey import Pubkey

from mangologs.core.exceptions import IndexLookupError
from mangologs.mangologs_logging import get_logger

logger = get_logger(__name__)

WALLET_QUERY_PARAM = "wallet-pk"
ACCOUNT_FIELD = "mango_account"
DEFAULT_INDEX_TIMEOUT_SEC = 15.0


def _accounts_from_payload(payload: Any) -> list[str]:
    """Extract mango_account ids in response order; entries without a string id are skipped."""
    if not isinstance(payload, list):
        return []
    accounts: list[str] = []
    for item in payload:
        account = item.get(ACCOUNT_FIELD) if isinstance(item, dict) else None
        if isinstance(account, str) and account:
            accounts.append(account)
        else:
            logger.debug("log_index_entry_skipped", entry=str(item)[:80])
    return accounts


class LogIndexClient:
    """
    Look up the Mango accounts with trade logs for a wallet.

    Owns its httpx.Client unless one is passed in. Use as a context manager
    or call close() when done.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_sec: float = DEFAULT_INDEX_TIMEOUT_SEC,
        client: httpx.Client | None = None,
    ) -> None:
        if not base_url.strip():
            raise ValueError("base_url must be non-empty")
        if timeout_sec <= 0:
            raise ValueError("timeout_sec must be positive")
        self._base_url = base_url.strip()
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout_sec))

    @property
    def base_url(self) -> str:
        return self._base_url

    def lookup(self, wallet: Pubkey | str) -> list[str]:
        """
        Return the account ids the service lists for wallet, in response order.

        Raises:
            IndexLookupError: timeout, connection failure or other transport error.
        """
        wallet_str = str(wallet)
        try:
            resp = self._client.get(self._base_url, params={WALLET_QUERY_PARAM: wallet_str})
        except httpx.TransportError as e:
            logger.warning("log_index_request_failed", wallet=wallet_str, error=str(e))
            raise IndexLookupError(f"log index request failed: {e}", address=wallet_str) from e

        if resp.is_error:
            logger.warning("log_index_http_status", wallet=wallet_str, status_code=resp.status_code)
        try:
            payload = resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("log_index_invalid_json", wallet=wallet_str, status_code=resp.status_code)
            return []

        if not isinstance(payload, list):
            logger.info("log_index_non_array_body", wallet=wallet_str, body_type=type(payload).__name__)
            return []

        accounts = _accounts_from_payload(payload)
        logger.info("log_index_lookup", wallet=wallet_str, account_count=len(accounts))
        return accounts

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "LogIndexClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

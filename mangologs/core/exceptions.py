"""
Application-level exceptions.

Only TransportError subclasses ever cross the resolver boundary. Invalid input,
undecodable Mango accounts and unsupported owner programs all resolve to an
empty account list instead of raising.
"""

from __future__ import annotations


class MangoLogsError(Exception):
    """Base class for all MangoLogs errors. `code` is a stable machine-readable tag."""

    code = "mangologs_error"

    def __init__(self, message: str = "", *, address: str | None = None) -> None:
        super().__init__(message or self.code)
        self.address = address


class InvalidAddressError(MangoLogsError, ValueError):
    """String is not a base58 encoding of exactly 32 bytes."""

    code = "invalid_address"


class DecodeError(MangoLogsError):
    """On-chain payload does not match the pinned Mango account layout."""

    code = "decode_failure"


class TransportError(MangoLogsError):
    """A network call could not complete (timeout, unreachable, malformed reply)."""

    code = "transport_failure"


class FetchError(TransportError):
    """getAccountInfo against the Solana RPC node failed."""

    code = "rpc_fetch_failure"


class IndexLookupError(TransportError):
    """Request to the transaction-log indexing service failed."""

    code = "index_lookup_failure"


class ResolveError(TransportError):
    """Resolution aborted because one of its network calls failed. `__cause__` holds the detail."""

    code = "resolve_failure"

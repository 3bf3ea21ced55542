"""
Core — exceptions shared by the account readers, the index client and the resolver.
"""

from mangologs.core.exceptions import (
    DecodeError,
    FetchError,
    IndexLookupError,
    InvalidAddressError,
    MangoLogsError,
    ResolveError,
    TransportError,
)

__all__ = [
    "DecodeError",
    "FetchError",
    "IndexLookupError",
    "InvalidAddressError",
    "MangoLogsError",
    "ResolveError",
    "TransportError",
]

"""
Data models for on-chain account reads.

- AccountRecord: owner program + raw payload returned by getAccountInfo.
- OwnerClass: which resolution strategy an account's owner selects.
- DecodedAccount: the fields taken from a Mango v3 MangoAccount payload.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from solders.pubkey import Pubkey


class OwnerClass(str, enum.Enum):
    SYSTEM_OWNED = "system_owned"
    KNOWN_PROGRAM_OWNED = "known_program_owned"
    OTHER_OWNED = "other_owned"
    MISSING = "missing"


@dataclass(frozen=True)
class AccountRecord:
    """
    Result of one getAccountInfo lookup.

    exists=False means the node has no account at the address; that is a valid
    outcome, distinct from an account owned by the system program.
    """

    owner: Pubkey | None
    data: bytes
    exists: bool
    lamports: int = 0
    executable: bool = False

    @classmethod
    def missing(cls) -> "AccountRecord":
        return cls(owner=None, data=b"", exists=False)


@dataclass(frozen=True)
class DecodedAccount:
    """Header fields of a MangoAccount; owner_wallet is the one resolution needs."""

    owner_wallet: Pubkey
    mango_group: Pubkey
    version: int
    is_initialized: bool

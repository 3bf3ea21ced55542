"""
Solana account reads: fetch an account, classify its owner program, and
decode Mango v3 account headers.
"""

from mangologs.solana_accounts.classifier import MANGO_V3_PROGRAM, SYSTEM_PROGRAM, classify
from mangologs.solana_accounts.fetcher import AccountFetcher
from mangologs.solana_accounts.layout import decode_mango_account
from mangologs.solana_accounts.models import AccountRecord, DecodedAccount, OwnerClass

__all__ = [
    "MANGO_V3_PROGRAM",
    "SYSTEM_PROGRAM",
    "AccountFetcher",
    "AccountRecord",
    "DecodedAccount",
    "OwnerClass",
    "classify",
    "decode_mango_account",
]

"""Owner program classification for fetched account records."""

from __future__ import annotations

from solders.pubkey import Pubkey

from mangologs.config.env import DEFAULT_MANGO_PROGRAM_ID, SYSTEM_PROGRAM_ID
from mangologs.solana_accounts.models import AccountRecord, OwnerClass

SYSTEM_PROGRAM = Pubkey.from_string(SYSTEM_PROGRAM_ID)
MANGO_V3_PROGRAM = Pubkey.from_string(DEFAULT_MANGO_PROGRAM_ID)


def classify(
    record: AccountRecord,
    *,
    system_program_id: Pubkey = SYSTEM_PROGRAM,
    trading_program_id: Pubkey = MANGO_V3_PROGRAM,
) -> OwnerClass:
    """
    Map a record to its resolution strategy. Pure and deterministic.

    Missing accounts are checked first, so a record with exists=False is
    MISSING whatever its owner field holds.
    """
    if not record.exists:
        return OwnerClass.MISSING
    if record.owner == system_program_id:
        return OwnerClass.SYSTEM_OWNED
    if record.owner == trading_program_id:
        return OwnerClass.KNOWN_PROGRAM_OWNED
    return OwnerClass.OTHER_OWNED

"""
Mango Markets v3 MangoAccount layout decoder.

Pinned to the v3 program (mv3ekLzLbnVPNxjSKvqBpU3ZeZXPQdEC3bp5MDEBG68).
Layout head, little-endian, no Anchor discriminator:

    0   u8        meta_data.data_type   (1 = MangoAccount)
    1   u8        meta_data.version
    2   u8        meta_data.is_initialized
    3   [u8; 5]   meta_data.extra_info
    8   Pubkey    mango_group
    40  Pubkey    owner
    72  ...       margin basket, deposits, borrows, perp accounts, orders, ...

The full account is 4296 bytes. Only the header is read; the rest is left
undecoded. Anything shorter than the full account, or tagged with another
data type, raises DecodeError.
"""

from __future__ import annotations

import struct

from solders.pubkey import Pubkey

from mangologs.core.exceptions import DecodeError
from mangologs.solana_accounts.models import DecodedAccount

# mango_v3 DataType enum: MangoGroup=0, MangoAccount=1, RootBank=2, NodeBank=3, PerpMarket=4, ...
MANGO_ACCOUNT_DATA_TYPE = 1

META_DATA_LEN = 8
PUBKEY_LEN = 32
MANGO_ACCOUNT_GROUP_OFFSET = META_DATA_LEN  # 8
MANGO_ACCOUNT_OWNER_OFFSET = MANGO_ACCOUNT_GROUP_OFFSET + PUBKEY_LEN  # 40
MANGO_ACCOUNT_LEN = 4296

_META_DATA = struct.Struct("<BBB5s")


def decode_mango_account(data: bytes) -> DecodedAccount:
    """
    Decode the MangoAccount header from raw account data.

    Raises:
        DecodeError: data is not bytes, shorter than MANGO_ACCOUNT_LEN, or its
            data_type tag is not MangoAccount.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise DecodeError(f"account data must be bytes, got {type(data).__name__}")
    raw = bytes(data)
    if len(raw) < MANGO_ACCOUNT_LEN:
        raise DecodeError(
            f"MangoAccount data too short: need {MANGO_ACCOUNT_LEN} bytes, got {len(raw)}"
        )

    data_type, version, is_initialized, _extra = _META_DATA.unpack_from(raw, 0)
    if data_type != MANGO_ACCOUNT_DATA_TYPE:
        raise DecodeError(
            f"unexpected data_type {data_type}, expected {MANGO_ACCOUNT_DATA_TYPE} (MangoAccount)"
        )

    mango_group = Pubkey(raw[MANGO_ACCOUNT_GROUP_OFFSET : MANGO_ACCOUNT_GROUP_OFFSET + PUBKEY_LEN])
    owner = Pubkey(raw[MANGO_ACCOUNT_OWNER_OFFSET : MANGO_ACCOUNT_OWNER_OFFSET + PUBKEY_LEN])
    return DecodedAccount(
        owner_wallet=owner,
        mango_group=mango_group,
        version=version,
        is_initialized=bool(is_initialized),
    )

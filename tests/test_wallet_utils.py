"""
Tests for address validation (is_valid_address, parse_address) and shorten_address.
"""

from __future__ import annotations

import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from conftest import TOKEN_PROGRAM, VALID_WALLET
from mangologs.core.exceptions import InvalidAddressError
from mangologs.utils.wallet_utils import is_valid_address, parse_address, shorten_address


@pytest.mark.parametrize(
    "address",
    [
        VALID_WALLET,
        TOKEN_PROGRAM,
        "11111111111111111111111111111111",
        "mv3ekLzLbnVPNxjSKvqBpU3ZeZXPQdEC3bp5MDEBG68",
    ],
)
def test_valid_addresses(address):
    assert is_valid_address(address) is True


@pytest.mark.parametrize(
    "address",
    [
        "",
        " ",
        "not-a-valid-pubkey",
        "0OIl0OIl0OIl0OIl0OIl0OIl0OIl0OIl",  # characters outside the base58 alphabet
        "1111111111111111111111111111111",  # 31 bytes
        VALID_WALLET + "1",
        " " + VALID_WALLET,
        VALID_WALLET + "\n",
        "é" * 44,
    ],
)
def test_invalid_addresses_return_false(address):
    """Never raises; any decode problem is just False."""
    assert is_valid_address(address) is False


def test_non_string_input_is_invalid():
    assert is_valid_address(None) is False  # type: ignore[arg-type]
    assert is_valid_address(b"\x00" * 32) is False  # type: ignore[arg-type]


def test_require_on_curve_rejects_program_derived_address():
    program = Pubkey.from_string(TOKEN_PROGRAM)
    pda, _bump = Pubkey.find_program_address([b"mango"], program)
    wallet = Keypair().pubkey()

    assert is_valid_address(str(pda)) is True
    assert is_valid_address(str(pda), require_on_curve=True) is False
    assert is_valid_address(str(wallet), require_on_curve=True) is True


def test_parse_address_returns_pubkey():
    pubkey = parse_address(VALID_WALLET)
    assert isinstance(pubkey, Pubkey)
    assert str(pubkey) == VALID_WALLET


def test_parse_address_raises_invalid_address_error():
    with pytest.raises(InvalidAddressError, match="Invalid Solana address"):
        parse_address("not-a-valid-pubkey")
    with pytest.raises(InvalidAddressError, match="non-empty"):
        parse_address("")


def test_shorten_address():
    assert shorten_address(VALID_WALLET) == "9QCfN...VUrka"
    assert shorten_address("abc") == "abc"
    assert shorten_address(VALID_WALLET, head=3, tail=2) == "9QC...ka"

"""Address validation and display helpers."""

from solders.pubkey import Pubkey

from mangologs.core.exceptions import InvalidAddressError


def parse_address(address: str) -> Pubkey:
    """Return the Pubkey for a base58 address; raise InvalidAddressError otherwise."""
    if not isinstance(address, str) or not address:
        raise InvalidAddressError("address must be a non-empty string", address=None)
    try:
        return Pubkey.from_string(address)
    except ValueError as e:
        raise InvalidAddressError(f"Invalid Solana address: {e}", address=address) from e


def is_valid_address(address: str, *, require_on_curve: bool = False) -> bool:
    """
    Return True if address is a base58 string decoding to exactly 32 bytes.

    Never raises. With require_on_curve, program-derived (off-curve) keys are
    rejected as well.
    """
    try:
        pubkey = parse_address(address)
    except InvalidAddressError:
        return False
    if require_on_curve:
        return pubkey.is_on_curve()
    return True


def shorten_address(address: str, head: int = 5, tail: int = 5) -> str:
    """abcdefghijklmnop -> abcde...lmnop; short strings are returned unchanged."""
    if len(address) <= head + tail:
        return address
    return address[:head] + "..." + address[-tail:]

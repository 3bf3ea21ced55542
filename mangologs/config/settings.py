"""
Application settings.

Responsibilities:
- Build one immutable Settings object from environment (see config.env).
- Parse the well-known program ids to Pubkey once at startup; they are never
  mutated afterwards.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from solders.pubkey import Pubkey

from mangologs.config import env


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration for the resolver and its network clients."""

    solana_rpc_url: str
    log_index_url: str
    mango_program_id: Pubkey
    system_program_id: Pubkey
    rpc_timeout_sec: float
    index_timeout_sec: float

    @classmethod
    def from_env(cls) -> "Settings":
        try:
            mango_program_id = Pubkey.from_string(env.get_mango_program_id())
        except ValueError as e:
            raise ValueError(f"MANGO_PROGRAM_ID is not a valid pubkey: {e}") from e
        return cls(
            solana_rpc_url=env.get_solana_rpc_url(),
            log_index_url=env.get_log_index_url(),
            mango_program_id=mango_program_id,
            system_program_id=Pubkey.from_string(env.SYSTEM_PROGRAM_ID),
            rpc_timeout_sec=env.get_rpc_timeout_sec(),
            index_timeout_sec=env.get_index_timeout_sec(),
        )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the current application settings.

    Built from the environment on first call and cached for the life of the
    process. Tests call get_settings.cache_clear() after changing env.
    """
    return Settings.from_env()

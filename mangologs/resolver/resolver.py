"""
Address -> Mango trade-log accounts resolution pipeline.

    validate -> fetch account -> classify owner -> (decode MangoAccount) -> index lookup

System-owned and missing accounts are treated as wallets and looked up
directly. Mango-owned accounts are followed to their owner wallet. Any other
owner, and any MangoAccount that fails to decode, resolve to an empty list.
Only network failures raise (ResolveError); "no logs" is a normal answer.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from solders.pubkey import Pubkey

from mangologs.config.settings import Settings
from mangologs.core.exceptions import DecodeError, FetchError, IndexLookupError, InvalidAddressError, ResolveError
from mangologs.log_index.client import LogIndexClient
from mangologs.mangologs_logging import bind_address
from mangologs.solana_accounts.classifier import MANGO_V3_PROGRAM, SYSTEM_PROGRAM, classify
from mangologs.solana_accounts.fetcher import AccountFetcher
from mangologs.solana_accounts.layout import decode_mango_account
from mangologs.solana_accounts.models import OwnerClass
from mangologs.utils.wallet_utils import parse_address


class ResolutionStatus(str, enum.Enum):
    INVALID_ADDRESS = "invalid_address"
    UNSUPPORTED_OWNER = "unsupported_owner"
    UNDECODABLE_ACCOUNT = "undecodable_account"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of one successful resolution.

    status and owner_class tell apart the causes of an empty result for
    logging and diagnostics; consumers only need accounts.
    """

    address: str
    status: ResolutionStatus
    owner_class: OwnerClass | None = None
    wallet: str | None = None
    accounts: list[str] = field(default_factory=list)


class Resolver:
    """
    Stateless orchestrator over AccountFetcher and LogIndexClient.

    Safe to share between threads: resolve() keeps everything it computes in
    locals, so concurrent calls for different addresses are independent.
    """

    def __init__(
        self,
        fetcher: AccountFetcher,
        index_client: LogIndexClient,
        *,
        trading_program_id: Pubkey = MANGO_V3_PROGRAM,
        system_program_id: Pubkey = SYSTEM_PROGRAM,
    ) -> None:
        self._fetcher = fetcher
        self._index = index_client
        self._trading_program_id = trading_program_id
        self._system_program_id = system_program_id

    @classmethod
    def from_settings(cls, settings: Settings) -> "Resolver":
        return cls(
            AccountFetcher(settings.solana_rpc_url, timeout_sec=settings.rpc_timeout_sec),
            LogIndexClient(settings.log_index_url, timeout_sec=settings.index_timeout_sec),
            trading_program_id=settings.mango_program_id,
            system_program_id=settings.system_program_id,
        )

    def close(self) -> None:
        self._fetcher.close()
        self._index.close()

    def resolve(self, address: str) -> list[str]:
        """
        Return the Mango account ids with trade logs for address.

        Invalid addresses, unsupported owners and undecodable Mango accounts
        all give []. Raises ResolveError only when the RPC node or the index
        service cannot be reached.
        """
        return self.resolve_detailed(address).accounts

    def resolve_detailed(self, address: str) -> Resolution:
        """Like resolve(), but also reports which path the address took."""
        try:
            pubkey = parse_address(address)
        except InvalidAddressError:
            return Resolution(address=address, status=ResolutionStatus.INVALID_ADDRESS)

        log = bind_address(address)

        try:
            record = self._fetcher.fetch(pubkey)
        except FetchError as e:
            log.error("resolve_fetch_failed", error=str(e))
            raise ResolveError(f"could not fetch account {address}: {e}", address=address) from e

        owner_class = classify(
            record,
            system_program_id=self._system_program_id,
            trading_program_id=self._trading_program_id,
        )
        log.info("owner_classified", owner_class=owner_class.value, owner=str(record.owner))

        if owner_class in (OwnerClass.SYSTEM_OWNED, OwnerClass.MISSING):
            wallet = address
        elif owner_class is OwnerClass.KNOWN_PROGRAM_OWNED:
            try:
                decoded = decode_mango_account(record.data)
            except DecodeError as e:
                log.warning("mango_account_decode_failed", data_len=len(record.data), error=str(e))
                return Resolution(
                    address=address,
                    status=ResolutionStatus.UNDECODABLE_ACCOUNT,
                    owner_class=owner_class,
                )
            wallet = str(decoded.owner_wallet)
            log.info(
                "mango_account_decoded",
                wallet=wallet,
                mango_group=str(decoded.mango_group),
                version=decoded.version,
            )
        else:
            log.info("unsupported_owner_program", owner=str(record.owner))
            return Resolution(
                address=address,
                status=ResolutionStatus.UNSUPPORTED_OWNER,
                owner_class=owner_class,
            )

        try:
            accounts = self._index.lookup(wallet)
        except IndexLookupError as e:
            log.error("resolve_lookup_failed", wallet=wallet, error=str(e))
            raise ResolveError(f"could not look up logs for {wallet}: {e}", address=address) from e

        log.info("resolve_done", wallet=wallet, account_count=len(accounts))
        return Resolution(
            address=address,
            status=ResolutionStatus.RESOLVED,
            owner_class=owner_class,
            wallet=wallet,
            accounts=accounts,
        )

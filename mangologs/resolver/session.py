"""
Input-driven resolution session for interactive front ends.

A front end calls submit() every time its address field changes and renders
`state`. The session:
- maps invalid input to AWAITING_INPUT without any network call;
- skips resolution when the address equals the last one resolved;
- runs each resolution in a worker thread, and when the input changes before
  it finishes, cancels the pending task and discards its result.

Stale results are simply ignored; resolution never writes anything, so there
is nothing to clean up.
"""

from __future__ import annotations

import asyncio
import enum
from dataclasses import dataclass

from mangologs.core.exceptions import ResolveError
from mangologs.mangologs_logging import get_logger
from mangologs.resolver.resolver import Resolver
from mangologs.utils.wallet_utils import is_valid_address

logger = get_logger(__name__)


class SessionStatus(str, enum.Enum):
    AWAITING_INPUT = "awaiting_input"
    FETCHING = "fetching"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class SessionState:
    status: SessionStatus
    address: str = ""
    accounts: tuple[str, ...] = ()
    error: ResolveError | None = None

    @property
    def is_busy(self) -> bool:
        return self.status is SessionStatus.FETCHING


class ResolutionSession:
    """Memoizing, cancel-on-change wrapper around Resolver.resolve."""

    def __init__(self, resolver: Resolver) -> None:
        self._resolver = resolver
        self._last_address = ""
        self._generation = 0
        self._task: asyncio.Task[None] | None = None
        self._state = SessionState(SessionStatus.AWAITING_INPUT)

    @property
    def state(self) -> SessionState:
        return self._state

    def submit(self, address: str) -> SessionState:
        """
        Record a new input value and start resolving it if needed.

        Must be called from a running event loop. Returns the state right
        after the call (FETCHING when a resolution was started).
        """
        if not is_valid_address(address):
            self._cancel_pending()
            self._last_address = ""
            self._state = SessionState(SessionStatus.AWAITING_INPUT, address=address)
            return self._state

        if address == self._last_address:
            return self._state

        self._cancel_pending()
        self._last_address = address
        self._state = SessionState(SessionStatus.FETCHING, address=address)
        self._task = asyncio.get_running_loop().create_task(
            self._run(address, self._generation)
        )
        return self._state

    async def wait(self) -> SessionState:
        """Wait for the pending resolution, if any, and return the resulting state."""
        task = self._task
        if task is not None:
            await asyncio.wait({task})
            if not task.cancelled():
                task.result()
        return self._state

    async def resolve(self, address: str) -> SessionState:
        self.submit(address)
        return await self.wait()

    def _cancel_pending(self) -> None:
        self._generation += 1
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            logger.debug("session_resolution_cancelled", address=self._last_address)

    async def _run(self, address: str, generation: int) -> None:
        try:
            accounts = await asyncio.to_thread(self._resolver.resolve, address)
        except ResolveError as e:
            if generation != self._generation:
                return
            # forget the memo so the same address can be retried
            self._last_address = ""
            self._state = SessionState(SessionStatus.FAILED, address=address, error=e)
            return

        if generation != self._generation:
            logger.debug("session_stale_result_discarded", address=address)
            return
        self._state = SessionState(SessionStatus.DONE, address=address, accounts=tuple(accounts))

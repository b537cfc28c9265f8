"""In-memory session store keyed by channel address."""

import asyncio
import time
import weakref
from typing import Callable, Protocol

from ..logging_config import get_logger
from ..models import Session, state_name

logger = get_logger(__name__)


class ISessionStore(Protocol):
    """Current dialogue state per user address."""

    def get(self, address: str) -> Session:
        """Current session, or None."""
        ...

    def set(self, address: str, session: Session) -> None:
        """Replace the session wholesale."""
        ...

    def clear(self, address: str) -> None:
        """Reset a session to None."""
        ...

    def lock(self, address: str) -> asyncio.Lock:
        """Per-address lock serialising updates from one user."""
        ...

    def reset_all(self) -> None:
        """Drop every session."""
        ...


class SessionStore:
    """Dict-backed store with optional idle expiry.

    Sessions untouched for longer than ``idle_timeout`` seconds read back as
    None. ``idle_timeout=0`` keeps sessions until they are replaced.
    """

    def __init__(
        self,
        idle_timeout: float = 0.0,
        clock: Callable[[], float] | None = None,
    ):
        self._idle_timeout = idle_timeout
        self._clock = clock or time.monotonic
        self._sessions: dict[str, tuple[Session, float]] = {}
        # Locks live only while a handler holds or awaits them
        self._locks: weakref.WeakValueDictionary[str, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    def get(self, address: str) -> Session:
        entry = self._sessions.get(address)
        if entry is None:
            return None

        session, touched_at = entry
        if self._idle_timeout and self._clock() - touched_at > self._idle_timeout:
            logger.info(
                "Session for %s expired after inactivity (%s)",
                address,
                state_name(session),
            )
            del self._sessions[address]
            return None
        return session

    def set(self, address: str, session: Session) -> None:
        if session is None:
            self._sessions.pop(address, None)
            return
        self._sessions[address] = (session, self._clock())

    def clear(self, address: str) -> None:
        self._sessions.pop(address, None)

    def lock(self, address: str) -> asyncio.Lock:
        lock = self._locks.get(address)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[address] = lock
        return lock

    @property
    def lock_count(self) -> int:
        return len(self._locks)

    def reset_all(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)

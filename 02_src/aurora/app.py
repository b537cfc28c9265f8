"""Application bootstrap and lifecycle management."""

import os
from typing import Protocol

from .config import (
    DATA_DIR,
    DEFAULT_DOCUMENT_PATH,
    DEFAULT_SEQUENCE_PATH,
    env_float,
    resolve_db_path,
    resolve_path,
)
from .dialogue import DialogueAgent, DialogueEngine, IDialogueAgent
from .logging_config import get_logger
from .notifications import NotificationDispatcher
from .output_router import OutputRouter
from .protocols import FileSequenceStore, ProtocolGenerator, StaticStatusLookup
from .sessions import SessionStore
from .storage import IStorage, Storage
from .tracker import ITracker, Tracker
from .transport import ITransport, LocalTransport

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Drop sessions and audit data."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        db_path: str | None = None,
        sequence_path: str | None = None,
        document_path: str | None = None,
        transport: ITransport | None = None,
        dispatcher: NotificationDispatcher | None = None,
    ):
        env_db_path = os.getenv("DATABASE_URL") if db_path is None else db_path
        self._db_path = resolve_db_path(env_db_path)
        self._sequence_path = resolve_path(
            sequence_path or os.getenv("SEQUENCE_FILE"), DEFAULT_SEQUENCE_PATH
        )
        self._document_path = resolve_path(
            document_path or os.getenv("RCA_DOCUMENT_PATH"), DEFAULT_DOCUMENT_PATH
        )
        self._status_file = os.getenv("PROTOCOL_STATUS_FILE")
        self._idle_timeout = env_float(os.getenv("SESSION_IDLE_TIMEOUT"), 0.0)

        self._transport: ITransport = transport or LocalTransport()
        self._dispatcher = dispatcher

        # Components (will be initialized in start())
        self._storage: IStorage | None = None
        self._tracker: ITracker | None = None
        self._protocols: ProtocolGenerator | None = None
        self._sessions: SessionStore | None = None
        self._output_router: OutputRouter | None = None
        self._dialogue_agent: DialogueAgent | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. Storage (no dependencies)
        self._storage = Storage(self._db_path)
        await self._storage.init()
        logger.info("Storage initialized")

        # 2. Tracker (depends on Storage)
        self._tracker = Tracker(self._storage)

        # 3. Protocols: counter is loaded once here and authoritative afterwards
        self._protocols = ProtocolGenerator(FileSequenceStore(self._sequence_path))
        if self._status_file:
            statuses = StaticStatusLookup.from_json_file(
                resolve_path(self._status_file, DATA_DIR / "protocol_status.json")
            )
        else:
            statuses = StaticStatusLookup()
        logger.info(
            "Protocol generator ready at sequence %s", self._protocols.last_sequence
        )

        # 4. Notifications
        if self._dispatcher is None:
            self._dispatcher = NotificationDispatcher()

        # 5. Sessions + engine
        self._sessions = SessionStore(idle_timeout=self._idle_timeout)
        engine = DialogueEngine(
            protocol_generator=self._protocols,
            status_lookup=statuses,
            document_path=str(self._document_path),
        )

        # 6. OutputRouter (depends on transport, dispatcher, tracker)
        self._output_router = OutputRouter(
            transport=self._transport,
            dispatcher=self._dispatcher,
            tracker=self._tracker,
        )

        # 7. DialogueAgent
        self._dialogue_agent = DialogueAgent(
            engine=engine,
            sessions=self._sessions,
            output_router=self._output_router,
            tracker=self._tracker,
        )
        await self._dialogue_agent.start()
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._dialogue_agent:
            await self._dialogue_agent.stop()
        if self._dispatcher:
            await self._dispatcher.close()
        if self._storage:
            await self._storage.close()
            logger.info("Storage closed")

    async def reset(self) -> None:
        """Drop sessions and audit data. The protocol sequence is never reset."""
        if self._sessions:
            self._sessions.reset_all()
            logger.info("Sessions cleared")
        if self._storage:
            await self._storage.clear()
            logger.info("Storage cleared")

    @property
    def storage(self) -> IStorage:
        """Get storage instance."""
        if not self._storage:
            raise RuntimeError("Application not started")
        return self._storage

    @property
    def dialogue_agent(self) -> IDialogueAgent:
        """Get dialogue agent instance."""
        if not self._dialogue_agent:
            raise RuntimeError("Application not started")
        return self._dialogue_agent

    @property
    def sessions(self) -> SessionStore:
        if not self._sessions:
            raise RuntimeError("Application not started")
        return self._sessions

    @property
    def transport(self) -> ITransport:
        return self._transport

    @property
    def tracker(self) -> ITracker:
        if not self._tracker:
            raise RuntimeError("Application not started")
        return self._tracker

    @property
    def last_sequence(self) -> int:
        """Last issued protocol sequence number."""
        if not self._protocols:
            raise RuntimeError("Application not started")
        return self._protocols.last_sequence

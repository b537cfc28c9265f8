"""Pytest configuration and fixtures."""

import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


FIXED_NOW = datetime(2025, 12, 8, 9, 30, 0)


@pytest_asyncio.fixture
async def storage():
    """Create in-memory storage for testing."""
    from aurora.storage import Storage

    st = Storage(":memory:")
    await st.init()
    yield st
    await st.close()


@pytest.fixture
def tracker(storage):
    """Create Tracker backed by in-memory storage."""
    from aurora.tracker import Tracker

    return Tracker(storage)


@pytest.fixture
def sequence_path(tmp_path):
    return tmp_path / "protocol_sequence.txt"


@pytest.fixture
def sequence_store(sequence_path):
    from aurora.protocols import FileSequenceStore

    return FileSequenceStore(sequence_path)


@pytest.fixture
def generator(sequence_store):
    """Protocol generator with a fixed clock."""
    from aurora.protocols import ProtocolGenerator

    return ProtocolGenerator(sequence_store, clock=lambda: FIXED_NOW)


@pytest.fixture
def document_path(tmp_path):
    path = tmp_path / "RCA.pdf"
    path.write_bytes(b"%PDF-1.4 test")
    return path


@pytest.fixture
def engine(generator, document_path):
    from aurora.dialogue import DialogueEngine
    from aurora.protocols import StaticStatusLookup

    return DialogueEngine(
        protocol_generator=generator,
        status_lookup=StaticStatusLookup(),
        document_path=str(document_path),
    )


@pytest.fixture
def contact():
    from aurora.models import Contact

    return Contact(address="5511999990000@c.us", name="Maria")


@pytest.fixture
def mock_dispatcher():
    """Create mock notification dispatcher."""
    from aurora.notifications import DispatchResult

    dispatcher = Mock()
    dispatcher.dispatch = AsyncMock(return_value=DispatchResult.SENT)
    dispatcher.close = AsyncMock()
    return dispatcher


@pytest.fixture
def mock_transport():
    """Create mock chat transport."""
    transport = Mock()
    transport.send_text = AsyncMock()
    transport.send_media = AsyncMock()
    return transport


@pytest.fixture
def output_router(mock_transport, mock_dispatcher, tracker):
    from aurora.output_router import OutputRouter

    return OutputRouter(
        transport=mock_transport,
        dispatcher=mock_dispatcher,
        tracker=tracker,
    )


@pytest.fixture
def session_store():
    from aurora.sessions import SessionStore

    return SessionStore()


@pytest_asyncio.fixture
async def dialogue_agent(engine, session_store, output_router, tracker):
    """Create a started DialogueAgent."""
    from aurora.dialogue import DialogueAgent

    da = DialogueAgent(
        engine=engine,
        sessions=session_store,
        output_router=output_router,
        tracker=tracker,
    )
    await da.start()
    yield da
    await da.stop()

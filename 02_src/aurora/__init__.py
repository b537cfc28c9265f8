"""Aurora: citizen-service chat assistant for municipal inspection."""

from .app import Application, IApplication
from .dialogue import DialogueAgent, DialogueEngine, IDialogueAgent
from .models import CallEvent, InboundMessage, NotificationEvent, Outbound, TraceEvent
from .notifications import INotificationDispatcher, NotificationDispatcher
from .output_router import IOutputRouter, OutputRouter
from .protocols import FileSequenceStore, ProtocolGenerator, StaticStatusLookup
from .sessions import ISessionStore, SessionStore
from .storage import IStorage, Storage
from .tracker import ITracker, Tracker

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "InboundMessage",
    "CallEvent",
    "Outbound",
    "NotificationEvent",
    "TraceEvent",
    # Components
    "DialogueEngine",
    "IDialogueAgent",
    "DialogueAgent",
    "ISessionStore",
    "SessionStore",
    "FileSequenceStore",
    "ProtocolGenerator",
    "StaticStatusLookup",
    "INotificationDispatcher",
    "NotificationDispatcher",
    "IOutputRouter",
    "OutputRouter",
    "IStorage",
    "Storage",
    "ITracker",
    "Tracker",
]

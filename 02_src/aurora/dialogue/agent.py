"""DialogueAgent implementation."""

import asyncio
from typing import Protocol

from ..logging_config import get_logger
from ..models import CallEvent, Contact, InboundMessage, Outbound, Session, state_name
from ..output_router import IOutputRouter
from ..sessions import ISessionStore
from ..tracker import ITracker
from .engine import DialogueEngine

logger = get_logger(__name__)


class IDialogueAgent(Protocol):
    """Inbound boundary for all citizen conversations."""

    async def handle_message(self, message: InboundMessage) -> list[Outbound]:
        """Run one message through the engine, commit the session, deliver replies."""
        ...

    async def handle_call(self, call: CallEvent) -> list[Outbound]:
        """Answer a voice call with the text-only notice and the main menu."""
        ...

    async def start(self) -> None:
        ...

    async def stop(self) -> None:
        ...


class DialogueAgent:
    """Serialises each user's messages through the dialogue engine."""

    def __init__(
        self,
        engine: DialogueEngine,
        sessions: ISessionStore,
        output_router: IOutputRouter,
        tracker: ITracker,
    ):
        self._engine = engine
        self._sessions = sessions
        self._router = output_router
        self._tracker = tracker
        self._running = False

    async def start(self) -> None:
        logger.info("Starting DialogueAgent")
        self._running = True

    async def stop(self) -> None:
        logger.info("Stopping DialogueAgent")
        self._running = False

    async def handle_message(self, message: InboundMessage) -> list[Outbound]:
        """Group messages are discarded before reaching the engine."""
        if not self._running:
            raise RuntimeError("DialogueAgent not started")

        if message.is_group:
            logger.debug("Discarding group message from %s", message.sender_id)
            await self._tracker.track(
                event_type="message_discarded",
                actor="dialogue_agent",
                data={"user_id": message.sender_id, "reason": "group"},
            )
            return []

        contact = Contact(address=message.sender_id, name=message.contact_name)

        async with self._sessions.lock(contact.address):
            before = self._sessions.get(contact.address)
            # Issuing a protocol fsyncs the sequence file; keep it off the event loop.
            transition = await asyncio.to_thread(
                self._engine.step, before, message.body, contact, has_media=message.has_media
            )
            self._sessions.set(contact.address, transition.session)
            # Effects run after the commit: a failed send keeps the new state.
            sent = await self._router.deliver(contact.address, transition.effects)

        await self._track_transition(
            "message_handled", contact, before, transition.session, transition.protocol
        )
        return sent

    async def handle_call(self, call: CallEvent) -> list[Outbound]:
        if not self._running:
            raise RuntimeError("DialogueAgent not started")

        contact = Contact(address=call.sender_id, name=call.contact_name)
        logger.info("Call received", extra={"user_id": contact.address})

        async with self._sessions.lock(contact.address):
            before = self._sessions.get(contact.address)
            transition = self._engine.on_call(contact)
            self._sessions.set(contact.address, transition.session)
            sent = await self._router.deliver(contact.address, transition.effects)

        await self._track_transition("call_handled", contact, before, transition.session)
        return sent

    async def _track_transition(
        self,
        event_type: str,
        contact: Contact,
        before: Session,
        after: Session,
        protocol: str | None = None,
    ) -> None:
        data = {
            "user_id": contact.address,
            "from_state": state_name(before),
            "to_state": state_name(after),
        }
        logger.debug(
            "%s -> %s",
            data["from_state"],
            data["to_state"],
            extra={"user_id": contact.address, "protocol": protocol, "state": data["to_state"]},
        )
        if protocol:
            data["protocol"] = protocol
            await self._tracker.track(
                event_type="protocol_issued",
                actor="dialogue_agent",
                data={"user_id": contact.address, "protocol": protocol},
            )
        await self._tracker.track(event_type=event_type, actor="dialogue_agent", data=data)

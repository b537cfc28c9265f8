"""OutputRouter implementation."""

from typing import Protocol

from ..logging_config import get_logger
from ..models import Dispatch, Effect, Outbound, SendDocument, SendText
from ..notifications import INotificationDispatcher
from ..tracker import ITracker
from ..transport import ITransport

logger = get_logger(__name__)


class IOutputRouter(Protocol):
    """Performs the effects of a committed dialogue transition."""

    async def deliver(self, to: str, effects: list[Effect]) -> list[Outbound]:
        """Execute effects in order. Return the messages handed to the transport."""
        ...


class OutputRouter:
    """Routes engine effects to the transport and the notification dispatcher."""

    def __init__(
        self,
        transport: ITransport,
        dispatcher: INotificationDispatcher,
        tracker: ITracker,
    ):
        self._transport = transport
        self._dispatcher = dispatcher
        self._tracker = tracker

    async def deliver(self, to: str, effects: list[Effect]) -> list[Outbound]:
        """Execute effects in order; a failed send never undoes the transition."""
        sent: list[Outbound] = []

        for effect in effects:
            if isinstance(effect, SendText):
                await self._send_text(to, effect.text, sent)

            elif isinstance(effect, SendDocument):
                try:
                    await self._transport.send_media(to, effect.path, effect.caption)
                except OSError as e:
                    logger.error("Document %s unavailable for %s: %s", effect.path, to, e)
                    await self._send_text(to, effect.fallback_text, sent)
                except Exception as e:
                    logger.error(
                        "Failed to send document %s to %s: %s", effect.path, to, e, exc_info=True
                    )
                    await self._send_text(to, effect.fallback_text, sent)
                else:
                    sent.append(
                        Outbound(to=to, kind="media", text=effect.caption, path=effect.path)
                    )
                    await self._send_text(to, effect.sent_text, sent)

            elif isinstance(effect, Dispatch):
                result = await self._dispatcher.dispatch(effect.event)
                await self._tracker.track(
                    event_type="notification_dispatched",
                    actor="output_router",
                    data={
                        "user_id": to,
                        "title": effect.event.title,
                        "result": result.value,
                    },
                )

        return sent

    async def _send_text(self, to: str, text: str, sent: list[Outbound]) -> None:
        try:
            await self._transport.send_text(to, text)
        except Exception as e:
            logger.error("Failed to send message to %s: %s", to, e, exc_info=True)
            return
        sent.append(Outbound(to=to, kind="text", text=text))

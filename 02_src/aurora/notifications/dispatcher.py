"""Notification dispatcher posting operator events to webhook sinks."""

import os
from datetime import datetime, timezone
from enum import Enum
from typing import Protocol

import httpx

from ..logging_config import get_logger
from ..models import NotificationEvent, Sink

logger = get_logger(__name__)


SATISFACTION_MARKER = "PESQUISA DE SATISFAÇÃO"
BOT_USERNAME = "Aurora - Fiscalização Municipal"
FOOTER_TEXT = "Via Chatbot WhatsApp"


class DispatchResult(str, Enum):
    SENT = "sent"
    DROPPED = "dropped"
    FAILED = "failed"


class INotificationDispatcher(Protocol):
    """Fire-and-forget delivery of operator notifications."""

    async def dispatch(self, event: NotificationEvent) -> DispatchResult:
        """Route and post an event. Never raises."""
        ...


def select_sink(event: NotificationEvent) -> Sink:
    """Satisfaction surveys go to metrics, everything else to alerts."""
    if SATISFACTION_MARKER in event.title:
        return Sink.METRICS
    return Sink.ALERTS


def build_payload(event: NotificationEvent, now: datetime | None = None) -> dict:
    """Webhook body with a single embed."""
    now = now or datetime.now(timezone.utc)
    return {
        "username": BOT_USERNAME,
        "embeds": [
            {
                "title": event.title,
                "color": int(event.color),
                "timestamp": now.isoformat(),
                "fields": [
                    {"name": f.name, "value": f.value, "inline": f.inline}
                    for f in event.fields
                ],
                "footer": {"text": FOOTER_TEXT},
            }
        ],
    }


class NotificationDispatcher:
    """Posts events to the alert or metrics webhook."""

    def __init__(
        self,
        alert_url: str | None = None,
        metrics_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self._urls = {
            Sink.ALERTS: alert_url or os.getenv("DISCORD_WEBHOOK_ALERTA"),
            Sink.METRICS: metrics_url or os.getenv("DISCORD_WEBHOOK_METRICAS"),
        }
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout

    def url_for(self, sink: Sink) -> str | None:
        return self._urls.get(sink)

    async def dispatch(self, event: NotificationEvent) -> DispatchResult:
        """Post the event to its sink; failures are logged, not raised."""
        sink = select_sink(event)
        url = self._urls.get(sink)

        if not url:
            logger.warning(
                "Webhook URL not configured for %s sink, dropping: %s",
                sink.value,
                event.title,
            )
            return DispatchResult.DROPPED

        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)

        try:
            response = await self._client.post(url, json=build_payload(event))
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Failed to deliver %s notification %r: %s", sink.value, event.title, e)
            return DispatchResult.FAILED

        logger.info("Notification sent to %s sink: %s", sink.value, event.title)
        return DispatchResult.SENT

    async def close(self) -> None:
        """Close the HTTP client if this dispatcher created it."""
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None

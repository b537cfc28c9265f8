"""Tests for NotificationDispatcher."""

import json
import logging

import httpx

from aurora.models import Color, NotificationEvent, NotificationField, Sink
from aurora.notifications import (
    DispatchResult,
    NotificationDispatcher,
    build_payload,
    select_sink,
)

ALERT_URL = "https://hooks.example/alerts"
METRICS_URL = "https://hooks.example/metrics"

COMPLAINT = NotificationEvent(
    title="🚨 NOVA DENÚNCIA DE LOTE SUJO (SEM FOTOS)",
    fields=(NotificationField("Protocolo", "2025.12.08.1.0001", inline=True),),
    color=Color.COMPLAINT,
)
SURVEY = NotificationEvent(
    title="📊 PESQUISA DE SATISFAÇÃO RECEBIDA",
    fields=(NotificationField("Nota Atribuída", "**4 / 5**", inline=True),),
    color=Color.RATING_OK,
)


def recording_client(requests: list, status_code: int = 204) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestSelectSink:
    def test_survey_goes_to_metrics(self):
        assert select_sink(SURVEY) == Sink.METRICS

    def test_everything_else_goes_to_alerts(self):
        assert select_sink(COMPLAINT) == Sink.ALERTS
        assert select_sink(NotificationEvent(title="🟣 HANDOFF")) == Sink.ALERTS


class TestBuildPayload:
    def test_embed_shape(self):
        payload = build_payload(COMPLAINT)

        assert payload["username"] == "Aurora - Fiscalização Municipal"
        embed = payload["embeds"][0]
        assert embed["title"] == COMPLAINT.title
        assert embed["color"] == 16711680
        assert embed["fields"] == [
            {"name": "Protocolo", "value": "2025.12.08.1.0001", "inline": True}
        ]
        assert embed["footer"] == {"text": "Via Chatbot WhatsApp"}
        assert "T" in embed["timestamp"]

    def test_serialises_as_json(self):
        body = json.dumps(build_payload(SURVEY))
        assert '"color": 65280' in body


class TestDispatch:
    async def test_posts_to_alert_sink(self):
        requests = []
        dispatcher = NotificationDispatcher(
            alert_url=ALERT_URL, metrics_url=METRICS_URL, client=recording_client(requests)
        )

        result = await dispatcher.dispatch(COMPLAINT)

        assert result == DispatchResult.SENT
        assert len(requests) == 1
        assert str(requests[0].url) == ALERT_URL
        body = json.loads(requests[0].content)
        assert body["embeds"][0]["title"] == COMPLAINT.title

    async def test_posts_survey_to_metrics_sink(self):
        requests = []
        dispatcher = NotificationDispatcher(
            alert_url=ALERT_URL, metrics_url=METRICS_URL, client=recording_client(requests)
        )

        await dispatcher.dispatch(SURVEY)

        assert str(requests[0].url) == METRICS_URL

    async def test_unconfigured_sink_is_dropped(self, monkeypatch, caplog):
        monkeypatch.delenv("DISCORD_WEBHOOK_METRICAS", raising=False)
        requests = []
        dispatcher = NotificationDispatcher(
            alert_url=ALERT_URL, client=recording_client(requests)
        )

        with caplog.at_level(logging.WARNING):
            result = await dispatcher.dispatch(SURVEY)

        assert result == DispatchResult.DROPPED
        assert requests == []
        assert "not configured" in caplog.text

    async def test_urls_from_environment(self, monkeypatch):
        monkeypatch.setenv("DISCORD_WEBHOOK_ALERTA", ALERT_URL)
        monkeypatch.setenv("DISCORD_WEBHOOK_METRICAS", METRICS_URL)

        dispatcher = NotificationDispatcher()

        assert dispatcher.url_for(Sink.ALERTS) == ALERT_URL
        assert dispatcher.url_for(Sink.METRICS) == METRICS_URL

    async def test_http_error_status_is_absorbed(self, caplog):
        dispatcher = NotificationDispatcher(
            alert_url=ALERT_URL, client=recording_client([], status_code=500)
        )

        with caplog.at_level(logging.ERROR):
            result = await dispatcher.dispatch(COMPLAINT)

        assert result == DispatchResult.FAILED
        assert "Failed to deliver" in caplog.text

    async def test_network_error_is_absorbed(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        dispatcher = NotificationDispatcher(
            alert_url=ALERT_URL,
            client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

        assert await dispatcher.dispatch(COMPLAINT) == DispatchResult.FAILED

    async def test_malformed_webhook_url_is_absorbed(self, caplog):
        requests = []
        dispatcher = NotificationDispatcher(
            alert_url="http://[::1/webhook", client=recording_client(requests)
        )

        with caplog.at_level(logging.ERROR):
            result = await dispatcher.dispatch(COMPLAINT)

        assert result == DispatchResult.FAILED
        assert requests == []
        assert "Failed to deliver" in caplog.text

    async def test_close_keeps_injected_client_open(self):
        client = recording_client([])
        dispatcher = NotificationDispatcher(alert_url=ALERT_URL, client=client)

        await dispatcher.close()

        assert not client.is_closed
        await client.aclose()

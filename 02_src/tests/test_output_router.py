"""Tests for OutputRouter."""

import pytest

from aurora.models import Dispatch, NotificationEvent, SendDocument, SendText
from aurora.notifications import DispatchResult

DOC = SendDocument(
    path="/srv/RCA.pdf",
    caption="Segue o RCA",
    sent_text="Documento enviado",
    fallback_text="Documento indisponível",
)


class TestOutputRouterDeliver:
    """Tests for OutputRouter.deliver()."""

    @pytest.mark.asyncio
    async def test_sends_texts_in_order(self, output_router, mock_transport):
        sent = await output_router.deliver("u1", [SendText("a"), SendText("b")])

        assert [o.text for o in sent] == ["a", "b"]
        texts = [call.args for call in mock_transport.send_text.await_args_list]
        assert texts == [("u1", "a"), ("u1", "b")]

    @pytest.mark.asyncio
    async def test_document_then_confirmation(self, output_router, mock_transport):
        sent = await output_router.deliver("u1", [DOC])

        mock_transport.send_media.assert_awaited_once_with("u1", "/srv/RCA.pdf", "Segue o RCA")
        assert [(o.kind, o.text) for o in sent] == [
            ("media", "Segue o RCA"),
            ("text", "Documento enviado"),
        ]

    @pytest.mark.asyncio
    async def test_missing_document_falls_back(self, output_router, mock_transport):
        mock_transport.send_media.side_effect = FileNotFoundError("RCA.pdf")

        sent = await output_router.deliver("u1", [DOC])

        assert [(o.kind, o.text) for o in sent] == [("text", "Documento indisponível")]

    @pytest.mark.asyncio
    async def test_document_transport_error_falls_back(
        self, output_router, mock_transport, mock_dispatcher
    ):
        mock_transport.send_media.side_effect = RuntimeError("media upload rejected")
        event = NotificationEvent(title="x")

        sent = await output_router.deliver("u1", [DOC, Dispatch(event), SendText("menu")])

        assert [(o.kind, o.text) for o in sent] == [
            ("text", "Documento indisponível"),
            ("text", "menu"),
        ]
        mock_dispatcher.dispatch.assert_awaited_once_with(event)

    @pytest.mark.asyncio
    async def test_dispatch_is_tracked(self, output_router, mock_dispatcher, storage):
        event = NotificationEvent(title="🚨 NOVA DENÚNCIA")

        sent = await output_router.deliver("u1", [Dispatch(event), SendText("ok")])

        mock_dispatcher.dispatch.assert_awaited_once_with(event)
        assert [o.text for o in sent] == ["ok"]
        events = await storage.get_trace_events(event_types=["notification_dispatched"])
        assert len(events) == 1
        assert events[0].data == {
            "user_id": "u1",
            "title": "🚨 NOVA DENÚNCIA",
            "result": "sent",
        }

    @pytest.mark.asyncio
    async def test_dropped_dispatch_does_not_stop_replies(
        self, output_router, mock_dispatcher
    ):
        mock_dispatcher.dispatch.return_value = DispatchResult.DROPPED

        sent = await output_router.deliver(
            "u1", [Dispatch(NotificationEvent(title="x")), SendText("reply")]
        )

        assert [o.text for o in sent] == ["reply"]

    @pytest.mark.asyncio
    async def test_transport_failure_is_logged_not_raised(
        self, output_router, mock_transport
    ):
        mock_transport.send_text.side_effect = [ConnectionError("down"), None]

        sent = await output_router.deliver("u1", [SendText("a"), SendText("b")])

        assert [o.text for o in sent] == ["b"]

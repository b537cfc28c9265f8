"""Tests for the HTTP API."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from aurora.api import create_fastapi_app
from aurora.app import Application

USER = "5511977776666@c.us"


@pytest.fixture
def client(tmp_path, mock_dispatcher):
    (tmp_path / "RCA.pdf").write_bytes(b"%PDF-1.4")
    application = Application(
        db_path=":memory:",
        sequence_path=str(tmp_path / "seq.txt"),
        document_path=str(tmp_path / "RCA.pdf"),
        dispatcher=mock_dispatcher,
    )
    with TestClient(create_fastapi_app(application)) as test_client:
        yield test_client


def post_message(client, body: str, **extra) -> dict:
    response = client.post(
        "/api/messages", json={"sender_id": USER, "body": body, **extra}
    )
    assert response.status_code == 200
    return response.json()


class TestMessagingRoutes:
    def test_menu(self, client):
        data = post_message(client, "oi", sender_name="Carla")
        assert len(data["replies"]) == 2
        assert "Carla" in data["replies"][0]["text"]

    def test_document_reply(self, client):
        data = post_message(client, "3")
        assert [r["kind"] for r in data["replies"]] == ["media", "text"]
        assert data["replies"][0]["path"].endswith("RCA.pdf")

    def test_group_message_ignored(self, client):
        assert post_message(client, "1", is_group=True) == {"replies": []}

    def test_tracking_flow(self, client):
        post_message(client, "2")
        data = post_message(client, "2025.12.08.1.0001")
        assert "Aguardando vistoria" in data["replies"][0]["text"]

    def test_call(self, client):
        response = client.post("/api/calls", json={"from": "5511977776666@c.us"})
        assert response.status_code == 200
        assert len(response.json()["replies"]) == 3

    def test_missing_sender_rejected(self, client):
        response = client.post("/api/messages", json={"body": "oi"})
        assert response.status_code == 422


class TestObservabilityRoutes:
    def test_trace_events(self, client):
        post_message(client, "1")
        response = client.get("/api/trace-events", params={"event_type": "message_handled"})
        assert response.status_code == 200
        events = response.json()
        assert len(events) == 1
        assert events[0]["data"]["to_state"] == "complaint_type_select"

    def test_invalid_after(self, client):
        response = client.get("/api/trace-events", params={"after": "yesterday"})
        assert response.status_code == 400


class TestTraceFilters:
    def test_filter_by_citizen(self, client):
        post_message(client, "1")
        client.post("/api/messages", json={"sender_id": "5511911112222@c.us", "body": "2"})

        response = client.get("/api/trace-events", params={"user_id": USER})
        events = response.json()

        assert events
        assert {e["data"]["user_id"] for e in events} == {USER}

    def test_filter_by_protocol(self, client):
        post_message(client, "1")
        post_message(client, "3")
        client.post("/api/messages", json={"sender_id": "5511911112222@c.us", "body": "oi"})
        issued = client.get(
            "/api/trace-events", params={"event_type": "protocol_issued"}
        ).json()
        protocol = issued[0]["data"]["protocol"]

        events = client.get("/api/trace-events", params={"protocol": protocol}).json()

        assert {e["event_type"] for e in events} == {"protocol_issued", "message_handled"}
        assert all(e["data"]["user_id"] == USER for e in events)

    def test_repeatable_event_type(self, client):
        post_message(client, "1", is_group=True)
        post_message(client, "oi")

        response = client.get(
            "/api/trace-events",
            params=[("event_type", "message_discarded"), ("event_type", "message_handled")],
        )
        assert {e["event_type"] for e in response.json()} == {
            "message_discarded",
            "message_handled",
        }


class TestControlRoutes:
    def test_reset(self, client):
        post_message(client, "1")
        assert client.post("/api/control/reset").json() == {"status": "ok"}

        # Session gone: "1" opens the complaint menu again instead of the lot flow
        data = post_message(client, "1")
        assert "Qual o foco da sua denúncia" in data["replies"][0]["text"]

    def test_session_state(self, client):
        assert client.get(f"/api/control/sessions/{USER}").json() == {
            "address": USER,
            "state": "idle",
        }

        post_message(client, "2")
        assert client.get(f"/api/control/sessions/{USER}").json()["state"] == (
            "track_protocol_input"
        )

    def test_reset_single_session(self, client):
        post_message(client, "1")

        response = client.delete(f"/api/control/sessions/{USER}")

        assert response.json() == {"address": USER, "state": "idle"}
        data = post_message(client, "1")
        assert "Qual o foco da sua denúncia" in data["replies"][0]["text"]

    def test_sequence_survives_reset(self, client):
        assert client.get("/api/control/protocols/sequence").json() == {"last_sequence": 0}

        post_message(client, "1")
        post_message(client, "3")
        client.post("/api/control/reset")

        assert client.get("/api/control/protocols/sequence").json() == {"last_sequence": 1}

    def test_sim_not_configured(self, client):
        assert client.post("/api/control/sim/start").status_code == 404


class TestSimControl:
    def test_start_and_stop(self, tmp_path, mock_dispatcher):
        sim = MagicMock()
        sim.start = AsyncMock()
        sim.stop = AsyncMock()
        application = Application(
            db_path=":memory:",
            sequence_path=str(tmp_path / "seq.txt"),
            dispatcher=mock_dispatcher,
        )

        with TestClient(create_fastapi_app(application, sim=sim)) as client:
            assert client.post("/api/control/sim/start").json() == {"status": "ok"}
            assert client.post("/api/control/sim/stop").json() == {"status": "ok"}
            assert client.post("/api/control/sim/pause").status_code == 404

        sim.start.assert_awaited_once()
        sim.set_tracker.assert_called_once()
        # once from the route, once on shutdown
        assert sim.stop.await_count == 2

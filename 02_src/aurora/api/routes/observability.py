"""Audit trail routes for operators."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException, Query

from ...app import Application
from ...models import TraceEvent


class TraceEventResponse(BaseModel):
    id: str
    event_type: str
    actor: str
    data: dict[str, Any]
    timestamp: datetime


def _to_response(event: TraceEvent) -> dict:
    return {
        "id": event.id,
        "event_type": event.event_type,
        "actor": event.actor,
        "data": event.data,
        "timestamp": event.timestamp.isoformat(),
    }


def create_observability_router(app: Application) -> APIRouter:
    """Create observability router."""
    router = APIRouter(prefix="/api", tags=["observability"])

    @router.get("/trace-events", response_model=list[TraceEventResponse])
    async def get_trace_events(
        after: str | None = Query(None, description="ISO timestamp filter"),
        limit: int = Query(100, ge=1, le=1000),
        event_type: list[str] | None = Query(None, description="Repeatable event type filter"),
        actor: str | None = Query(None, description="Component that emitted the event"),
        user_id: str | None = Query(None, description="Citizen channel address"),
        protocol: str | None = Query(None, description="Protocol identifier"),
    ) -> list[dict]:
        """Audit events, newest first. Message bodies are never recorded."""
        after_dt = None
        if after:
            try:
                after_dt = datetime.fromisoformat(after)
            except ValueError:
                raise HTTPException(status_code=400, detail="Invalid after timestamp format")

        try:
            events = await app.storage.get_trace_events(
                after=after_dt,
                event_types=event_type,
                actor=actor,
                user_id=user_id,
                protocol=protocol,
                limit=limit,
            )
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        return [_to_response(e) for e in events]

    return router

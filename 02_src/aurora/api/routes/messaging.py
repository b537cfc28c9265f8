"""Messaging API routes."""

from typing import Literal

from pydantic import BaseModel, Field
from fastapi import APIRouter, HTTPException

from ...app import Application
from ...models import CallEvent, InboundMessage, Outbound


class MessageRequest(BaseModel):
    """Inbound chat message."""

    sender_id: str
    body: str = ""
    is_group: bool = False
    sender_name: str | None = None
    has_media: bool = False


class CallRequest(BaseModel):
    """Inbound voice call."""

    sender_id: str = Field(alias="from")
    sender_name: str | None = None


class Reply(BaseModel):
    kind: Literal["text", "media"]
    text: str
    path: str | None = None


class MessageResponse(BaseModel):
    """Messages handed to the transport for this event."""

    replies: list[Reply]


def _to_response(sent: list[Outbound]) -> dict:
    return {
        "replies": [{"kind": o.kind, "text": o.text, "path": o.path} for o in sent]
    }


def create_messaging_router(app: Application) -> APIRouter:
    """Create messaging router."""
    router = APIRouter(prefix="/api", tags=["messaging"])

    @router.post("/messages", response_model=MessageResponse)
    async def send_message(request: MessageRequest) -> dict:
        """Deliver a chat message to the dialogue agent."""
        try:
            sent = await app.dialogue_agent.handle_message(
                InboundMessage(
                    sender_id=request.sender_id,
                    body=request.body,
                    is_group=request.is_group,
                    sender_name=request.sender_name,
                    has_media=request.has_media,
                )
            )
            return _to_response(sent)
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.post("/calls", response_model=MessageResponse)
    async def receive_call(request: CallRequest) -> dict:
        """Answer a voice call with the text-only notice."""
        try:
            sent = await app.dialogue_agent.handle_call(
                CallEvent(sender_id=request.sender_id, sender_name=request.sender_name)
            )
            return _to_response(sent)
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router

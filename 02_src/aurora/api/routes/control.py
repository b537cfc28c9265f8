"""Operator control routes: sessions, protocol counter and the scripted SIM."""

from typing import Protocol

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import Application
from ...models import state_name


class ISimControl(Protocol):
    async def start(self) -> None: ...

    async def stop(self) -> None: ...


class StatusResponse(BaseModel):
    status: str


class SessionResponse(BaseModel):
    address: str
    state: str


class SequenceResponse(BaseModel):
    last_sequence: int


def create_control_router(app: Application, sim: ISimControl | None = None) -> APIRouter:
    """Create control router. SIM routes answer 404 when no SIM is attached."""
    router = APIRouter(prefix="/api/control", tags=["control"])

    @router.post("/reset", response_model=StatusResponse)
    async def reset_system() -> dict:
        """Drop all sessions and audit events. The protocol counter is kept."""
        try:
            await app.reset()
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
        return {"status": "ok"}

    @router.get("/sessions/{address}", response_model=SessionResponse)
    async def get_session(address: str) -> dict:
        return {"address": address, "state": state_name(app.sessions.get(address))}

    @router.delete("/sessions/{address}", response_model=SessionResponse)
    async def reset_session(address: str) -> dict:
        """Send one citizen back to the main menu, waiting for any message in flight."""
        async with app.sessions.lock(address):
            app.sessions.clear(address)
        return {"address": address, "state": state_name(None)}

    @router.get("/protocols/sequence", response_model=SequenceResponse)
    async def get_sequence() -> dict:
        return {"last_sequence": app.last_sequence}

    @router.post("/sim/{action}", response_model=StatusResponse)
    async def control_sim(action: str) -> dict:
        if sim is None:
            raise HTTPException(status_code=404, detail="SIM not configured")
        if action not in ("start", "stop"):
            raise HTTPException(status_code=404, detail=f"Unknown SIM action: {action}")
        try:
            if action == "start":
                await sim.start()
            else:
                await sim.stop()
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
        return {"status": "ok"}

    return router

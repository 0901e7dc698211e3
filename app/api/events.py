from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.logging import logger
from ..db.store import JsonStore, get_store
from ..schemas import EventUpdateRequest, VerifyCodeRequest
from ..services.gate import GateRole, verify, verify_type


router = APIRouter()


@router.get("/event")
def get_event(store: JsonStore = Depends(get_store)) -> Any:
    """Return the current event with its tasks and rosters."""
    event = store.read_event()
    if event is None:
        return JSONResponse({"error": "Failed to load event data"}, status_code=500)
    return event


@router.post("/event")
def replace_event(payload: EventUpdateRequest, store: JsonStore = Depends(get_store)) -> Any:
    """Overwrite the event wholesale (organizer only)."""
    if not verify(payload.gateCode, GateRole.ORGANIZER):
        logger.warning("Rejected event update: invalid organizer gate code")
        return JSONResponse({"error": "Invalid organizer gate code"}, status_code=401)

    with store.mutation():
        if not store.write_event(payload.eventData):
            return JSONResponse({"error": "Failed to update event"}, status_code=500)

    logger.info(f"Event replaced by organizer: {payload.eventData.get('name', '')}")
    return {"message": "Event updated successfully"}


@router.post("/verify-gate-code")
def verify_gate_code(payload: VerifyCodeRequest) -> Any:
    """Check a gate code without touching any state."""
    role = verify_type(payload.code, payload.type)
    if role == GateRole.VOLUNTEER:
        return {"valid": True, "message": "Volunteer gate code verified"}
    if role == GateRole.ORGANIZER:
        return {"valid": True, "message": "Organizer gate code verified"}
    return JSONResponse({"valid": False, "message": "Invalid gate code"}, status_code=401)

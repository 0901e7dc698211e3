from typing import Any, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.logging import logger
from ..db.store import JsonStore, get_store
from ..schemas import GateCodeRequest, VolunteerSignupRequest
from ..services.gate import GateRole, verify
from ..services.notifications import notify_signup
from ..services.signup import SignupError, add_volunteer, remove_volunteer


router = APIRouter()


@router.post("/volunteer")
def register_volunteer(payload: VolunteerSignupRequest, store: JsonStore = Depends(get_store)) -> Any:
    """Claim a slot on a task, then email the volunteer and the organizer."""
    if not verify(payload.gateCode, GateRole.VOLUNTEER):
        return JSONResponse({"error": "Invalid gate code"}, status_code=401)

    try:
        with store.mutation():
            event = store.read_event()
            if event is None:
                return JSONResponse({"error": "Event data not available"}, status_code=500)
            ledger = store.read_volunteers()

            try:
                volunteer, task = add_volunteer(event, ledger, payload.volunteer)
            except SignupError as e:
                logger.info(f"Signup rejected for task '{payload.volunteer.taskId}': {e.message}")
                return JSONResponse({"error": e.message}, status_code=e.status_code)

            # Two independent writes; neither is rolled back if the other fails.
            event_saved = store.write_event(event)
            ledger_saved = store.write_volunteers(ledger)
            if not (event_saved and ledger_saved):
                return JSONResponse({"error": "Failed to register volunteer"}, status_code=500)

        logger.info(f"✅ {volunteer['name']} signed up for {task.get('name')} (id={volunteer['id']})")

        try:
            notify_signup(event, task, volunteer)
        except Exception as e:
            logger.exception(f"Signup notification error for volunteer {volunteer['id']}: {e}")

        return {"message": "Volunteer registered successfully", "volunteer": volunteer}

    except Exception as e:
        logger.exception(f"Volunteer signup error: {e}")
        return JSONResponse({"error": "Failed to register volunteer"}, status_code=500)


@router.delete("/volunteer/{task_id}/{volunteer_id}")
def delete_volunteer(
    task_id: str,
    volunteer_id: str,
    payload: Optional[GateCodeRequest] = None,
    store: JsonStore = Depends(get_store),
) -> Any:
    """Remove a volunteer from a task roster and from the ledger."""
    gate_code = payload.gateCode if payload else None
    if not verify(gate_code, GateRole.VOLUNTEER):
        return JSONResponse({"error": "Invalid gate code"}, status_code=401)

    try:
        with store.mutation():
            event = store.read_event()
            if event is None:
                return JSONResponse({"error": "Failed to remove volunteer"}, status_code=500)
            ledger = store.read_volunteers()

            updated_ledger = remove_volunteer(event, ledger, task_id, volunteer_id)

            event_saved = store.write_event(event)
            ledger_saved = store.write_volunteers(updated_ledger)
            if not (event_saved and ledger_saved):
                return JSONResponse({"error": "Failed to remove volunteer"}, status_code=500)

        logger.info(f"Removed volunteer {volunteer_id} from task '{task_id}'")
        return {"message": "Volunteer removed successfully"}

    except Exception as e:
        logger.exception(f"Remove volunteer error: {e}")
        return JSONResponse({"error": "Failed to remove volunteer"}, status_code=500)

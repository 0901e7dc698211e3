from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse

from ..db.store import JsonStore, get_store
from ..services.gate import GateRole, verify
from ..services.signup import find_task


router = APIRouter()


def _unauthorized() -> JSONResponse:
    return JSONResponse({"error": "Invalid organizer gate code"}, status_code=401)


@router.get("/volunteers")
def get_volunteers(
    x_gate_code: Optional[str] = Header(None),
    store: JsonStore = Depends(get_store),
) -> Any:
    """Get the volunteer ledger, newest signup first."""
    if not verify(x_gate_code, GateRole.ORGANIZER):
        return _unauthorized()

    ledger = store.read_volunteers()
    return sorted(ledger, key=lambda entry: entry.get("signupTime") or "", reverse=True)


@router.get("/volunteers/{task_id}")
def get_task_volunteers(
    task_id: str,
    x_gate_code: Optional[str] = Header(None),
    store: JsonStore = Depends(get_store),
) -> Any:
    """Get ledger entries for a single task."""
    if not verify(x_gate_code, GateRole.ORGANIZER):
        return _unauthorized()

    event = store.read_event()
    if event is None:
        return JSONResponse({"error": "Failed to load event data"}, status_code=500)
    if find_task(event, task_id) is None:
        return JSONResponse({"error": "Task not found"}, status_code=404)

    return [entry for entry in store.read_volunteers() if entry.get("taskId") == task_id]


@router.get("/summary")
def get_summary(
    x_gate_code: Optional[str] = Header(None),
    store: JsonStore = Depends(get_store),
) -> Any:
    """Get fill levels per task and overall."""
    if not verify(x_gate_code, GateRole.ORGANIZER):
        return _unauthorized()

    event = store.read_event()
    if event is None:
        return JSONResponse({"error": "Failed to load event data"}, status_code=500)

    tasks: List[Dict[str, Any]] = []
    for task in event.get("tasks") or []:
        needed = int(task.get("needed") or 0)
        filled = len(task.get("volunteers") or [])
        tasks.append({
            "id": task.get("id"),
            "name": task.get("name"),
            "needed": needed,
            "filled": filled,
            "open": max(needed - filled, 0),
        })

    return {
        "event_id": event.get("id"),
        "event_name": event.get("name"),
        "tasks": tasks,
        "total_needed": sum(t["needed"] for t in tasks),
        "total_filled": sum(t["filled"] for t in tasks),
        "total_open": sum(t["open"] for t in tasks),
        "ledger_entries": len(store.read_volunteers()),
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }

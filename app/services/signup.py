import time
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..db.models import LedgerEntry, Volunteer
from ..schemas import VolunteerSignup


class SignupError(Exception):
    status_code = 400
    message = "Signup rejected"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class TaskNotFoundError(SignupError):
    message = "Invalid task selected"


class TaskFullError(SignupError):
    message = "This task is already full"


def find_task(event: Dict[str, Any], task_id: str) -> Optional[Dict[str, Any]]:
    for task in event.get("tasks") or []:
        if task.get("id") == task_id:
            return task
    return None


def task_is_full(task: Dict[str, Any]) -> bool:
    return len(task.get("volunteers") or []) >= int(task.get("needed") or 0)


def generate_volunteer_id(taken: Iterable[str], now_ms: Optional[int] = None) -> str:
    """Millisecond timestamp id, bumped past any id already in use."""
    used = set(taken)
    candidate = now_ms if now_ms is not None else int(time.time() * 1000)
    while str(candidate) in used:
        candidate += 1
    return str(candidate)


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _ids_in_use(event: Dict[str, Any], ledger: List[Dict[str, Any]]) -> List[str]:
    ids = [str(entry.get("id")) for entry in ledger]
    for task in event.get("tasks") or []:
        ids.extend(str(v.get("id")) for v in task.get("volunteers") or [])
    return ids


def add_volunteer(
    event: Dict[str, Any],
    ledger: List[Dict[str, Any]],
    signup: VolunteerSignup,
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Append a new volunteer to its task and to the ledger.

    Both documents are mutated in place. Returns the stored volunteer and the
    task it joined. Raises TaskNotFoundError or TaskFullError and leaves both
    documents untouched when the signup cannot be accepted.
    """
    task = find_task(event, signup.taskId)
    if task is None:
        raise TaskNotFoundError()
    if task_is_full(task):
        raise TaskFullError()

    volunteer = Volunteer(
        id=generate_volunteer_id(_ids_in_use(event, ledger)),
        name=signup.name,
        email=signup.email,
        phone=signup.phone or "",
        notes=signup.notes or "",
        signupTime=_iso_now(),
    ).model_dump()

    entry = LedgerEntry(**volunteer, taskId=signup.taskId, taskName=task.get("name", "")).model_dump()

    task.setdefault("volunteers", []).append(volunteer)
    ledger.append(entry)
    return volunteer, task


def remove_volunteer(
    event: Dict[str, Any],
    ledger: List[Dict[str, Any]],
    task_id: str,
    volunteer_id: str,
) -> List[Dict[str, Any]]:
    """Drop a volunteer from its task and from the ledger.

    An unknown task id leaves the event alone; the ledger is filtered by
    volunteer id regardless. Returns the filtered ledger.
    """
    task = find_task(event, task_id)
    if task is not None:
        task["volunteers"] = [v for v in task.get("volunteers") or [] if v.get("id") != volunteer_id]

    return [entry for entry in ledger if entry.get("id") != volunteer_id]

import hmac
from enum import Enum
from typing import Any, Optional

from ..core.config import settings


class GateRole(str, Enum):
    VOLUNTEER = "volunteer"
    ORGANIZER = "organizer"


def secret_for(role: GateRole) -> str:
    if role == GateRole.ORGANIZER:
        return settings.organizer_gate_code
    return settings.volunteer_gate_code


def verify(code: Any, role: GateRole) -> bool:
    """Return True when code matches the shared secret for role."""
    if not isinstance(code, str):
        return False
    return hmac.compare_digest(code.encode("utf-8"), secret_for(role).encode("utf-8"))


def verify_type(code: Any, type_name: Any) -> Optional[GateRole]:
    """Check a code against a role given by name; returns the role on success."""
    try:
        role = GateRole(type_name)
    except (TypeError, ValueError):
        return None
    return role if verify(code, role) else None

"""
Request bodies for the signup API.

Field names follow the JSON the browser sends (camelCase).
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class GateCodeRequest(BaseModel):
    # Any JSON value is accepted; non-strings fail the gate check with 401.
    gateCode: Any = Field(None, description="Shared gate code for the caller's role")


class EventUpdateRequest(GateCodeRequest):
    eventData: Dict[str, Any] = Field(..., description="Replacement event document, stored as given")


class VolunteerSignup(BaseModel):
    name: str = Field(..., description="Volunteer's full name")
    email: str = Field(..., description="Address for the thank-you email")
    phone: Optional[str] = Field(None, description="Contact phone")
    notes: Optional[str] = Field(None, description="Free-form notes for the organizer")
    taskId: str = Field(..., description="Id of the task being claimed")

    @field_validator("name", "email")
    @classmethod
    def _required_text(cls, value: str) -> str:
        cleaned = (value or "").strip()
        if not cleaned:
            raise ValueError("must not be blank")
        return cleaned


class VolunteerSignupRequest(GateCodeRequest):
    volunteer: VolunteerSignup


class VerifyCodeRequest(BaseModel):
    code: Any = None
    type: Any = Field(None, description="'volunteer' or 'organizer'")

# jobboard/schemas/application.py

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from jobboard.schemas.common import CamelModel, require_text

UNKNOWN_POSITION = "Unknown Position"


class ApplicationStatus(str, Enum):
    """Review states. Any state can move to any other."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


_REQUIRED_MESSAGES = {
    "job_id": "Job ID is required",
    "first_name": "First name is required",
    "last_name": "Last name is required",
    "phone": "Phone is required",
    "cover_letter": "Cover letter is required",
}


# Schema for a public submission (POST /api/applications)
class ApplicationCreate(CamelModel):
    job_id: str
    first_name: str
    last_name: str
    email: EmailStr
    phone: str
    linkedin: Optional[str] = None
    portfolio: Optional[str] = None
    resume_url: Optional[str] = None
    cover_letter: str
    availability: Optional[str] = None
    salary: Optional[str] = None

    @field_validator("job_id", "first_name", "last_name", "phone", "cover_letter", mode="before")
    @classmethod
    def _required_text(cls, value, info):
        return require_text(value, _REQUIRED_MESSAGES[info.field_name])


class ApplicationStatusUpdate(CamelModel):
    status: Optional[ApplicationStatus] = Field(default=None, validate_default=True)

    @field_validator("status", mode="before")
    @classmethod
    def _known_status(cls, value):
        allowed = {s.value for s in ApplicationStatus}
        if not isinstance(value, str) or value not in allowed:
            raise ValueError("Invalid status")
        return value


# Schema for an application response
class ApplicationResponse(CamelModel):
    id: str
    job_id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    linkedin: Optional[str] = None
    portfolio: Optional[str] = None
    resume_url: Optional[str] = None
    cover_letter: str
    availability: Optional[str] = None
    salary: Optional[str] = None
    status: ApplicationStatus
    created_at: datetime
    updated_at: Optional[datetime] = None


# Admin views also carry the title of the job the application points at
class AdminApplicationResponse(ApplicationResponse):
    job_title: str = UNKNOWN_POSITION

# jobboard/schemas/job.py

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import field_validator

from jobboard.schemas.common import CamelModel, require_text


class JobType(str, Enum):
    """Employment types a posting can advertise."""
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


def normalize_skills(value):
    """
    Accepts skills either as a list or as a comma-separated string.
    "React, Node.js, " becomes ["React", "Node.js"].
    """
    if isinstance(value, str):
        return [skill.strip() for skill in value.split(",") if skill.strip()]
    return value


_REQUIRED_MESSAGES = {
    "title": "Title is required",
    "company": "Company is required",
    "location": "Location is required",
    "description": "Description is required",
}


# Schema for creating a job (POST /api/admin/jobs)
class JobCreate(CamelModel):
    title: str
    company: str
    location: str
    type: JobType
    description: str
    salary: Optional[str] = None
    skills: Optional[List[str]] = None
    is_active: bool = True

    @field_validator("title", "company", "location", "description", mode="before")
    @classmethod
    def _required_text(cls, value, info):
        return require_text(value, _REQUIRED_MESSAGES[info.field_name])

    @field_validator("skills", mode="before")
    @classmethod
    def _split_skills(cls, value):
        return normalize_skills(value)


# Schema for a partial update (PUT /api/admin/jobs/{id}); only sent fields apply
class JobUpdate(CamelModel):
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    type: Optional[JobType] = None
    description: Optional[str] = None
    salary: Optional[str] = None
    skills: Optional[List[str]] = None
    is_active: Optional[bool] = None

    @field_validator("title", "company", "location", "description", mode="before")
    @classmethod
    def _required_text(cls, value, info):
        # Explicit null is rejected the same way as an empty string
        return require_text(value, _REQUIRED_MESSAGES[info.field_name])

    @field_validator("type", "is_active", mode="before")
    @classmethod
    def _not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    @field_validator("skills", mode="before")
    @classmethod
    def _split_skills(cls, value):
        return normalize_skills(value)


# Schema for a job response
class JobResponse(CamelModel):
    id: str
    title: str
    company: str
    location: str
    type: str
    description: str
    salary: Optional[str] = None
    skills: Optional[List[str]] = None
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

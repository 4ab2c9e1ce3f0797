"""Pydantic models for jobs."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class JobStatus(str, Enum):
    """Job status values the UI acts on. Other values are passed through as-is."""

    OPEN = "open"


class Job(BaseModel):
    """A posted work opportunity as read from the backend."""

    id: str
    title: str
    description: str = ""
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    duration: Optional[str] = None
    skills_required: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    status: str = JobStatus.OPEN.value
    proposals_count: int = 0
    created_at: datetime
    client_id: Optional[str] = None
    poster_name: Optional[str] = Field(None, description="Full name of the client who posted the job")

    @field_validator("id", "client_id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return str(value) if value is not None else None

    @field_validator("skills_required", mode="before")
    @classmethod
    def _skills_default(cls, value: Any) -> Any:
        return value or []

    @field_validator("proposals_count", mode="before")
    @classmethod
    def _count_default(cls, value: Any) -> Any:
        return value or 0

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Job":
        """Build a Job from a backend row, flattening the joined poster profile."""
        data = dict(record)
        poster = data.pop("profiles", None)
        if isinstance(poster, dict) and "poster_name" not in data:
            data["poster_name"] = poster.get("full_name")
        return cls.model_validate(data)


class JobDraft(BaseModel):
    """Validated job posting form, ready to be inserted."""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    budget_min: Optional[float] = Field(None, ge=0)
    budget_max: Optional[float] = Field(None, ge=0)
    duration: Optional[str] = None
    skills_required: List[str] = Field(default_factory=list)
    location: str = "Remote"

    def to_insert(self, client_id: str) -> Dict[str, Any]:
        """Row payload for the jobs table."""
        return {
            "client_id": client_id,
            "title": self.title,
            "description": self.description,
            "budget_min": self.budget_min,
            "budget_max": self.budget_max,
            "duration": self.duration,
            "skills_required": list(self.skills_required),
            "location": self.location,
        }

"""Pydantic models for proposals."""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, field_validator


class ProposalStatus(str, Enum):
    """Proposal status set by this app. The backend may move it to other states."""

    PENDING = "pending"


class Proposal(BaseModel):
    """A freelancer's application to a job."""

    id: str
    job_id: str
    freelancer_id: str
    cover_letter: str
    status: str = ProposalStatus.PENDING.value
    created_at: Optional[datetime] = None

    @field_validator("id", "job_id", "freelancer_id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return str(value) if value is not None else value

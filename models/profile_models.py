"""Pydantic models for identities and freelancer profiles."""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class Identity(BaseModel):
    """Signed-in user as known for the duration of a session."""

    id: str
    email: str
    full_name: Optional[str] = None
    access_token: Optional[str] = Field(
        None, description="Bearer token for row-level-security calls (Supabase only)"
    )
    refresh_token: Optional[str] = Field(None, description="Exchanged for a new access token once it expires")
    expires_at: Optional[int] = Field(None, description="Unix time at which access_token expires")

    @property
    def display_name(self) -> str:
        return self.full_name or self.email


class FreelancerProfile(BaseModel):
    """Public freelancer profile shown on the landing page."""

    id: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    hourly_rate: Optional[float] = None
    location: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return str(value) if value is not None else value

    @field_validator("skills", mode="before")
    @classmethod
    def _skills_default(cls, value: Any) -> Any:
        return value or []

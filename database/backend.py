"""Data and auth gateway interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from core.exceptions import ConfigurationError
from models.job_models import Job, JobDraft
from models.profile_models import FreelancerProfile, Identity
from models.proposal_models import Proposal


class Backend(ABC):
    """
    Read/write and auth surface the pages talk to.

    Implementations translate driver errors into the application taxonomy:
    BackendError for any failed call, UniqueViolationError (code 23505) when
    an insert hits a uniqueness constraint, SessionExpiredError when the
    stored access token is no longer accepted, AuthenticationError for
    rejected credentials. Rows that cannot be mapped onto the models are
    reported as BackendError too.
    """

    name: str = "backend"

    @abstractmethod
    def select_open_jobs(self, limit: Optional[int] = None) -> List[Job]:
        """Open jobs joined with poster name, newest first."""

    @abstractmethod
    def select_top_freelancers(self, limit: Optional[int] = None) -> List[FreelancerProfile]:
        """Freelancers with a non-null hourly rate, highest rate first."""

    @abstractmethod
    def insert_proposal(
        self, job_id: str, freelancer_id: str, cover_letter: str, status: str
    ) -> Optional[Proposal]:
        """Insert a proposal row. Returns the stored row when the backend reads it back."""

    @abstractmethod
    def insert_job(self, draft: JobDraft, client_id: str) -> Optional[Job]:
        """Insert a job row. Returns the stored row when the backend reads it back."""

    @abstractmethod
    def sign_in(self, email: str, password: str) -> Identity:
        """Authenticate with email and password."""

    @abstractmethod
    def sign_up(
        self, email: str, password: str, full_name: Optional[str] = None, is_freelancer: bool = False
    ) -> Identity:
        """Register a new identity and return it signed in."""

    def refresh_session(self, identity: Identity) -> Identity:
        """Exchange the identity's refresh token for a fresh access token."""
        return identity

    def sign_out(self) -> None:
        """Invalidate backend-side session state, if any."""
        return None

    @abstractmethod
    def ping(self) -> None:
        """Raise BackendError if the backend cannot be reached."""


def create_backend(settings, access_token: Optional[str] = None) -> Backend:
    """
    Build the gateway selected by settings.backend.

    Args:
        settings: Application settings
        access_token: Bearer token of the signed-in user (Supabase only)

    Returns:
        Backend instance

    Raises:
        ConfigurationError: Unknown backend or missing credentials
    """
    name = (settings.backend or "sqlite").lower()
    if name == "sqlite":
        from database.sqlite_backend import SQLiteBackend

        return SQLiteBackend()
    if name == "supabase":
        if not settings.is_supabase_configured:
            raise ConfigurationError(
                "SUPABASE_URL and SUPABASE_ANON_KEY must be set when BACKEND=supabase"
            )
        from database.supabase_backend import SupabaseBackend

        return SupabaseBackend.from_settings(settings, access_token=access_token)
    raise ConfigurationError(f"Unknown backend: {settings.backend}")

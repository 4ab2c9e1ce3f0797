"""Hosted Supabase gateway (PostgREST tables + GoTrue auth)."""

from typing import Any, Callable, Dict, List, Optional

from postgrest.exceptions import APIError
from postgrest.types import ReturnMethod
from supabase import Client, create_client

from constants import ErrorCodes
from core.exceptions import AuthenticationError, BackendError, SessionExpiredError, UniqueViolationError
from core.logger import logger
from database.backend import Backend
from models.job_models import Job, JobDraft, JobStatus
from models.profile_models import FreelancerProfile, Identity
from models.proposal_models import Proposal

JOB_COLUMNS = "*, profiles!jobs_client_id_fkey(full_name)"


def _translate(error: APIError) -> BackendError:
    """Map a PostgREST error onto the application taxonomy."""
    message = error.message or str(error)
    if error.code == ErrorCodes.UNIQUE_VIOLATION:
        return UniqueViolationError(message, code=error.code)
    if error.code == ErrorCodes.JWT_EXPIRED:
        return SessionExpiredError(message, code=error.code)
    return BackendError(message, code=error.code)


def _session_fields(session) -> Dict[str, Any]:
    return {
        "access_token": session.access_token,
        "refresh_token": getattr(session, "refresh_token", None),
        "expires_at": getattr(session, "expires_at", None),
    }


class SupabaseBackend(Backend):
    """Backend talking to a Supabase project through supabase-py."""

    name = "supabase"

    def __init__(self, client: Client):
        self.client = client

    @classmethod
    def from_settings(cls, settings, access_token: Optional[str] = None) -> "SupabaseBackend":
        """
        Create a client for one request.

        When an access token is given, table calls run as that user so the
        project's row-level security policies apply.
        """
        client = create_client(settings.supabase_url, settings.supabase_anon_key)
        if access_token:
            client.postgrest.auth(access_token)
        return cls(client)

    def _execute(self, query) -> Any:
        try:
            return query.execute()
        except APIError as e:
            raise _translate(e) from e
        except Exception as e:
            raise BackendError(str(e)) from e

    @staticmethod
    def _map_rows(rows, build: Callable[[Any], Any]) -> list:
        try:
            return [build(row) for row in rows or []]
        except (TypeError, ValueError) as e:
            raise BackendError(f"Malformed record: {e}") from e

    def select_open_jobs(self, limit: Optional[int] = None) -> List[Job]:
        query = (
            self.client.table("jobs")
            .select(JOB_COLUMNS)
            .eq("status", JobStatus.OPEN.value)
            .order("created_at", desc=True)
        )
        if limit is not None:
            query = query.limit(limit)
        response = self._execute(query)
        return self._map_rows(response.data, Job.from_record)

    def select_top_freelancers(self, limit: Optional[int] = None) -> List[FreelancerProfile]:
        query = (
            self.client.table("profiles")
            .select("*")
            .eq("is_freelancer", True)
            .not_.is_("hourly_rate", "null")
            .order("hourly_rate", desc=True)
        )
        if limit is not None:
            query = query.limit(limit)
        response = self._execute(query)
        return self._map_rows(response.data, FreelancerProfile.model_validate)

    # Inserts do not read the row back: RLS may allow INSERT without SELECT.

    def insert_proposal(
        self, job_id: str, freelancer_id: str, cover_letter: str, status: str
    ) -> Optional[Proposal]:
        self._execute(
            self.client.table("proposals").insert(
                {
                    "job_id": job_id,
                    "freelancer_id": freelancer_id,
                    "cover_letter": cover_letter,
                    "status": status,
                },
                returning=ReturnMethod.minimal,
            )
        )
        return None

    def insert_job(self, draft: JobDraft, client_id: str) -> Optional[Job]:
        self._execute(
            self.client.table("jobs").insert(
                draft.to_insert(client_id), returning=ReturnMethod.minimal
            )
        )
        return None

    def _identity_from_auth(self, response) -> Identity:
        user = response.user
        metadata = getattr(user, "user_metadata", None) or {}
        tokens = _session_fields(response.session) if response.session else {}
        return Identity(
            id=str(user.id),
            email=user.email,
            full_name=metadata.get("full_name"),
            **tokens,
        )

    def sign_in(self, email: str, password: str) -> Identity:
        try:
            response = self.client.auth.sign_in_with_password(
                {"email": email.strip(), "password": password}
            )
        except Exception as e:
            logger.warning(f"Supabase sign-in failed for {email}: {str(e)}")
            raise AuthenticationError(str(e)) from e
        if not response.user or not response.session:
            raise AuthenticationError("Invalid login credentials")
        return self._identity_from_auth(response)

    def sign_up(
        self, email: str, password: str, full_name: Optional[str] = None, is_freelancer: bool = False
    ) -> Identity:
        try:
            response = self.client.auth.sign_up(
                {
                    "email": email.strip(),
                    "password": password,
                    "options": {"data": {"full_name": full_name, "is_freelancer": is_freelancer}},
                }
            )
        except Exception as e:
            logger.warning(f"Supabase sign-up failed for {email}: {str(e)}")
            raise AuthenticationError(str(e)) from e
        if not response.user:
            raise AuthenticationError("Sign up failed")
        if not response.session:
            # Project requires email confirmation before the first sign-in
            raise AuthenticationError("Check your email to confirm your account, then sign in.")
        return self._identity_from_auth(response)

    def refresh_session(self, identity: Identity) -> Identity:
        """
        Trade the refresh token for a new session and authenticate table calls with it.

        Raises:
            AuthenticationError: No refresh token, or GoTrue refused it
        """
        if not identity.refresh_token:
            raise AuthenticationError("Session expired")
        try:
            response = self.client.auth.refresh_session(identity.refresh_token)
        except Exception as e:
            logger.warning(f"Supabase session refresh failed for {identity.email}: {str(e)}")
            raise AuthenticationError(str(e)) from e
        if not response.session:
            raise AuthenticationError("Session expired")
        self.client.postgrest.auth(response.session.access_token)
        return identity.model_copy(update=_session_fields(response.session))

    def sign_out(self) -> None:
        try:
            self.client.auth.sign_out()
        except Exception as e:
            logger.warning(f"Supabase sign-out failed: {str(e)}")

    def ping(self) -> None:
        self._execute(self.client.table("jobs").select("id").limit(1))

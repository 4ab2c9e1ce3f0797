"""Shared helpers for routes: per-request wiring of session, backend and services."""

from flask import current_app, g, session

from config import settings
from database.backend import Backend, create_backend
from services.job_posting import JobPostingService
from services.job_query import JobQueryService
from services.notifications import FlashNotifier, Notifier
from services.proposals import ProposalService
from services.session import SESSION_KEY, SessionProvider
from services.submission import SubmissionTracker

TRACKER_EXTENSION = "submission_tracker"


def get_backend() -> Backend:
    """Backend for the current request, authenticated as the stored identity when possible."""
    if "backend" not in g:
        stored = session.get(SESSION_KEY) or {}
        g.backend = create_backend(settings, access_token=stored.get("access_token"))
    return g.backend


def get_session_provider() -> SessionProvider:
    """Session provider for the current request, with tokens renewed before first use."""
    if "session_provider" not in g:
        provider = SessionProvider(get_backend(), session)
        provider.refresh_if_expired()
        g.session_provider = provider
    return g.session_provider


def get_notifier() -> Notifier:
    if "notifier" not in g:
        g.notifier = FlashNotifier()
    return g.notifier


def get_tracker() -> SubmissionTracker:
    return current_app.extensions[TRACKER_EXTENSION]


def job_query_service() -> JobQueryService:
    return JobQueryService(get_session_provider().backend, get_notifier())


def proposal_service() -> ProposalService:
    return ProposalService(
        get_session_provider().backend, job_query_service(), get_notifier(), get_tracker()
    )


def job_posting_service() -> JobPostingService:
    return JobPostingService(get_session_provider().backend, get_notifier(), get_tracker())

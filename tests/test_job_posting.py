"""Tests for the job posting form."""

import pytest

from core.exceptions import BackendError, SessionExpiredError, ValidationError
from database.jobs import get_open_jobs
from database.sqlite_backend import SQLiteBackend
from models.profile_models import Identity
from services.job_posting import JobPostingService, build_job_draft, parse_budget, parse_skills
from services.submission import SubmissionOutcome, SubmissionTracker

VALID_FORM = {
    "title": "Full-Stack Web Developer",
    "description": "Build a customer portal.",
    "budget_min": "1000",
    "budget_max": "5000",
    "duration": "2-3 months",
    "skills": "React, Node.js",
    "location": "",
}


class RecordingBackend(SQLiteBackend):
    def __init__(self, error=None):
        self.inserted = []
        self.error = error

    def insert_job(self, draft, client_id):
        self.inserted.append((draft, client_id))
        if self.error:
            raise self.error
        return super().insert_job(draft, client_id)


def test_parse_skills_trims_and_drops_empty_entries():
    assert parse_skills(" React, Node.js ,,Express") == ["React", "Node.js", "Express"]


def test_parse_skills_blank_and_duplicates():
    assert parse_skills("") == []
    assert parse_skills(None) == []
    assert parse_skills("React, React ,Vue") == ["React", "Vue"]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1000", 1000.0),
        (" 2500.50 ", 2500.5),
        ("1,000", 1000.0),
        ("0", 0.0),
        ("", None),
        (None, None),
        ("abc", None),
        ("-5", None),
        ("inf", None),
        ("nan", None),
    ],
)
def test_parse_budget(raw, expected):
    assert parse_budget(raw) == expected


def test_build_draft_defaults():
    draft = build_job_draft({"title": " Logo ", "description": " Design a logo "})

    assert draft.title == "Logo"
    assert draft.description == "Design a logo"
    assert draft.location == "Remote"
    assert draft.duration is None
    assert draft.budget_min is None and draft.budget_max is None
    assert draft.skills_required == []


def test_build_draft_invalid_budget_text_is_absent():
    draft = build_job_draft({**VALID_FORM, "budget_min": "lots", "budget_max": "5000"})

    assert draft.budget_min is None
    assert draft.budget_max == 5000.0


@pytest.mark.parametrize("missing", ["title", "description"])
def test_build_draft_requires_title_and_description(missing):
    with pytest.raises(ValidationError) as exc_info:
        build_job_draft({**VALID_FORM, missing: "   "})
    assert exc_info.value.title == "Missing required fields"


def test_build_draft_rejects_inverted_budget_range():
    with pytest.raises(ValidationError) as exc_info:
        build_job_draft({**VALID_FORM, "budget_min": "6000", "budget_max": "5000"})
    assert exc_info.value.title == "Invalid budget"


def test_unauthenticated_post_never_calls_backend(notifier):
    backend = RecordingBackend()

    result = JobPostingService(backend, notifier, SubmissionTracker()).submit(VALID_FORM, None)

    assert result.outcome == SubmissionOutcome.AUTH_REQUIRED
    assert backend.inserted == []
    assert notifier.titles == ["Authentication required"]


def test_invalid_form_never_calls_backend(notifier):
    backend = RecordingBackend()
    identity = Identity(id="client-1", email="c@test.com")

    result = JobPostingService(backend, notifier, SubmissionTracker()).submit(
        {**VALID_FORM, "title": ""}, identity
    )

    assert result.outcome == SubmissionOutcome.INVALID
    assert backend.inserted == []
    assert notifier.titles == ["Missing required fields"]


def test_backend_error_message_is_passed_through(notifier):
    backend = RecordingBackend(error=BackendError('new row violates row-level security policy for table "jobs"'))
    identity = Identity(id="client-1", email="c@test.com")

    result = JobPostingService(backend, notifier, SubmissionTracker()).submit(VALID_FORM, identity)

    assert result.outcome == SubmissionOutcome.FAILED
    assert notifier.titles == ["Error posting job"]
    assert notifier.notifications[0].description == 'new row violates row-level security policy for table "jobs"'


def test_successful_post_is_listed_as_open(client_identity, notifier):
    service = JobPostingService(SQLiteBackend(), notifier, SubmissionTracker())

    result = service.submit({**VALID_FORM, "skills": " React, Node.js ,,Express"}, client_identity)

    assert result.ok
    assert notifier.titles == ["Job posted successfully!"]
    jobs = get_open_jobs()
    assert [job.id for job in jobs] == [result.record.id]
    job = jobs[0]
    assert job.client_id == client_identity.id
    assert job.skills_required == ["React", "Node.js", "Express"]
    assert job.location == "Remote"
    assert job.budget_min == 1000 and job.budget_max == 5000
    assert job.status == "open"
    assert job.proposals_count == 0


def test_concurrent_post_is_refused_with_notification(notifier):
    backend = RecordingBackend()
    tracker = SubmissionTracker()
    identity = Identity(id="client-1", email="c@test.com")
    assert tracker.begin(("job", identity.id))

    result = JobPostingService(backend, notifier, tracker).submit(VALID_FORM, identity)

    assert result.outcome == SubmissionOutcome.IN_PROGRESS
    assert backend.inserted == []
    assert notifier.titles == ["Posting..."]


def test_expired_session_asks_for_sign_in(notifier):
    backend = RecordingBackend(error=SessionExpiredError("JWT expired", code="PGRST301"))
    identity = Identity(id="client-1", email="c@test.com")

    result = JobPostingService(backend, notifier, SubmissionTracker()).submit(VALID_FORM, identity)

    assert result.outcome == SubmissionOutcome.AUTH_REQUIRED
    assert notifier.titles == ["Session expired"]

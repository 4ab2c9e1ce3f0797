"""Job posting form: parsing, validation and insert."""

import math
from typing import List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from constants import Defaults, Messages
from core.exceptions import BackendError, SessionExpiredError, ValidationError
from core.logger import logger
from database.backend import Backend
from models.job_models import JobDraft
from models.profile_models import Identity
from services.notifications import Notifier
from services.submission import SubmissionOutcome, SubmissionResult, SubmissionTracker


def parse_budget(raw: Optional[str]) -> Optional[float]:
    """Parse a budget field. Blank, invalid, negative or non-finite input counts as absent."""
    if raw is None:
        return None
    text = str(raw).strip().replace(",", "")
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def parse_skills(raw: Optional[str]) -> List[str]:
    """Split comma-separated skills, trimming and dropping empty and repeated entries."""
    skills: List[str] = []
    for part in (raw or "").split(","):
        skill = part.strip()
        if skill and skill not in skills:
            skills.append(skill)
    return skills


def build_job_draft(form: Mapping[str, str]) -> JobDraft:
    """
    Turn raw form fields into a JobDraft.

    Raises:
        ValidationError: Missing title/description or inverted budget range
    """
    title = (form.get("title") or "").strip()
    description = (form.get("description") or "").strip()
    if not title or not description:
        raise ValidationError(Messages.MISSING_FIELDS[1], title=Messages.MISSING_FIELDS[0])

    budget_min = parse_budget(form.get("budget_min"))
    budget_max = parse_budget(form.get("budget_max"))
    # JobDraft checks each bound on its own; the range is checked here
    if budget_min is not None and budget_max is not None and budget_min > budget_max:
        raise ValidationError(Messages.BUDGET_RANGE[1], title=Messages.BUDGET_RANGE[0])

    try:
        return JobDraft(
            title=title,
            description=description,
            budget_min=budget_min,
            budget_max=budget_max,
            duration=(form.get("duration") or "").strip() or None,
            skills_required=parse_skills(form.get("skills")),
            location=(form.get("location") or "").strip() or Defaults.LOCATION,
        )
    except PydanticValidationError as e:
        raise ValidationError(str(e)) from e


class JobPostingService:
    """Publish a new job for the signed-in client."""

    def __init__(self, backend: Backend, notifier: Notifier, tracker: SubmissionTracker):
        self.backend = backend
        self.notifier = notifier
        self.tracker = tracker

    def submit(self, form: Mapping[str, str], identity: Optional[Identity]) -> SubmissionResult:
        if identity is None:
            title, description = Messages.AUTH_REQUIRED_POST
            self.notifier.error(title, description)
            return SubmissionResult(SubmissionOutcome.AUTH_REQUIRED, message=description)

        try:
            draft = build_job_draft(form)
        except ValidationError as e:
            self.notifier.error(e.title, e.message)
            return SubmissionResult(SubmissionOutcome.INVALID, message=e.message)

        key = ("job", identity.id)
        with self.tracker.submitting(key) as acquired:
            if not acquired:
                title, description = Messages.POST_JOB_IN_PROGRESS
                self.notifier.error(title, description)
                return SubmissionResult(SubmissionOutcome.IN_PROGRESS, message=description)
            try:
                job = self.backend.insert_job(draft, client_id=identity.id)
            except SessionExpiredError as e:
                logger.warning(f"Session expired while posting job for {identity.id}: {e.message}")
                title, description = Messages.SESSION_EXPIRED
                self.notifier.error(title, description)
                return SubmissionResult(SubmissionOutcome.AUTH_REQUIRED, message=description)
            except BackendError as e:
                logger.error(f"Error posting job for {identity.id}: {e.message}")
                self.notifier.error(Messages.POST_JOB_ERROR, e.message)
                return SubmissionResult(SubmissionOutcome.FAILED, message=e.message)

        logger.info(f"Job posted: {draft.title} by {identity.id}")
        self.notifier.success(Messages.POST_JOB_SUCCESS)
        return SubmissionResult(SubmissionOutcome.SUCCEEDED, record=job)

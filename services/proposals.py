"""Proposal submission service."""

from typing import Optional, Tuple

from constants import Defaults, Messages
from core.exceptions import BackendError, SessionExpiredError, UniqueViolationError
from core.logger import logger
from database.backend import Backend
from models.profile_models import Identity
from models.proposal_models import ProposalStatus
from services.job_query import JobQueryService
from services.notifications import Notifier
from services.submission import SubmissionOutcome, SubmissionResult, SubmissionTracker


def submission_key(identity: Identity, job_id: str) -> Tuple[str, str, str]:
    """Tracker key of a proposal submission."""
    return ("proposal", identity.id, str(job_id))


class ProposalService:
    """Apply to a job on behalf of the signed-in freelancer."""

    def __init__(
        self,
        backend: Backend,
        job_query: JobQueryService,
        notifier: Notifier,
        tracker: SubmissionTracker,
    ):
        self.backend = backend
        self.job_query = job_query
        self.notifier = notifier
        self.tracker = tracker

    def is_applying(self, identity: Optional[Identity], job_id: str) -> bool:
        """True while a submission for this job by this identity is in flight."""
        if identity is None:
            return False
        return self.tracker.is_submitting(submission_key(identity, job_id))

    def submit(self, job_id: str, identity: Optional[Identity]) -> SubmissionResult:
        """
        Submit a proposal with the default cover letter.

        Args:
            job_id: Job to apply to
            identity: Signed-in identity, or None

        Returns:
            SubmissionResult; on success `jobs` holds the refreshed open jobs
        """
        if identity is None:
            title, description = Messages.AUTH_REQUIRED_APPLY
            self.notifier.error(title, description)
            return SubmissionResult(SubmissionOutcome.AUTH_REQUIRED, message=description)

        key = submission_key(identity, job_id)
        with self.tracker.submitting(key) as acquired:
            if not acquired:
                title, description = Messages.APPLY_IN_PROGRESS
                self.notifier.error(title, description)
                return SubmissionResult(SubmissionOutcome.IN_PROGRESS, message=description)
            return self._insert_and_refresh(job_id, identity)

    def _insert_and_refresh(self, job_id: str, identity: Identity) -> SubmissionResult:
        logger.info(f"Submitting proposal: job={job_id} freelancer={identity.id}")
        try:
            proposal = self.backend.insert_proposal(
                job_id=job_id,
                freelancer_id=identity.id,
                cover_letter=Defaults.COVER_LETTER,
                status=ProposalStatus.PENDING.value,
            )
        except UniqueViolationError:
            logger.info(f"Duplicate proposal rejected: job={job_id} freelancer={identity.id}")
            title, description = Messages.ALREADY_APPLIED
            self.notifier.error(title, description)
            return SubmissionResult(SubmissionOutcome.ALREADY_APPLIED, message=description)
        except SessionExpiredError as e:
            logger.warning(f"Session expired while applying to job {job_id}: {e.message}")
            title, description = Messages.SESSION_EXPIRED
            self.notifier.error(title, description)
            return SubmissionResult(SubmissionOutcome.AUTH_REQUIRED, message=description)
        except BackendError as e:
            logger.error(f"Error applying to job {job_id}: {e.message}")
            self.notifier.error(Messages.APPLY_ERROR, e.message)
            return SubmissionResult(SubmissionOutcome.FAILED, message=e.message)

        self.notifier.success(Messages.APPLY_SUCCESS)
        jobs = self.job_query.fetch_open_jobs()
        return SubmissionResult(SubmissionOutcome.SUCCEEDED, record=proposal, jobs=jobs)

"""Job query service: reads of the job and freelancer collections."""

from typing import List, Optional

from constants import Messages
from core.exceptions import BackendError, SessionExpiredError
from core.logger import logger
from database.backend import Backend
from models.job_models import Job
from models.profile_models import FreelancerProfile
from services.notifications import Notifier


class JobQueryService:
    """Read-side of the marketplace. Never raises past its boundary."""

    def __init__(self, backend: Backend, notifier: Notifier):
        self.backend = backend
        self.notifier = notifier
        # Last error swallowed at the boundary, for callers that react to it
        self.last_error: Optional[BackendError] = None

    def fetch_open_jobs(self, limit: Optional[int] = None, report_errors: bool = True) -> List[Job]:
        """
        Fetch open jobs, newest first.

        Args:
            limit: Optional maximum number of jobs (featured subset)
            report_errors: Notify the user on failure; otherwise only log

        Returns:
            List of open jobs, empty on failure
        """
        try:
            jobs = self.backend.select_open_jobs(limit=limit)
        except SessionExpiredError as e:
            logger.warning(f"Session expired while fetching jobs: {e.message}")
            self.last_error = e
            if report_errors:
                self.notifier.error(*Messages.SESSION_EXPIRED)
            return []
        except BackendError as e:
            logger.error(f"Error fetching jobs: {e.message}")
            self.last_error = e
            if report_errors:
                self.notifier.error(Messages.LOAD_JOBS_ERROR, e.message)
            return []
        logger.debug(f"Fetched {len(jobs)} open jobs (limit={limit})")
        return jobs

    def fetch_top_freelancers(self, limit: Optional[int] = None) -> List[FreelancerProfile]:
        """Freelancers with the highest hourly rate; empty on failure."""
        try:
            return self.backend.select_top_freelancers(limit=limit)
        except BackendError as e:
            logger.error(f"Error fetching freelancers: {e.message}")
            self.last_error = e
            return []

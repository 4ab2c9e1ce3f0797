"""Services package."""
from services.job_filter import filter_jobs
from services.job_posting import JobPostingService
from services.job_query import JobQueryService
from services.proposals import ProposalService
from services.session import SessionProvider

__all__ = ["filter_jobs", "JobPostingService", "JobQueryService", "ProposalService", "SessionProvider"]

"""Models package."""

from models.job_models import Job, JobDraft, JobStatus
from models.profile_models import FreelancerProfile, Identity
from models.proposal_models import Proposal, ProposalStatus

__all__ = [
    "Job",
    "JobDraft",
    "JobStatus",
    "FreelancerProfile",
    "Identity",
    "Proposal",
    "ProposalStatus",
]

"""Local database and backend gateways."""
from .db import init_db, get_db, clear_database
from .backend import Backend, create_backend
from .jobs import get_open_jobs, get_job_by_id, create_job
from .profiles import create_profile, get_profile_by_id, get_profile_by_email, get_top_freelancers
from .proposals import create_proposal, get_proposal_by_id, get_proposals_for_job

__all__ = [
    'init_db', 'get_db', 'clear_database', 'Backend', 'create_backend',
    'get_open_jobs', 'get_job_by_id', 'create_job',
    'create_profile', 'get_profile_by_id', 'get_profile_by_email', 'get_top_freelancers',
    'create_proposal', 'get_proposal_by_id', 'get_proposals_for_job',
]

"""Client-side job search."""

from typing import List, Sequence

from models.job_models import Job


def job_matches(job: Job, query: str) -> bool:
    """Case-insensitive substring match on title, description or any required skill."""
    needle = query.lower()
    if needle in job.title.lower() or needle in (job.description or "").lower():
        return True
    return any(needle in skill.lower() for skill in job.skills_required)


def filter_jobs(jobs: Sequence[Job], query: str) -> List[Job]:
    """Filter already-fetched jobs. An empty query returns every job in its original order."""
    if not query:
        return list(jobs)
    return [job for job in jobs if job_matches(job, query)]

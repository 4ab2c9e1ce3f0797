"""Job CRUD operations."""

import json
import uuid
from typing import Any, Dict, List, Optional

from database.db import get_db
from models.job_models import Job, JobStatus

_JOB_SELECT = """
    SELECT jobs.*, profiles.full_name AS poster_name
    FROM jobs
    LEFT JOIN profiles ON profiles.id = jobs.client_id
"""


def _row_to_job(row) -> Job:
    data = dict(row)
    data["skills_required"] = json.loads(data["skills_required"]) if data["skills_required"] else []
    return Job.from_record(data)


def get_open_jobs(limit: Optional[int] = None) -> List[Job]:
    """Open jobs with poster name, newest first."""
    # rowid breaks ties between jobs created within the same millisecond
    query = _JOB_SELECT + " WHERE jobs.status = ? ORDER BY jobs.created_at DESC, jobs.rowid DESC"
    params: list = [JobStatus.OPEN.value]
    if limit is not None:
        query += " LIMIT ?"
        params.append(limit)
    conn = get_db()
    cursor = conn.cursor()
    cursor.execute(query, params)
    rows = cursor.fetchall()
    conn.close()
    return [_row_to_job(row) for row in rows]


def get_job_by_id(job_id: str) -> Optional[Job]:
    """Get job by ID regardless of status."""
    conn = get_db()
    cursor = conn.cursor()
    cursor.execute(_JOB_SELECT + " WHERE jobs.id = ?", (job_id,))
    row = cursor.fetchone()
    conn.close()
    if not row:
        return None
    return _row_to_job(row)


def create_job(
    client_id: str,
    title: str,
    description: str,
    budget_min: Optional[float] = None,
    budget_max: Optional[float] = None,
    duration: Optional[str] = None,
    skills_required: Optional[List[str]] = None,
    location: Optional[str] = None,
    status: str = JobStatus.OPEN.value,
    created_at: Optional[str] = None,
) -> Job:
    """Create a new job."""
    job_id = str(uuid.uuid4())
    columns = [
        "id", "client_id", "title", "description", "budget_min", "budget_max",
        "duration", "skills_required", "location", "status",
    ]
    values: List[Any] = [
        job_id, client_id, title, description, budget_min, budget_max,
        duration, json.dumps(skills_required or []), location, status,
    ]
    if created_at is not None:
        columns.append("created_at")
        values.append(created_at)
    conn = get_db()
    try:
        conn.execute(
            f"INSERT INTO jobs ({', '.join(columns)}) VALUES ({', '.join('?' for _ in columns)})",
            values,
        )
        conn.commit()
    finally:
        conn.close()
    return get_job_by_id(job_id)


def insert_job_record(record: Dict[str, Any]) -> Job:
    """Insert a job from a row payload (see JobDraft.to_insert)."""
    return create_job(**record)

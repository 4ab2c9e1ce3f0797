"""Proposal CRUD operations."""

import uuid
from typing import List, Optional

from database.db import get_db
from models.proposal_models import Proposal, ProposalStatus


def _row_to_proposal(row) -> Proposal:
    return Proposal(
        id=row["id"],
        job_id=row["job_id"],
        freelancer_id=row["freelancer_id"],
        cover_letter=row["cover_letter"],
        status=row["status"],
        created_at=row["created_at"],
    )


def create_proposal(
    job_id: str,
    freelancer_id: str,
    cover_letter: str,
    status: str = ProposalStatus.PENDING.value,
) -> Proposal:
    """Create a new proposal. Raises sqlite3.IntegrityError on a duplicate (job, freelancer)."""
    proposal_id = str(uuid.uuid4())
    conn = get_db()
    try:
        conn.execute(
            """
            INSERT INTO proposals (id, job_id, freelancer_id, cover_letter, status)
            VALUES (?, ?, ?, ?, ?)
        """,
            (proposal_id, job_id, freelancer_id, cover_letter, status),
        )
        conn.commit()
    finally:
        conn.close()
    return get_proposal_by_id(proposal_id)


def get_proposal_by_id(proposal_id: str) -> Optional[Proposal]:
    """Get proposal by ID."""
    conn = get_db()
    cursor = conn.cursor()
    cursor.execute("SELECT * FROM proposals WHERE id = ?", (proposal_id,))
    row = cursor.fetchone()
    conn.close()
    if not row:
        return None
    return _row_to_proposal(row)


def get_proposals_for_job(job_id: str) -> List[Proposal]:
    """All proposals for a job, oldest first."""
    conn = get_db()
    cursor = conn.cursor()
    cursor.execute(
        "SELECT * FROM proposals WHERE job_id = ? ORDER BY created_at ASC", (job_id,)
    )
    rows = cursor.fetchall()
    conn.close()
    return [_row_to_proposal(row) for row in rows]

"""Profile CRUD operations."""

import json
import uuid
from typing import Any, Dict, List, Optional

from database.db import get_db
from models.profile_models import FreelancerProfile


def _row_to_freelancer(row) -> FreelancerProfile:
    return FreelancerProfile(
        id=row["id"],
        full_name=row["full_name"],
        avatar_url=row["avatar_url"],
        bio=row["bio"],
        skills=json.loads(row["skills"]) if row["skills"] else [],
        hourly_rate=row["hourly_rate"],
        location=row["location"],
    )


def create_profile(
    email: str,
    password_hash: Optional[str] = None,
    full_name: Optional[str] = None,
    is_freelancer: bool = False,
    bio: Optional[str] = None,
    skills: Optional[List[str]] = None,
    hourly_rate: Optional[float] = None,
    location: Optional[str] = None,
    avatar_url: Optional[str] = None,
) -> Dict[str, Any]:
    """Create a new profile and return its row."""
    profile_id = str(uuid.uuid4())
    conn = get_db()
    try:
        conn.execute(
            """
            INSERT INTO profiles (id, email, password_hash, full_name, is_freelancer,
                                  bio, skills, hourly_rate, location, avatar_url)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
            (
                profile_id,
                email,
                password_hash,
                full_name,
                1 if is_freelancer else 0,
                bio,
                json.dumps(skills) if skills is not None else None,
                hourly_rate,
                location,
                avatar_url,
            ),
        )
        conn.commit()
    finally:
        conn.close()
    return get_profile_by_id(profile_id)


def get_profile_by_id(profile_id: str) -> Optional[Dict[str, Any]]:
    """Get profile row by ID."""
    conn = get_db()
    cursor = conn.cursor()
    cursor.execute("SELECT * FROM profiles WHERE id = ?", (profile_id,))
    row = cursor.fetchone()
    conn.close()
    return dict(row) if row else None


def get_profile_by_email(email: str) -> Optional[Dict[str, Any]]:
    """Get profile row by email (case-insensitive)."""
    conn = get_db()
    cursor = conn.cursor()
    cursor.execute("SELECT * FROM profiles WHERE lower(email) = lower(?)", (email,))
    row = cursor.fetchone()
    conn.close()
    return dict(row) if row else None


def get_top_freelancers(limit: Optional[int] = None) -> List[FreelancerProfile]:
    """Freelancers with an hourly rate, highest rate first."""
    query = """
        SELECT * FROM profiles
        WHERE is_freelancer = 1 AND hourly_rate IS NOT NULL
        ORDER BY hourly_rate DESC
    """
    params: tuple = ()
    if limit is not None:
        query += " LIMIT ?"
        params = (limit,)
    conn = get_db()
    cursor = conn.cursor()
    cursor.execute(query, params)
    rows = cursor.fetchall()
    conn.close()
    return [_row_to_freelancer(row) for row in rows]

"""Local SQLite gateway used for development, demos and tests."""

import sqlite3
from typing import List, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from constants import ErrorCodes
from core.exceptions import AuthenticationError, BackendError, UniqueViolationError
from core.logger import logger
from database.backend import Backend
from database.db import get_db
from database.jobs import get_open_jobs, insert_job_record
from database.profiles import create_profile, get_profile_by_email, get_top_freelancers
from database.proposals import create_proposal
from models.job_models import Job, JobDraft
from models.profile_models import FreelancerProfile, Identity
from models.proposal_models import Proposal

FOREIGN_KEY_VIOLATION = "23503"


def _translate(error: sqlite3.Error) -> BackendError:
    """Map a sqlite3 error onto the Postgres-style codes the app reacts to."""
    message = str(error)
    if isinstance(error, sqlite3.IntegrityError):
        if "UNIQUE constraint failed" in message:
            return UniqueViolationError(message, code=ErrorCodes.UNIQUE_VIOLATION)
        if "FOREIGN KEY constraint failed" in message:
            return BackendError(message, code=FOREIGN_KEY_VIOLATION)
    return BackendError(message)


def _malformed(error: ValueError) -> BackendError:
    """A stored row that does not map onto the models (bad JSON, missing columns)."""
    return BackendError(f"Malformed record: {error}")


class SQLiteBackend(Backend):
    """Backend backed by the local database module."""

    name = "sqlite"

    def select_open_jobs(self, limit: Optional[int] = None) -> List[Job]:
        try:
            return get_open_jobs(limit=limit)
        except sqlite3.Error as e:
            raise _translate(e) from e
        except ValueError as e:
            raise _malformed(e) from e

    def select_top_freelancers(self, limit: Optional[int] = None) -> List[FreelancerProfile]:
        try:
            return get_top_freelancers(limit=limit)
        except sqlite3.Error as e:
            raise _translate(e) from e
        except ValueError as e:
            raise _malformed(e) from e

    def insert_proposal(
        self, job_id: str, freelancer_id: str, cover_letter: str, status: str
    ) -> Proposal:
        try:
            return create_proposal(
                job_id=job_id,
                freelancer_id=freelancer_id,
                cover_letter=cover_letter,
                status=status,
            )
        except sqlite3.Error as e:
            raise _translate(e) from e
        except ValueError as e:
            raise _malformed(e) from e

    def insert_job(self, draft: JobDraft, client_id: str) -> Job:
        try:
            return insert_job_record(draft.to_insert(client_id))
        except sqlite3.Error as e:
            raise _translate(e) from e
        except ValueError as e:
            raise _malformed(e) from e

    def sign_in(self, email: str, password: str) -> Identity:
        try:
            row = get_profile_by_email(email.strip())
        except sqlite3.Error as e:
            raise _translate(e) from e
        if not row or not row["password_hash"] or not check_password_hash(row["password_hash"], password):
            raise AuthenticationError("Invalid login credentials")
        return Identity(id=row["id"], email=row["email"], full_name=row["full_name"])

    def sign_up(
        self, email: str, password: str, full_name: Optional[str] = None, is_freelancer: bool = False
    ) -> Identity:
        email = email.strip()
        if not email or not password:
            raise AuthenticationError("Email and password are required")
        try:
            row = create_profile(
                email=email,
                password_hash=generate_password_hash(password),
                full_name=full_name or None,
                is_freelancer=is_freelancer,
            )
        except sqlite3.IntegrityError as e:
            raise AuthenticationError("User already registered") from e
        except sqlite3.Error as e:
            raise _translate(e) from e
        logger.info(f"Registered local profile {row['id']} ({email})")
        return Identity(id=row["id"], email=row["email"], full_name=row["full_name"])

    def ping(self) -> None:
        try:
            conn = get_db()
            try:
                conn.execute("SELECT 1").fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise _translate(e) from e

"""Database connection and initialization."""

import sqlite3
from pathlib import Path

from config import settings
from core.logger import logger

# ISO-8601 UTC with milliseconds, parseable by pydantic
NOW_SQL = "(strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))"


def get_db_path() -> Path:
    """Get database file path."""
    db_path = Path(settings.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return db_path


def get_db() -> sqlite3.Connection:
    """Get database connection."""
    db_path = get_db_path()
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


def init_db():
    """Initialize database with tables."""
    db_path = get_db_path()
    conn = get_db()
    cursor = conn.cursor()

    cursor.execute(
        f"""
        CREATE TABLE IF NOT EXISTS profiles (
            id TEXT PRIMARY KEY,
            email TEXT NOT NULL UNIQUE,
            password_hash TEXT,
            full_name TEXT,
            is_freelancer INTEGER NOT NULL DEFAULT 0,
            bio TEXT,
            skills TEXT,
            hourly_rate REAL,
            location TEXT,
            avatar_url TEXT,
            created_at TEXT NOT NULL DEFAULT {NOW_SQL}
        )
    """
    )

    cursor.execute(
        f"""
        CREATE TABLE IF NOT EXISTS jobs (
            id TEXT PRIMARY KEY,
            client_id TEXT NOT NULL,
            title TEXT NOT NULL,
            description TEXT NOT NULL,
            budget_min REAL CHECK (budget_min IS NULL OR budget_min >= 0),
            budget_max REAL CHECK (budget_max IS NULL OR budget_max >= 0),
            duration TEXT,
            skills_required TEXT NOT NULL DEFAULT '[]',
            location TEXT,
            status TEXT NOT NULL DEFAULT 'open',
            proposals_count INTEGER NOT NULL DEFAULT 0,
            created_at TEXT NOT NULL DEFAULT {NOW_SQL},
            FOREIGN KEY (client_id) REFERENCES profiles(id)
        )
    """
    )

    cursor.execute(
        f"""
        CREATE TABLE IF NOT EXISTS proposals (
            id TEXT PRIMARY KEY,
            job_id TEXT NOT NULL,
            freelancer_id TEXT NOT NULL,
            cover_letter TEXT NOT NULL,
            status TEXT NOT NULL DEFAULT 'pending',
            created_at TEXT NOT NULL DEFAULT {NOW_SQL},
            UNIQUE (job_id, freelancer_id),
            FOREIGN KEY (job_id) REFERENCES jobs(id),
            FOREIGN KEY (freelancer_id) REFERENCES profiles(id)
        )
    """
    )

    cursor.execute(
        "CREATE INDEX IF NOT EXISTS idx_jobs_status_created ON jobs (status, created_at)"
    )

    # proposals_count is owned by the database, never written by the app
    cursor.execute(
        """
        CREATE TRIGGER IF NOT EXISTS proposals_count_after_insert
        AFTER INSERT ON proposals
        BEGIN
            UPDATE jobs SET proposals_count = proposals_count + 1 WHERE id = NEW.job_id;
        END
    """
    )

    conn.commit()
    conn.close()
    logger.info(f"Database initialized at: {db_path}")


def clear_database() -> None:
    """Clear all rows from application tables without dropping tables."""
    conn = get_db()
    cursor = conn.cursor()
    init_db()
    tables_in_delete_order = ["proposals", "jobs", "profiles"]
    try:
        for table in tables_in_delete_order:
            cursor.execute(f"DELETE FROM {table};")
        conn.commit()
        logger.info("Database cleared (tables kept).")
    finally:
        conn.close()

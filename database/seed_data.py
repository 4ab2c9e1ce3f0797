"""Seed database with example data."""
from datetime import datetime, timedelta, timezone
from typing import Optional

from werkzeug.security import generate_password_hash

from config import settings
from config.seed_config import load_seed_config
from core.logger import logger
from database.db import clear_database, get_db, init_db
from database.jobs import create_job
from database.profiles import create_profile, get_profile_by_email


def _is_empty() -> bool:
    conn = get_db()
    try:
        return conn.execute("SELECT COUNT(*) FROM profiles").fetchone()[0] == 0
    finally:
        conn.close()


def seed_database(reset: bool = False, config_path: Optional[str] = None) -> int:
    """
    Seed the local database with demo profiles and jobs.

    Args:
        reset: Clear all tables first
        config_path: Seed file, defaults to settings.seed_data_path

    Returns:
        Number of jobs created
    """
    init_db()

    if reset:
        logger.info("Reset flag detected: clearing database tables (without dropping)...")
        clear_database()

    if not _is_empty():
        logger.info("Database already contains data. Skipping seed.")
        return 0

    config = load_seed_config(config_path or settings.seed_data_path)
    password_hash = generate_password_hash(config.get("password", "password"))
    logger.info("Seeding database with example data...")

    for profile in config["profiles"]:
        create_profile(
            email=profile["email"],
            password_hash=password_hash,
            full_name=profile.get("full_name"),
            is_freelancer=profile.get("is_freelancer", False),
            bio=profile.get("bio"),
            skills=profile.get("skills"),
            hourly_rate=profile.get("hourly_rate"),
            location=profile.get("location"),
        )

    now = datetime.now(timezone.utc)
    created = 0
    for job in config["jobs"]:
        client = get_profile_by_email(job["client"])
        if not client:
            logger.warning(f"Skipping seed job '{job['title']}': unknown client {job['client']}")
            continue
        created_at = now - timedelta(hours=job.get("age_hours", 0))
        create_job(
            client_id=client["id"],
            title=job["title"],
            description=job["description"],
            budget_min=job.get("budget_min"),
            budget_max=job.get("budget_max"),
            duration=job.get("duration"),
            skills_required=job.get("skills_required", []),
            location=job.get("location"),
            status=job.get("status", "open"),
            created_at=created_at.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
        )
        created += 1

    logger.info(f"Seeded {len(config['profiles'])} profiles and {created} jobs")
    return created

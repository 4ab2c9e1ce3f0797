"""Pytest configuration and shared fixtures."""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Ensure project root is on path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Tests always run against an empty local database
os.environ["BACKEND"] = "sqlite"
os.environ["SEED_DEMO_DATA"] = "false"

from services.notifications import Notifier  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def use_test_database():
    """Use a temporary database file for the whole test session (before app is imported)."""
    tmp_dir = Path(tempfile.mkdtemp(prefix="freelancehub_test_"))
    test_db_path = tmp_dir / "data" / "marketplace.db"

    from config.settings import settings
    from database.db import init_db

    original_path = settings.database_path
    settings.database_path = str(test_db_path)
    init_db()

    yield test_db_path

    settings.database_path = original_path


@pytest.fixture
def clean_db():
    """Empty all tables before the test."""
    from database.db import clear_database

    clear_database()


class RecordingNotifier(Notifier):
    """Notifier that keeps every notification for assertions."""

    def __init__(self):
        self.notifications = []

    def deliver(self, notification):
        self.notifications.append(notification)

    @property
    def titles(self):
        return [n.title for n in self.notifications]


@pytest.fixture
def notifier():
    return RecordingNotifier()


def _identity_from_row(row):
    from models.profile_models import Identity

    return Identity(id=row["id"], email=row["email"], full_name=row["full_name"])


@pytest.fixture
def client_identity(clean_db):
    """A client account that posts jobs."""
    from database.profiles import create_profile

    return _identity_from_row(create_profile(email="client@test.com", full_name="Carla Client"))


@pytest.fixture
def freelancer_identity(clean_db):
    """A freelancer account that applies to jobs."""
    from database.profiles import create_profile

    row = create_profile(
        email="freelancer@test.com",
        full_name="Fred Freelancer",
        is_freelancer=True,
        skills=["React"],
        hourly_rate=50,
    )
    return _identity_from_row(row)


@pytest.fixture
def make_job(client_identity):
    """Factory creating jobs posted by client_identity."""
    from database.jobs import create_job

    def _make_job(title="Test Job", description="Test description", **kwargs):
        return create_job(client_id=client_identity.id, title=title, description=description, **kwargs)

    return _make_job


@pytest.fixture(scope="session")
def app(use_test_database):
    """Flask application with TESTING enabled (import after DB patch)."""
    from app import app as flask_app

    flask_app.config["TESTING"] = True
    flask_app.config["WTF_CSRF_ENABLED"] = False
    return flask_app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def sign_in(client):
    """Store an identity in the test client's session cookie."""
    from services.session import SESSION_KEY

    def _sign_in(identity):
        with client.session_transaction() as sess:
            sess[SESSION_KEY] = identity.model_dump(mode="json")
        return client

    return _sign_in

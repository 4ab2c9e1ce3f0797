"""Tests for page routes."""

from core.exceptions import SessionExpiredError
from database.proposals import get_proposals_for_job
from database.sqlite_backend import SQLiteBackend
from services.session import SESSION_KEY


def test_index_returns_200(client, make_job):
    make_job(title="Featured Gig", budget_min=1000, budget_max=5000)

    response = client.get("/")

    assert response.status_code == 200
    assert b"Featured Gig" in response.data
    assert b"$1,000 - $5,000" in response.data


def test_search_requires_a_term(client):
    response = client.get("/search?q=%20%20", follow_redirects=True)

    assert response.request.path == "/"
    assert b"Please enter a search term" in response.data


def test_search_redirects_to_find_jobs(client):
    response = client.get("/search?q=react")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/find-jobs?search=react")


def test_find_jobs_requires_sign_in(client, clean_db):
    response = client.get("/find-jobs")

    assert response.status_code == 200
    assert b"Authentication Required" in response.data


def test_find_jobs_lists_and_filters(client, sign_in, make_job, freelancer_identity):
    make_job(title="React Dashboard", skills_required=["React"])
    make_job(title="Logo Design")
    make_job(title="Closed Gig", status="closed")
    sign_in(freelancer_identity)

    everything = client.get("/find-jobs")
    filtered = client.get("/find-jobs?search=REACT")

    assert b"React Dashboard" in everything.data and b"Logo Design" in everything.data
    assert b"Closed Gig" not in everything.data
    assert b"React Dashboard" in filtered.data
    assert b"Logo Design" not in filtered.data


def test_find_jobs_empty_state(client, sign_in, freelancer_identity):
    sign_in(freelancer_identity)

    response = client.get("/find-jobs?search=nothing-matches")

    assert b"No jobs found matching your search criteria." in response.data


def test_apply_requires_sign_in(client, make_job):
    job = make_job()

    response = client.post(f"/jobs/{job.id}/apply")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/auth")
    assert get_proposals_for_job(job.id) == []


def test_apply_then_apply_again(client, sign_in, make_job, freelancer_identity):
    job = make_job(title="Apply Here")
    sign_in(freelancer_identity)

    first = client.post(f"/jobs/{job.id}/apply")
    second = client.post(f"/jobs/{job.id}/apply", follow_redirects=True)

    assert first.status_code == 200
    assert b"Application submitted!" in first.data
    assert b"1 proposals" in first.data
    assert b"Already applied" in second.data
    assert len(get_proposals_for_job(job.id)) == 1


def test_post_job_requires_sign_in(client, clean_db):
    response = client.get("/post-job")

    assert response.status_code == 200
    assert b"Please sign in to post a job." in response.data


def test_post_job_form_returns_200(client, sign_in, client_identity):
    sign_in(client_identity)

    response = client.get("/post-job")

    assert response.status_code == 200
    assert b"Post a New Job" in response.data


def test_post_job_creates_job(client, sign_in, client_identity):
    sign_in(client_identity)

    response = client.post(
        "/post-job",
        data={"title": "New Gig", "description": "Details", "skills": "Go, ,Rust", "budget_min": "abc"},
    )
    landing = client.get("/")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/")
    assert b"New Gig" in landing.data
    assert b"Job posted successfully!" in landing.data


def test_post_job_missing_title(client, sign_in, client_identity):
    sign_in(client_identity)

    response = client.post("/post-job", data={"title": "", "description": "Details"})

    assert response.status_code == 400
    assert b"Missing required fields" in response.data


def test_sign_up_and_sign_out(client, clean_db):
    response = client.post(
        "/auth",
        data={"mode": "sign_up", "email": "route@test.com", "password": "pw", "full_name": "Route User"},
        follow_redirects=True,
    )
    assert b"Route User" in response.data

    response = client.post("/sign-out", follow_redirects=True)
    assert b"Signed out" in response.data
    assert b"Route User" not in response.data


def test_sign_in_with_bad_password(client, clean_db):
    client.post("/auth", data={"mode": "sign_up", "email": "bad@test.com", "password": "pw"})
    client.post("/sign-out")

    response = client.post("/auth", data={"mode": "sign_in", "email": "bad@test.com", "password": "nope"})

    assert response.status_code == 401
    assert b"Sign in failed" in response.data


def _expire(*args, **kwargs):
    raise SessionExpiredError("JWT expired", code="PGRST301")


def test_expired_session_on_find_jobs_signs_out(client, sign_in, freelancer_identity, monkeypatch):
    sign_in(freelancer_identity)
    monkeypatch.setattr(SQLiteBackend, "select_open_jobs", _expire)

    response = client.get("/find-jobs")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/auth")
    with client.session_transaction() as sess:
        assert SESSION_KEY not in sess


def test_expired_session_on_apply_signs_out(client, sign_in, make_job, freelancer_identity, monkeypatch):
    job = make_job()
    sign_in(freelancer_identity)
    monkeypatch.setattr(SQLiteBackend, "insert_proposal", _expire)

    response = client.post(f"/jobs/{job.id}/apply")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/auth")
    with client.session_transaction() as sess:
        assert SESSION_KEY not in sess
    assert get_proposals_for_job(job.id) == []

"""Tests for configuration and settings."""

from config.settings import Settings, settings
from constants import Limits


def test_settings_has_expected_attributes():
    """Settings should have expected configuration attributes."""
    assert hasattr(settings, "backend")
    assert hasattr(settings, "supabase_url")
    assert hasattr(settings, "supabase_anon_key")
    assert hasattr(settings, "database_path")
    assert hasattr(settings, "secret_key")


def test_tests_use_local_backend():
    assert settings.backend == "sqlite"
    assert settings.seed_demo_data is False


def test_supabase_configured_flag(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://x.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")

    assert Settings().is_supabase_configured
    assert settings.featured_jobs_limit == 6


def test_landing_page_limits_default_to_constants(monkeypatch):
    monkeypatch.delenv("FEATURED_JOBS_LIMIT", raising=False)
    monkeypatch.delenv("TOP_FREELANCERS_LIMIT", raising=False)

    fresh = Settings()

    assert fresh.featured_jobs_limit == Limits.FEATURED_JOBS
    assert fresh.top_freelancers_limit == Limits.TOP_FREELANCERS


def test_landing_page_limits_from_env(monkeypatch):
    monkeypatch.setenv("FEATURED_JOBS_LIMIT", "3")

    assert Settings().featured_jobs_limit == 3

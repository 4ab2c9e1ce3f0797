"""Flask route registration."""

from routes.auth import register_auth
from routes.health import register_health
from routes.index import register_index
from routes.jobs import register_jobs
from routes.post_job import register_post_job


def register_all_routes(app):
    """Register all route modules on the Flask app."""
    register_index(app)
    register_jobs(app)
    register_post_job(app)
    register_auth(app)
    register_health(app)

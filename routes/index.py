"""Landing page routes."""

from flask import redirect, render_template, request, url_for

from config import settings
from constants import Messages
from routes.helpers import get_notifier, get_session_provider, job_query_service


def register_index(app):
    """Register landing page and search routes."""

    @app.route("/")
    def index():
        """Featured jobs and top freelancers."""
        queries = job_query_service()
        featured_jobs = queries.fetch_open_jobs(
            limit=settings.featured_jobs_limit, report_errors=False
        )
        top_freelancers = queries.fetch_top_freelancers(limit=settings.top_freelancers_limit)
        return render_template(
            "index.html",
            identity=get_session_provider().identity,
            featured_jobs=featured_jobs,
            top_freelancers=top_freelancers,
        )

    @app.route("/search")
    def search():
        """Hand the search box off to the job list."""
        query = request.args.get("q", "").strip()
        if not query:
            get_notifier().error(*Messages.EMPTY_SEARCH)
            return redirect(url_for("index"))
        return redirect(url_for("find_jobs", search=query))

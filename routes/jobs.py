"""Job list and proposal routes."""

from flask import redirect, render_template, request, url_for

from constants import Messages
from core.exceptions import SessionExpiredError
from routes.helpers import get_session_provider, job_query_service, proposal_service
from services.job_filter import filter_jobs
from services.submission import SubmissionOutcome


def register_jobs(app):
    """Register find-jobs and apply routes."""

    def render_jobs(jobs, identity, search_query):
        proposals = proposal_service()
        filtered = filter_jobs(jobs, search_query)
        applying = {job.id for job in filtered if proposals.is_applying(identity, job.id)}
        return render_template(
            "find_jobs.html",
            identity=identity,
            jobs=filtered,
            search_query=search_query,
            applying=applying,
            show_apply=True,
            empty_message=Messages.NO_JOBS,
        )

    @app.route("/find-jobs")
    def find_jobs():
        """Open jobs narrowed by the search box."""
        provider = get_session_provider()
        identity = provider.identity
        if identity is None:
            return render_template(
                "auth_required.html", message="Please sign in to find and apply for jobs."
            )
        search_query = request.args.get("search", "")
        queries = job_query_service()
        jobs = queries.fetch_open_jobs()
        if isinstance(queries.last_error, SessionExpiredError):
            provider.forget()
            return redirect(url_for("auth"))
        return render_jobs(jobs, identity, search_query)

    @app.route("/jobs/<job_id>/apply", methods=["POST"])
    def apply_to_job(job_id):
        """Submit a proposal, then show the refreshed list."""
        provider = get_session_provider()
        identity = provider.identity
        search_query = request.form.get("search", "")
        result = proposal_service().submit(job_id, identity)
        if result.outcome == SubmissionOutcome.AUTH_REQUIRED:
            # No identity, or one whose session the backend no longer accepts
            provider.forget()
            return redirect(url_for("auth"))
        if result.ok:
            return render_jobs(result.jobs, identity, search_query)
        return redirect(url_for("find_jobs", search=search_query or None))

"""Job posting routes."""

from flask import redirect, render_template, request, url_for

from routes.helpers import get_session_provider, job_posting_service
from services.submission import SubmissionOutcome


def register_post_job(app):
    """Register job posting route."""

    @app.route("/post-job", methods=["GET", "POST"])
    def post_job():
        """Post a new job."""
        provider = get_session_provider()
        identity = provider.identity
        if request.method == "POST":
            result = job_posting_service().submit(request.form, identity)
            if result.ok:
                return redirect(url_for("index"))
            if result.outcome == SubmissionOutcome.AUTH_REQUIRED:
                provider.forget()
                return redirect(url_for("auth"))
            # Keep what the user typed so they can fix it and retry
            return render_template("post_job.html", identity=identity, form=request.form), 400
        if identity is None:
            return render_template("auth_required.html", message="Please sign in to post a job.")
        return render_template("post_job.html", identity=identity, form={})

"""Sign-in, sign-up and sign-out routes."""

from flask import redirect, render_template, request, url_for

from constants import Messages
from core.exceptions import AuthenticationError
from core.logger import logger
from routes.helpers import get_notifier, get_session_provider


def register_auth(app):
    """Register auth routes."""

    @app.route("/auth", methods=["GET", "POST"])
    def auth():
        """Sign in or create an account."""
        provider = get_session_provider()
        if request.method == "POST":
            notifier = get_notifier()
            mode = request.form.get("mode", "sign_in")
            email = request.form.get("email", "").strip()
            password = request.form.get("password", "")
            try:
                if mode == "sign_up":
                    provider.sign_up(
                        email,
                        password,
                        full_name=request.form.get("full_name", "").strip() or None,
                        is_freelancer=request.form.get("is_freelancer") == "on",
                    )
                    notifier.success(Messages.SIGNED_UP)
                else:
                    provider.sign_in(email, password)
                    notifier.success(Messages.SIGNED_IN)
            except AuthenticationError as e:
                logger.info(f"Authentication failed for {email}: {str(e)}")
                notifier.error(Messages.SIGN_IN_ERROR, str(e))
                return render_template("auth.html", identity=None, email=email, mode=mode), 401
            return redirect(url_for("index"))
        if provider.is_authenticated:
            return redirect(url_for("index"))
        return render_template("auth.html", identity=None, email="", mode="sign_in")

    @app.route("/sign-out", methods=["POST"])
    def sign_out():
        """Sign out and go back to the landing page."""
        get_session_provider().sign_out()
        get_notifier().success(Messages.SIGNED_OUT)
        return redirect(url_for("index"))

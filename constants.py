"""Application constants."""


class Defaults:
    """Default values filled in on behalf of the user."""

    COVER_LETTER = "I am interested in this project and would like to discuss further."
    LOCATION = "Remote"


class ErrorCodes:
    """Backend error codes with special handling."""

    # PostgreSQL unique_violation
    UNIQUE_VIOLATION = "23505"
    # PostgREST: JWT expired or invalid
    JWT_EXPIRED = "PGRST301"


class Limits:
    """Size and length limits."""

    FEATURED_JOBS = 6
    TOP_FREELANCERS = 6
    # Refresh the session this many seconds before the access token expires
    SESSION_REFRESH_MARGIN = 60
    VISIBLE_SKILLS = 3


class Messages:
    """Common user-facing messages as (title, description) pairs."""

    AUTH_REQUIRED_APPLY = ("Authentication required", "Please sign in to apply for jobs.")
    AUTH_REQUIRED_POST = ("Authentication required", "Please sign in to post a job.")
    ALREADY_APPLIED = ("Already applied", "You have already applied to this job.")
    APPLY_IN_PROGRESS = ("Applying...", "Your application for this job is already being sent.")
    POST_JOB_IN_PROGRESS = ("Posting...", "Your job is already being published.")
    SESSION_EXPIRED = ("Session expired", "Please sign in again.")
    APPLY_ERROR = "Error applying"
    APPLY_SUCCESS = ("Application submitted!", "Your proposal has been sent to the client.")
    LOAD_JOBS_ERROR = "Error loading jobs"
    POST_JOB_ERROR = "Error posting job"
    POST_JOB_SUCCESS = (
        "Job posted successfully!",
        "Your job has been published and is now visible to freelancers.",
    )
    MISSING_FIELDS = ("Missing required fields", "Please provide a job title and description.")
    BUDGET_RANGE = ("Invalid budget", "Minimum budget cannot be greater than maximum budget.")
    EMPTY_SEARCH = ("Please enter a search term", None)
    SIGNED_IN = ("Welcome back!", "You have been signed in.")
    SIGNED_UP = ("Account created", "Your account is ready.")
    SIGN_IN_ERROR = "Sign in failed"
    SIGNED_OUT = ("Signed out", "You have been successfully signed out.")
    NO_JOBS = "No jobs found matching your search criteria."
    BUDGET_NOT_SPECIFIED = "Budget not specified"

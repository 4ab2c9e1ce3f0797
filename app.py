"""FreelanceHub web application: find jobs, post jobs, send proposals."""
from pathlib import Path

from flask import Flask
from dotenv import load_dotenv

from config import settings
from core.logger import attach_to_flask, logger, setup_logger
from database.backend import create_backend
from database.db import init_db
from routes import register_all_routes
from services.submission import SubmissionTracker
from routes.helpers import TRACKER_EXTENSION
from utils.formatting import format_budget, format_location, format_time_ago, split_skills

# Load environment variables
load_dotenv()

# Setup logging
setup_logger(
    log_level=settings.log_level,
    log_file=Path(settings.log_file) if settings.log_file else None,
)

# Fail fast on a misconfigured backend
create_backend(settings)

if settings.backend == "sqlite":
    init_db()
    if settings.seed_demo_data:
        try:
            from database.seed_data import seed_database
            seed_database()
        except Exception as e:
            logger.warning(f"Could not seed database: {str(e)}")

app = Flask(__name__)
app.secret_key = settings.secret_key
attach_to_flask(app)
app.extensions[TRACKER_EXTENSION] = SubmissionTracker()

app.add_template_filter(format_time_ago, "time_ago")
app.add_template_filter(format_location, "location")
app.add_template_global(split_skills, "split_skills")
app.add_template_global(format_budget, "format_budget")

register_all_routes(app)
logger.info(f"FreelanceHub ready (backend={settings.backend})")


if __name__ == '__main__':
    logger.info("Starting Flask application")
    app.run(debug=True, host='0.0.0.0', port=5000)

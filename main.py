"""Command line entry point: seed the local database and browse open jobs."""

import sys

from config import settings
from core.logger import logger, setup_logger
from core.exceptions import ConfigurationError
from database.backend import create_backend
from services.job_filter import filter_jobs
from services.job_query import JobQueryService
from services.notifications import ConsoleNotifier
from utils.formatting import format_budget, format_location, format_time_ago

USAGE = """Usage:
  python main.py seed [--reset]      Initialise and seed the local database
  python main.py jobs [search terms]  List open jobs, optionally filtered
  python main.py freelancers         List top freelancers"""


def _seed(args) -> int:
    if settings.backend != "sqlite":
        print("❌ Seeding is only available for the local sqlite backend")
        return 1
    from database.seed_data import seed_database

    created = seed_database(reset="--reset" in args)
    print(f"✅ Seeded {created} jobs")
    return 0


def _jobs(args, queries: JobQueryService) -> int:
    query = " ".join(args)
    jobs = filter_jobs(queries.fetch_open_jobs(), query)
    if not jobs:
        print("No jobs found matching your search criteria.")
        return 0
    for job in jobs:
        print(f"• {job.title}  [{format_time_ago(job.created_at)}]")
        print(f"    {format_budget(job.budget_min, job.budget_max)} | {format_location(job.location)}"
              f" | {job.proposals_count} proposals")
        if job.skills_required:
            print(f"    Skills: {', '.join(job.skills_required)}")
    return 0


def _freelancers(queries: JobQueryService) -> int:
    freelancers = queries.fetch_top_freelancers(limit=settings.top_freelancers_limit)
    for freelancer in freelancers:
        print(f"• {freelancer.full_name or 'Anonymous'}  ${freelancer.hourly_rate:g}/hr"
              f"  ({format_location(freelancer.location)})")
    return 0


def main(argv=None) -> int:
    """Main application function."""
    setup_logger(log_level=settings.log_level)
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv or argv[0] in ("-h", "--help"):
        print(USAGE)
        return 0

    command, args = argv[0], argv[1:]
    if command == "seed":
        return _seed(args)

    try:
        backend = create_backend(settings)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {str(e)}")
        print(f"❌ {str(e)}")
        return 1

    if settings.backend == "sqlite":
        from database.db import init_db

        init_db()

    queries = JobQueryService(backend, ConsoleNotifier())
    if command == "jobs":
        return _jobs(args, queries)
    if command == "freelancers":
        return _freelancers(queries)

    print(f"❌ Unknown command: {command}")
    print(USAGE)
    return 2


if __name__ == "__main__":
    sys.exit(main())

"""Utils package."""

from utils.formatting import format_budget, format_location, format_time_ago, split_skills

__all__ = [
    "format_budget",
    "format_location",
    "format_time_ago",
    "split_skills",
]

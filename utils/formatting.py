"""Display formatting for job cards."""

from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

from constants import Defaults, Limits, Messages


def format_amount(value: float) -> str:
    """Format a dollar amount with thousands separators (1000 -> "1,000", 1500.5 -> "1,500.5")."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_budget(budget_min: Optional[float], budget_max: Optional[float]) -> str:
    """
    Human-readable budget range.

    A zero amount reads as "not specified", same as a missing one.
    """
    if budget_min and budget_max:
        return f"${format_amount(budget_min)} - ${format_amount(budget_max)}"
    if budget_min:
        return f"${format_amount(budget_min)}+"
    if budget_max:
        return f"Up to ${format_amount(budget_max)}"
    return Messages.BUDGET_NOT_SPECIFIED


def format_time_ago(created_at: datetime, now: Optional[datetime] = None) -> str:
    """Relative age of a posting; dates older than a week are shown as M/D/YYYY."""
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    hours = int((now - created_at).total_seconds() // 3600)
    if hours < 1:
        return "Just now"
    if hours < 24:
        return "1 hour ago" if hours == 1 else f"{hours} hours ago"
    days = hours // 24
    if days < 7:
        return "1 day ago" if days == 1 else f"{days} days ago"
    return f"{created_at.month}/{created_at.day}/{created_at.year}"


def format_location(location: Optional[str]) -> str:
    return location or Defaults.LOCATION


def split_skills(skills: Sequence[str], limit: int = Limits.VISIBLE_SKILLS) -> Tuple[List[str], int]:
    """Skills to show as badges and how many are hidden behind a "+N" badge."""
    visible = list(skills[:limit])
    return visible, max(len(skills) - limit, 0)

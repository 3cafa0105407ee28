from __future__ import annotations

import logging
from datetime import datetime

from .errors import MalformedDeadline, PastDeadline
from .models import RemainingBreakdown, UnitVisibility

log = logging.getLogger(__name__)

DEADLINE_FORMAT = "%Y-%m-%d %I:%M %p"

# A month is counted as 30 days; this is an approximation, not calendar math.
DAYS_PER_MONTH = 30


def parse_deadline(text: str) -> datetime:
    """Parse ``YYYY-MM-DD HH:MM AM|PM`` as local wall-clock time."""
    try:
        return datetime.strptime(str(text).strip(), DEADLINE_FORMAT)
    except ValueError as e:
        raise MalformedDeadline(f"Invalid deadline {text!r}: {e}") from e


def deadline_from_parts(date: str, hours: str | int, minutes: str | int, period: str) -> datetime:
    hh = str(hours).strip()
    mm = str(minutes).strip()
    if not (hh.isdigit() and mm.isdigit()):
        raise MalformedDeadline(f"Invalid deadline time {hh}:{mm}")
    return parse_deadline(f"{str(date).strip()} {int(hh):02d}:{int(mm):02d} {str(period).strip().upper()}")


def compute(now: datetime, deadline: datetime, visibility: UnitVisibility) -> RemainingBreakdown:
    diff = deadline - now
    seconds = diff.days * 86400 + diff.seconds
    minutes = seconds // 60
    if minutes <= 0:
        raise PastDeadline()

    total_days = seconds // 86400
    months = total_days // DAYS_PER_MONTH
    weeks = total_days // 7
    days = total_days
    hours = seconds // 3600

    # Each enabled unit takes its share out of the finer pools before the
    # next enabled unit is counted. Disabled units fold into the next one.
    if visibility.months:
        days_in_months = months * DAYS_PER_MONTH
        weeks_in_months = days_in_months // 7
        day_remainder = days_in_months - weeks_in_months * 7
        weeks -= weeks_in_months
        days -= months * (DAYS_PER_MONTH - day_remainder)
        hours -= months * (DAYS_PER_MONTH - day_remainder) * 24

    if visibility.weeks:
        days -= weeks * 7
        hours -= weeks * 7 * 24

    if visibility.days:
        hours -= days * 24

    units: list[tuple[str, int]] = []
    if visibility.months:
        units.append(("Months", months))
    if visibility.weeks:
        units.append(("Weeks", weeks))
    if visibility.days:
        units.append(("Days", days))
    if visibility.hours:
        units.append(("Hours", hours))

    breakdown = RemainingBreakdown(units=tuple(units), minutes=minutes)
    log.debug("%d minutes left: %s", minutes, breakdown.label)
    return breakdown

#!/usr/bin/env python3
"""
Reporting Period Windows

Maps a dashboard period (daily, weekly, monthly) and a reference day onto the
inclusive date bounds of a FilterSpec.
"""

import calendar
from datetime import date, timedelta

from ..core.config import get_config
from ..core.dates import DateInput, canonical_date
from ..core.models import FilterSpec, Period


def period_window(
    period: Period, reference: DateInput, week_start: int | None = None
) -> tuple[date, date]:
    """
    Get the inclusive (first_day, last_day) window of a period.

    Args:
        period: Reporting period
        reference: Any day inside the wanted window
        week_start: Weekday the week starts on (Monday=0); defaults to the
            configured FLEET_WEEK_START

    Returns:
        Tuple of first and last calendar day
    """
    day = date.fromisoformat(canonical_date(reference))

    if period is Period.DAILY:
        return day, day

    if period is Period.WEEKLY:
        if week_start is None:
            week_start = get_config().week_start_index
        offset = (day.weekday() - week_start) % 7
        first = day - timedelta(days=offset)
        return first, first + timedelta(days=6)

    if period is Period.MONTHLY:
        last_day = calendar.monthrange(day.year, day.month)[1]
        return day.replace(day=1), day.replace(day=last_day)

    raise ValueError(f"Unsupported period: {period!r}")


def filter_spec_for_period(
    period: Period,
    reference: DateInput,
    owner_id: str | None = None,
    classifier: str | None = None,
    week_start: int | None = None,
) -> FilterSpec:
    """Build a FilterSpec covering the period that contains reference."""
    date_from, date_to = period_window(period, reference, week_start=week_start)
    return FilterSpec(owner_id=owner_id, classifier=classifier, date_from=date_from, date_to=date_to)

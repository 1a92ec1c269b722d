#!/usr/bin/env python3
"""
Same-Day Partitioning

Splits records into those that occurred on a reference day and the rest,
for the "today" transaction feed on the driver dashboard.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..core.dates import DateInput, canonical_date
from ..core.models import AggregationResult, FinancialRecord
from ..records.filter import valid_records
from .aggregator import aggregate


@dataclass(frozen=True)
class DayPartition:
    """Records split by whether they fall on the reference day."""

    reference_date: str
    today: list[FinancialRecord] = field(default_factory=list)
    other: list[FinancialRecord] = field(default_factory=list)


def partition_by_day(records: Iterable[FinancialRecord], reference_date: DateInput) -> DayPartition:
    """
    Partition records into today/other relative to reference_date.

    The reference is canonicalised once; each record's canonical date is
    compared by string equality. Records with a missing or unparsable date
    always land in other. Relative order is preserved in both buckets.

    Raises:
        ValueError: If reference_date is not a recognisable date
    """
    reference = canonical_date(reference_date)
    today: list[FinancialRecord] = []
    other: list[FinancialRecord] = []

    for record in records:
        if record.occurred_on_iso is not None and record.occurred_on_iso == reference:
            today.append(record)
        else:
            other.append(record)

    return DayPartition(reference_date=reference, today=today, other=other)


@dataclass(frozen=True)
class DailyFeed:
    """Valid records for one day with their totals."""

    day: str
    records: list[FinancialRecord]
    totals: AggregationResult


def daily_feed(records: Iterable[FinancialRecord], reference_date: DateInput) -> DailyFeed:
    """Build the transaction feed for the reference day."""
    partition = partition_by_day(records, reference_date)
    todays = valid_records(partition.today)
    return DailyFeed(day=partition.reference_date, records=todays, totals=aggregate(todays))

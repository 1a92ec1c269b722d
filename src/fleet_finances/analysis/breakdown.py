#!/usr/bin/env python3
"""
Period Breakdown Tables

pandas tables behind the dashboard charts: per-day totals over a window, the
Mon..Sun weekly chart, and the per-classifier table. Money columns stay in
integer cents.
"""

from collections.abc import Iterable
from datetime import date

import pandas as pd

from ..core.dates import DateInput, canonical_date
from ..core.models import AggregationResult, FinancialRecord
from ..records.filter import valid_records

WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def daily_totals(records: Iterable[FinancialRecord], date_from: DateInput, date_to: DateInput) -> pd.DataFrame:
    """
    Total cents and record count for every day in [date_from, date_to].

    Days without records are present with zeros. Only valid records with a
    usable date inside the window are counted.

    Returns:
        DataFrame indexed by day ("date") with int64 columns cents and count
    """
    first = date.fromisoformat(canonical_date(date_from))
    last = date.fromisoformat(canonical_date(date_to))
    if last < first:
        raise ValueError(f"Window end {last} is before start {first}")

    index = pd.date_range(start=first, end=last, freq="D", name="date")

    rows = [
        {"date": pd.Timestamp(record.occurred_on.date), "cents": record.amount_cents}
        for record in valid_records(records)
        if record.occurred_on is not None and first <= record.occurred_on.date <= last
    ]

    if rows:
        df = pd.DataFrame(rows)
        grouped = df.groupby("date")["cents"].agg(["sum", "count"])
        grouped.columns = ["cents", "count"]
    else:
        grouped = pd.DataFrame({"cents": [], "count": []}, index=pd.DatetimeIndex([], name="date"))

    return grouped.reindex(index, fill_value=0).astype("int64")


def weekday_totals(
    records: Iterable[FinancialRecord],
    date_from: DateInput,
    date_to: DateInput,
    week_start: int = 0,
) -> pd.DataFrame:
    """
    Totals per weekday for the weekly chart.

    Args:
        week_start: Weekday the chart starts on (Monday=0)

    Returns:
        DataFrame indexed by weekday label with int64 columns cents and count
    """
    daily = daily_totals(records, date_from, date_to)
    by_weekday = daily.groupby(daily.index.dayofweek).sum()

    order = [(week_start + offset) % 7 for offset in range(7)]
    result = by_weekday.reindex(order, fill_value=0).astype("int64")
    result.index = pd.Index([WEEKDAY_LABELS[day] for day in order], name="weekday")
    return result


def classifier_table(aggregation: AggregationResult) -> pd.DataFrame:
    """
    Per-classifier rows sorted by amount, largest first.

    Returns:
        DataFrame with columns classifier, cents, count, share_pct
    """
    rows = [
        {
            "classifier": label,
            "cents": money.to_cents(),
            "count": aggregation.count_by_classifier.get(label, 0),
        }
        for label, money in aggregation.amount_by_classifier.items()
    ]
    df = pd.DataFrame(rows, columns=["classifier", "cents", "count"])

    total = aggregation.total.to_cents()
    df["share_pct"] = (df["cents"] * 100 / total).round(1) if total else 0.0

    return df.sort_values("cents", ascending=False, kind="mergesort").reset_index(drop=True)

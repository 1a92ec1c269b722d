"""
Financial Analysis Package

Aggregation and reporting over driver records.

Key Components:
- aggregator: Totals per classifier and per earnings account, and the commission income rule
- partition: Same-day partitioning and the daily transaction feed
- periods: Daily/weekly/monthly date windows
- breakdown: pandas tables for the dashboard charts
"""

from .aggregator import IncomeSummary, aggregate, aggregate_by_account, net_income
from .breakdown import classifier_table, daily_totals, weekday_totals
from .partition import DailyFeed, DayPartition, daily_feed, partition_by_day
from .periods import filter_spec_for_period, period_window

__all__ = [
    "DailyFeed",
    "DayPartition",
    "IncomeSummary",
    "aggregate",
    "aggregate_by_account",
    "classifier_table",
    "daily_feed",
    "daily_totals",
    "filter_spec_for_period",
    "net_income",
    "partition_by_day",
    "period_window",
    "weekday_totals",
]

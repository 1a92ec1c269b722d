"""
Fleet Finances - Driver Earnings and Expense Ledger

Client-side financial logic for a fleet management app: normalising backend
records, filtering them, aggregating totals, building the daily feed and
producing driver statements.

Domain Packages:
- core: Currency, dates, models, configuration, refresh events
- records: Backend response adapter and record filtering
- analysis: Aggregation, same-day partitioning, period windows and breakdowns
- statement: Statement documents and HTML/JSON export
- cli: Command-line interface

Example Usage:
    from fleet_finances import aggregate, filter_records, FilterSpec
    from fleet_finances.records import records_from_response
"""

__version__ = "0.1.0"

from .analysis.aggregator import aggregate, net_income
from .analysis.partition import partition_by_day
from .core.currency import AmountParseError, parse_amount
from .core.dates import canonical_date
from .core.models import AggregationResult, FilterSpec, FinancialRecord, Owner, Period, RecordKind
from .records.filter import filter_records
from .statement.formatter import EmptyOwnerError, format_statement

__all__ = [
    "AggregationResult",
    "AmountParseError",
    "EmptyOwnerError",
    "FilterSpec",
    "FinancialRecord",
    "Owner",
    "Period",
    "RecordKind",
    "aggregate",
    "canonical_date",
    "filter_records",
    "format_statement",
    "net_income",
    "parse_amount",
    "partition_by_day",
]

"""
Core Utilities Package

Shared primitives and models used by the record, analysis and statement packages.

This package provides:
- Currency handling with integer cents for precision
- Local-calendar date canonicalisation
- Record, filter and aggregation models
- Configuration management for environment-specific settings
- The application-wide refresh event bus
"""

from .config import Config, Environment, get_config, get_data_dir, is_production, is_test, reload_config
from .currency import (
    AmountParseError,
    cents_to_amount_str,
    cents_to_decimal,
    format_cents,
    is_valid_amount,
    parse_amount,
    parse_amount_to_cents,
)
from .dates import FinancialDate, canonical_date, safe_canonical_date
from .events import RefreshBus, get_refresh_bus
from .models import (
    AggregationResult,
    AutoExpenseCategory,
    EarningAccount,
    EarningType,
    ExpenseCategory,
    FilterSpec,
    FinancialRecord,
    Owner,
    Period,
    RecordKind,
    normalize_classifier,
)
from .money import Money

__all__ = [
    "AggregationResult",
    "AmountParseError",
    "AutoExpenseCategory",
    # Configuration
    "Config",
    "EarningAccount",
    "EarningType",
    "Environment",
    "ExpenseCategory",
    "FilterSpec",
    "FinancialDate",
    # Data models
    "FinancialRecord",
    "Money",
    "Owner",
    "Period",
    "RecordKind",
    "RefreshBus",
    "canonical_date",
    # Currency utilities
    "cents_to_amount_str",
    "cents_to_decimal",
    "format_cents",
    "get_config",
    "get_data_dir",
    "get_refresh_bus",
    "is_production",
    "is_test",
    "is_valid_amount",
    "normalize_classifier",
    "parse_amount",
    "parse_amount_to_cents",
    "reload_config",
    "safe_canonical_date",
]

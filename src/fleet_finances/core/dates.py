#!/usr/bin/env python3
"""
FinancialDate Primitive Type and Date Canonicalisation

Every date comparison in the fleet ledger goes through canonical_date(), which
renders a YYYY-MM-DD string from *local* calendar components. UTC conversion is
never applied, so a record entered at 00:30 local time stays on its own day.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

_ISO_DATE_PREFIX = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})(?:$|[T\s])")
# A time part ending in an explicit numeric offset, e.g. "T23:30:00-05:00"
_NUMERIC_OFFSET_SUFFIX = re.compile(r"[T\s]\d{1,2}:\d{2}(?::\d{2}(?:\.\d+)?)?[+-]\d{2}:\d{2}\s*$")


@dataclass(frozen=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, date_format: str = "%Y-%m-%d") -> "FinancialDate":
        """
        Parse from string in specified format.

        Args:
            date_str: Date string to parse
            date_format: Date format (default: ISO format "%Y-%m-%d")

        Returns:
            FinancialDate object
        """
        return cls(date=datetime.strptime(date_str, date_format).date())

    @classmethod
    def from_value(cls, value: "DateInput") -> "FinancialDate":
        """Build from anything canonical_date() accepts."""
        return cls(date=date.fromisoformat(canonical_date(value)))

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def age_days(self, other: "FinancialDate | None" = None) -> int:
        """
        Calculate days between this date and another (or today).

        Args:
            other: Other date to compare to (default: today)

        Returns:
            Number of days difference
        """
        if other is None:
            other = FinancialDate.today()
        return (other.date - self.date).days

    def __str__(self) -> str:
        return self.to_iso_string()

    def __lt__(self, other: "FinancialDate") -> bool:
        return self.date < other.date

    def __le__(self, other: "FinancialDate") -> bool:
        return self.date <= other.date

    def __gt__(self, other: "FinancialDate") -> bool:
        return self.date > other.date

    def __ge__(self, other: "FinancialDate") -> bool:
        return self.date >= other.date

    def __repr__(self) -> str:
        return f"FinancialDate(date={self.date!r})"


DateInput = Union[date, datetime, FinancialDate, str]


def canonical_date(value: DateInput) -> str:
    """
    Render a date as YYYY-MM-DD from its local calendar components.

    Accepted inputs:
    - datetime: naive values use their own components; timezone-aware
      values are converted to the host's local time first
    - date / FinancialDate
    - str: "YYYY-MM-DD", optionally followed by a time part
      ("2024-03-01T00:00:00.000Z"); the leading calendar date is taken
      literally because the backend serialises plain dates that way.
      A time part with an explicit numeric offset ("...T23:30:00-05:00")
      is an instant and is converted to local time like an aware datetime

    Raises:
        ValueError: If the value is not a recognisable date

    Examples:
        canonical_date(datetime(2024, 3, 1, 23, 59)) -> "2024-03-01"
        canonical_date("2024-3-1") -> "2024-03-01"
    """
    if isinstance(value, FinancialDate):
        return value.to_iso_string()

    if isinstance(value, datetime):
        local = value.astimezone() if value.tzinfo is not None else value
        return f"{local.year:04d}-{local.month:02d}-{local.day:02d}"

    if isinstance(value, date):
        return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"

    if isinstance(value, str):
        match = _ISO_DATE_PREFIX.match(value)
        if not match:
            raise ValueError(f"Unrecognised date: {value!r}")
        year, month, day = (int(part) for part in match.groups())
        if _NUMERIC_OFFSET_SUFFIX.search(value):
            time_part = value[match.end() :].strip()
            try:
                instant = datetime.fromisoformat(f"{year:04d}-{month:02d}-{day:02d}T{time_part}")
            except ValueError as e:
                raise ValueError(f"Unrecognised date: {value!r}") from e
            return canonical_date(instant)

        # Rejects impossible days such as 2024-02-30
        parsed = date(year, month, day)
        return f"{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d}"

    raise ValueError(f"Unsupported date type: {type(value).__name__}")


def safe_canonical_date(value: DateInput | None) -> str | None:
    """Canonicalise a date, returning None for missing or unparsable input."""
    if value is None:
        return None
    try:
        return canonical_date(value)
    except ValueError:
        return None

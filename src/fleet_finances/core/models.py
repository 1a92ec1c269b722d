#!/usr/bin/env python3
"""
Core Data Models for Fleet Finances

Earnings, expenses and auto-expenses share one record shape and differ only in
the vocabulary of their classifier (payment type or expense category).
All models are immutable; every operation builds new values.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from .currency import try_parse_cents
from .dates import FinancialDate, safe_canonical_date
from .money import Money

logger = logging.getLogger(__name__)


class EarningType(Enum):
    """Payment methods for driver earnings."""

    ONLINE = "Online"
    CASH = "Cash"
    POCKET_SPLIT = "PocketSplit"


class EarningAccount(Enum):
    """Accounts a driver's earnings are booked to."""

    PERSONAL = "Personal Account"
    LIMOUSINE = "Limousine Account"


class ExpenseCategory(Enum):
    """Categories for driver expenses."""

    FUEL = "Fuel"
    MAINTENANCE = "Maintenance"
    INSURANCE = "Insurance"
    PARKING = "Parking"
    OTHER = "Other"


class AutoExpenseCategory(Enum):
    """Categories for vehicle (auto) expenses."""

    PETROL = "Petrol"
    CAR_ACCIDENT = "CarAccident"
    MAINTENANCE = "Maintenance"
    INSURANCE = "Insurance"
    OTHER = "Other"


# Labels the backend and older app builds send for the same classifier
CLASSIFIER_ALIASES = {
    "Pocket Slipt": "PocketSplit",
    "Pocket Split": "PocketSplit",
    "Car Accident": "CarAccident",
}


class RecordKind(Enum):
    """The three kinds of financial record a driver account holds."""

    EARNING = "earning"
    EXPENSE = "expense"
    AUTO_EXPENSE = "auto_expense"

    @property
    def classifier_field(self) -> str:
        """Backend field carrying the classifier for this kind."""
        return "type" if self is RecordKind.EARNING else "category"

    @property
    def collection_key(self) -> str:
        """Backend key wrapping a list of this kind in a response body."""
        return {
            RecordKind.EARNING: "earnings",
            RecordKind.EXPENSE: "expenses",
            RecordKind.AUTO_EXPENSE: "autoExpenses",
        }[self]

    @property
    def label(self) -> str:
        """Human readable plural label."""
        return {
            RecordKind.EARNING: "Earnings",
            RecordKind.EXPENSE: "Expenses",
            RecordKind.AUTO_EXPENSE: "Auto Expenses",
        }[self]

    @property
    def classifiers(self) -> tuple[str, ...]:
        """Closed classifier vocabulary for this kind."""
        vocabulary: type[Enum] = {
            RecordKind.EARNING: EarningType,
            RecordKind.EXPENSE: ExpenseCategory,
            RecordKind.AUTO_EXPENSE: AutoExpenseCategory,
        }[self]
        return tuple(member.value for member in vocabulary)


class Period(Enum):
    """Reporting periods offered on the dashboards."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


def normalize_classifier(label: str | None, kind: RecordKind | None = None) -> str:
    """
    Map a backend classifier label onto its canonical spelling.

    Unknown labels are returned stripped but otherwise untouched.
    """
    if label is None:
        return ""
    cleaned = str(label).strip()
    canonical = CLASSIFIER_ALIASES.get(cleaned, cleaned)
    if kind is not None and canonical and canonical not in kind.classifiers:
        logger.debug(f"Unknown {kind.value} classifier: {canonical!r}")
    return canonical


@dataclass(frozen=True)
class FinancialRecord:
    """
    One earning, expense or auto-expense entry.

    raw_amount keeps the value exactly as received; amount is its parsed form
    (None when it could not be parsed). occurred_on is None when the date was
    missing or unparsable. account is the earnings account the entry was
    booked to ("Personal Account" or "Limousine Account"), if any.
    """

    id: str
    kind: RecordKind
    raw_amount: Any
    classifier: str
    occurred_on: FinancialDate | None = None
    owner_id: str | None = None
    note: str | None = None
    account: str | None = None

    @classmethod
    def create(
        cls,
        id: str,
        amount: Any,
        classifier: str,
        occurred_on: Any = None,
        owner_id: str | None = None,
        note: str | None = None,
        kind: RecordKind = RecordKind.EARNING,
        account: str | None = None,
    ) -> "FinancialRecord":
        """Build a record from loose values, canonicalising the date."""
        canonical = safe_canonical_date(occurred_on)
        return cls(
            id=str(id),
            kind=kind,
            raw_amount=amount,
            classifier=normalize_classifier(classifier, kind),
            occurred_on=FinancialDate(date=date.fromisoformat(canonical)) if canonical else None,
            owner_id=str(owner_id) if owner_id is not None else None,
            note=note,
            account=(str(account).strip() or None) if account is not None else None,
        )

    @property
    def amount(self) -> Money | None:
        """
        Parsed amount, or None when the raw value is invalid.

        Stored amounts are not subject to the entry-form digit cap.
        """
        cents = try_parse_cents(self.raw_amount, max_integer_digits=None)
        return Money.from_cents(cents) if cents is not None else None

    @property
    def amount_cents(self) -> int | None:
        amount = self.amount
        return amount.to_cents() if amount is not None else None

    @property
    def occurred_on_iso(self) -> str | None:
        return self.occurred_on.to_iso_string() if self.occurred_on else None

    @property
    def is_valid(self) -> bool:
        """A record counts towards totals only with a strictly positive amount."""
        cents = self.amount_cents
        return cents is not None and cents > 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to the backend's JSON field names."""
        amount = self.amount
        result = {
            "id": self.id,
            "amount": str(amount) if amount is not None else self.raw_amount,
            "date": self.occurred_on_iso,
            self.kind.classifier_field: self.classifier,
            "driverId": self.owner_id,
            "note": self.note,
        }
        if self.account is not None:
            result["accountName"] = self.account
        return result


@dataclass(frozen=True)
class FilterSpec:
    """
    Record selection criteria. Every field is optional; None means no
    constraint on that dimension. Date bounds are inclusive.
    """

    owner_id: str | None = None
    classifier: str | None = None
    date_from: Any = None
    date_to: Any = None
    account: str | None = None

    @property
    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.owner_id, self.classifier, self.date_from, self.date_to, self.account)
        )


@dataclass(frozen=True)
class AggregationResult:
    """Totals for a collection of valid records."""

    total: Money = field(default_factory=Money.zero)
    amount_by_classifier: dict[str, Money] = field(default_factory=dict)
    count_by_classifier: dict[str, int] = field(default_factory=dict)
    record_count: int = 0

    @property
    def total_amount(self) -> Decimal:
        """Grand total as a two-place Decimal."""
        return self.total.to_decimal()

    @property
    def amounts(self) -> dict[str, Decimal]:
        """Per-classifier totals as two-place Decimals."""
        return {label: money.to_decimal() for label, money in self.amount_by_classifier.items()}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON serialization (amounts as strings)."""
        return {
            "totalAmount": str(self.total),
            "recordCount": self.record_count,
            "amountByClassifier": {label: str(money) for label, money in self.amount_by_classifier.items()},
            "countByClassifier": dict(self.count_by_classifier),
        }


@dataclass(frozen=True)
class Owner:
    """The driver a statement is attributed to."""

    id: str | None
    name: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or "Driver"


#!/usr/bin/env python3
"""
Statement Formatter

Builds the structured statement document handed to the export layer.
No I/O happens here.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any

from ..core.dates import DateInput, canonical_date
from ..core.models import AggregationResult, FinancialRecord, Owner, RecordKind
from ..core.money import Money


class StatementFormatError(Exception):
    """Raised when a statement cannot be built from the given inputs."""

    pass


class EmptyOwnerError(StatementFormatError):
    """Raised when a statement has no driver to attribute it to."""

    def __init__(self) -> None:
        super().__init__("A statement must be attributed to a driver: owner id is missing")


@dataclass(frozen=True)
class StatementRow:
    """One line of a statement."""

    date: str | None
    classifier: str
    note: str | None
    amount: Money

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "classifier": self.classifier,
            "note": self.note,
            "amount": str(self.amount),
        }


@dataclass(frozen=True)
class StatementDocument:
    """Exportable statement for one driver."""

    title: str
    generated_on: str
    owner_id: str
    owner_name: str
    kind: RecordKind
    total: Money
    rows: list[StatementRow] = field(default_factory=list)

    @property
    def total_amount(self) -> Decimal:
        return self.total.to_decimal()

    @property
    def rows_total(self) -> Money:
        """Sum of the row amounts (equals total when built from the same records)."""
        return Money.from_cents(sum(row.amount.to_cents() for row in self.rows))

    def to_dict(self) -> dict[str, Any]:
        """Convert statement to dict for JSON serialization."""
        return {
            "title": self.title,
            "generatedOn": self.generated_on,
            "ownerId": self.owner_id,
            "ownerName": self.owner_name,
            "kind": self.kind.value,
            "rows": [row.to_dict() for row in self.rows],
            "totalAmount": str(self.total),
        }


def _row_sort_key(row: StatementRow) -> tuple[bool, str]:
    # Undated rows sort after every dated row in a descending sort
    return (row.date is not None, row.date or "")


def format_statement(
    records: Iterable[FinancialRecord],
    aggregation: AggregationResult,
    owner: Owner,
    kind: RecordKind | None = None,
    generated_on: DateInput | None = None,
) -> StatementDocument:
    """
    Build a statement document for one driver.

    Rows are built from the valid records, newest first; rows on the same
    day keep their input order. The total comes from aggregation.

    Args:
        records: Records to list (normally the ones aggregation was built from)
        aggregation: Totals for the same records
        owner: Driver the statement belongs to
        kind: Record kind for the title; inferred from the first record
            when omitted, falling back to earnings
        generated_on: Statement date; defaults to today

    Returns:
        StatementDocument

    Raises:
        EmptyOwnerError: If owner has no id
    """
    if owner is None or owner.id is None or not str(owner.id).strip():
        raise EmptyOwnerError()

    records = list(records)
    if kind is None:
        kind = records[0].kind if records else RecordKind.EARNING

    rows = [
        StatementRow(
            date=record.occurred_on_iso,
            classifier=record.classifier,
            note=record.note,
            amount=Money.from_cents(record.amount_cents),
        )
        for record in records
        if record.is_valid
    ]
    rows.sort(key=_row_sort_key, reverse=True)

    return StatementDocument(
        title=f"{kind.label} Statement",
        generated_on=canonical_date(generated_on if generated_on is not None else date.today()),
        owner_id=str(owner.id),
        owner_name=owner.display_name,
        kind=kind,
        total=aggregation.total,
        rows=rows,
    )

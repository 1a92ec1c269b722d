#!/usr/bin/env python3
"""
Record Filter

Selects records by driver, classifier, earnings account and inclusive date
range. Dates are compared as canonical YYYY-MM-DD strings, never as
timestamps.

Matching and the amount validity gate are separate steps: filter_records()
only matches, valid_records() drops non-positive or unparsable amounts, and
select_records() runs both in that order.
"""

from collections.abc import Iterable

from ..core.dates import canonical_date
from ..core.models import FilterSpec, FinancialRecord


def _bound(value) -> str | None:
    return canonical_date(value) if value is not None else None


def filter_records(records: Iterable[FinancialRecord], spec: FilterSpec) -> list[FinancialRecord]:
    """
    Return the records matching every present field of spec.

    Input order is preserved. A record without a usable date never matches a
    spec that has a date bound.

    Raises:
        ValueError: If a date bound in spec is not a recognisable date
    """
    date_from = _bound(spec.date_from)
    date_to = _bound(spec.date_to)
    has_date_bound = date_from is not None or date_to is not None

    matched = []
    for record in records:
        if spec.owner_id is not None and record.owner_id != spec.owner_id:
            continue
        if spec.classifier is not None and record.classifier != spec.classifier:
            continue
        if spec.account is not None and record.account != spec.account:
            continue
        if has_date_bound:
            occurred = record.occurred_on_iso
            if occurred is None:
                continue
            if date_from is not None and occurred < date_from:
                continue
            if date_to is not None and occurred > date_to:
                continue
        matched.append(record)

    return matched


def valid_records(records: Iterable[FinancialRecord]) -> list[FinancialRecord]:
    """Drop records whose amount is unparsable, negative or zero."""
    return [record for record in records if record.is_valid]


def select_records(records: Iterable[FinancialRecord], spec: FilterSpec) -> list[FinancialRecord]:
    """Apply the validity gate, then match against spec."""
    return filter_records(valid_records(records), spec)

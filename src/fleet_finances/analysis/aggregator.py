#!/usr/bin/env python3
"""
Record Aggregation

Reduces a record collection to a grand total plus per-classifier amounts and
counts. Accumulation is done in integer cents; a malformed record is skipped
rather than aborting the whole reduction.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from ..core.config import get_config
from ..core.currency import apply_rate
from ..core.models import AggregationResult, FinancialRecord
from ..core.money import Money

logger = logging.getLogger(__name__)


def aggregate(records: Iterable[FinancialRecord]) -> AggregationResult:
    """
    Aggregate valid records into totals.

    Records with an unparsable or non-positive amount contribute neither to
    the totals nor to the counts. Classifiers with no valid record are absent
    from the per-classifier maps.

    Example:
        Cash 100.00 + Online 50.50 + Cash "-10" ->
        total 150.50, record_count 2, {Cash: 100.00, Online: 50.50}
    """
    total_cents = 0
    record_count = 0
    cents_by_classifier: dict[str, int] = {}
    count_by_classifier: dict[str, int] = {}
    skipped = 0

    for record in records:
        cents = record.amount_cents
        if cents is None or cents <= 0:
            skipped += 1
            continue

        total_cents += cents
        record_count += 1
        cents_by_classifier[record.classifier] = cents_by_classifier.get(record.classifier, 0) + cents
        count_by_classifier[record.classifier] = count_by_classifier.get(record.classifier, 0) + 1

    if skipped:
        logger.debug(f"Skipped {skipped} records with invalid amounts during aggregation")

    return AggregationResult(
        total=Money.from_cents(total_cents),
        amount_by_classifier={label: Money.from_cents(c) for label, c in cents_by_classifier.items()},
        count_by_classifier=count_by_classifier,
        record_count=record_count,
    )


def aggregate_by_account(
    records: Iterable[FinancialRecord], accounts: Iterable[str] | None = None
) -> dict[str, AggregationResult]:
    """
    Aggregate records separately per earnings account.

    Args:
        records: Records to total
        accounts: Accounts always present in the result (with zero totals
            when they have no valid record), in this order

    Returns:
        Dict of account name to AggregationResult. Records without an
        account are left out.
    """
    grouped: dict[str, list[FinancialRecord]] = {name: [] for name in accounts or ()}
    unassigned = 0

    for record in records:
        if record.account is None:
            unassigned += 1
            continue
        grouped.setdefault(record.account, []).append(record)

    if unassigned:
        logger.debug(f"{unassigned} records have no account and are not split")

    return {name: aggregate(members) for name, members in grouped.items()}


@dataclass(frozen=True)
class IncomeSummary:
    """Driver income for a period under the commission model."""

    earnings: Money
    expenses: Money
    commission_rate: Decimal
    earnings_share: Money
    net: Money

    @property
    def is_positive(self) -> bool:
        return self.net.to_cents() >= 0


def net_income(
    earnings: AggregationResult,
    expenses: AggregationResult,
    commission_rate: Decimal | None = None,
) -> IncomeSummary:
    """
    Compute period income as earnings * commission_rate - expenses.

    Auto-expenses are carried by the vehicle and are not part of this figure.
    The share of earnings is rounded half up to the cent.

    Args:
        earnings: Aggregated earnings for the period
        expenses: Aggregated driver expenses for the period
        commission_rate: Share of earnings credited to the driver; defaults
            to the configured FLEET_COMMISSION_RATE
    """
    rate = commission_rate if commission_rate is not None else get_config().commission_rate
    share = Money.from_cents(apply_rate(earnings.total.to_cents(), rate))

    return IncomeSummary(
        earnings=earnings.total,
        expenses=expenses.total,
        commission_rate=rate,
        earnings_share=share,
        net=share - expenses.total,
    )

#!/usr/bin/env python3
"""
Record CLI - Driver Record Reports

Commands that read saved backend responses (earnings, expenses or
auto-expenses JSON) and print totals, the daily feed, period breakdowns,
income and statements.
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path

import click

from ..analysis import (
    aggregate,
    aggregate_by_account,
    classifier_table,
    daily_feed,
    daily_totals,
    filter_spec_for_period,
    net_income,
    period_window,
    weekday_totals,
)
from ..core.config import get_config
from ..core.currency import format_cents
from ..core.models import AggregationResult, EarningAccount, FilterSpec, Owner, Period, RecordKind
from ..records import ResponseShapeError, load_records, select_records
from ..statement import StatementFormatError, format_statement, write_statement

logger = logging.getLogger(__name__)

KIND_CHOICE = click.Choice([kind.value for kind in RecordKind])
PERIOD_CHOICE = click.Choice([period.value for period in Period])


def _load(path: str, kind: str):
    try:
        return load_records(path, RecordKind(kind))
    except (FileNotFoundError, ResponseShapeError, ValueError) as e:
        raise click.ClickException(f"Could not load {kind} records from {path}: {e}") from e


def _build_spec(
    driver: str | None,
    classifier: str | None,
    start: str | None,
    end: str | None,
    period: str | None,
    on: str | None,
    account: str | None = None,
) -> FilterSpec:
    if period:
        spec = filter_spec_for_period(Period(period), on or date.today(), owner_id=driver, classifier=classifier)
        return FilterSpec(
            owner_id=spec.owner_id,
            classifier=spec.classifier,
            date_from=start or spec.date_from,
            date_to=end or spec.date_to,
            account=account,
        )
    return FilterSpec(owner_id=driver, classifier=classifier, date_from=start, date_to=end, account=account)


def _echo_totals(result: AggregationResult, currency: str) -> None:
    click.echo(f"Records: {result.record_count}")
    click.echo(f"Total: {format_cents(result.total.to_cents(), currency)}")
    if result.record_count:
        table = classifier_table(result)
        for row in table.to_dict("records"):
            click.echo(
                f"  {row['classifier'] or '(none)'}: {format_cents(int(row['cents']), currency)}"
                f" ({int(row['count'])} records, {row['share_pct']}%)"
            )


@click.group()
def records() -> None:
    """Driver earnings, expenses and auto-expense reports."""
    pass


@records.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--kind", type=KIND_CHOICE, default="earning", help="Record kind in FILE (default: earning)")
@click.option("--driver", help="Only records of this driver id")
@click.option("--classifier", help="Only records with this type/category")
@click.option("--start", help="Start date (YYYY-MM-DD), inclusive")
@click.option("--end", help="End date (YYYY-MM-DD), inclusive")
@click.option("--period", type=PERIOD_CHOICE, help="Limit to the period containing --on")
@click.option("--on", "on", help="Reference day for --period (default: today)")
@click.option("--account", help="Only earnings booked to this account, e.g. 'Personal Account'")
@click.option("--by-account", is_flag=True, help="Print totals per earnings account")
def summary(
    file: str,
    kind: str,
    driver: str | None,
    classifier: str | None,
    start: str | None,
    end: str | None,
    period: str | None,
    on: str | None,
    account: str | None,
    by_account: bool,
) -> None:
    """
    Print totals per classifier.

    Examples:
      fleet records summary earnings.json --driver 42 --period monthly
      fleet records summary expenses.json --kind expense --classifier Fuel
      fleet records summary earnings.json --driver 42 --by-account
    """
    config = get_config()
    loaded = _load(file, kind)

    try:
        spec = _build_spec(driver, classifier, start, end, period, on, account=account)
        selected = select_records(loaded, spec)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    logger.info(f"Selected {len(selected)} of {len(loaded)} {kind} records")

    if by_account:
        known = [member.value for member in EarningAccount] if RecordKind(kind) is RecordKind.EARNING else None
        per_account = aggregate_by_account(selected, accounts=known)
        if not per_account:
            click.echo("No records with an account")
        for name, result in per_account.items():
            click.echo(f"{name}:")
            _echo_totals(result, config.currency)
        return

    _echo_totals(aggregate(selected), config.currency)


@records.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--kind", type=KIND_CHOICE, default="earning", help="Record kind in FILE (default: earning)")
@click.option("--driver", help="Only records of this driver id")
@click.option("--on", "on", help="Day to show (default: today)")
def today(file: str, kind: str, driver: str | None, on: str | None) -> None:
    """Print the transaction feed for one day."""
    config = get_config()
    loaded = _load(file, kind)
    if driver:
        loaded = [record for record in loaded if record.owner_id == driver]

    try:
        feed = daily_feed(loaded, on or date.today())
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"{RecordKind(kind).label} on {feed.day}:")
    if not feed.records:
        click.echo("  No records")
    for record in feed.records:
        note = f" - {record.note}" if record.note else ""
        click.echo(f"  {record.classifier}: {format_cents(record.amount_cents, config.currency)}{note}")
    click.echo(f"Total: {format_cents(feed.totals.total.to_cents(), config.currency)}")


@records.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--kind", type=KIND_CHOICE, default="earning", help="Record kind in FILE (default: earning)")
@click.option("--driver", help="Only records of this driver id")
@click.option("--period", type=PERIOD_CHOICE, default="weekly", help="Period to break down (default: weekly)")
@click.option("--on", "on", help="Reference day (default: today)")
def breakdown(file: str, kind: str, driver: str | None, period: str, on: str | None) -> None:
    """Print per-day totals for the period containing --on."""
    config = get_config()
    loaded = _load(file, kind)
    if driver:
        loaded = [record for record in loaded if record.owner_id == driver]

    try:
        first, last = period_window(Period(period), on or date.today())
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"{RecordKind(kind).label} {first} to {last}:")
    if Period(period) is Period.WEEKLY:
        table = weekday_totals(loaded, first, last, week_start=config.week_start_index)
        for label, row in table.iterrows():
            click.echo(f"  {label}: {format_cents(int(row['cents']), config.currency)} ({int(row['count'])})")
    else:
        table = daily_totals(loaded, first, last)
        for day, row in table.iterrows():
            click.echo(
                f"  {day:%Y-%m-%d}: {format_cents(int(row['cents']), config.currency)} ({int(row['count'])})"
            )


@records.command()
@click.argument("earnings_file", type=click.Path(dir_okay=False))
@click.argument("expenses_file", type=click.Path(dir_okay=False))
@click.option("--driver", help="Only records of this driver id")
@click.option("--period", type=PERIOD_CHOICE, default="monthly", help="Period (default: monthly)")
@click.option("--on", "on", help="Reference day (default: today)")
@click.option("--rate", help="Commission rate override, e.g. 0.3")
def income(
    earnings_file: str,
    expenses_file: str,
    driver: str | None,
    period: str,
    on: str | None,
    rate: str | None,
) -> None:
    """Print earnings * rate - expenses for the period."""
    config = get_config()
    earnings = _load(earnings_file, RecordKind.EARNING.value)
    expenses = _load(expenses_file, RecordKind.EXPENSE.value)

    try:
        commission_rate = Decimal(rate) if rate is not None else None
    except InvalidOperation as e:
        raise click.ClickException(f"Invalid --rate: {rate!r}") from e

    try:
        spec = filter_spec_for_period(Period(period), on or date.today(), owner_id=driver)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    result = net_income(
        aggregate(select_records(earnings, spec)),
        aggregate(select_records(expenses, spec)),
        commission_rate=commission_rate,
    )

    click.echo(f"Period: {spec.date_from} to {spec.date_to}")
    click.echo(f"Earnings: {format_cents(result.earnings.to_cents(), config.currency)}")
    click.echo(
        f"Earnings share ({result.commission_rate}): "
        f"{format_cents(result.earnings_share.to_cents(), config.currency)}"
    )
    click.echo(f"Expenses: {format_cents(result.expenses.to_cents(), config.currency)}")
    click.echo(f"Income: {format_cents(result.net.to_cents(), config.currency)}")


@records.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--kind", type=KIND_CHOICE, default="earning", help="Record kind in FILE (default: earning)")
@click.option("--driver", help="Driver id the statement is for")
@click.option("--driver-name", help="Driver name printed on the statement")
@click.option("--start", help="Start date (YYYY-MM-DD), inclusive")
@click.option("--end", help="End date (YYYY-MM-DD), inclusive")
@click.option("--output", help="Output file (default: statement directory)")
@click.option("--format", "export_format", type=click.Choice(["html", "json"]), help="Output format")
def statement(
    file: str,
    kind: str,
    driver: str | None,
    driver_name: str | None,
    start: str | None,
    end: str | None,
    output: str | None,
    export_format: str | None,
) -> None:
    """
    Export a statement for one driver.

    Examples:
      fleet records statement earnings.json --driver 42 --driver-name "Sam"
      fleet records statement expenses.json --kind expense --driver 42 --format json
    """
    config = get_config()
    export_format = export_format or config.statement.default_format
    loaded = _load(file, kind)

    try:
        selected = select_records(loaded, FilterSpec(owner_id=driver, date_from=start, date_to=end))
        document = format_statement(
            selected, aggregate(selected), Owner(id=driver, name=driver_name), kind=RecordKind(kind)
        )
    except (StatementFormatError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    if output:
        output_path = Path(output)
    else:
        output_path = config.output_dir / f"{document.generated_on}_{kind}_statement_{driver}.{export_format}"

    write_statement(
        document,
        output_path,
        export_format=export_format,
        currency=config.currency,
        company=config.statement.company_name,
    )
    click.echo(f"{document.title}: {len(document.rows)} rows, total {format_cents(document.total.to_cents(), config.currency)}")
    click.echo(f"Saved to: {output_path}")

#!/usr/bin/env python3
"""
Statement Export

Renders a StatementDocument as a self-contained HTML page (the share/print
format used by the driver app) or as JSON, and writes it to disk.
"""

import logging
from datetime import date
from html import escape
from pathlib import Path

from ..core.currency import format_cents
from ..core.json_utils import format_json, write_json
from .formatter import StatementDocument

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("html", "json")

_STYLE = """
      body { font-family: 'Helvetica', Arial, sans-serif; margin: 0; padding: 20px; color: #333; }
      .header { text-align: center; margin-bottom: 30px; }
      .logo { font-size: 24px; font-weight: bold; margin-bottom: 5px; }
      .title { font-size: 20px; margin: 20px 0; }
      .info-section { margin-bottom: 20px; }
      table { width: 100%; border-collapse: collapse; margin-top: 20px; }
      th { background-color: #000; color: white; text-align: left; padding: 10px 12px; }
      td { padding: 8px 12px; border-bottom: 1px solid #eee; }
      tr.alt { background-color: #f9f9f9; }
      .amount { text-align: right; }
      .total-row { font-weight: bold; background-color: #f0f0f0; }
      .total-row td { border-top: 2px solid #000; }
      .footer { margin-top: 40px; text-align: center; font-size: 12px; color: #666; }
"""


def _display_date(iso: str | None) -> str:
    """Format "2024-03-01" as "Mar 1, 2024"."""
    if not iso:
        return "-"
    day = date.fromisoformat(iso)
    return f"{day:%b} {day.day}, {day.year}"


def render_html(document: StatementDocument, currency: str = "AED", company: str = "FleetX") -> str:
    """
    Render a statement as an HTML page.

    All document text is HTML-escaped.
    """
    classifier_heading = "Payment Type" if document.kind.classifier_field == "type" else "Category"

    body_rows = []
    for index, row in enumerate(document.rows):
        css = ' class="alt"' if index % 2 == 0 else ""
        body_rows.append(
            f"        <tr{css}>"
            f"<td>{escape(_display_date(row.date))}</td>"
            f"<td>{escape(row.classifier or '-')}</td>"
            f"<td>{escape(row.note or '-')}</td>"
            f'<td class="amount">{escape(format_cents(row.amount.to_cents(), currency))}</td>'
            "</tr>"
        )

    generated = date.fromisoformat(document.generated_on)
    summary_heading = document.title.replace("Statement", "Summary").strip()

    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{escape(document.title)}</title>
    <style>{_STYLE}    </style>
  </head>
  <body>
    <div class="header">
      <div class="logo">{escape(company)}</div>
      <div>{escape(document.title)}</div>
    </div>
    <div class="info-section">
      <div><strong>Driver:</strong> {escape(document.owner_name)}</div>
      <div><strong>Driver ID:</strong> {escape(document.owner_id)}</div>
      <div><strong>Generated on:</strong> {generated:%B} {generated.day}, {generated.year}</div>
    </div>
    <h2 class="title">{escape(summary_heading)}</h2>
    <table>
      <thead>
        <tr><th>Date</th><th>{classifier_heading}</th><th>Description</th><th class="amount">Amount</th></tr>
      </thead>
      <tbody>
{chr(10).join(body_rows)}
        <tr class="total-row"><td colspan="3" class="amount">Total</td><td class="amount">{escape(format_cents(document.total.to_cents(), currency))}</td></tr>
      </tbody>
    </table>
    <div class="footer">
      <p>This document was automatically generated by {escape(company)}. &copy; {generated.year} {escape(company)}.</p>
    </div>
  </body>
</html>
"""


def render_json(document: StatementDocument) -> str:
    """Render a statement as pretty-printed JSON."""
    return format_json(document.to_dict())


def write_statement(
    document: StatementDocument,
    path: str | Path,
    export_format: str = "html",
    currency: str = "AED",
    company: str = "FleetX",
) -> Path:
    """
    Write a statement to disk.

    Args:
        document: Statement to write
        path: Output file path (parent directories are created)
        export_format: "html" or "json"

    Returns:
        The written path

    Raises:
        ValueError: If export_format is not supported
    """
    if export_format not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported statement format: {export_format!r}")

    path = Path(path)
    if export_format == "json":
        write_json(path, document.to_dict())
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_html(document, currency=currency, company=company), encoding="utf-8")

    logger.info(f"Wrote {document.title.lower()} for driver {document.owner_id} to {path}")
    return path

#!/usr/bin/env python3
"""
Record Loader

Boundary adapter between the fleet REST backend and the record model.

The backend is inconsistent about response shape: list endpoints return a bare
array, {"data": [...]}, or a kind-specific key such as {"earnings": [...]}.
All of that shape-sniffing lives here so the filter and aggregator only ever
see list[FinancialRecord].

Functions:
- unwrap_response: Extract the list of raw record dicts from a response body
- record_from_dict: Convert one raw dict into a FinancialRecord
- records_from_response: Both of the above for a whole response
- load_records: Read a saved response from a JSON file
"""

import logging
from pathlib import Path
from typing import Any

from ..core.json_utils import read_json
from ..core.models import FinancialRecord, RecordKind

logger = logging.getLogger(__name__)


class ResponseShapeError(ValueError):
    """Raised when a response body carries no recognisable record list."""

    pass


def unwrap_response(payload: Any, kind: RecordKind) -> list[Any]:
    """
    Extract the record list from a backend response body.

    Args:
        payload: Parsed JSON body
        kind: Record kind, used to find the kind-specific key

    Returns:
        List of raw entries (not yet validated)

    Raises:
        ResponseShapeError: If no list can be found
    """
    if isinstance(payload, list):
        return payload

    if isinstance(payload, dict):
        for key in ("data", kind.collection_key):
            value = payload.get(key)
            if isinstance(value, list):
                return value
            if key == "data" and isinstance(value, dict):
                # {"data": {"earnings": [...]}}
                return unwrap_response(value, kind)

    raise ResponseShapeError(
        f"Expected a list, 'data' or '{kind.collection_key}' in {kind.value} response, "
        f"got {type(payload).__name__}"
    )


def _owner_id(data: dict[str, Any]) -> str | None:
    owner = data.get("driverId")
    if owner is None and isinstance(data.get("driver"), dict):
        owner = data["driver"].get("id")
    return str(owner) if owner is not None else None


def record_from_dict(data: dict[str, Any], kind: RecordKind) -> FinancialRecord:
    """
    Create a FinancialRecord from a backend dict.

    Invalid amounts and dates are kept on the record (amount/occurred_on
    become None) so later stages decide what to exclude.

    Args:
        data: Dictionary from the backend (earnings, expenses or auto-expenses)
        kind: Which kind of record the dict describes

    Returns:
        FinancialRecord instance
    """
    return FinancialRecord.create(
        id=str(data.get("id", "")),
        amount=data.get("amount"),
        classifier=data.get(kind.classifier_field) or "",
        occurred_on=data.get("date"),
        owner_id=_owner_id(data),
        note=data.get("note") or data.get("description"),
        kind=kind,
        account=data.get("accountName"),
    )


def records_from_response(payload: Any, kind: RecordKind) -> list[FinancialRecord]:
    """
    Convert a whole backend response into records.

    Entries that are not JSON objects are skipped with a warning.
    """
    records = []
    for index, entry in enumerate(unwrap_response(payload, kind)):
        if not isinstance(entry, dict):
            logger.warning(f"Skipping non-object {kind.value} entry at index {index}: {entry!r}")
            continue
        records.append(record_from_dict(entry, kind))

    logger.debug(f"Loaded {len(records)} {kind.value} records")
    return records


def load_records(path: str | Path, kind: RecordKind) -> list[FinancialRecord]:
    """
    Load records from a saved backend response.

    Raises:
        FileNotFoundError: If the file does not exist
        ResponseShapeError: If the file holds no record list
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Record file not found: {path}")

    return records_from_response(read_json(path), kind)

"""
Record Package

Turns backend responses into FinancialRecord lists and selects the records a
screen or report is interested in.
"""

from .filter import filter_records, select_records, valid_records
from .loader import ResponseShapeError, load_records, record_from_dict, records_from_response, unwrap_response

__all__ = [
    "ResponseShapeError",
    "filter_records",
    "load_records",
    "record_from_dict",
    "records_from_response",
    "select_records",
    "unwrap_response",
    "valid_records",
]

"""
Statement Package

Statement documents for a driver and their HTML/JSON export.
"""

from .export import EXPORT_FORMATS, render_html, render_json, write_statement
from .formatter import (
    EmptyOwnerError,
    StatementDocument,
    StatementFormatError,
    StatementRow,
    format_statement,
)

__all__ = [
    "EXPORT_FORMATS",
    "EmptyOwnerError",
    "StatementDocument",
    "StatementFormatError",
    "StatementRow",
    "format_statement",
    "render_html",
    "render_json",
    "write_statement",
]

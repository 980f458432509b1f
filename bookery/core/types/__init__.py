"""Validated value types."""

from .values import (
    BookName,
    EditorName,
    IsoDate,
    PersonDocument,
    PersonName,
    ValidatedString,
    parse_iso_date,
)

__all__ = [
    "BookName",
    "EditorName",
    "IsoDate",
    "PersonDocument",
    "PersonName",
    "ValidatedString",
    "parse_iso_date",
]

"""Validated value types guarding every persisted field.

Each type checks its raw string once, at construction, and either holds the
exact input or raises. Nothing is trimmed, truncated or case-folded.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Annotated, Any, ClassVar

from pydantic import BeforeValidator, GetCoreSchemaHandler
from pydantic_core import core_schema

from bookery.core.exceptions import (
    InvalidCharsetError,
    TooLongError,
    WrongSizeError,
)

_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_DIGITS = frozenset("0123456789")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class ValidatedString:
    """Immutable string wrapper validated on construction.

    Subclasses set ``max_length`` or ``exact_length`` and may override
    ``_allowed`` to restrict the character set.
    """

    max_length: ClassVar[int | None] = None
    exact_length: ClassVar[int | None] = None

    __slots__ = ("_value",)

    def __init__(self, raw: str) -> None:
        if not isinstance(raw, str):
            raise TypeError(f"{type(self).__name__} expects str, got {type(raw).__name__}")

        name = type(self).__name__
        if self.exact_length is not None and len(raw) != self.exact_length:
            raise WrongSizeError(
                name, f"expected exactly {self.exact_length} characters, got {len(raw)}"
            )
        # Charset before max length: a disallowed character is reported as
        # such whatever the length of the input.
        for char in raw:
            if not self._allowed(char):
                raise InvalidCharsetError(name, f"character {char!r} is not allowed")
        if self.max_length is not None and len(raw) > self.max_length:
            raise TooLongError(
                name, f"at most {self.max_length} characters allowed, got {len(raw)}"
            )

        object.__setattr__(self, "_value", raw)

    @classmethod
    def _allowed(cls, char: str) -> bool:
        return True

    def as_str(self) -> str:
        """Return the raw validated value."""
        return self._value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Domain errors raised by cls() are not ValueErrors, so pydantic lets
        # them propagate unchanged instead of wrapping them.
        from_str = core_schema.no_info_after_validator_function(
            cls, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.as_str(), return_schema=core_schema.str_schema()
            ),
        )


class PersonName(ValidatedString):
    """Up to 128 ASCII letters and spaces."""

    max_length = 128

    @classmethod
    def _allowed(cls, char: str) -> bool:
        return char in _ASCII_LETTERS or char == " "


class BookName(ValidatedString):
    """Up to 64 characters of any kind."""

    max_length = 64


class EditorName(ValidatedString):
    """Up to 64 ASCII characters."""

    max_length = 64

    @classmethod
    def _allowed(cls, char: str) -> bool:
        return char.isascii()


class PersonDocument(ValidatedString):
    """National ID number: exactly 11 ASCII digits."""

    exact_length = 11

    @classmethod
    def _allowed(cls, char: str) -> bool:
        return char in _ASCII_DIGITS


def parse_iso_date(value: Any) -> date:
    """Accept ``YYYY-MM-DD`` strings and ``date`` objects, nothing else.

    Raises ValueError so pydantic reports a malformed date as a regular
    payload error.
    """
    if isinstance(value, str):
        if not _ISO_DATE.match(value):
            raise ValueError(f"date must be formatted as YYYY-MM-DD, got {value!r}")
        return date.fromisoformat(value)
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    raise ValueError(f"date must be a YYYY-MM-DD string, got {type(value).__name__}")


IsoDate = Annotated[date, BeforeValidator(parse_iso_date)]

"""Unit tests for the validated value types."""

from datetime import date, datetime

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from bookery.core.exceptions import (
    InvalidCharsetError,
    TooLongError,
    ValidationError,
    WrongSizeError,
)
from bookery.core.types import (
    BookName,
    EditorName,
    IsoDate,
    PersonDocument,
    PersonName,
    parse_iso_date,
)


class TestPersonName:
    """PersonName accepts up to 128 ASCII letters and spaces."""

    def test_letters_and_spaces_round_trip(self):
        assert PersonName("Jane Austen").as_str() == "Jane Austen"

    def test_max_length_accepted(self):
        raw = "a" * 128
        assert PersonName(raw).as_str() == raw

    def test_too_long(self):
        with pytest.raises(TooLongError):
            PersonName("a" * 129)

    def test_digit_rejected(self):
        with pytest.raises(InvalidCharsetError):
            PersonName("R2D2")

    def test_non_ascii_letter_rejected(self):
        with pytest.raises(InvalidCharsetError):
            PersonName("Zoë")

    def test_empty_is_valid(self):
        assert PersonName("").as_str() == ""

    def test_no_normalization(self):
        """Case and surrounding whitespace are kept as given."""
        assert PersonName("  jANE  ").as_str() == "  jANE  "

    def test_errors_share_a_base(self):
        with pytest.raises(ValidationError) as exc_info:
            PersonName("123")
        assert exc_info.value.type_name == "PersonName"


class TestPersonDocument:
    """PersonDocument is exactly eleven ASCII digits."""

    def test_eleven_digits(self):
        assert PersonDocument("12345678901").as_str() == "12345678901"

    @pytest.mark.parametrize("raw", ["1234567890", "123456789012", ""])
    def test_wrong_size(self, raw):
        with pytest.raises(WrongSizeError):
            PersonDocument(raw)

    def test_letter_rejected(self):
        with pytest.raises(InvalidCharsetError):
            PersonDocument("1234567890a")

    def test_size_checked_before_charset(self):
        with pytest.raises(WrongSizeError):
            PersonDocument("abc")


class TestBookName:
    def test_multibyte_characters_allowed(self):
        assert BookName("Les Misérables 📚").as_str() == "Les Misérables 📚"

    def test_length_counts_characters(self):
        assert BookName("é" * 64).as_str() == "é" * 64

    def test_too_long(self):
        with pytest.raises(TooLongError):
            BookName("x" * 65)


class TestEditorName:
    def test_ascii_punctuation_allowed(self):
        assert EditorName("Penguin & Co. #1").as_str() == "Penguin & Co. #1"

    def test_non_ascii_rejected(self):
        with pytest.raises(InvalidCharsetError):
            EditorName("Éditions")

    def test_too_long(self):
        with pytest.raises(TooLongError):
            EditorName("x" * 65)


class TestValueSemantics:
    """Values behave like immutable strings of their own type."""

    def test_equality_and_hash(self):
        assert PersonName("Emma") == PersonName("Emma")
        assert hash(PersonName("Emma")) == hash(PersonName("Emma"))
        assert PersonName("Emma") != BookName("Emma")

    def test_immutable(self):
        name = PersonName("Emma")
        with pytest.raises(AttributeError):
            name._value = "Other"  # type: ignore[misc]

    def test_str_and_repr(self):
        assert str(BookName("Emma")) == "Emma"
        assert repr(BookName("Emma")) == "BookName('Emma')"

    def test_non_string_rejected(self):
        with pytest.raises(TypeError):
            PersonName(42)  # type: ignore[arg-type]


class _Holder(BaseModel):
    name: PersonName
    day: IsoDate


class TestPydanticIntegration:
    def test_validates_from_str(self):
        holder = _Holder(name="Emma", day="2020-02-29")
        assert holder.name == PersonName("Emma")
        assert holder.day == date(2020, 2, 29)

    def test_domain_error_propagates(self):
        with pytest.raises(InvalidCharsetError):
            _Holder(name="R2D2", day="2020-01-01")

    def test_serializes_raw_string(self):
        holder = _Holder(name="Emma", day="2020-01-01")
        assert holder.model_dump(mode="json") == {"name": "Emma", "day": "2020-01-01"}

    def test_json_round_trip(self):
        holder = _Holder.model_validate_json('{"name": "Emma", "day": "2020-01-01"}')
        assert holder.name.as_str() == "Emma"


class TestIsoDate:
    def test_parses_iso_string(self):
        assert parse_iso_date("1815-12-23") == date(1815, 12, 23)

    def test_date_passes_through(self):
        assert parse_iso_date(date(2000, 1, 1)) == date(2000, 1, 1)

    @pytest.mark.parametrize("raw", ["2020-1-1", "01/02/2020", "2020-01-01T00:00:00"])
    def test_other_formats_rejected(self, raw):
        with pytest.raises(ValueError):
            parse_iso_date(raw)

    @pytest.mark.parametrize("raw", [0, 1700000000, 1.5, None, datetime(2020, 1, 1, 12, 0)])
    def test_non_string_values_rejected(self, raw):
        with pytest.raises(ValueError):
            parse_iso_date(raw)

    def test_timestamp_rejected_in_models(self):
        with pytest.raises(PydanticValidationError):
            _Holder(name="Emma", day=0)

    def test_impossible_date_rejected(self):
        with pytest.raises(PydanticValidationError):
            _Holder(name="Emma", day="2021-02-29")

"""
ABOUTME: Unit tests for string parsers and default conversion
ABOUTME: Tests parser lookup, registration and converting defaults into target types
"""

import enum
from decimal import Decimal
from pathlib import Path

import pytest

from env_option import parsers
from env_option.parsers import convert, parse_bool, parser_for, register_parser


class Color(enum.Enum):
    RED = "red"
    BLUE = "blue"


@pytest.fixture
def restore_parsers():
    """Undo parser registrations made by a test."""
    saved = dict(parsers._PARSERS)
    yield
    parsers._PARSERS.clear()
    parsers._PARSERS.update(saved)


class TestParseBool:
    """Test the bool parser."""

    def test_accepts_true_and_false(self):
        assert parse_bool("true") is True
        assert parse_bool("false") is False

    @pytest.mark.parametrize("raw", ["True", "1", "yes", "", " true"])
    def test_rejects_other_spellings(self, raw):
        with pytest.raises(ValueError, match="not `true` or `false`"):
            parse_bool(raw)


class TestParserFor:
    """Test parser lookup."""

    def test_bool_uses_registered_parser(self):
        assert parser_for(bool) is parse_bool

    @pytest.mark.parametrize("kind", [int, float, str, Decimal, Path])
    def test_types_parse_by_construction(self, kind):
        assert parser_for(kind) is kind

    def test_enum_parses_by_value(self):
        assert parser_for(Color)("blue") is Color.BLUE

    def test_callable_is_its_own_parser(self):
        def upper(raw):
            return raw.upper()

        assert parser_for(upper) is upper

    def test_register_parser(self, restore_parsers):
        """Test that a registered parser replaces construction."""
        register_parser(Color, lambda raw: Color[raw.upper()])

        assert parser_for(Color)("red") is Color.RED


class TestConvert:
    """Test converting defaults into target types."""

    def test_instance_returned_unchanged(self):
        value = Decimal("1.5")
        assert convert(value, Decimal) is value

    def test_bool_into_int(self):
        """Test that bool is not treated as already being an int."""
        value = convert(False, int)

        assert value == 0
        assert type(value) is int

    def test_bool_into_bool_unchanged(self):
        assert convert(True, bool) is True

    def test_int_into_float(self):
        value = convert(3, float)

        assert value == 3.0
        assert isinstance(value, float)

    def test_str_into_int(self):
        assert convert("8080", int) == 8080

    def test_str_into_bool_uses_parser(self):
        assert convert("false", bool) is False

    def test_str_into_path(self):
        assert convert("/tmp/data", Path) == Path("/tmp/data")

    def test_callable_kind_returns_value_unchanged(self):
        assert convert(["a"], lambda raw: raw.split(",")) == ["a"]

    def test_unconvertible_default_raises(self):
        with pytest.raises(ValueError):
            convert("eighty", int)

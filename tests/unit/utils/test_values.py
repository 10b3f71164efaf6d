"""Unit tests for value elision and string conversion."""
import logging
import pytest
from decimal import Decimal
from fractions import Fraction
from fix_whitespace.utils.exceptions import ValueConversionError
from fix_whitespace.utils.values import is_falsy, stringify


class BrokenStr:
    """Value whose string conversion fails."""

    def __str__(self):
        raise RuntimeError("boom")


class NonStringStr:
    """Value whose __str__ returns something other than a string."""

    def __str__(self):
        return 42


class TestIsFalsy:
    """Test the falsy predicate."""

    @pytest.mark.parametrize("value", [
        "", 0, 0.0, -0.0, 0j, False, None,
        float("nan"), Decimal(0), Decimal("NaN"), Decimal("sNaN"), Fraction(0)
    ])
    def test_falsy_values(self, value):
        """Empty string, zero, False, None and NaN are falsy."""
        assert is_falsy(value) is True

    @pytest.mark.parametrize("value", [
        "0", " ", "false", 1, -1, 0.5, True, float("inf"),
        [], {}, (), object()
    ])
    def test_truthy_values(self, value):
        """Non-empty strings, non-zero numbers and any container are truthy."""
        assert is_falsy(value) is False


class TestStringify:
    """Test value string conversion."""

    def test_string_passthrough(self):
        """Strings are returned unchanged."""
        assert stringify("<li>1</li>") == "<li>1</li>"

    def test_number_conversion(self):
        """Numbers use their natural representation."""
        assert stringify(42) == "42"
        assert stringify(1.5) == "1.5"

    def test_custom_str(self):
        """Objects use their __str__."""
        class Greeting:
            def __str__(self):
                return "hello\nworld"

        assert stringify(Greeting()) == "hello\nworld"

    def test_failing_conversion_raises(self):
        """A failing __str__ becomes ValueConversionError."""
        with pytest.raises(ValueConversionError, match="BrokenStr") as exc_info:
            stringify(BrokenStr())
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_non_string_result_raises(self):
        """A __str__ returning a non-string becomes ValueConversionError."""
        with pytest.raises(ValueConversionError):
            stringify(NonStringStr())

    def test_failing_conversion_is_logged(self, caplog):
        """Conversion failures are logged at ERROR before propagating."""
        with caplog.at_level(logging.ERROR, logger="fix_whitespace.utils.values"):
            with pytest.raises(ValueConversionError):
                stringify(BrokenStr())
        assert "BrokenStr" in caplog.text

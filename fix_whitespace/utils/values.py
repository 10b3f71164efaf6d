"""Elision and string coercion rules for interpolated values."""
import logging
from decimal import Decimal
from numbers import Number
from typing import Any

from fix_whitespace.utils.exceptions import ValueConversionError

logger = logging.getLogger(__name__)


def is_falsy(value: Any) -> bool:
    """
    Check whether a value should be left out of the output entirely.

    Args:
        value: Any interpolated value

    Returns:
        True for None, False, "", numeric zero and NaN; False otherwise

    Behavior:
        - Mirrors JavaScript falsiness rather than Python truthiness
        - Empty containers ([], {}) are NOT falsy
        - The string "0" is NOT falsy
    """
    if value is None or value is False:
        return True

    if isinstance(value, str):
        return value == ""

    if isinstance(value, Decimal) and value.is_nan():
        # signaling NaN raises on comparison
        return True

    if isinstance(value, Number):
        # NaN is the only value not equal to itself
        return value == 0 or value != value

    return False


def stringify(value: Any) -> str:
    """
    Convert a truthy value to the text that gets inserted.

    Args:
        value: Value to convert

    Returns:
        str(value)

    Raises:
        ValueConversionError: If the value's string conversion fails
    """
    try:
        text = str(value)
    except Exception as e:
        logger.error(f"Failed to convert {type(value).__name__} value to string: {e}")
        raise ValueConversionError(
            f"Cannot convert {type(value).__name__} value to string: {e}"
        ) from e

    return text

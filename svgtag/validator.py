"""Validation of attribute values before they reach a builder's attribute map.

Each check returns the value to store (enum members are normalized to their
wire string) or raises InvalidValueError. ``None`` and ``""`` always mean
"unset" and pass through untouched.
"""

import math
import re
from enum import Enum
from typing import Any

from .errors import (
    VALUE_MUST_BE_GTE_ONE_OR_NULL,
    VALUE_MUST_BE_POSITIVE_NUMBER_OR_NULL,
    VALUE_NOT_IN_LIST,
    VALUE_OUT_OF_RANGE_OR_NULL,
    InvalidValueError,
)
from .values import SvgAttribute, Vocabulary

# SVG/CSS <number> grammar
NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def attribute_name(attribute: str | Enum) -> str:
    """Return the wire name for an attribute given as a string or enum member."""
    return attribute.value if isinstance(attribute, Enum) else attribute


def normalize(value: Any) -> Any:
    """Replace enum members with their underlying value."""
    return value.value if isinstance(value, Enum) else value


def is_unset(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def to_number(value: Any) -> float | None:
    """Parse an int, float or SVG number string; None when not a finite number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        if NUMBER.fullmatch(value) is None:
            return None
        number = float(value)
    else:
        return None
    return number if math.isfinite(number) else None


def one_of(value: Any, vocabulary: type[Vocabulary], attribute: str | Enum) -> Any:
    """Check that a value belongs to a vocabulary.

    Args:
        value: Enum member, raw string, or None/"" to unset
        vocabulary: Enum class listing the allowed keywords
        attribute: Wire name reported in the error message

    Returns:
        The wire string to store, or the unset marker unchanged

    Raises:
        InvalidValueError: If the value is not one of the vocabulary's keywords
    """
    if is_unset(value):
        return value
    if isinstance(value, vocabulary):
        return value.value

    value = normalize(value)
    allowed = vocabulary.values()
    if not isinstance(value, str) or value not in allowed:
        name = attribute_name(attribute)
        raise InvalidValueError(
            VALUE_NOT_IN_LIST.format(
                value=value,
                attribute=name,
                allowed=", ".join(f"'{item}'" for item in allowed),
            ),
            value=value,
            attribute=name,
            allowed=tuple(allowed),
        )
    return value


def in_range(value: Any, attribute: str | Enum, low: float = 0, high: float = 1) -> Any:
    """Check that a value is a number between ``low`` and ``high`` inclusive."""
    if is_unset(value):
        return value

    number = to_number(value)
    if number is None or not low <= number <= high:
        raise InvalidValueError(
            VALUE_OUT_OF_RANGE_OR_NULL.format(low=low, high=high),
            value=value,
            attribute=attribute_name(attribute),
        )
    return value


def unit_interval(value: Any, attribute: str | Enum) -> Any:
    """Opacity-like values: a number in [0, 1]."""
    return in_range(value, attribute, 0, 1)


def offset(value: Any, attribute: str | Enum = SvgAttribute.OFFSET) -> Any:
    """Gradient stop offsets: a number in [0, 1] or a percentage in [0%, 100%]."""
    if isinstance(value, str) and value.endswith("%"):
        number = to_number(value[:-1])
        if number is None or not 0 <= number <= 100:
            raise InvalidValueError(
                VALUE_OUT_OF_RANGE_OR_NULL.format(low=0, high=100),
                value=value,
                attribute=attribute_name(attribute),
            )
        return value
    return in_range(value, attribute, 0, 1)


def non_negative(value: Any, attribute: str | Enum) -> Any:
    if is_unset(value):
        return value

    number = to_number(value)
    if number is None or number < 0:
        raise InvalidValueError(
            VALUE_MUST_BE_POSITIVE_NUMBER_OR_NULL,
            value=value,
            attribute=attribute_name(attribute),
        )
    return value


def at_least_one(value: Any, attribute: str | Enum) -> Any:
    if is_unset(value):
        return value

    number = to_number(value)
    if number is None or number < 1:
        raise InvalidValueError(
            VALUE_MUST_BE_GTE_ONE_OR_NULL,
            value=value,
            attribute=attribute_name(attribute),
        )
    return value

# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
Contains the string-to-value conversion routines used by value bindings.

Each `ValueType` maps to one converter. Converters accept the raw token exactly
as it appeared on the command line and raise `ConversionError` when the token
is not a well-formed literal of the target type.

Functions:
- coerce_bool: Convert a string to a boolean using a fixed literal set.
- coerce_int: Convert a string to an integer.
- coerce_float: Convert a string to a float.
- coerce_datetime: Convert a string to a datetime via `dateutil`.
- coerce_value: Dispatch to the converter for a `ValueType`.
"""
import re
from datetime import datetime
from typing import Any, Callable

from dateutil import parser as date_parser

from argbind.exceptions import ConversionError
from argbind.parser.value_type import ValueType

TRUE_LITERALS = frozenset({"true", "True", "TRUE"})
FALSE_LITERALS = frozenset({"false", "False", "FALSE"})
INT_LITERAL = re.compile(r"[+-]?\d+", re.ASCII)
FLOAT_LITERAL = re.compile(
    r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|[+-]?(inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Only `true`, `True`, `TRUE`, `false`, `False` and `FALSE` are accepted.

    Raises:
        ConversionError: If the string is not one of the recognized literals.
    """
    if value in TRUE_LITERALS:
        return True
    if value in FALSE_LITERALS:
        return False
    raise ConversionError(value, "boolean")


def coerce_int(value: str) -> int:
    if not INT_LITERAL.fullmatch(value):
        raise ConversionError(value, "int")
    return int(value, 10)


def coerce_float(value: str) -> float:
    if not FLOAT_LITERAL.fullmatch(value):
        raise ConversionError(value, "float")
    return float(value)


def coerce_datetime(value: str) -> datetime:
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as error:
        raise ConversionError(value, "datetime") from error


def coerce_str(value: str) -> str:
    return value


_CONVERTERS: dict[ValueType, Callable[[str], Any]] = {
    ValueType.STRING: coerce_str,
    ValueType.INTEGER: coerce_int,
    ValueType.FLOAT: coerce_float,
    ValueType.BOOLEAN: coerce_bool,
    ValueType.DATETIME: coerce_datetime,
}


def coerce_value(value: str, value_type: ValueType | str | type) -> Any:
    """
    Convert a raw string to the given value type.

    Args:
        value (str): The raw command-line token.
        value_type (ValueType | str | type): The target variant, its name, or the
            matching Python type.

    Returns:
        Any: The converted value.

    Raises:
        ConversionError: If the string is malformed for the target type.
    """
    if not isinstance(value_type, ValueType):
        value_type = ValueType(value_type)
    return _CONVERTERS[value_type](value)

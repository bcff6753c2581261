# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
Defines `ValueType`, the closed set of scalar types a value binding can hold.

Each member names one conversion routine in `argbind.parser.utils`. Keeping the
set small and fixed lets conversion and restriction be keyed by the variant tag
instead of arbitrary callables.

Supports alias coercion for config-friendly names and lookup from Python types.

Example:
    ValueType("int")      → ValueType.INTEGER
    ValueType("double")   → ValueType.FLOAT (via alias)
    ValueType.from_python_type(bool) → ValueType.BOOLEAN
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any


class ValueType(Enum):
    """
    Scalar variants supported by value bindings.

    Members:
        STRING: Raw string, stored unchanged.
        INTEGER: Base-10 integer literal.
        FLOAT: Floating-point literal.
        BOOLEAN: One of `true`, `True`, `TRUE`, `false`, `False`, `FALSE`.
        DATETIME: Date and/or time string, parsed with `python-dateutil`.

    Aliases:
        - "string" → "str"
        - "integer", "long" → "int"
        - "double" → "float"
        - "boolean" → "bool"
        - "date" → "datetime"
    """

    STRING = "str"
    INTEGER = "int"
    FLOAT = "float"
    BOOLEAN = "bool"
    DATETIME = "datetime"

    @classmethod
    def ordered(cls) -> frozenset[ValueType]:
        """Return the value types whose values support ordering comparisons."""
        return frozenset({cls.INTEGER, cls.FLOAT, cls.DATETIME})

    @classmethod
    def from_python_type(cls, python_type: type) -> ValueType:
        """Map a Python type to its value type."""
        mapping: dict[type, ValueType] = {
            str: cls.STRING,
            bool: cls.BOOLEAN,
            int: cls.INTEGER,
            float: cls.FLOAT,
            datetime: cls.DATETIME,
        }
        try:
            return mapping[python_type]
        except KeyError:
            raise ValueError(
                f"Unsupported value type '{getattr(python_type, '__name__', python_type)}'"
            ) from None

    @classmethod
    def infer(cls, value: Any) -> ValueType:
        """Infer the value type of an existing Python value."""
        return cls.from_python_type(type(value))

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "string": "str",
            "integer": "int",
            "long": "int",
            "double": "float",
            "boolean": "bool",
            "date": "datetime",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueType:
        if isinstance(value, type):
            return cls.from_python_type(value)
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the value type."""
        return self.value

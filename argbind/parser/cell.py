# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
Defines `Cell`, the shared value holder that value and option bindings write to.

Binding a command to a variable means the action must outlive the registration
call and write somewhere the caller can read back. A `Cell` is that place: the
caller owns it, the binding holds a reference to it, and only the binding's
action writes to it during `CLI.run()`.

Example:
    rate = Cell(0.0)                     # ValueType.FLOAT inferred
    address = Cell(value_type="str")     # starts as None
    cli.register_value("r", rate, in_range(0.0, 1.0))
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from argbind.parser.value_type import ValueType


@dataclass
class Cell:
    """
    A mutable, typed slot for a bound command-line value.

    Attributes:
        value (Any): The current value. Defaults to None.
        value_type (ValueType | str | type | None): The scalar type of the cell.
            Inferred from `value` when omitted.
    """

    value: Any = None
    value_type: ValueType | str | type | None = None

    def __post_init__(self) -> None:
        if self.value_type is None:
            if self.value is None:
                raise ValueError("Cell needs an initial value or an explicit value_type")
            self.value_type = ValueType.infer(self.value)
        elif not isinstance(self.value_type, ValueType):
            self.value_type = ValueType(self.value_type)

    def get(self) -> Any:
        return self.value

    def set(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Cell({self.value!r}, value_type={self.value_type})"

"""
argbind

Copyright (c) 2025 argbind contributors.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .cli import CLI
from .exceptions import (
    ArgbindError,
    ArgbindWarning,
    ArityError,
    ArityWarning,
    ConversionError,
    DiscardedArgumentWarning,
    InvalidValueError,
    UnrecognizedTokenWarning,
)
from .options import CLIOptions
from .parser import (
    DEFAULT_PRIORITY,
    Cell,
    Restrictor,
    ValueType,
    email,
    in_range,
    one_of,
    pattern,
    unrestricted,
)
from .signals import FatalSignal, UsageError
from .state import ParseState

logger = logging.getLogger("argbind")


__all__ = [
    "CLI",
    "CLIOptions",
    "Cell",
    "DEFAULT_PRIORITY",
    "ParseState",
    "Restrictor",
    "ValueType",
    "email",
    "in_range",
    "one_of",
    "pattern",
    "unrestricted",
    "ArgbindError",
    "ArgbindWarning",
    "ArityError",
    "ArityWarning",
    "ConversionError",
    "DiscardedArgumentWarning",
    "FatalSignal",
    "InvalidValueError",
    "UnrecognizedTokenWarning",
    "UsageError",
]

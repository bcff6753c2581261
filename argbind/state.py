# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
Defines `ParseState`, the lifecycle of a `CLI` instance.

UNPARSED → PARSING → PARSED. There is no transition back to UNPARSED.
Registration is only legal while UNPARSED and `run()` only once PARSED.
A parse that fails part-way stays in PARSING.
"""
from enum import Enum


class ParseState(Enum):
    """Enum for the lifecycle states of a CLI instance."""

    UNPARSED = "unparsed"
    PARSING = "parsing"
    PARSED = "parsed"

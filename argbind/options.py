# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
Runtime options for a `CLI` instance.

Options:
- tie_break: How actions of equal priority are ordered. "registration" (default)
  keeps the order the commands were registered in; "input" keeps the order they
  appeared on the command line.
- single_shot_run: If True, a second `run()` is a `UsageError`. By default
  `run()` re-executes every action each time it is called.
- echo_warnings: Print warnings to the console as they are reported.
"""
from typing import Literal

from pydantic import BaseModel, ConfigDict


class CLIOptions(BaseModel):
    """Behavioral switches for `CLI`."""

    tie_break: Literal["registration", "input"] = "registration"
    single_shot_run: bool = False
    echo_warnings: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")

# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
This module implements `CLI`, the entry point of argbind: register commands,
values and options, parse an argument vector, then run the bound actions.

Pipeline:
    argv → tokenize() → expand_clusters() → dispatch() → ordered actions → run()

Key Features:
- Chainable registration of free commands, typed value bindings and flags
- Aliases, short-flag clustering (`-abc` → `-a -b -c`)
- Arity checks at parse time (too few is an error, too many a warning)
- Type conversion and restrictor validation when the action runs
- Priority-ordered deferred execution

Example Usage:
    rate = Cell(0.0)
    verbose = Cell(False)

    cli = CLI()
    cli.register_value("r", rate, in_range(0.0, 1.0)).register_option(
        "v", verbose, alias="verbose"
    )
    cli.parse(["prog", "-r", "0.5", "--verbose"]).run()

    # rate.value == 0.5, verbose.value is True

Lifecycle:
    UNPARSED → PARSING → PARSED. Misusing it raises `UsageError`, a fatal signal.
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Sequence

from rich.console import Console

from argbind.console import console, print_warning
from argbind.exceptions import ArgbindWarning, InvalidValueError
from argbind.logger import logger
from argbind.options import CLIOptions
from argbind.parser.binding import DEFAULT_PRIORITY, Binding, DeferredAction
from argbind.parser.cell import Cell
from argbind.parser.cluster import expand_clusters
from argbind.parser.dispatcher import dispatch
from argbind.parser.registry import BindingRegistry
from argbind.parser.restrictors import Restrictor, unrestricted
from argbind.parser.token import Token
from argbind.parser.tokenizer import tokenize
from argbind.parser.utils import coerce_value
from argbind.parser.value_type import ValueType
from argbind.signals import UsageError
from argbind.state import ParseState


class CLI:
    """
    Command-line binding front end.

    Holds the binding registry, parses argument vectors into priority-ordered
    deferred actions and runs them.

    Attributes:
        options (CLIOptions): Ordering, re-run and echo behavior.
        console (Console): Rich console used to echo warnings.
        warnings (list[ArgbindWarning]): Every warning reported during parsing.
    """

    def __init__(
        self,
        options: CLIOptions | None = None,
        console: Console = console,
    ) -> None:
        self.options: CLIOptions = options or CLIOptions()
        self.console: Console = console
        self.warnings: list[ArgbindWarning] = []
        self._registry = BindingRegistry()
        self._state = ParseState.UNPARSED
        self._tokens: list[Token] = []
        self._tasks: list[DeferredAction] = []
        self._runs: int = 0

    @property
    def state(self) -> ParseState:
        return self._state

    @property
    def parsed(self) -> bool:
        return self._state == ParseState.PARSED

    @property
    def tokens(self) -> list[Token]:
        """Tokens after cluster expansion, program identity first."""
        return list(self._tokens)

    @property
    def tasks(self) -> list[DeferredAction]:
        """Deferred actions in execution order."""
        return list(self._tasks)

    @property
    def bindings(self) -> BindingRegistry:
        return self._registry

    def _ensure_unparsed(self, operation: str) -> None:
        if self._state != ParseState.UNPARSED:
            raise UsageError(f"Can not {operation}() after parse().")

    def _report(self, warning: ArgbindWarning) -> None:
        self.warnings.append(warning)
        if self.options.echo_warnings:
            logger.debug("%s", warning)
            print_warning(str(warning), self.console)
        else:
            logger.warning("%s", warning)

    def register_command(
        self,
        name: str,
        action: Callable[[list[str]], Any],
        expected_arity: int | None = None,
        priority: int = DEFAULT_PRIORITY,
        *,
        alias: str | None = None,
    ) -> CLI:
        """
        Register a free command.

        Args:
            name (str): Primary name, without leading dashes.
            action (Callable[[list[str]], Any]): Called with the command's arguments.
            expected_arity (int | None): Exact argument count; None is unbounded.
            priority (int): Higher priorities run first.
            alias (str | None): Optional alternate name.

        Returns:
            CLI: This instance, for chaining.

        Raises:
            UsageError: If called after parse() or a name is already taken.
        """
        self._ensure_unparsed("register_command")
        try:
            binding = Binding(
                name=name,
                alias=alias,
                action=action,
                expected_arity=expected_arity,
                priority=priority,
                index=self._registry.next_index,
            )
        except (TypeError, ValueError) as error:
            raise UsageError(f"Invalid command '{name}': {error}") from error
        self._registry.add(binding)
        return self

    def register_value(
        self,
        name: str,
        target: Cell,
        restrictor: Restrictor | None = None,
        *,
        alias: str | None = None,
        priority: int = DEFAULT_PRIORITY,
    ) -> CLI:
        """
        Register a one-argument command that converts, validates and stores a value.

        The conversion runs when the action runs. If conversion or validation
        fails, `target` keeps its previous value and `ConversionError` or
        `InvalidValueError` propagates out of `run()`.

        Args:
            name (str): Primary name, without leading dashes.
            target (Cell): Cell that receives the converted value.
            restrictor (Restrictor | None): Validation rule; defaults to `unrestricted()`.
            alias (str | None): Optional alternate name.
            priority (int): Higher priorities run first.

        Returns:
            CLI: This instance, for chaining.
        """
        self._ensure_unparsed("register_value")
        if not isinstance(target, Cell):
            raise UsageError(f"Target for '{name}' must be a Cell, got {type(target)}.")
        value_type = target.value_type
        restrictor = restrictor or unrestricted()
        if not restrictor.supports(value_type):
            raise UsageError(
                f"Restrictor '{restrictor.description}' cannot validate "
                f"{value_type} values ('{name}')."
            )

        def assign(arguments: list[str]) -> None:
            raw = arguments[0]
            value = coerce_value(raw, value_type)
            try:
                allowed = restrictor(value)
            except TypeError as error:
                raise InvalidValueError(raw, name, restrictor.description) from error
            if not allowed:
                raise InvalidValueError(raw, name, restrictor.description)
            target.set(value)
            logger.debug("[%s] Stored %r", name, value)

        return self.register_command(name, assign, 1, priority, alias=alias)

    def register_option(
        self,
        name: str,
        target: Cell,
        *,
        alias: str | None = None,
        priority: int = DEFAULT_PRIORITY,
    ) -> CLI:
        """
        Register a zero-argument flag that sets a boolean cell to True.

        Returns:
            CLI: This instance, for chaining.
        """
        self._ensure_unparsed("register_option")
        if not isinstance(target, Cell) or target.value_type != ValueType.BOOLEAN:
            raise UsageError(f"Target for option '{name}' must be a boolean Cell.")

        def enable(_: list[str]) -> None:
            target.set(True)

        return self.register_command(name, enable, 0, priority, alias=alias)

    def parse(self, arguments: Sequence[str] | None = None) -> CLI:
        """
        Tokenize, expand clusters, resolve, pack and order the actions.

        Args:
            arguments (Sequence[str] | None): Program identity followed by user
                arguments. Defaults to `sys.argv`.

        Returns:
            CLI: This instance, for chaining.

        Raises:
            UsageError: If parse() was already called.
            ArityError: If a command received too few arguments.
        """
        if self._state != ParseState.UNPARSED:
            raise UsageError("parse() may only be called once.")
        if arguments is None:
            arguments = sys.argv
        self._state = ParseState.PARSING
        self._registry.freeze()

        tokens = tokenize(arguments)
        self._tokens = expand_clusters(tokens, self._registry, self._report)
        self._tasks = dispatch(
            self._tokens, self._registry, self._report, self.options.tie_break
        )
        self._state = ParseState.PARSED
        logger.info(
            "Parsed %d token(s) into %d action(s).",
            len(self._tokens) - 1,
            len(self._tasks),
        )
        return self

    def run(self) -> CLI:
        """
        Invoke every deferred action once, in priority order.

        Calling `run()` again re-executes all actions unless
        `CLIOptions.single_shot_run` is set.

        Returns:
            CLI: This instance, for chaining.

        Raises:
            UsageError: If called before a successful parse(), or a second time
                with `single_shot_run`.
        """
        if self._state != ParseState.PARSED:
            raise UsageError("Option has not parsed; call parse() before run().")
        if self.options.single_shot_run and self._runs:
            raise UsageError("run() may only be called once (single_shot_run).")
        self._runs += 1
        for task in self._tasks:
            logger.debug("[%s] Running (priority=%d)", task.name, task.priority)
            task()
        return self

    def __str__(self) -> str:
        return (
            f"CLI(state={self._state.value}, bindings={len(self._registry)}, "
            f"tasks={len(self._tasks)}, warnings={len(self.warnings)})"
        )

    def __repr__(self) -> str:
        return str(self)

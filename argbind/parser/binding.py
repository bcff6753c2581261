# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
Defines `Binding`, a registered command, and `DeferredAction`, a binding packed
with the arguments of one token and waiting to run.

A `Binding` is created at registration time and never changes afterwards. When
the dispatcher resolves a token to a binding it calls `Binding.pack()`, which
checks the argument count against `expected_arity` and returns a zero-argument
`DeferredAction` that `CLI.run()` invokes later, in priority order.

Arity rules:
- `expected_arity=None` accepts any number of arguments.
- Fewer arguments than expected raises `ArityError`.
- More arguments than expected reports an `ArityWarning`; every argument is
  still passed to the action.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from argbind.exceptions import ArgbindWarning, ArityError, ArityWarning
from argbind.logger import logger

DEFAULT_PRIORITY = -1

Reporter = Callable[[ArgbindWarning], None]


@dataclass
class DeferredAction:
    """
    A binding's action bound to a token's arguments.

    Attributes:
        name (str): Primary name of the binding that produced this action.
        thunk (Callable[[], Any]): The bound action, ready to call.
        priority (int): Higher priorities run first.
        order (int): Registration index of the binding, used as a tie-break.
        arguments (list[str]): The arguments bound into `thunk`.
    """

    name: str
    thunk: Callable[[], Any]
    priority: int
    order: int = 0
    arguments: list[str] = field(default_factory=list)

    def __call__(self) -> Any:
        return self.thunk()


class Binding(BaseModel):
    """
    A command registered under a primary name and an optional alias.

    Attributes:
        name (str): Primary name (without leading dashes).
        alias (str | None): Alternate name resolved to the same binding.
        action (Callable[[list[str]], Any]): Called with the token's arguments.
        expected_arity (int | None): Exact argument count, or None for unbounded.
        priority (int): Execution priority; higher runs first.
        index (int): Registration order within the registry.
    """

    name: str
    action: Callable[[list[str]], Any]
    alias: str | None = None
    expected_arity: int | None = Field(default=None, ge=0)
    priority: int = DEFAULT_PRIORITY
    index: int = 0

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @field_validator("action", mode="before")
    @classmethod
    def check_callable(cls, action: Any) -> Any:
        if not callable(action):
            raise TypeError("Action must be a callable")
        return action

    @property
    def names(self) -> tuple[str, ...]:
        """All names this binding answers to."""
        if self.alias is None:
            return (self.name,)
        return (self.name, self.alias)

    def pack(
        self, arguments: list[str], report: Reporter | None = None
    ) -> DeferredAction:
        """
        Check arity and bind `arguments` into a deferred action.

        Args:
            arguments (list[str]): Plain arguments of the resolved token.
            report (Reporter | None): Receives non-fatal diagnostics.

        Returns:
            DeferredAction: The packed action.

        Raises:
            ArityError: If fewer arguments than `expected_arity` were given.
        """
        arguments = list(arguments)
        if self.expected_arity is not None:
            if len(arguments) < self.expected_arity:
                raise ArityError(self.name, self.expected_arity, len(arguments))
            if len(arguments) > self.expected_arity and report is not None:
                report(ArityWarning(self.name, self.expected_arity, len(arguments)))

        logger.debug("[%s] Packed with arguments %s", self.name, arguments)
        return DeferredAction(
            name=self.name,
            thunk=partial(self.action, arguments),
            priority=self.priority,
            order=self.index,
            arguments=arguments,
        )

# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
Resolves tokens to bindings and produces the priority-ordered action list.

For every token after the program identity:
1. Resolve the name as a primary name, then as an alias.
2. Unresolved tokens are reported (`UnrecognizedTokenWarning` plus one
   `DiscardedArgumentWarning` per argument) and skipped.
3. Resolved tokens are packed by their binding, which checks arity.

The packed actions are then sorted by descending priority. Python's sort is
stable; ties fall back to registration order or, with `tie_break="input"`, to
the order the tokens appeared on the command line.
"""
from typing import Literal, Sequence

from argbind.exceptions import DiscardedArgumentWarning, UnrecognizedTokenWarning
from argbind.logger import logger
from argbind.parser.binding import DeferredAction, Reporter
from argbind.parser.registry import BindingRegistry
from argbind.parser.token import Token

TieBreak = Literal["registration", "input"]


def order_actions(
    actions: Sequence[DeferredAction], tie_break: TieBreak = "registration"
) -> list[DeferredAction]:
    """Sort actions by descending priority using a stable sort."""
    if tie_break == "registration":
        return sorted(actions, key=lambda action: (-action.priority, action.order))
    if tie_break == "input":
        return sorted(actions, key=lambda action: -action.priority)
    raise ValueError(f"Invalid tie_break: {tie_break!r}")


def dispatch(
    tokens: Sequence[Token],
    registry: BindingRegistry,
    report: Reporter | None = None,
    tie_break: TieBreak = "registration",
) -> list[DeferredAction]:
    """
    Resolve and pack every command token, then order the resulting actions.

    Args:
        tokens (Sequence[Token]): Expanded tokens; index 0 is the program identity.
        registry (BindingRegistry): Registry used for resolution.
        report (Reporter | None): Receives non-fatal diagnostics.
        tie_break (TieBreak): Ordering among actions of equal priority.

    Returns:
        list[DeferredAction]: Actions in execution order.

    Raises:
        ArityError: If a command received fewer arguments than it expects.
    """
    actions: list[DeferredAction] = []
    for token in tokens[1:]:
        binding = registry.resolve(token.name)
        if binding is None:
            logger.debug("No binding for '%s'", token.display_name)
            if report is not None:
                report(UnrecognizedTokenWarning(token.name, prefix=token.prefix))
                for argument in token.arguments:
                    report(DiscardedArgumentWarning(argument, owner=token.name))
            continue
        actions.append(binding.pack(token.arguments, report))

    ordered = order_actions(actions, tie_break)
    logger.debug("Execution order: %s", [action.name for action in ordered])
    return ordered

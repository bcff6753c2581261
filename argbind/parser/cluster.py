# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
Expands short-flag clusters such as `-abc` into `-a -b -c`.

A token is a cluster when its own name is not registered but every one of its
characters is (as a primary name or an alias). Clustered flags take no value
arguments: any arguments that followed the cluster are discarded and reported.
Tokens whose name is registered directly are never expanded.

The expander builds a fresh token list and never mutates the input sequence.
"""
from typing import Sequence

from argbind.exceptions import DiscardedArgumentWarning
from argbind.logger import logger
from argbind.parser.binding import Reporter
from argbind.parser.registry import BindingRegistry
from argbind.parser.token import Token


def is_cluster(name: str, registry: BindingRegistry) -> bool:
    """Return True if `name` should be expanded into single-character commands."""
    if registry.is_registered(name):
        return False
    return all(registry.is_registered(char) for char in name)


def expand_clusters(
    tokens: Sequence[Token],
    registry: BindingRegistry,
    report: Reporter | None = None,
) -> list[Token]:
    """
    Replace every cluster token with one argument-less token per character.

    Args:
        tokens (Sequence[Token]): Tokenizer output; index 0 is the program identity.
        registry (BindingRegistry): Registry used for name lookups.
        report (Reporter | None): Receives a `DiscardedArgumentWarning` for each
            argument attached to an expanded cluster.

    Returns:
        list[Token]: A new token list.
    """
    if not tokens:
        return []

    expanded: list[Token] = [tokens[0]]
    for token in tokens[1:]:
        if not is_cluster(token.name, registry):
            expanded.append(token)
            continue
        logger.debug("Expanding cluster '%s'", token.display_name)
        expanded.extend(Token(char, prefix="-") for char in token.name)
        if report is not None:
            for argument in token.arguments:
                report(DiscardedArgumentWarning(argument, owner=token.name))
    return expanded

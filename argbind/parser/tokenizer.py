# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
Splits a raw argument vector into `Token`s.

Rules:
- `argv[0]` opens the program-identity token as-is.
- `-name` (one dash, length > 1) opens a token named `name`.
- `--name` (two dashes, length > 2) opens a token named `name`.
- Everything else, including a bare `-` (the usual stdin placeholder) and a
  bare `--`, is a plain argument of the currently open token.

Example:
    tokenize(["prog", "-a", "1", "2", "--long", "x"])
    # [Token("prog"), Token("a", ["1", "2"]), Token("long", ["x"])]
"""
from typing import Sequence

from argbind.logger import logger
from argbind.parser.token import Token
from argbind.signals import UsageError


def _split_prefix(argument: str) -> tuple[str, str] | None:
    """Return `(prefix, name)` if the argument opens a new token, else None."""
    if argument.startswith("--"):
        if len(argument) > 2:
            return "--", argument[2:]
        return None
    if argument.startswith("-") and len(argument) > 1:
        return "-", argument[1:]
    return None


def tokenize(argv: Sequence[str]) -> list[Token]:
    """
    Tokenize a raw argument vector.

    Args:
        argv (Sequence[str]): Program identity followed by user arguments.

    Returns:
        list[Token]: The program-identity token followed by one token per command.

    Raises:
        UsageError: If `argv` is empty.
    """
    if not argv:
        raise UsageError("Cannot tokenize an empty argument vector (missing argv[0]).")

    tokens: list[Token] = [Token(str(argv[0]))]
    for argument in argv[1:]:
        split = _split_prefix(argument)
        if split is None:
            tokens[-1].add(argument)
        else:
            prefix, name = split
            tokens.append(Token(name, prefix=prefix))

    logger.debug(
        "Tokenized %d argument(s) into %d token(s).", len(argv) - 1, len(tokens) - 1
    )
    return tokens

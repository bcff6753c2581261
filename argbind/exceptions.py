# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
Defines the recoverable errors and the warning categories raised by argbind.

Errors are raised while packing or invoking bindings and surface to whatever
called `CLI.parse()` or `CLI.run()`. The caller decides whether to abort.
Warnings never interrupt control flow: they are handed to the CLI reporter,
recorded, logged, and optionally echoed to the console.

Exception Hierarchy:
- ArgbindError
    ├── ConversionError
    ├── InvalidValueError
    └── ArityError

Warning Hierarchy:
- ArgbindWarning (UserWarning)
    ├── ArityWarning
    ├── UnrecognizedTokenWarning
    └── DiscardedArgumentWarning

Fatal misuse of the API is reported by `argbind.signals.UsageError` instead.
"""


class ArgbindError(Exception):
    """Base exception for recoverable argbind errors."""


class ConversionError(ArgbindError):
    """Raised when a raw argument cannot be converted to the target type."""

    def __init__(self, raw: str, type_name: str):
        self.raw = raw
        self.type_name = type_name
        super().__init__(f"Unexpected conversion of '{raw}' to {type_name}.")


class InvalidValueError(ArgbindError):
    """Raised when a converted value is rejected by its restrictor."""

    def __init__(self, raw: str, name: str | None = None, rule: str = ""):
        self.raw = raw
        self.name = name
        self.rule = rule
        prefix = f"{name}: " if name else ""
        suffix = f" (expected {rule})" if rule else ""
        super().__init__(f"{prefix}Invalid value '{raw}'{suffix}.")


class ArityError(ArgbindError):
    """Raised when a command receives fewer arguments than it expects."""

    def __init__(self, name: str, expected: int, actual: int):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{name}: Too few arguments ({actual}), expects {expected}."
        )


class ArgbindWarning(UserWarning):
    """Base class for non-fatal argbind diagnostics."""


class ArityWarning(ArgbindWarning):
    """Reported when a command receives more arguments than it expects."""

    def __init__(self, name: str, expected: int, actual: int):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{name}: Expected {expected} arguments, but {actual} were given."
        )


class UnrecognizedTokenWarning(ArgbindWarning):
    """Reported when a token matches no command, alias, or cluster."""

    def __init__(self, name: str, prefix: str = ""):
        self.name = name
        super().__init__(f"Unrecognized option '{prefix}{name}'.")


class DiscardedArgumentWarning(ArgbindWarning):
    """Reported for every plain argument that is dropped during parsing."""

    def __init__(self, argument: str, owner: str = ""):
        self.argument = argument
        self.owner = owner
        super().__init__(f"Discarded argument '{argument}'.")

# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
Defines the fatal signals raised by argbind on programmer errors.

Misusing the registration or execution API is not something a caller is
expected to recover from: registering after `parse()`, calling `run()` before
`parse()`, or reusing a command name. These conditions raise a `FatalSignal`,
which is a subclass of `BaseException` so it passes straight through
`except Exception` blocks in host code and aborts the pipeline.

Signals:
- FatalSignal: Base class for unrecoverable conditions.
- UsageError: The binding API was used out of order or with conflicting names.
"""


class FatalSignal(BaseException):
    """Base class for all unrecoverable argbind conditions.

    These are not errors a caller should handle. They report programmer
    mistakes and are meant to terminate the process.
    """


class UsageError(FatalSignal):
    """Raised when the registration or execution API is misused."""

    def __init__(self, message: str = "Invalid use of the argbind API."):
        super().__init__(message)

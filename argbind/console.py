# argbind — (c) 2025 argbind contributors — MIT Licensed
"""Global console instance and diagnostic printers for argbind."""
from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

ARGBIND_THEME = Theme(
    {
        "argbind.warning": "bold yellow",
        "argbind.error": "bold red",
        "argbind.fatal": "bold white on red",
    }
)

console = Console(theme=ARGBIND_THEME, highlight=False)


def print_warning(message: str, target: Console | None = None) -> None:
    (target or console).print(f"[argbind.warning]WARNING:[/] {escape(message)}")


def print_error(message: str, target: Console | None = None) -> None:
    (target or console).print(f"[argbind.error]ERROR:[/] {escape(message)}")


def print_fatal(message: str, target: Console | None = None) -> None:
    (target or console).print(f"[argbind.fatal]FATAL:[/] {escape(message)}")

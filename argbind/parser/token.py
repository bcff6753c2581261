# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
Defines `Token`, one command name plus the plain arguments that follow it.

Tokens are produced by `tokenize()`. The token at index 0 always stands for the
program identity (`argv[0]`) and never resolves to a command.
"""
from dataclasses import dataclass, field


@dataclass
class Token:
    """
    A parsed command name and its attached plain arguments.

    Attributes:
        name (str): Command name with its leading dashes stripped.
        arguments (list[str]): Plain arguments that followed the command.
        prefix (str): The dashes stripped from the name ("-", "--", or "" for the
            program identity). Used only for diagnostics.
    """

    name: str
    arguments: list[str] = field(default_factory=list)
    prefix: str = field(default="", compare=False)

    def add(self, argument: str) -> None:
        """Attach a plain argument to this token."""
        self.arguments.append(argument)

    @property
    def display_name(self) -> str:
        return f"{self.prefix}{self.name}"

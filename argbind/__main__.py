"""
argbind sample program

Copyright (c) 2025 argbind contributors.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Sequence

from argbind.cli import CLI
from argbind.console import console, print_error, print_fatal
from argbind.exceptions import ArgbindError
from argbind.parser import Cell, email, in_range, one_of
from argbind.signals import FatalSignal
from argbind.utils import setup_logging


def build_cli(address: Cell, rate: Cell, choice: Cell, option: Cell) -> CLI:
    cli = CLI()

    def print_arguments(arguments: list[str]) -> None:
        quoted = " ".join(f'"{argument}"' for argument in arguments)
        console.print(f"print: {quoted}", markup=False)

    return (
        cli.register_value("s", address, email())
        .register_value("r", rate, in_range(0.0, 1.0))
        .register_value("f", choice, one_of([1, 3, 5]), alias="oneof")
        .register_option("o", option, alias="option")
        .register_command("p", print_arguments, alias="print")
    )


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging(console_log_level=logging.ERROR)
    address = Cell(value_type=str)
    rate = Cell(0.0)
    choice = Cell(0)
    option = Cell(False)

    try:
        cli = build_cli(address, rate, choice, option)
        cli.parse(sys.argv if argv is None else argv).run()
    except ArgbindError as error:
        print_error(str(error))
        return 1
    except FatalSignal as signal:
        print_fatal(str(signal))
        return 2

    console.print(
        f"s={address.value!r} r={rate.value!r} f={choice.value!r} o={option.value!r}",
        markup=False,
    )
    return 0


def main_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    main_entry()

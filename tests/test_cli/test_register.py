import pytest

from argbind import CLI, Cell, CLIOptions, in_range, pattern
from argbind.signals import UsageError


@pytest.fixture
def cli():
    return CLI(CLIOptions(echo_warnings=False))


def test_registration_is_chainable(cli):
    flag = Cell(False)
    value = Cell(0)
    result = (
        cli.register_command("p", lambda args: None)
        .register_value("n", value)
        .register_option("v", flag, alias="verbose")
    )
    assert result is cli
    assert [binding.name for binding in cli.bindings] == ["p", "n", "v"]


def test_value_binding_has_arity_one(cli):
    cli.register_value("n", Cell(0))
    assert cli.bindings.get("n").expected_arity == 1


def test_option_binding_has_arity_zero(cli):
    cli.register_option("v", Cell(False))
    assert cli.bindings.get("v").expected_arity == 0


def test_duplicate_name_is_fatal(cli):
    cli.register_command("p", lambda args: None, alias="print")
    with pytest.raises(UsageError):
        cli.register_command("p", lambda args: None)
    with pytest.raises(UsageError):
        cli.register_value("print", Cell(0))
    with pytest.raises(UsageError):
        cli.register_option("x", Cell(False), alias="p")


@pytest.mark.parametrize(
    "register",
    [
        lambda cli: cli.register_command("late", lambda args: None),
        lambda cli: cli.register_value("late", Cell(0)),
        lambda cli: cli.register_option("late", Cell(False)),
    ],
)
def test_registration_after_parse_is_fatal(cli, register):
    cli.parse(["prog"])
    with pytest.raises(UsageError):
        register(cli)


def test_restrictor_must_support_cell_type(cli):
    with pytest.raises(UsageError):
        cli.register_value("n", Cell(0), pattern(r"\d+"))
    with pytest.raises(UsageError):
        cli.register_value("s", Cell(""), in_range(0, 10))


def test_value_target_must_be_a_cell(cli):
    with pytest.raises(UsageError):
        cli.register_value("n", 0)


def test_option_target_must_be_boolean(cli):
    with pytest.raises(UsageError):
        cli.register_option("v", Cell(0))


def test_invalid_command_definition_is_fatal(cli):
    with pytest.raises(UsageError):
        cli.register_command("n", lambda args: None, expected_arity=-1)
    with pytest.raises(UsageError):
        cli.register_command("m", "not callable")

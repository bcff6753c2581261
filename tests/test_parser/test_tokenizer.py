import pytest

from argbind.parser import Token, tokenize
from argbind.signals import UsageError


def test_tokenize_short_and_long_flags():
    tokens = tokenize(["prog", "-a", "1", "2", "--long", "x"])
    assert tokens == [
        Token("prog"),
        Token("a", ["1", "2"]),
        Token("long", ["x"]),
    ]


def test_tokenize_program_identity_only():
    assert tokenize(["prog"]) == [Token("prog")]


def test_program_identity_is_not_stripped():
    tokens = tokenize(["-weird-name", "-a"])
    assert tokens[0].name == "-weird-name"
    assert tokens[1].name == "a"


def test_arguments_before_first_flag_belong_to_program_token():
    tokens = tokenize(["prog", "input.txt", "-v"])
    assert tokens == [Token("prog", ["input.txt"]), Token("v")]


@pytest.mark.parametrize("placeholder", ["-", "--"])
def test_bare_dashes_are_plain_arguments(placeholder):
    tokens = tokenize(["prog", "-f", placeholder])
    assert tokens == [Token("prog"), Token("f", [placeholder])]


def test_only_two_dashes_are_stripped():
    tokens = tokenize(["prog", "---x"])
    assert tokens[1].name == "-x"
    assert tokens[1].prefix == "--"


def test_prefix_is_kept_for_diagnostics():
    tokens = tokenize(["prog", "-a", "--beta"])
    assert tokens[1].display_name == "-a"
    assert tokens[2].display_name == "--beta"


def test_prefix_is_ignored_by_equality():
    assert Token("a", ["1"], prefix="-") == Token("a", ["1"], prefix="--")


def test_empty_argv_is_fatal():
    with pytest.raises(UsageError):
        tokenize([])

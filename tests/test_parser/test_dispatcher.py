import pytest

from argbind.exceptions import (
    ArityError,
    DiscardedArgumentWarning,
    UnrecognizedTokenWarning,
)
from argbind.parser import Binding, BindingRegistry, DeferredAction, Token
from argbind.parser import dispatch, order_actions


def build_registry(calls):
    registry = BindingRegistry()
    registry.add(
        Binding(name="low", action=lambda args: calls.append("low"), priority=5)
    )
    registry.add(
        Binding(
            name="high",
            alias="h",
            action=lambda args: calls.append("high"),
            priority=10,
            index=1,
        )
    )
    registry.add(
        Binding(name="echo", action=lambda args: calls.append(args), index=2)
    )
    return registry


def test_dispatch_orders_by_descending_priority():
    calls = []
    registry = build_registry(calls)
    actions = dispatch([Token("prog"), Token("low"), Token("high")], registry)
    for action in actions:
        action()
    assert calls == ["high", "low"]


def test_dispatch_resolves_aliases():
    calls = []
    registry = build_registry(calls)
    actions = dispatch([Token("prog"), Token("h")], registry)
    assert [action.name for action in actions] == ["high"]


def test_dispatch_skips_program_identity():
    calls = []
    registry = build_registry(calls)
    assert dispatch([Token("echo", ["x"])], registry) == []


def test_unrecognized_tokens_are_reported_and_discarded():
    calls = []
    reported = []
    registry = build_registry(calls)
    actions = dispatch(
        [Token("prog"), Token("nope", ["1", "2"], prefix="--"), Token("low")],
        registry,
        reported.append,
    )
    assert [action.name for action in actions] == ["low"]
    assert isinstance(reported[0], UnrecognizedTokenWarning)
    assert "--nope" in str(reported[0])
    assert [type(warning) for warning in reported[1:]] == [
        DiscardedArgumentWarning,
        DiscardedArgumentWarning,
    ]
    assert [warning.argument for warning in reported[1:]] == ["1", "2"]


def test_dispatch_propagates_arity_error():
    registry = BindingRegistry()
    registry.add(Binding(name="n", action=lambda args: None, expected_arity=1))
    with pytest.raises(ArityError):
        dispatch([Token("prog"), Token("n")], registry)


def test_equal_priorities_keep_registration_order():
    calls = []
    registry = BindingRegistry()
    for index, name in enumerate(["first", "second", "third"]):
        registry.add(
            Binding(name=name, action=lambda args, n=name: calls.append(n), index=index)
        )
    tokens = [Token("prog"), Token("third"), Token("first"), Token("second")]
    for action in dispatch(tokens, registry):
        action()
    assert calls == ["first", "second", "third"]


def test_equal_priorities_keep_input_order():
    calls = []
    registry = BindingRegistry()
    for index, name in enumerate(["first", "second", "third"]):
        registry.add(
            Binding(name=name, action=lambda args, n=name: calls.append(n), index=index)
        )
    tokens = [Token("prog"), Token("third"), Token("first"), Token("second")]
    for action in dispatch(tokens, registry, tie_break="input"):
        action()
    assert calls == ["third", "first", "second"]


def test_repeated_command_runs_once_per_occurrence():
    calls = []
    registry = build_registry(calls)
    actions = dispatch(
        [Token("prog"), Token("echo", ["a"]), Token("echo", ["b"])], registry
    )
    for action in actions:
        action()
    assert calls == [["a"], ["b"]]


def test_order_actions_rejects_unknown_tie_break():
    with pytest.raises(ValueError):
        order_actions([DeferredAction("a", lambda: None, 0)], tie_break="random")

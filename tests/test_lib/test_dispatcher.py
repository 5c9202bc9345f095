"""Tests for binding passes."""

import pytest
from unittest.mock import Mock, patch
from tokenbind.lib.dispatcher import Dispatcher, parameters_bind
from tokenbind.lib.errors import BindingFailure, MissingResolverError, ResolverSemanticError
from tokenbind.lib.registry import registry_default
from tokenbind.lib.stack import ArgumentStack
from tokenbind.models.dataModel import CommandParameter, ErrorKind, NumberKind


class Player:
    def __init__(self, name: str) -> None:
        self.name = name


class PlayerResolver:
    """Looks players up in a fixed roster."""

    roster = {"alice", "bob"}

    def resolve(self, context):
        name = context.pop()
        if name not in self.roster:
            raise ResolverSemanticError(f"no player found for name {name}")
        return Player(name)


class Vector:
    def __init__(self, x: float, y: float, z: float) -> None:
        self.xyz = (x, y, z)


def vector_resolve(context):
    return Vector(context.pop_double(), context.pop_double(), context.pop_double())


def param(name, declared, position=0, **flags) -> CommandParameter:
    return CommandParameter(name=name, type=declared, position=position, **flags)


@pytest.fixture
def dispatcher() -> Dispatcher:
    registry = registry_default()
    registry.register(Player, PlayerResolver())
    registry.register(Vector, vector_resolve)
    return Dispatcher(registry, reject_leftover=False)


def test_bind_int_then_string(dispatcher):
    stack = ArgumentStack.from_tokens(["10", "foo"])
    result = dispatcher.stack_bind([param("n", int), param("s", str, 1)], stack)
    assert result.success
    assert result.values == [10, "foo"]
    assert result.named == {"n": 10, "s": "foo"}
    assert stack.is_empty()


def test_bind_fails_fast_on_invalid_number(dispatcher):
    string_resolver = Mock()
    dispatcher.registry.register(str, string_resolver)
    stack = ArgumentStack.from_tokens(["foo"])
    result = dispatcher.stack_bind([param("n", int), param("s", str, 1)], stack)
    assert not result.success
    assert result.values == []
    assert result.named == {}
    assert result.error.kind is ErrorKind.INVALID_NUMBER
    assert result.error.number_kind is NumberKind.INT
    assert result.error.token == "foo"
    assert result.error.position == 0
    assert result.error.parameter == "n"
    string_resolver.resolve.assert_not_called()
    # the token is popped before it is parsed
    assert stack.is_empty()


def test_bind_exhausted_input(dispatcher):
    result = dispatcher.bind([param("n", int), param("s", str, 1)], ["10"])
    assert not result.success
    assert result.error.kind is ErrorKind.EXHAUSTED_INPUT
    assert result.error.position == 1
    assert result.error.parameter == "s"


def test_bind_greedy_last(dispatcher):
    result = dispatcher.bind(
        [param("n", int), param("msg", str, 1, consumesAllString=True)],
        ["3", "hello", "big", "world"],
    )
    assert result.values == [3, "hello big world"]


def test_bind_multi_token_resolver(dispatcher):
    result = dispatcher.bind(
        [param("at", Vector), param("who", Player, 1)], ["1", "2.5", "-3", "alice"]
    )
    assert result.success
    vector, player = result.values
    assert vector.xyz == (1.0, 2.5, -3.0)
    assert player.name == "alice"


def test_bind_semantic_error(dispatcher):
    result = dispatcher.bind([param("who", Player)], ["mallory"])
    assert not result.success
    assert result.error.kind is ErrorKind.RESOLVER_SEMANTIC
    assert "mallory" in result.error.message


def test_bind_invalid_boolean_is_semantic(dispatcher):
    result = dispatcher.bind([param("flag", bool)], ["maybe"])
    assert result.error.kind is ErrorKind.RESOLVER_SEMANTIC
    assert result.error.token == "maybe"


def test_bind_does_not_mutate_input(dispatcher):
    tokens = ["10", "foo"]
    dispatcher.bind([param("n", int)], tokens)
    assert tokens == ["10", "foo"]


def test_bind_missing_resolver_raises(dispatcher):
    class Unknown:
        pass

    with pytest.raises(MissingResolverError):
        dispatcher.bind([param("u", Unknown)], ["x"])


def test_unexpected_errors_propagate(dispatcher):
    def broken(context):
        raise RuntimeError("bug")

    dispatcher.registry.register(Player, broken, replace=True)
    with pytest.raises(RuntimeError, match="bug"):
        dispatcher.bind([param("who", Player)], ["alice"])


def test_default_tokens_used_when_input_runs_out(dispatcher):
    result = dispatcher.bind(
        [param("n", int), param("times", int, 1, default="5")], ["10"]
    )
    assert result.values == [10, 5]


def test_default_ignored_when_input_present(dispatcher):
    result = dispatcher.bind([param("times", int, default="5")], ["7"])
    assert result.values == [7]


def test_invalid_default_reports_invalid_number(dispatcher):
    result = dispatcher.bind([param("times", int, default="five")], [])
    assert result.error.kind is ErrorKind.INVALID_NUMBER
    assert result.error.token == "five"


def test_optional_parameter_binds_none(dispatcher):
    resolver = Mock()
    dispatcher.registry.register(Player, resolver, replace=True)
    result = dispatcher.bind([param("n", int), param("who", Player, 1, optional=True)], ["1"])
    assert result.values == [1, None]
    resolver.resolve.assert_not_called()


def test_leftover_tokens_allowed_by_default(dispatcher):
    stack = ArgumentStack.from_tokens(["1", "2"])
    result = dispatcher.stack_bind([param("n", int)], stack)
    assert result.success
    assert stack.as_tuple() == ("2",)


def test_leftover_tokens_rejected_when_strict():
    dispatcher = Dispatcher(reject_leftover=True)
    result = dispatcher.bind([param("n", int)], ["1", "2", "3"])
    assert not result.success
    assert result.error.kind is ErrorKind.TOO_MANY_ARGUMENTS
    assert result.error.token == "2"
    assert result.error.position is None


def test_context_sees_actor_command_and_input(dispatcher):
    seen = {}

    def spy(context):
        seen["actor"] = context.actor()
        seen["command"] = context.command()
        seen["input"] = context.input()
        seen["previous"] = context.resolved_parameter("n")
        return context.pop()

    dispatcher.registry.register(Player, spy, replace=True)
    dispatcher.bind(
        [param("n", int), param("who", Player, 1)],
        ["4", "bob"],
        actor="console",
        command="give",
    )
    assert seen == {
        "actor": "console",
        "command": "give",
        "input": ("4", "bob"),
        "previous": 4,
    }


def test_unwrap(dispatcher):
    assert dispatcher.bind([param("n", int)], ["3"]).unwrap() == [3]
    failed = dispatcher.bind([param("n", int)], [])
    with pytest.raises(BindingFailure) as excinfo:
        failed.unwrap()
    assert excinfo.value.error.kind is ErrorKind.EXHAUSTED_INPUT


def test_parameters_bind_default_dispatcher():
    result = parameters_bind([param("n", int), param("s", str, 1)], ["10", "foo"])
    assert result.values == [10, "foo"]


def test_passes_are_independent(dispatcher):
    parameters = [param("n", int), param("s", str, 1)]
    first = dispatcher.bind(parameters, ["1", "a"])
    second = dispatcher.bind(parameters, ["1", "a"])
    assert first.values == second.values


def test_bind_enum_exact_name_wins_over_case_fold(dispatcher):
    import enum

    class Case(enum.Enum):
        a = 1
        A = 2

    with patch("tokenbind.lib.resolvers.builtin.appsettings") as settings:
        settings.enumCaseSensitive = False
        result = dispatcher.bind([param("x", Case), param("y", Case, 1)], ["A", "a"])
    assert result.values == [Case.A, Case.a]


def test_exhausted_error_reports_resolver_arity(dispatcher):
    result = dispatcher.bind([param("n", int), param("s", str, 1)], ["10"])
    assert result.error.arity == 1


def test_greedy_and_undeclared_arity_is_none(dispatcher):
    greedy = dispatcher.bind([param("msg", str, consumesAllString=True)], [])
    assert greedy.error.kind is ErrorKind.EXHAUSTED_INPUT
    assert greedy.error.arity is None
    vector = dispatcher.bind([param("at", Vector)], ["1", "2"])
    assert vector.error.kind is ErrorKind.EXHAUSTED_INPUT
    assert vector.error.arity is None

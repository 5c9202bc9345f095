"""Tests for built-in value resolvers."""

import enum
import uuid
import pytest
from unittest.mock import patch
from tokenbind.lib.context import ResolutionContext
from tokenbind.lib.errors import (
    ExhaustedInputError,
    InvalidNumberError,
    InvalidValueError,
    ResolverSemanticError,
)
from tokenbind.lib.resolvers import (
    BooleanResolver,
    EnumResolver,
    EnumResolverFactory,
    FunctionResolver,
    NumberResolver,
    StringResolver,
    UUIDResolver,
    ValueResolver,
    resolver_coerce,
)
from tokenbind.lib.stack import ArgumentStack
from tokenbind.models.dataModel import CommandParameter, NumberKind


class Color(enum.Enum):
    RED = 1
    GREEN = 2


def context_make(tokens, declared=str, **flags) -> ResolutionContext:
    parameter = CommandParameter(name="value", type=declared, **flags)
    return ResolutionContext(ArgumentStack.from_tokens(tokens), parameter)


def test_builtins_satisfy_protocol():
    for resolver in (
        StringResolver(),
        NumberResolver(NumberKind.INT),
        BooleanResolver(),
        UUIDResolver(),
        EnumResolver(Color),
    ):
        assert isinstance(resolver, ValueResolver)


def test_string_resolver_single():
    context = context_make(["foo", "bar"])
    assert StringResolver().resolve(context) == "foo"
    assert context.arguments().as_tuple() == ("bar",)


def test_string_resolver_greedy():
    context = context_make(["foo", "bar"], consumesAllString=True)
    assert StringResolver().resolve(context) == "foo bar"
    assert context.arguments().is_empty()


def test_string_resolver_empty():
    with pytest.raises(ExhaustedInputError):
        StringResolver().resolve(context_make([]))


def test_number_resolver():
    assert NumberResolver(NumberKind.LONG).resolve(context_make(["123456789012"])) == 123456789012
    with pytest.raises(InvalidNumberError) as excinfo:
        NumberResolver(NumberKind.SHORT).resolve(context_make(["abc"]))
    assert excinfo.value.number_kind is NumberKind.SHORT


@pytest.mark.parametrize("token", ["true", "YES", "on", "1"])
def test_boolean_resolver_true(token):
    assert BooleanResolver().resolve(context_make([token])) is True


@pytest.mark.parametrize("token", ["false", "No", "OFF", "0"])
def test_boolean_resolver_false(token):
    assert BooleanResolver().resolve(context_make([token])) is False


def test_boolean_resolver_invalid():
    with pytest.raises(InvalidValueError) as excinfo:
        BooleanResolver().resolve(context_make(["maybe"]))
    assert excinfo.value.label == "boolean"
    assert excinfo.value.token == "maybe"
    assert isinstance(excinfo.value, ResolverSemanticError)


def test_uuid_resolver():
    value = uuid.uuid4()
    assert UUIDResolver().resolve(context_make([str(value)])) == value
    with pytest.raises(InvalidValueError):
        UUIDResolver().resolve(context_make(["not-a-uuid"]))


def test_enum_resolver_case_insensitive_by_default():
    with patch("tokenbind.lib.resolvers.builtin.appsettings") as settings:
        settings.enumCaseSensitive = False
        assert EnumResolver(Color).resolve(context_make(["red"])) is Color.RED


def test_enum_resolver_case_sensitive_setting():
    with patch("tokenbind.lib.resolvers.builtin.appsettings") as settings:
        settings.enumCaseSensitive = True
        assert EnumResolver(Color).resolve(context_make(["GREEN"])) is Color.GREEN
        with pytest.raises(InvalidValueError):
            EnumResolver(Color).resolve(context_make(["green"]))


def test_enum_resolver_unknown_member():
    with pytest.raises(InvalidValueError) as excinfo:
        EnumResolver(Color, case_sensitive=False).resolve(context_make(["blue"]))
    assert excinfo.value.label == "Color"


class Case(enum.Enum):
    a = 1
    A = 2


def test_enum_resolver_prefers_exact_name_over_case_folded():
    resolver = EnumResolver(Case, case_sensitive=False)
    assert resolver.resolve(context_make(["A"])) is Case.A
    assert resolver.resolve(context_make(["a"])) is Case.a


def test_enum_resolver_case_folds_when_no_exact_name():
    assert EnumResolver(Color, case_sensitive=False).resolve(context_make(["Green"])) is Color.GREEN


def test_builtin_resolvers_declare_single_token_arity():
    for resolver in (
        StringResolver(),
        NumberResolver(NumberKind.INT),
        BooleanResolver(),
        UUIDResolver(),
        EnumResolver(Color),
    ):
        assert resolver.arity == 1


def test_enum_factory():
    factory = EnumResolverFactory()
    parameter = CommandParameter(name="color", type=Color)
    resolver = factory.create(parameter)
    assert isinstance(resolver, EnumResolver)
    assert factory.create(parameter) is resolver
    assert factory.create(CommandParameter(name="n", type=int)) is None


def test_function_resolver_wraps_callables():
    resolver = resolver_coerce(lambda context: context.pop().upper())
    assert isinstance(resolver, FunctionResolver)
    assert resolver.resolve(context_make(["abc"])) == "ABC"


def test_resolver_coerce_keeps_resolvers():
    resolver = StringResolver()
    assert resolver_coerce(resolver) is resolver


def test_resolver_coerce_rejects_non_callables():
    with pytest.raises(TypeError):
        resolver_coerce(42)

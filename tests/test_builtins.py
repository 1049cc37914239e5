"""Tests for runtime/builtins.py: registry, arity and the default builtins.

Python 3.13+.
"""

from __future__ import annotations

import re

import pytest

from fakerengine import Faker
from fakerengine.diagnostics import (
    DiagnosticCode,
    EvaluationError,
    InvalidArgumentError,
    PatternSyntaxError,
)
from fakerengine.runtime.builtins import (
    BuiltinRegistry,
    create_default_builtins,
    describe_arity,
    parse_bool,
    positional_arity,
)

# ============================================================================
# Arity helpers
# ============================================================================


class TestArity:
    def test_fixed(self) -> None:
        def func(faker: object, a: str, b: str) -> str:
            return a + b

        assert positional_arity(func, skip=1) == (2, 2)

    def test_optional(self) -> None:
        def func(faker: object, a: str, b: str | None = None) -> str:
            return a

        assert positional_arity(func, skip=1) == (1, 2)

    def test_variadic(self) -> None:
        def func(faker: object, a: str, *rest: str) -> str:
            return a

        assert positional_arity(func, skip=1) == (1, None)

    @pytest.mark.parametrize(
        ("min_args", "max_args", "expected"),
        [(1, 1, "1"), (1, 2, "1 to 2"), (3, None, "at least 3"), (0, 0, "0")],
    )
    def test_describe(self, min_args: int, max_args: int | None, expected: str) -> None:
        assert describe_arity(min_args, max_args) == expected


class TestParseBool:
    @pytest.mark.parametrize(
        ("value", "expected"), [("true", True), ("FALSE", False), (" True ", True)]
    )
    def test_accepts(self, value: str, expected: bool) -> None:
        assert parse_bool("letterify", value) is expected

    def test_rejects(self) -> None:
        with pytest.raises(EvaluationError) as exc_info:
            parse_bool("letterify", "yes")

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.ARGUMENT_INVALID


# ============================================================================
# Registry
# ============================================================================


class TestBuiltinRegistry:
    """Registration, lookup and checked calls."""

    def test_default_names(self) -> None:
        registry = create_default_builtins()

        assert set(registry) == {
            "numerify", "letterify", "bothify", "regexify", "examplify", "templatify",
        }
        assert len(registry) == 6

    def test_membership_case_insensitive(self) -> None:
        registry = create_default_builtins()

        assert "NumeriFy" in registry
        assert "nope" not in registry
        assert 42 not in registry

    def test_signature_metadata(self) -> None:
        registry = create_default_builtins()

        letterify = registry.get_signature("letterify")
        templatify = registry.get_signature("templatify")

        assert letterify is not None
        assert (letterify.min_args, letterify.max_args) == (1, 2)
        assert templatify is not None
        assert (templatify.min_args, templatify.max_args) == (2, None)
        assert registry.get_signature("nope") is None

    def test_register_custom_name(self, bare_faker: Faker) -> None:
        registry = BuiltinRegistry()

        def shout(faker: Faker, text: str) -> str:
            return text.upper()

        registry.register(shout, name="Loud")

        assert registry.call("loud", bare_faker, ["hi"]) == "HI"

    def test_call_unknown(self, bare_faker: Faker) -> None:
        with pytest.raises(EvaluationError) as exc_info:
            BuiltinRegistry().call("nope", bare_faker, [])

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.BUILTIN_NOT_FOUND

    @pytest.mark.parametrize(
        ("name", "arguments"),
        [
            ("numerify", []),
            ("numerify", ["#", "#"]),
            ("letterify", ["?", "true", "x"]),
            ("templatify", ["X"]),
        ],
    )
    def test_call_wrong_arity(self, bare_faker: Faker, name: str, arguments: list[str]) -> None:
        with pytest.raises(EvaluationError) as exc_info:
            create_default_builtins().call(name, bare_faker, arguments)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.BUILTIN_ARITY_MISMATCH

    def test_copy_is_independent(self) -> None:
        original = create_default_builtins()
        copy = original.copy()

        copy.register(lambda faker, text: text, name="echo")

        assert "echo" in copy
        assert "echo" not in original

    def test_repr(self) -> None:
        assert repr(create_default_builtins()) == "BuiltinRegistry(builtins=6)"


# ============================================================================
# Default builtins
# ============================================================================


class TestDefaultBuiltins:
    """Each builtin delegates to the Faker generator of the same name."""

    @pytest.fixture
    def registry(self) -> BuiltinRegistry:
        return create_default_builtins()

    def test_numerify(self, registry: BuiltinRegistry, bare_faker: Faker) -> None:
        assert re.fullmatch(r"\d{3}-x", registry.call("numerify", bare_faker, ["###-x"]))

    def test_letterify_upper(self, registry: BuiltinRegistry, bare_faker: Faker) -> None:
        assert re.fullmatch("[A-Z]{4}", registry.call("letterify", bare_faker, ["????", "true"]))

    def test_bothify_lower(self, registry: BuiltinRegistry, bare_faker: Faker) -> None:
        result = registry.call("bothify", bare_faker, ["#?#?", "false"])

        assert re.fullmatch("[0-9][a-z][0-9][a-z]", result)

    def test_bad_bool(self, registry: BuiltinRegistry, bare_faker: Faker) -> None:
        with pytest.raises(EvaluationError):
            registry.call("letterify", bare_faker, ["?", "maybe"])

    def test_regexify(self, registry: BuiltinRegistry, bare_faker: Faker) -> None:
        assert re.fullmatch(r"[a-c]{2}\d", registry.call("regexify", bare_faker, [r"[a-c]{2}\d"]))

    def test_regexify_error_propagates(
        self, registry: BuiltinRegistry, bare_faker: Faker
    ) -> None:
        with pytest.raises(PatternSyntaxError):
            registry.call("regexify", bare_faker, ["[a-"])

    def test_examplify(self, registry: BuiltinRegistry, bare_faker: Faker) -> None:
        result = registry.call("examplify", bare_faker, ["Abc-12"])

        assert re.fullmatch(r"[A-Z][a-z]{2}-\d{2}", result)

    def test_templatify(self, registry: BuiltinRegistry, bare_faker: Faker) -> None:
        result = registry.call("templatify", bare_faker, ["X-X", "X", "a", "b"])

        assert result in {"a-a", "a-b", "b-a", "b-b"}

    def test_templatify_without_options(
        self, registry: BuiltinRegistry, bare_faker: Faker
    ) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            registry.call("templatify", bare_faker, ["X-X", "X"])

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.OPTIONS_EMPTY

"""Builtin generators callable from #{...} directives.

A builtin is a plain function taking the owning Faker followed by string
arguments:

    #{numerify '##-##'}           -> numerify(faker, "##-##")
    #{letterify '??', 'true'}     -> letterify(faker, "??", "true")
    #{templatify 'X-X', 'X', 'a', 'b'}

Names match case-insensitively. Arity comes from the function signature, so
registering a function is enough to make it callable with checked argument
counts. Boolean parameters accept 'true' or 'false'.

Errors raised by the generators themselves (PatternSyntaxError from
regexify, InvalidArgumentError from templatify) propagate unchanged.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from inspect import Parameter, signature
from typing import TYPE_CHECKING

from fakerengine.diagnostics import ErrorTemplate, EvaluationError

if TYPE_CHECKING:
    from .faker import Faker

__all__ = [
    "BuiltinRegistry",
    "BuiltinSignature",
    "create_default_builtins",
    "describe_arity",
    "parse_bool",
    "positional_arity",
]


@dataclass(frozen=True, slots=True)
class BuiltinSignature:
    """Builtin metadata.

    Attributes:
        name: Directive name, lower-case
        min_args: Required argument count
        max_args: Maximum argument count; None for variadic
        callable: The Python function
    """

    name: str
    min_args: int
    max_args: int | None
    callable: Callable[..., str]


def positional_arity(func: Callable[..., object], *, skip: int = 0) -> tuple[int, int | None]:
    """Count a function's positional parameters.

    Args:
        func: Function to inspect
        skip: Leading parameters supplied by the caller, not the directive

    Returns:
        (required, maximum) where maximum is None for *args
    """
    required = 0
    maximum: int | None = 0
    params = list(signature(func).parameters.values())[skip:]
    for param in params:
        if param.kind is Parameter.VAR_POSITIONAL:
            maximum = None
        elif param.kind in (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD):
            if param.default is Parameter.empty:
                required += 1
            if maximum is not None:
                maximum += 1
    return required, maximum


def describe_arity(min_args: int, max_args: int | None) -> str:
    """Human-readable argument count: "1", "1 to 2", "at least 3"."""
    if max_args is None:
        return f"at least {min_args}"
    if min_args == max_args:
        return str(min_args)
    return f"{min_args} to {max_args}"


class BuiltinRegistry:
    """Directive name -> builtin function.

    Supports dict-like introspection:
        - __iter__: Iterate over builtin names
        - __len__: Count registered builtins
        - __contains__: Case-insensitive membership ('in' operator)

    Example:
        >>> registry = create_default_builtins()
        >>> "NUMERIFY" in registry
        True
        >>> registry.get_signature("templatify").max_args is None
        True
    """

    __slots__ = ("_builtins",)

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._builtins: dict[str, BuiltinSignature] = {}

    def register(self, func: Callable[..., str], *, name: str | None = None) -> None:
        """Register a builtin.

        Args:
            func: Function whose first parameter receives the Faker
            name: Directive name (default: func.__name__ without leading underscores)
        """
        if name is None:
            name = getattr(func, "__name__", "unknown").lstrip("_")
        min_args, max_args = positional_arity(func, skip=1)
        key = name.lower()
        self._builtins[key] = BuiltinSignature(key, min_args, max_args, func)

    def call(self, name: str, faker: Faker, arguments: Sequence[str]) -> str:
        """Call a builtin with directive arguments.

        Args:
            name: Directive name, any case
            faker: Owning Faker, passed as the first argument
            arguments: Evaluated directive arguments

        Returns:
            Generated text

        Raises:
            EvaluationError: If the builtin is unknown or the argument count is wrong
        """
        builtin = self._builtins.get(name.lower())
        if builtin is None:
            raise EvaluationError(ErrorTemplate.builtin_not_found(name))

        received = len(arguments)
        if received < builtin.min_args or (
            builtin.max_args is not None and received > builtin.max_args
        ):
            expected = describe_arity(builtin.min_args, builtin.max_args)
            raise EvaluationError(ErrorTemplate.builtin_arity_mismatch(name, expected, received))

        return builtin.callable(faker, *arguments)

    def get_signature(self, name: str) -> BuiltinSignature | None:
        """Builtin metadata by name, or None if not registered."""
        return self._builtins.get(name.lower())

    def __iter__(self) -> Iterator[str]:
        return iter(self._builtins)

    def __len__(self) -> int:
        return len(self._builtins)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._builtins

    def __repr__(self) -> str:
        return f"BuiltinRegistry(builtins={len(self._builtins)})"

    def copy(self) -> BuiltinRegistry:
        """Create a shallow copy; registering on the copy leaves this registry untouched."""
        new_registry = BuiltinRegistry()
        new_registry._builtins = self._builtins.copy()
        return new_registry


def parse_bool(builtin: str, value: str) -> bool:
    """Parse a directive boolean argument.

    Raises:
        EvaluationError: If value is not 'true' or 'false' (any case)
    """
    match value.strip().lower():
        case "true":
            return True
        case "false":
            return False
        case _:
            raise EvaluationError(
                ErrorTemplate.argument_invalid(builtin, value, "'true' or 'false'")
            )


def _numerify(faker: Faker, template: str) -> str:
    return faker.numerify(template)


def _letterify(faker: Faker, template: str, upper: str | None = None) -> str:
    return faker.letterify(template, None if upper is None else parse_bool("letterify", upper))


def _bothify(faker: Faker, template: str, upper: str | None = None) -> str:
    return faker.bothify(template, None if upper is None else parse_bool("bothify", upper))


def _regexify(faker: Faker, pattern: str) -> str:
    return faker.regexify(pattern)


def _examplify(faker: Faker, example: str) -> str:
    return faker.examplify(example)


def _templatify(faker: Faker, template: str, placeholder: str, *options: str) -> str:
    return faker.templatify(template, placeholder, options)


def create_default_builtins() -> BuiltinRegistry:
    """Create a registry holding numerify, letterify, bothify, regexify,
    examplify and templatify.

    Each call returns a fresh registry, so registering extra builtins on one
    Faker never leaks into another.
    """
    registry = BuiltinRegistry()
    for func in (_numerify, _letterify, _bothify, _regexify, _examplify, _templatify):
        registry.register(func)
    return registry

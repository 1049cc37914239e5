"""Expression evaluator - turns #{...} templates into text.

Walks the Expression AST left to right, concatenating literal runs with the
result of each directive:

    BuiltinCall       -> builtin registry, or a relative data key when the
                         name is not a builtin and a namespace is in scope
    ProviderReference -> provider operation, or <namespace>.<key> data

Data values are themselves evaluated (the Key Resolver calls back into
evaluate()), so data may nest directives to any depth up to max_depth.
Builtin and operation results are returned as literal text.

Depth Tracking:
    Provider operations reach the data through the public Faker API, which
    starts a fresh evaluate() call. The active EvaluationContext is kept in
    a ContextVar so that such re-entrant calls share one DepthGuard instead
    of each starting from zero. Every pass over text containing directives
    and every nested directive argument is one level.

    The context belongs to one evaluator. When a provider drives a
    different Faker, that Faker's evaluator starts its own context with
    its own max_depth, and the outer context is restored afterwards.

Thread Safety:
    Evaluation state lives in the ContextVar, so threads and async tasks
    evaluating concurrently have independent depth counts. The RandomService
    is still shared (see RandomService).

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fakerengine.constants import MAX_EXPRESSION_DEPTH
from fakerengine.core.depth_guard import DepthGuard
from fakerengine.diagnostics import (
    ErrorTemplate,
    EvaluationError,
    KeyNotFoundError,
)
from fakerengine.syntax import (
    Argument,
    BuiltinCall,
    Directive,
    ProviderReference,
    StringArgument,
    Text,
    has_directives,
    parse_expression,
)

from .builtins import BuiltinRegistry, describe_arity, positional_arity

if TYPE_CHECKING:
    from .faker import Faker
    from .providers import ProviderCatalog

__all__ = ["EvaluationContext", "ExpressionEvaluator"]


@dataclass(slots=True)
class EvaluationContext:
    """State shared by every evaluate() call below one top-level call.

    Attributes:
        evaluator: Evaluator that opened the context
        guard: Depth guard for the whole evaluation tree
    """

    evaluator: ExpressionEvaluator
    guard: DepthGuard = field(default_factory=DepthGuard)


_active_context: ContextVar[EvaluationContext | None] = ContextVar(
    "fakerengine_evaluation_context", default=None
)


class ExpressionEvaluator:
    """Evaluates template text for one Faker.

    Attributes:
        faker: Owning Faker; provides key resolution and provider instances
        builtins: Builtin registry
        catalog: Provider name -> class
        max_depth: Maximum nesting depth (clamped against the recursion limit)
    """

    __slots__ = ("builtins", "catalog", "faker", "max_depth")

    def __init__(
        self,
        faker: Faker,
        *,
        builtins: BuiltinRegistry,
        catalog: ProviderCatalog,
        max_depth: int = MAX_EXPRESSION_DEPTH,
    ) -> None:
        self.faker = faker
        self.builtins = builtins
        self.catalog = catalog
        self.max_depth = max_depth

    def evaluate(self, source: str, namespace: str | None = None) -> str:
        """Evaluate template text.

        Args:
            source: Template, e.g. "#{Name.first_name} ##"
            namespace: Category for relative directives such as #{first_name};
                None at top level

        Returns:
            Evaluated text

        Raises:
            EvaluationError: If a directive is malformed or cannot be resolved
            DepthLimitExceededError: If nesting exceeds max_depth
            PatternSyntaxError: If a regexify builtin receives a bad pattern
            InvalidArgumentError: If a builtin or operation rejects an argument
        """
        if not has_directives(source):
            return source

        context = _active_context.get()
        if context is not None and context.evaluator is self:
            return self._evaluate_in(context, source, namespace)

        context = EvaluationContext(self, DepthGuard(max_depth=self.max_depth))
        token = _active_context.set(context)
        try:
            return self._evaluate_in(context, source, namespace)
        finally:
            _active_context.reset(token)

    def _evaluate_in(self, context: EvaluationContext, source: str, namespace: str | None) -> str:
        with context.guard:
            expression = parse_expression(source)
            parts: list[str] = []
            for segment in expression.segments:
                if isinstance(segment, Text):
                    parts.append(segment.value)
                else:
                    parts.append(self._directive(segment, context, namespace))
            return "".join(parts)

    def _directive(
        self, directive: Directive, context: EvaluationContext, namespace: str | None
    ) -> str:
        arguments = [self._argument(arg, context, namespace) for arg in directive.arguments]
        if isinstance(directive, BuiltinCall):
            return self._builtin(directive, arguments, namespace)
        return self._provider(directive, arguments)

    def _argument(
        self, argument: Argument, context: EvaluationContext, namespace: str | None
    ) -> str:
        if isinstance(argument, StringArgument):
            return argument.value
        with context.guard:
            return self._directive(argument, context, namespace)

    def _builtin(self, call: BuiltinCall, arguments: list[str], namespace: str | None) -> str:
        if call.name in self.builtins:
            return self.builtins.call(call.name, self.faker, arguments)

        # Not a builtin: a key relative to the category being resolved
        if namespace is None:
            raise EvaluationError(ErrorTemplate.builtin_not_found(call.name))
        if arguments:
            raise EvaluationError(
                ErrorTemplate.builtin_arity_mismatch(call.name, "0", len(arguments))
            )
        try:
            return self.faker.resolve(f"{namespace}.{call.name}")
        except KeyNotFoundError as e:
            raise EvaluationError(ErrorTemplate.provider_key_not_found(namespace, call.name)) from e

    def _provider(self, reference: ProviderReference, arguments: list[str]) -> str:
        provider_cls = self.catalog.lookup(reference.provider)
        if provider_cls is None:
            raise EvaluationError(ErrorTemplate.provider_not_found(reference.provider))
        provider = self.faker.provider(provider_cls)

        operation = provider.operation(reference.key)
        if operation is not None:
            _check_arity(reference.key, operation, len(arguments))
        elif arguments:
            raise EvaluationError(
                ErrorTemplate.builtin_arity_mismatch(reference.key, "0", len(arguments))
            )

        try:
            if operation is not None:
                return str(operation(*arguments))
            return self.faker.resolve(f"{provider.namespace}.{reference.key}")
        except KeyNotFoundError as e:
            raise EvaluationError(
                ErrorTemplate.provider_key_not_found(reference.provider, reference.key)
            ) from e


def _check_arity(name: str, operation: Callable[..., object], received: int) -> None:
    """Raise EvaluationError unless operation accepts received positional args."""
    min_args, max_args = positional_arity(operation)
    if received < min_args or (max_args is not None and received > max_args):
        raise EvaluationError(
            ErrorTemplate.builtin_arity_mismatch(name, describe_arity(min_args, max_args), received)
        )

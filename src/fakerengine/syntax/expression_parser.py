"""Recursive-descent parser for the #{...} directive language.

Grammar:
    expression := (text | directive)*
    directive  := '#{' name arguments? '}'
    name       := identifier ('.' identifier)*
    arguments  := argument (',' argument)*
    argument   := quoted | directive
    quoted     := "'" (escaped-quote | any character except "'")* "'"

Directives nested as arguments are limited to MAX_EXPRESSION_DEPTH levels.

Spaces and tabs are allowed around names, arguments and commas. Inside a
quoted argument only \\' is an escape; every other backslash is kept, so
regexify patterns such as '\\d{3}' reach the generator unchanged.

A name without a dot parses to BuiltinCall; a dotted name parses to
ProviderReference with the first segment as provider. Whether a dotless
name is a builtin or a relative data key is decided at evaluation time.

Python 3.13+. Zero external dependencies.
"""

from typing import NoReturn

from fakerengine.constants import DIRECTIVE_CLOSE, DIRECTIVE_OPEN, MAX_EXPRESSION_DEPTH
from fakerengine.core.depth_guard import DepthLimitExceededError
from fakerengine.diagnostics import ErrorTemplate, EvaluationError

from .ast import (
    Argument,
    BuiltinCall,
    Directive,
    Expression,
    ProviderReference,
    Segment,
    StringArgument,
    Text,
)
from .cursor import Cursor

__all__ = ["has_directives", "parse_expression"]


def has_directives(text: str) -> bool:
    """True if text contains a directive opening marker."""
    return DIRECTIVE_OPEN in text


def parse_expression(source: str) -> Expression:
    """Parse template text into an Expression AST.

    Args:
        source: Template text, e.g. "#{Name.first_name} ##-###"

    Returns:
        Expression with literal Text runs and directive nodes

    Raises:
        EvaluationError: If a directive is unterminated or malformed

    Example:
        >>> [type(segment).__name__ for segment in parse_expression("id-#{numerify '##'}").segments]
        ['Text', 'BuiltinCall']
    """
    return _ExpressionParser(source).parse()


def _is_identifier_start(ch: str) -> bool:
    return ch.isascii() and (ch.isalpha() or ch == "_")


def _is_identifier_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


class _ExpressionParser:
    """Single-use parser over one template."""

    __slots__ = ("_source",)

    def __init__(self, source: str) -> None:
        self._source = source

    def parse(self) -> Expression:
        segments: list[Segment] = []
        cursor = Cursor(self._source, 0)
        while not cursor.is_eof:
            next_open = self._source.find(DIRECTIVE_OPEN, cursor.pos)
            if next_open == -1:
                segments.append(Text(cursor.slice_to(len(self._source))))
                break
            if next_open > cursor.pos:
                segments.append(Text(cursor.slice_to(next_open)))
            directive, cursor = self._parse_directive(Cursor(self._source, next_open))
            segments.append(directive)
        return Expression(tuple(segments))

    def _fail(self, position: int, reason: str) -> NoReturn:
        raise EvaluationError(ErrorTemplate.directive_malformed(self._source, position, reason))

    def _fail_unterminated(self, position: int) -> NoReturn:
        raise EvaluationError(ErrorTemplate.directive_unterminated(self._source, position))

    def _parse_directive(self, cursor: Cursor, depth: int = 0) -> tuple[Directive, Cursor]:
        start = cursor.pos
        if depth >= MAX_EXPRESSION_DEPTH:
            raise DepthLimitExceededError(ErrorTemplate.max_depth_exceeded(MAX_EXPRESSION_DEPTH))
        cursor = cursor.advance(len(DIRECTIVE_OPEN)).skip_spaces()
        if cursor.is_eof:
            self._fail_unterminated(start)

        name, cursor = self._parse_name(cursor)
        cursor = cursor.skip_spaces()

        arguments: list[Argument] = []
        if cursor.is_eof:
            self._fail_unterminated(start)
        if not cursor.startswith(DIRECTIVE_CLOSE):
            argument, cursor = self._parse_argument(cursor, start, depth)
            arguments.append(argument)
            cursor = cursor.skip_spaces()
            while not cursor.is_eof and cursor.current == ",":
                argument, cursor = self._parse_argument(
                    cursor.advance().skip_spaces(), start, depth
                )
                arguments.append(argument)
                cursor = cursor.skip_spaces()
            if cursor.is_eof:
                self._fail_unterminated(start)
            if not cursor.startswith(DIRECTIVE_CLOSE):
                self._fail(cursor.pos, "expected ',' or '}' after argument")

        cursor = cursor.advance(len(DIRECTIVE_CLOSE))
        source = self._source[start : cursor.pos]
        provider, dot, key = name.partition(".")
        if dot:
            return ProviderReference(provider, key, tuple(arguments), source), cursor
        return BuiltinCall(name, tuple(arguments), source), cursor

    def _parse_name(self, cursor: Cursor) -> tuple[str, Cursor]:
        start = cursor.pos
        while True:
            if cursor.is_eof or not _is_identifier_start(cursor.current):
                self._fail(cursor.pos, "expected identifier")
            while not cursor.is_eof and _is_identifier_char(cursor.current):
                cursor = cursor.advance()
            if cursor.is_eof or cursor.current != ".":
                break
            cursor = cursor.advance()
        return self._source[start : cursor.pos], cursor

    def _parse_argument(
        self, cursor: Cursor, directive_start: int, depth: int
    ) -> tuple[Argument, Cursor]:
        if cursor.is_eof:
            self._fail_unterminated(directive_start)
        if cursor.startswith(DIRECTIVE_OPEN):
            return self._parse_directive(cursor, depth + 1)
        if cursor.current != "'":
            self._fail(cursor.pos, "expected quoted argument")
        return self._parse_quoted(cursor, directive_start)

    def _parse_quoted(self, cursor: Cursor, directive_start: int) -> tuple[StringArgument, Cursor]:
        cursor = cursor.advance()
        chars: list[str] = []
        while True:
            if cursor.is_eof:
                self._fail_unterminated(directive_start)
            ch = cursor.current
            if ch == "\\" and cursor.peek(1) == "'":
                chars.append("'")
                cursor = cursor.advance(2)
            elif ch == "'":
                return StringArgument("".join(chars)), cursor.advance()
            else:
                chars.append(ch)
                cursor = cursor.advance()

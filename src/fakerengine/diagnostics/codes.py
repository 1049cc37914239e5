"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (locales, data sources, engine settings)
        2000-2999: Pattern syntax errors (regex-subset grammar)
        3000-3999: Evaluation errors (directive language)
        4000-4999: Lookup errors (dotted keys)
        5000-5999: Argument errors (generator and random service inputs)
    """

    # Configuration errors (1000-1999)
    LOCALE_INVALID = 1001
    SOURCE_UNREADABLE = 1002
    SOURCE_MALFORMED = 1003
    CONFIG_INVALID = 1004

    # Pattern syntax errors (2000-2999)
    PATTERN_UNBALANCED = 2001
    PATTERN_INVALID_RANGE = 2002
    PATTERN_EMPTY_CLASS = 2003
    PATTERN_NOTHING_TO_REPEAT = 2004
    PATTERN_INVALID_QUANTIFIER = 2005
    PATTERN_UNSUPPORTED = 2006
    PATTERN_DANGLING_ESCAPE = 2007

    # Evaluation errors (3000-3999)
    DIRECTIVE_UNTERMINATED = 3001
    DIRECTIVE_MALFORMED = 3002
    BUILTIN_NOT_FOUND = 3003
    BUILTIN_ARITY_MISMATCH = 3004
    ARGUMENT_INVALID = 3005
    PROVIDER_NOT_FOUND = 3006
    PROVIDER_KEY_NOT_FOUND = 3007
    MAX_DEPTH_EXCEEDED = 3008

    # Lookup errors (4000-4999)
    KEY_NOT_FOUND = 4001
    KEY_IS_CATEGORY = 4002

    # Argument errors (5000-5999)
    OPTIONS_EMPTY = 5001
    PLACEHOLDER_INVALID = 5002
    BOUND_INVALID = 5003
    PROBABILITY_INVALID = 5004
    SEQUENCE_EMPTY = 5005
    OPTION_INVALID = 5006


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside a template or pattern string.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the offending template or pattern (optional)
        hint: Suggestion for fixing the error
        source: The template, pattern or path the error refers to
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[PATTERN_UNBALANCED]: Unterminated character class at position 0
              --> [a-c
              = help: Close the class with ']'

        Returns:
            Formatted error message
        """
        parts = [f"error[{self.code.name}]: {self.message}"]
        if self.source is not None:
            parts.append(f"  --> {_escape_control(self.source)}")
        if self.hint:
            parts.append(f"  = help: {self.hint}")
        return "\n".join(parts)


def _escape_control(text: str) -> str:
    """Escape control characters so diagnostics stay on their own lines."""
    return "".join(ch if ch.isprintable() else repr(ch)[1:-1] for ch in text)

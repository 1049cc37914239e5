"""AST node definitions for expressions and regex-subset patterns.

Two small trees live here:

- Expression AST: literal text interleaved with #{...} directives.
- Regex AST: alternations of sequences of atoms with optional repetition.

Both are built per call by the parsers and discarded after evaluation.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Expression nodes
    "Text",
    "StringArgument",
    "BuiltinCall",
    "ProviderReference",
    "Expression",
    # Regex nodes
    "Literal",
    "CharClass",
    "Anchor",
    "Group",
    "Repeat",
    "Sequence",
    "Alternation",
    # Type aliases
    "Directive",
    "Argument",
    "Segment",
    "RegexNode",
]

# ============================================================================
# EXPRESSION NODES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text run between directives."""

    value: str


@dataclass(frozen=True, slots=True)
class StringArgument:
    """Single-quoted directive argument, quotes removed and escapes applied."""

    value: str


@dataclass(frozen=True, slots=True)
class BuiltinCall:
    """Directive naming a builtin generator, or a relative data key.

    #{regexify '[a-z]{3}'} -> BuiltinCall("regexify", (StringArgument("[a-z]{3}"),))
    #{first_name}          -> BuiltinCall("first_name", ())

    Attributes:
        name: Identifier as written
        arguments: Positional arguments
        source: Directive text including markers, for error messages
    """

    name: str
    arguments: tuple["Argument", ...]
    source: str


@dataclass(frozen=True, slots=True)
class ProviderReference:
    """Directive naming a provider and one of its keys.

    #{Name.first_name}                   -> ProviderReference("Name", "first_name", ())
    #{Number.number_between '1','10'}    -> ProviderReference("Number", "number_between", ...)

    Attributes:
        provider: Provider name as written
        key: Dotted method key as written
        arguments: Positional arguments
        source: Directive text including markers, for error messages
    """

    provider: str
    key: str
    arguments: tuple["Argument", ...]
    source: str


@dataclass(frozen=True, slots=True)
class Expression:
    """Parsed template: ordered literal runs and directives."""

    segments: tuple["Segment", ...]


type Directive = BuiltinCall | ProviderReference
type Argument = StringArgument | Directive
type Segment = Text | Directive

# ============================================================================
# REGEX NODES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Literal:
    """Single literal character."""

    char: str


@dataclass(frozen=True, slots=True)
class CharClass:
    """Set of candidate characters, negation already applied.

    Attributes:
        members: Distinct member characters in code point order (never empty)
    """

    members: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Anchor:
    """'^' or '$'. Matches a position, so generates nothing."""

    symbol: str


@dataclass(frozen=True, slots=True)
class Group:
    """Parenthesized sub-pattern."""

    body: "Alternation"


@dataclass(frozen=True, slots=True)
class Repeat:
    """Quantified atom.

    Attributes:
        node: Repeated atom
        minimum: Lower repetition bound
        maximum: Upper repetition bound; None means unbounded
    """

    node: "RegexNode"
    minimum: int
    maximum: int | None


@dataclass(frozen=True, slots=True)
class Sequence:
    """Concatenation of atoms: one branch of an alternation."""

    items: tuple["RegexNode", ...]


@dataclass(frozen=True, slots=True)
class Alternation:
    """Branches separated by '|'. A pattern without '|' has one branch."""

    branches: tuple[Sequence, ...]


type RegexNode = Literal | CharClass | Anchor | Group | Repeat

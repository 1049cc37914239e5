"""Parsers and AST for directive expressions and regex-subset patterns."""

from .ast import (
    Alternation,
    Anchor,
    Argument,
    BuiltinCall,
    CharClass,
    Directive,
    Expression,
    Group,
    Literal,
    ProviderReference,
    RegexNode,
    Repeat,
    Segment,
    Sequence,
    StringArgument,
    Text,
)
from .cursor import Cursor
from .expression_parser import has_directives, parse_expression
from .regex_parser import parse_regex

__all__ = [
    "Alternation",
    "Anchor",
    "Argument",
    "BuiltinCall",
    "CharClass",
    "Cursor",
    "Directive",
    "Expression",
    "Group",
    "Literal",
    "ProviderReference",
    "RegexNode",
    "Repeat",
    "Segment",
    "Sequence",
    "StringArgument",
    "Text",
    "has_directives",
    "parse_expression",
    "parse_regex",
]

"""Recursive-descent parser for the regex subset understood by regexify.

Grammar:
    alternation := sequence ('|' sequence)*
    sequence    := (atom quantifier?)*
    atom        := '(' ('?:')? alternation ')' | '[' class ']' | '.' | '^' | '$'
                 | '\\' escape | literal
    quantifier  := ('?' | '*' | '+' | '{m}' | '{m,}' | '{m,n}') ('?' | '+')?
    class       := '^'? (item ('-' item)?)+

Escapes: \\d \\w \\s (and negated \\D \\W \\S) are character classes;
\\n \\t \\r \\f \\v, \\xHH and \\uHHHH are control or code point escapes;
\\b \\B \\A \\z \\Z are anchors; any other non-alphanumeric character
escapes to itself. Backreferences and lookaround are rejected.

Every failure raises PatternSyntaxError before any output exists.

Python 3.13+. Zero external dependencies.
"""

from typing import NoReturn

from fakerengine.constants import ASCII_DIGITS, ASCII_LOWERCASE, ASCII_UPPERCASE, PRINTABLE_ALPHABET
from fakerengine.diagnostics import Diagnostic, ErrorTemplate, PatternSyntaxError

from .ast import Alternation, Anchor, CharClass, Group, Literal, RegexNode, Repeat, Sequence
from .cursor import Cursor

__all__ = ["parse_regex"]

_WORD_CHARS: frozenset[str] = frozenset(ASCII_LOWERCASE + ASCII_UPPERCASE + ASCII_DIGITS + "_")
_SPACE_CHARS: frozenset[str] = frozenset(" \t\n\r\f\v")
_DIGIT_CHARS: frozenset[str] = frozenset(ASCII_DIGITS)

_CLASS_ESCAPES: dict[str, frozenset[str]] = {
    "d": _DIGIT_CHARS,
    "w": _WORD_CHARS,
    "s": _SPACE_CHARS,
}

_CONTROL_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_ANCHOR_ESCAPES: frozenset[str] = frozenset("bBAzZG")

_HEX_ESCAPE_LENGTH: dict[str, int] = {"x": 2, "u": 4}

# Characters that cannot start an atom.
_QUANTIFIER_CHARS: frozenset[str] = frozenset("*+?{")


def parse_regex(pattern: str) -> Alternation:
    """Parse a regex-subset pattern into a RegexAST.

    Args:
        pattern: Pattern text, e.g. "[a-c]{2,3}" or "(foo|bar)-\\d+"

    Returns:
        Root Alternation node

    Raises:
        PatternSyntaxError: If the pattern is malformed or uses
            unsupported constructs

    Example:
        >>> len(parse_regex("a|b").branches)
        2
    """
    return _RegexParser(pattern).parse()


class _RegexParser:
    """Single-use parser over one pattern."""

    __slots__ = ("_pattern",)

    def __init__(self, pattern: str) -> None:
        self._pattern = pattern

    def parse(self) -> Alternation:
        cursor = Cursor(self._pattern, 0)
        tree, cursor = self._parse_alternation(cursor)
        if not cursor.is_eof:
            # Only an unmatched ')' stops the top-level alternation early.
            self._fail(
                ErrorTemplate.pattern_unbalanced(self._pattern, cursor.pos, "')'"), cursor.pos
            )
        return tree

    def _fail(self, diagnostic: Diagnostic, position: int) -> NoReturn:
        raise PatternSyntaxError(diagnostic, pattern=self._pattern, position=position)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def _parse_alternation(self, cursor: Cursor) -> tuple[Alternation, Cursor]:
        branches: list[Sequence] = []
        branch, cursor = self._parse_sequence(cursor)
        branches.append(branch)
        while not cursor.is_eof and cursor.current == "|":
            branch, cursor = self._parse_sequence(cursor.advance())
            branches.append(branch)
        return Alternation(tuple(branches)), cursor

    def _parse_sequence(self, cursor: Cursor) -> tuple[Sequence, Cursor]:
        items: list[RegexNode] = []
        while not cursor.is_eof and cursor.current not in "|)":
            if cursor.current in _QUANTIFIER_CHARS:
                self._fail(
                    ErrorTemplate.pattern_nothing_to_repeat(
                        self._pattern, cursor.pos, cursor.current
                    ),
                    cursor.pos,
                )
            atom, cursor = self._parse_atom(cursor)
            if not cursor.is_eof and cursor.current in _QUANTIFIER_CHARS:
                atom, cursor = self._parse_quantifier(atom, cursor)
            items.append(atom)
        return Sequence(tuple(items)), cursor

    def _parse_atom(self, cursor: Cursor) -> tuple[RegexNode, Cursor]:
        ch = cursor.current
        match ch:
            case "(":
                return self._parse_group(cursor)
            case "[":
                return self._parse_class(cursor)
            case ".":
                return CharClass(tuple(PRINTABLE_ALPHABET)), cursor.advance()
            case "^" | "$":
                return Anchor(ch), cursor.advance()
            case "\\":
                return self._parse_escape(cursor)
            case _:
                return Literal(ch), cursor.advance()

    def _parse_group(self, cursor: Cursor) -> tuple[Group, Cursor]:
        start = cursor.pos
        cursor = cursor.advance()
        if cursor.startswith("?:"):
            cursor = cursor.advance(2)
        elif cursor.startswith("?"):
            construct = "lookaround" if cursor.peek(1) in ("=", "!", "<") else "group flag"
            self._fail(ErrorTemplate.pattern_unsupported(self._pattern, start, construct), start)
        body, cursor = self._parse_alternation(cursor)
        if cursor.is_eof:
            self._fail(ErrorTemplate.pattern_unbalanced(self._pattern, start, "'('"), start)
        return Group(body), cursor.advance()

    # ------------------------------------------------------------------
    # Quantifiers
    # ------------------------------------------------------------------

    def _parse_quantifier(self, atom: RegexNode, cursor: Cursor) -> tuple[Repeat, Cursor]:
        start = cursor.pos
        if isinstance(atom, Anchor):
            self._fail(
                ErrorTemplate.pattern_nothing_to_repeat(self._pattern, start, cursor.current),
                start,
            )
        match cursor.current:
            case "?":
                minimum, maximum, cursor = 0, 1, cursor.advance()
            case "*":
                minimum, maximum, cursor = 0, None, cursor.advance()
            case "+":
                minimum, maximum, cursor = 1, None, cursor.advance()
            case _:
                minimum, maximum, cursor = self._parse_bounds(cursor)
        # Lazy '?' and possessive '+' change matching, not generation.
        if not cursor.is_eof and cursor.current in "?+":
            cursor = cursor.advance()
        if not cursor.is_eof and cursor.current in _QUANTIFIER_CHARS:
            self._fail(
                ErrorTemplate.pattern_nothing_to_repeat(self._pattern, cursor.pos, cursor.current),
                cursor.pos,
            )
        return Repeat(atom, minimum, maximum), cursor

    def _parse_bounds(self, cursor: Cursor) -> tuple[int, int | None, Cursor]:
        start = cursor.pos
        close = self._pattern.find("}", start)
        if close == -1:
            self._fail(
                ErrorTemplate.pattern_invalid_quantifier(
                    self._pattern, start, self._pattern[start:]
                ),
                start,
            )
        text = self._pattern[start : close + 1]
        low_text, comma, high_text = text[1:-1].partition(",")
        if not _is_ascii_number(low_text) or (high_text and not _is_ascii_number(high_text)):
            self._fail(ErrorTemplate.pattern_invalid_quantifier(self._pattern, start, text), start)
        minimum = int(low_text)
        if not comma:
            maximum: int | None = minimum
        elif high_text:
            maximum = int(high_text)
        else:
            maximum = None
        if maximum is not None and maximum < minimum:
            self._fail(ErrorTemplate.pattern_invalid_quantifier(self._pattern, start, text), start)
        return minimum, maximum, Cursor(self._pattern, close + 1)

    # ------------------------------------------------------------------
    # Escapes
    # ------------------------------------------------------------------

    def _parse_escape(self, cursor: Cursor) -> tuple[RegexNode, Cursor]:
        start = cursor.pos
        members, char, cursor = self._read_escape(cursor)
        if members is not None:
            return CharClass(tuple(sorted(members))), cursor
        if char is None:
            return Anchor(self._pattern[start : cursor.pos]), cursor
        return Literal(char), cursor

    def _read_escape(
        self, cursor: Cursor
    ) -> tuple[frozenset[str] | None, str | None, Cursor]:
        """Read one escape sequence starting at a backslash.

        Returns:
            (class members, None, cursor) for class escapes,
            (None, char, cursor) for single characters,
            (None, None, cursor) for anchors
        """
        start = cursor.pos
        cursor = cursor.advance()
        if cursor.is_eof:
            self._fail(ErrorTemplate.pattern_dangling_escape(self._pattern, start), start)
        ch = cursor.current
        cursor = cursor.advance()

        if ch.lower() in _CLASS_ESCAPES:
            members = _CLASS_ESCAPES[ch.lower()]
            if ch.isupper():
                members = frozenset(PRINTABLE_ALPHABET) - members
            return members, None, cursor
        if ch in _CONTROL_ESCAPES:
            return None, _CONTROL_ESCAPES[ch], cursor
        if ch in _HEX_ESCAPE_LENGTH:
            length = _HEX_ESCAPE_LENGTH[ch]
            digits = cursor.slice_to(cursor.pos + length)
            if len(digits) != length or any(d not in "0123456789abcdefABCDEF" for d in digits):
                self._fail(
                    ErrorTemplate.pattern_unsupported(
                        self._pattern, start, f"escape '\\{ch}{digits}'"
                    ),
                    start,
                )
            return None, chr(int(digits, 16)), cursor.advance(length)
        if ch in _ANCHOR_ESCAPES:
            return None, None, cursor
        if ch.isdigit():
            self._fail(
                ErrorTemplate.pattern_unsupported(self._pattern, start, "backreference"), start
            )
        if ch.isalnum():
            self._fail(
                ErrorTemplate.pattern_unsupported(self._pattern, start, f"escape '\\{ch}'"),
                start,
            )
        return None, ch, cursor

    # ------------------------------------------------------------------
    # Character classes
    # ------------------------------------------------------------------

    def _parse_class(self, cursor: Cursor) -> tuple[CharClass, Cursor]:
        start = cursor.pos
        cursor = cursor.advance()
        negated = False
        if not cursor.is_eof and cursor.current == "^":
            negated = True
            cursor = cursor.advance()

        members: set[str] = set()
        item_count = 0
        while True:
            if cursor.is_eof:
                self._fail(ErrorTemplate.pattern_unbalanced(self._pattern, start, "'['"), start)
            if cursor.current == "]":
                cursor = cursor.advance()
                break
            item_count += 1
            item_start = cursor.pos
            item_members, low, cursor = self._read_class_item(cursor)
            if item_members:
                members |= item_members
                continue
            # '-' between two single characters forms a range; elsewhere it is literal.
            if not cursor.startswith("-") or cursor.peek(1) in (None, "]"):
                members.add(low)
                continue
            range_members, high, cursor = self._read_class_item(cursor.advance())
            if range_members or ord(low) > ord(high):
                self._fail(
                    ErrorTemplate.pattern_invalid_range(
                        self._pattern, item_start, low, high or "?"
                    ),
                    item_start,
                )
            members.update(chr(code) for code in range(ord(low), ord(high) + 1))

        if negated:
            members = set(PRINTABLE_ALPHABET) - members
        if item_count == 0 or not members:
            self._fail(ErrorTemplate.pattern_empty_class(self._pattern, start), start)
        return CharClass(tuple(sorted(members))), cursor

    def _read_class_item(self, cursor: Cursor) -> tuple[frozenset[str], str, Cursor]:
        """Read one class member.

        Returns:
            (members, "", cursor) for class escapes such as \\d,
            (empty set, char, cursor) for single characters
        """
        if cursor.current != "\\":
            return frozenset(), cursor.current, cursor.advance()
        start = cursor.pos
        members, char, cursor = self._read_escape(cursor)
        if members is not None:
            return members, "", cursor
        if char is None:
            self._fail(
                ErrorTemplate.pattern_unsupported(self._pattern, start, "anchor inside class"),
                start,
            )
        return frozenset(), char, cursor


def _is_ascii_number(text: str) -> bool:
    return bool(text) and all(ch in ASCII_DIGITS for ch in text)

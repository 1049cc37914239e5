"""Generate strings matching a regex-subset pattern.

The structural inverse of matching: walk the RegexAST depth-first and emit
one string the pattern would accept.

- Alternation: one branch, uniformly
- Repeat: a count drawn uniformly from [minimum, maximum]; unbounded
  quantifiers use maximum = minimum + repeat_cap
- CharClass: one member, uniformly
- Anchor: nothing

Python 3.13+.
"""

from fakerengine.constants import UNBOUNDED_REPEAT_CAP
from fakerengine.syntax import (
    Alternation,
    Anchor,
    CharClass,
    Group,
    Literal,
    RegexNode,
    Repeat,
    parse_regex,
)

from .random_service import RandomService

__all__ = ["RegexGenerator", "regexify"]


class RegexGenerator:
    """Walks a RegexAST emitting characters.

    Attributes:
        random: Source of draws
        repeat_cap: Extra repetitions allowed for unbounded quantifiers
    """

    __slots__ = ("random", "repeat_cap")

    def __init__(self, random: RandomService, *, repeat_cap: int = UNBOUNDED_REPEAT_CAP) -> None:
        self.random = random
        self.repeat_cap = repeat_cap

    def generate(self, tree: Alternation) -> str:
        """Generate one string for a parsed pattern."""
        parts: list[str] = []
        self._emit_alternation(tree, parts)
        return "".join(parts)

    def _emit_alternation(self, node: Alternation, parts: list[str]) -> None:
        branch = self.random.pick(node.branches)
        for item in branch.items:
            self._emit(item, parts)

    def _emit(self, node: RegexNode, parts: list[str]) -> None:
        match node:
            case Literal(char=char):
                parts.append(char)
            case CharClass(members=members):
                parts.append(self.random.pick(members))
            case Group(body=body):
                self._emit_alternation(body, parts)
            case Repeat(node=inner, minimum=minimum, maximum=maximum):
                upper = minimum + self.repeat_cap if maximum is None else maximum
                for _ in range(self.random.between(minimum, upper)):
                    self._emit(inner, parts)
            case Anchor():
                pass


def regexify(pattern: str, random: RandomService, *, repeat_cap: int = UNBOUNDED_REPEAT_CAP) -> str:
    """Generate a string matching pattern.

    The pattern is parsed completely before any draw, so a malformed
    pattern raises without consuming randomness.

    Args:
        pattern: Regex-subset pattern
        random: Source of draws
        repeat_cap: Extra repetitions allowed for *, + and {m,}

    Returns:
        Generated string

    Raises:
        PatternSyntaxError: If the pattern is malformed

    Example:
        >>> from fakerengine.runtime.random_service import RandomService
        >>> len(regexify("[a-c]{3}", RandomService.from_seed(1)))
        3
    """
    tree = parse_regex(pattern)
    return RegexGenerator(random, repeat_cap=repeat_cap).generate(tree)

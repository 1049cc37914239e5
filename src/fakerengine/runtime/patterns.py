"""Placeholder-substitution generators.

numerify, letterify, bothify, examplify and templatify turn a template into
text by replacing placeholder characters with random draws. Every function
is pure given the RandomService draw sequence.

Python 3.13+.
"""

from collections.abc import Mapping, Sequence

from fakerengine.constants import DIGIT_PLACEHOLDER, LETTER_PLACEHOLDER
from fakerengine.diagnostics import ErrorTemplate, InvalidArgumentError

from .random_service import RandomService

__all__ = [
    "bothify",
    "examplify",
    "letterify",
    "numerify",
    "templatify",
    "templatify_map",
]


def numerify(template: str, random: RandomService) -> str:
    """Replace each '#' with a random digit.

    Examples:
        "ABC##EFG" -> "ABC07EFG"
    """
    return "".join(
        random.digit() if ch == DIGIT_PLACEHOLDER else ch for ch in template
    )


def letterify(template: str, random: RandomService, upper: bool | None = None) -> str:
    """Replace each '?' with a random ASCII letter.

    Args:
        template: Template text
        random: Source of draws
        upper: Fix the case of every letter; None draws the case per letter

    Examples:
        "12??34" -> "12Qf34"
    """
    return "".join(
        random.letter(upper) if ch == LETTER_PLACEHOLDER else ch for ch in template
    )


def bothify(template: str, random: RandomService, upper: bool | None = None) -> str:
    """numerify then letterify."""
    return letterify(numerify(template, random), random, upper)


def examplify(example: str, random: RandomService) -> str:
    """Generate text shaped like the example.

    Uppercase letters become random uppercase letters, lowercase letters
    random lowercase letters and digits random digits. Everything else is
    copied.

    Examples:
        "A19c" -> "Z20d"
        "AB-12" -> "QX-87"
    """
    chars: list[str] = []
    for ch in example:
        if "A" <= ch <= "Z":
            chars.append(random.letter(upper=True))
        elif "a" <= ch <= "z":
            chars.append(random.letter(upper=False))
        elif "0" <= ch <= "9":
            chars.append(random.digit())
        else:
            chars.append(ch)
    return "".join(chars)


def templatify(
    template: str,
    placeholder: str,
    options: Sequence[str],
    random: RandomService,
) -> str:
    """Replace every occurrence of placeholder with a random option.

    Each occurrence draws independently.

    Raises:
        InvalidArgumentError: If placeholder is not one character or options is empty

    Examples:
        templatify("X-X", "X", ["foo", "bar"]) -> "bar-bar"
    """
    if not options:
        raise InvalidArgumentError(ErrorTemplate.options_empty(placeholder))
    return templatify_map(template, {placeholder: options}, random)


def templatify_map(
    template: str,
    options_by_char: Mapping[str, Sequence[str]],
    random: RandomService,
) -> str:
    """Replace each mapped character with a random option for that character.

    Characters that are not keys of options_by_char pass through.

    Raises:
        InvalidArgumentError: If a key is not one character, or a character
            that occurs in the template maps to no options
    """
    for placeholder, options in options_by_char.items():
        if not isinstance(placeholder, str) or len(placeholder) != 1:
            raise InvalidArgumentError(ErrorTemplate.placeholder_invalid(placeholder))
        if not options and placeholder in template:
            raise InvalidArgumentError(ErrorTemplate.options_empty(placeholder))
        if isinstance(options, str):
            raise InvalidArgumentError(ErrorTemplate.option_invalid(placeholder, options))
        for option in options:
            if not isinstance(option, str):
                raise InvalidArgumentError(ErrorTemplate.option_invalid(placeholder, option))

    return "".join(
        random.pick(options_by_char[ch]) if ch in options_by_char else ch
        for ch in template
    )

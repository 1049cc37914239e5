"""Seedable randomness shared by every generator.

RandomService wraps exactly one random.Random. Its state advances on
every draw, so two services built from the same seed produce the same
sequence of values as long as they receive the same sequence of calls.

Thread Safety:
    NOT thread-safe. Confine a RandomService to one thread or serialize
    draws externally. This is a caller responsibility.

Python 3.13+.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

from fakerengine.constants import ASCII_DIGITS, ASCII_LOWERCASE, ASCII_UPPERCASE
from fakerengine.diagnostics import ErrorTemplate, InvalidArgumentError

__all__ = ["RandomService"]

T = TypeVar("T")


class RandomService:
    """Uniform draws over integers, sequences and characters.

    Not for security purposes: uses the Mersenne Twister.

    Example:
        >>> service = RandomService.from_seed(42)
        >>> 0 <= service.draw(10) < 10
        True
        >>> service.pick(["a", "b", "c"]) in "abc"
        True
    """

    __slots__ = ("_source",)

    def __init__(self, source: random.Random) -> None:
        """Wrap an explicit random source.

        Args:
            source: The random.Random instance all draws come from
        """
        self._source = source

    @classmethod
    def from_seed(cls, seed: int | str | bytes) -> RandomService:
        """Create a deterministic service.

        Args:
            seed: Seed for random.Random

        Returns:
            RandomService that replays the same draws for the same seed
        """
        return cls(random.Random(seed))

    @classmethod
    def from_entropy(cls) -> RandomService:
        """Create a service seeded from operating-system entropy."""
        return cls(random.Random())

    @property
    def source(self) -> random.Random:
        """The wrapped random.Random."""
        return self._source

    def draw(self, bound: int) -> int:
        """Uniform integer in [0, bound).

        Raises:
            InvalidArgumentError: If bound is not positive
        """
        if bound <= 0:
            raise InvalidArgumentError(ErrorTemplate.bound_invalid(bound))
        return self._source.randrange(bound)

    def between(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both inclusive.

        Raises:
            InvalidArgumentError: If low > high
        """
        if low > high:
            raise InvalidArgumentError(ErrorTemplate.range_invalid(low, high))
        return self._source.randint(low, high)

    def pick(self, sequence: Sequence[T]) -> T:
        """Uniformly chosen element of a non-empty sequence.

        Raises:
            InvalidArgumentError: If the sequence is empty
        """
        if not sequence:
            raise InvalidArgumentError(ErrorTemplate.sequence_empty())
        return sequence[self._source.randrange(len(sequence))]

    def chance(self, probability: float) -> bool:
        """True with the given probability.

        Raises:
            InvalidArgumentError: If probability is outside [0, 1]
        """
        if not 0.0 <= probability <= 1.0:
            raise InvalidArgumentError(ErrorTemplate.probability_invalid(probability))
        return self._source.random() < probability

    def digit(self) -> str:
        """Random ASCII digit."""
        return self.pick(ASCII_DIGITS)

    def letter(self, upper: bool | None = None) -> str:
        """Random ASCII letter.

        Args:
            upper: True for uppercase, False for lowercase,
                None to draw the case uniformly per call
        """
        if upper is None:
            upper = self.chance(0.5)
        return self.pick(ASCII_UPPERCASE if upper else ASCII_LOWERCASE)

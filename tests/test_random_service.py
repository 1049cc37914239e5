"""Tests for runtime/random_service.py.

Python 3.13+.
"""

from __future__ import annotations

import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fakerengine.diagnostics import DiagnosticCode, InvalidArgumentError
from fakerengine.runtime.random_service import RandomService

# ============================================================================
# Construction
# ============================================================================


class TestConstruction:
    """RandomService constructors."""

    def test_from_seed_is_deterministic(self) -> None:
        """Two services with the same seed replay the same draws."""
        first = RandomService.from_seed(99)
        second = RandomService.from_seed(99)

        assert [first.draw(1000) for _ in range(20)] == [second.draw(1000) for _ in range(20)]

    def test_explicit_source_is_used(self) -> None:
        """An injected random.Random is the source of every draw."""
        source = random.Random(7)
        service = RandomService(source)

        assert service.source is source

    def test_from_entropy_draws_in_range(self) -> None:
        """Entropy-seeded services still honor bounds."""
        service = RandomService.from_entropy()

        assert 0 <= service.draw(5) < 5


# ============================================================================
# Draws
# ============================================================================


class TestDraws:
    """draw, between, pick and chance."""

    @given(seed=st.integers(), bound=st.integers(min_value=1, max_value=10_000))
    def test_draw_within_bound(self, seed: int, bound: int) -> None:
        """draw(bound) is in [0, bound)."""
        assert 0 <= RandomService.from_seed(seed).draw(bound) < bound

    @pytest.mark.parametrize("bound", [0, -1, -100])
    def test_draw_rejects_non_positive_bound(self, bound: int) -> None:
        """Non-positive bounds fail fast."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            RandomService.from_seed(1).draw(bound)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.BOUND_INVALID

    @given(
        seed=st.integers(),
        low=st.integers(min_value=-1000, max_value=1000),
        span=st.integers(min_value=0, max_value=1000),
    )
    def test_between_is_inclusive(self, seed: int, low: int, span: int) -> None:
        """between(low, high) stays within both inclusive bounds."""
        value = RandomService.from_seed(seed).between(low, low + span)

        assert low <= value <= low + span

    def test_between_single_value(self) -> None:
        """between(n, n) always returns n."""
        assert RandomService.from_seed(3).between(5, 5) == 5

    def test_between_rejects_inverted_range(self) -> None:
        """low > high is an argument error."""
        with pytest.raises(InvalidArgumentError):
            RandomService.from_seed(1).between(10, 1)

    @given(seed=st.integers(), items=st.lists(st.text(), min_size=1))
    def test_pick_returns_member(self, seed: int, items: list[str]) -> None:
        """pick() returns an element of the sequence."""
        assert RandomService.from_seed(seed).pick(items) in items

    def test_pick_rejects_empty_sequence(self) -> None:
        """An empty sequence has nothing to pick."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            RandomService.from_seed(1).pick([])

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.SEQUENCE_EMPTY

    def test_pick_covers_all_members(self) -> None:
        """Every member is eventually chosen."""
        service = RandomService.from_seed(11)

        assert {service.pick("abc") for _ in range(200)} == {"a", "b", "c"}

    def test_chance_extremes(self) -> None:
        """chance(0) is never true and chance(1) is always true."""
        service = RandomService.from_seed(5)

        assert not any(service.chance(0.0) for _ in range(100))
        assert all(service.chance(1.0) for _ in range(100))

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_chance_rejects_out_of_range(self, probability: float) -> None:
        """Probabilities outside [0, 1] are rejected."""
        with pytest.raises(InvalidArgumentError):
            RandomService.from_seed(1).chance(probability)


# ============================================================================
# Character helpers
# ============================================================================


class TestCharacters:
    """digit() and letter()."""

    def test_digit(self) -> None:
        service = RandomService.from_seed(2)

        assert all(service.digit().isdigit() for _ in range(50))

    def test_letter_fixed_case(self) -> None:
        """upper=True/False fixes the case."""
        service = RandomService.from_seed(2)

        assert all(service.letter(upper=True).isupper() for _ in range(50))
        assert all(service.letter(upper=False).islower() for _ in range(50))

    def test_letter_random_case_yields_both(self) -> None:
        """upper=None draws the case per call."""
        service = RandomService.from_seed(2)
        letters = [service.letter() for _ in range(200)]

        assert any(ch.isupper() for ch in letters)
        assert any(ch.islower() for ch in letters)
        assert all(ch.isascii() and ch.isalpha() for ch in letters)

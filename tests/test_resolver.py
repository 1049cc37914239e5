"""Tests for runtime/resolver.py: key lookup, candidate choice and evaluation hand-off.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fakerengine.diagnostics import DiagnosticCode, KeyNotFoundError
from fakerengine.localization import DataStore
from fakerengine.runtime import KeyResolver, RandomService


class RecordingEvaluate:
    """Stands in for the evaluator; records (text, namespace) pairs."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []

    def __call__(self, text: str, namespace: str | None) -> str:
        self.calls.append((text, namespace))
        return text.upper()


@pytest.fixture
def store() -> DataStore:
    store = DataStore()
    store.merge_source(
        "en",
        {
            "sport": {"teams": ["Arsenal", "Chelsea"], "league": "Premier"},
            "motto": "play",
            "nested": {"deep": [["a", "b"], "c"]},
        },
    )
    store.merge_source("en_GB", {"sport": {"league": "Championship"}})
    return store


def _resolver(store: DataStore, seed: int = 3) -> tuple[KeyResolver, RecordingEvaluate]:
    evaluate = RecordingEvaluate()
    resolver = KeyResolver(store, ("en_GB", "en"), RandomService.from_seed(seed), evaluate)
    return resolver, evaluate


class TestLookup:
    def test_returns_raw_candidates(self, store: DataStore) -> None:
        resolver, evaluate = _resolver(store)

        assert resolver.lookup("sport.teams") == ["Arsenal", "Chelsea"]
        assert evaluate.calls == []

    def test_chain_order(self, store: DataStore) -> None:
        resolver, _ = _resolver(store)

        assert resolver.lookup("Sport.League") == "Championship"

    def test_missing_key(self, store: DataStore) -> None:
        resolver, _ = _resolver(store)

        with pytest.raises(KeyNotFoundError) as exc_info:
            resolver.lookup("sport.coach")

        error = exc_info.value
        assert error.key == "sport.coach"
        assert error.locale_chain == ("en_GB", "en")
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.KEY_NOT_FOUND

    def test_category_key(self, store: DataStore) -> None:
        resolver, _ = _resolver(store)

        with pytest.raises(KeyNotFoundError) as exc_info:
            resolver.lookup("sport")

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.KEY_IS_CATEGORY


class TestResolve:
    def test_evaluates_chosen_value_in_category(self, store: DataStore) -> None:
        resolver, evaluate = _resolver(store)

        result = resolver.resolve("SPORT.teams")

        assert result in {"ARSENAL", "CHELSEA"}
        assert evaluate.calls[0][1] == "sport"

    def test_top_level_key_has_no_namespace(self, store: DataStore) -> None:
        resolver, evaluate = _resolver(store)

        assert resolver.resolve("motto") == "PLAY"
        assert evaluate.calls == [("play", None)]

    def test_nested_lists_descend(self, store: DataStore) -> None:
        resolver, _ = _resolver(store)

        results = {resolver.resolve("nested.deep") for _ in range(100)}

        assert results == {"A", "B", "C"}

    @given(seed=st.integers(min_value=0, max_value=2**32))
    def test_same_seed_same_choices(self, seed: int) -> None:
        store = DataStore()
        store.merge_source("en", {"x": {"y": [str(i) for i in range(20)]}})
        first, _ = _resolver(store, seed)
        second, _ = _resolver(store, seed)

        assert [first.resolve("x.y") for _ in range(5)] == [
            second.resolve("x.y") for _ in range(5)
        ]


class TestChoose:
    def test_string_returned_without_draw(self) -> None:
        random = RandomService.from_seed(0)
        state = random.source.getstate()
        resolver = KeyResolver(DataStore(), ("en",), random, RecordingEvaluate())

        assert resolver.choose("only") == "only"
        assert random.source.getstate() == state

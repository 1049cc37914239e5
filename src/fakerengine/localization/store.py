"""Hierarchical per-locale data store.

Holds one nested dict tree per locale and answers dotted-key lookups along
a locale chain.

Merge Policy:
    merge_source() deep-merges: where old and new values are both
    categories the merge recurses, otherwise the new value replaces the
    old one. Keys the new source does not mention are left untouched, so
    the last registered source wins on collision.

Thread Safety:
    Reads take no lock. Each merge builds a new tree and swaps it in with
    a single assignment, and merges are serialized by a mutex, so a
    concurrent reader sees either the old or the new tree. Mutating a
    locale while generating from it is still a caller error: results
    may mix old and new data across calls.

Python 3.13+.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping

from fakerengine.localization.loading import parse_data_source
from fakerengine.localization.types import DataTree, DataValue, DottedKey, LocaleCode

__all__ = ["DataStore", "deep_merge"]


def deep_merge(base: DataTree, overlay: Mapping[str, object]) -> DataTree:
    """Recursively merge overlay onto base, returning a new tree.

    Neither argument is modified.

    Example:
        >>> deep_merge({"a": {"x": "1", "y": "2"}}, {"a": {"y": "3"}})
        {'a': {'x': '1', 'y': '3'}}
    """
    result: DataTree = dict(base)
    for key, overlay_value in overlay.items():
        base_value = result.get(key)
        if isinstance(base_value, dict) and isinstance(overlay_value, dict):
            result[key] = deep_merge(base_value, overlay_value)
        else:
            result[key] = overlay_value  # type: ignore[assignment]
    return result


class DataStore:
    """Per-locale key -> value(s) trees with chain-ordered lookup.

    Example:
        >>> store = DataStore()
        >>> store.merge_source("en", {"sport": {"teams": ["A", "B"]}})
        >>> store.lookup(("en_GB", "en"), "sport.teams")
        ['A', 'B']
        >>> store.lookup(("en",), "sport.missing") is None
        True
    """

    __slots__ = ("_lock", "_trees")

    def __init__(self) -> None:
        self._trees: dict[LocaleCode, DataTree] = {}
        self._lock = threading.Lock()

    def merge_source(self, locale: LocaleCode, data: Mapping[object, object]) -> None:
        """Overlay data onto a locale's tree.

        Args:
            locale: POSIX locale code
            data: Data tree; validated and key-normalized before merging

        Raises:
            ConfigurationError: If data is not a valid data tree
        """
        tree = parse_data_source(data, f"<{locale}>")
        with self._lock:
            current = self._trees.get(locale, {})
            self._trees[locale] = deep_merge(current, tree)

    def lookup(self, chain: Iterable[LocaleCode], key: DottedKey) -> DataValue | None:
        """Find a value along a locale chain.

        The first locale holding a value at the path wins; candidate lists
        from different locales are never combined.

        Args:
            chain: Locales to search, most specific first
            key: Dotted key, matched case-insensitively

        Returns:
            The string or candidate list, or None if no locale has a value
        """
        path = key.lower().split(".")
        for locale in chain:
            node = self._walk(locale, path)
            if node is not None and not isinstance(node, dict):
                return node
        return None

    def is_category(self, chain: Iterable[LocaleCode], key: DottedKey) -> bool:
        """True if some locale in the chain has a category at key."""
        path = key.lower().split(".")
        return any(isinstance(self._walk(locale, path), dict) for locale in chain)

    def _walk(self, locale: LocaleCode, path: list[str]) -> DataValue | DataTree | None:
        node: DataValue | DataTree | None = self._trees.get(locale)
        for segment in path:
            if not isinstance(node, dict):
                return None
            node = node.get(segment)
        return node

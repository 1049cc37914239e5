"""Key resolver - dotted key to generated text.

resolve("englandfootball.teams"):
    1. Lower-case the key
    2. Look it up along the locale chain (first locale with a value wins)
    3. Pick one candidate uniformly, descending into nested lists
    4. Evaluate the chosen string, so data may embed #{...} directives;
       the key's parent category ("englandfootball") is the namespace for
       relative directives

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable

from fakerengine.diagnostics import ErrorTemplate, KeyNotFoundError
from fakerengine.localization import DataStore, DataValue, LocaleCode

from .random_service import RandomService

__all__ = ["KeyResolver"]

# (text, namespace) -> evaluated text
type Evaluate = Callable[[str, str | None], str]


class KeyResolver:
    """Resolves dotted keys against a DataStore for one locale chain.

    Attributes:
        store: Locale data
        chain: Locales searched, most specific first
        random: Source of candidate draws
    """

    __slots__ = ("_evaluate", "chain", "random", "store")

    def __init__(
        self,
        store: DataStore,
        chain: tuple[LocaleCode, ...],
        random: RandomService,
        evaluate: Evaluate,
    ) -> None:
        """Initialize resolver.

        Args:
            store: Locale data
            chain: Locale chain
            random: Source of candidate draws
            evaluate: Expression evaluation applied to the chosen value
        """
        self.store = store
        self.chain = chain
        self.random = random
        self._evaluate = evaluate

    def lookup(self, key: str) -> DataValue:
        """Raw value(s) for key, without choosing or evaluating.

        Raises:
            KeyNotFoundError: If no locale has a value at key, or key names
                a category
        """
        normalized = key.lower()
        value = self.store.lookup(self.chain, normalized)
        if value is not None:
            return value
        if self.store.is_category(self.chain, normalized):
            raise KeyNotFoundError(
                ErrorTemplate.key_is_category(key), key=key, locale_chain=self.chain
            )
        raise KeyNotFoundError(
            ErrorTemplate.key_not_found(key, self.chain), key=key, locale_chain=self.chain
        )

    def resolve(self, key: str) -> str:
        """Resolve key to generated text.

        Raises:
            KeyNotFoundError: If the key is absent from the whole chain
            EvaluationError: If the chosen value has a bad directive
        """
        raw = self.choose(self.lookup(key))
        namespace, _, _ = key.lower().rpartition(".")
        return self._evaluate(raw, namespace or None)

    def choose(self, value: DataValue) -> str:
        """Pick one string, uniformly at each level of list nesting."""
        while isinstance(value, list):
            value = self.random.pick(value)
        return value

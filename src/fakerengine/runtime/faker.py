"""Faker - the public entry point.

One Faker owns one locale chain, one DataStore, one RandomService and one
provider cache. Everything else (pattern generators, regexify, the
expression evaluator and the key resolver) runs on those.

Example:
    >>> faker = Faker("en-GB", seed=42)
    >>> faker.locale_chain
    ('en_GB', 'en')
    >>> len(faker.numerify("###-###"))
    7
    >>> faker.england_football.team() in faker.resolve_all("englandfootball.teams")
    True

Thread Safety:
    Provider creation is thread-safe. Generation draws from one
    RandomService, which is not; share a Faker across threads only with
    external locking, or give each thread its own Faker. Call
    add_data_source() before generating, not concurrently with it.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from functools import lru_cache
from pathlib import Path
from typing import TypeVar

from fakerengine.diagnostics import ErrorTemplate, InvalidArgumentError
from fakerengine.locale_utils import locale_chain, normalize_locale
from fakerengine.localization import (
    DataLoader,
    DataStore,
    DataTree,
    DataValue,
    LocaleCode,
    PackageDataLoader,
    load_data_file,
)
from fakerengine.providers import (
    EnglandFootball,
    Name,
    Number,
    Options,
    create_default_catalog,
)

from . import patterns
from .builtins import BuiltinRegistry, create_default_builtins
from .engine_config import EngineConfig
from .evaluator import ExpressionEvaluator
from .providers import Provider, ProviderCatalog, ProviderRegistry
from .random_service import RandomService
from .regexify import regexify
from .resolver import KeyResolver

__all__ = ["Faker"]

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Provider)

_PACKAGE_LOADER = PackageDataLoader()


@lru_cache(maxsize=32)
def _builtin_data(locale: LocaleCode) -> DataTree | None:
    """Parsed built-in data for a locale, shared by every Faker.

    DataStore copies on merge, so the cached tree is never mutated.
    """
    return _PACKAGE_LOADER.load(locale)


class Faker:
    """Fake data generator for one locale.

    Args:
        locale: BCP-47 or POSIX locale code (default: "en")
        random_service: Explicit source of randomness
        seed: Seed for a new RandomService; cannot be combined with random_service.
            With neither, the service is seeded from OS entropy.
        config: Engine limits (default: EngineConfig())
        providers: Provider catalog (default: the built-in providers). Copied,
            so register_provider() on this Faker leaves the argument untouched.
        builtins: Builtin registry (default: create_default_builtins())
        loader: Source of the data loaded for each locale in the chain
            (default: the files shipped in fakerengine.data). Skipped when
            config.load_builtin_data is False.

    Raises:
        ConfigurationError: If the locale code is invalid
        InvalidArgumentError: If both random_service and seed are given
    """

    __slots__ = (
        "_catalog",
        "_chain",
        "_config",
        "_evaluator",
        "_locale",
        "_providers",
        "_random",
        "_resolver",
        "_store",
    )

    def __init__(
        self,
        locale: str = "en",
        *,
        random_service: RandomService | None = None,
        seed: int | str | bytes | None = None,
        config: EngineConfig | None = None,
        providers: ProviderCatalog | None = None,
        builtins: BuiltinRegistry | None = None,
        loader: DataLoader | None = None,
    ) -> None:
        if random_service is not None and seed is not None:
            raise InvalidArgumentError(
                ErrorTemplate.config_invalid("seed", seed, "cannot be combined with random_service")
            )
        if random_service is None:
            random_service = (
                RandomService.from_entropy() if seed is None else RandomService.from_seed(seed)
            )

        self._config = config if config is not None else EngineConfig()
        self._chain = locale_chain(locale)
        self._locale = self._chain[0]
        self._random = random_service
        self._store = DataStore()
        self._providers = ProviderRegistry()
        self._catalog = (providers if providers is not None else create_default_catalog()).copy()
        self._evaluator = ExpressionEvaluator(
            self,
            builtins=builtins if builtins is not None else create_default_builtins(),
            catalog=self._catalog,
            max_depth=self._config.max_depth,
        )
        self._resolver = KeyResolver(
            self._store, self._chain, self._random, self._evaluator.evaluate
        )

        if self._config.load_builtin_data:
            self._load_builtin_data(loader)

        logger.info(
            "Faker initialized for locale %s (chain: %s, seeded: %s)",
            self._locale,
            " -> ".join(self._chain),
            seed is not None,
        )

    def _load_builtin_data(self, loader: DataLoader | None) -> None:
        for locale in self._chain:
            tree = _builtin_data(locale) if loader is None else loader.load(locale)
            if tree is not None:
                self._store.merge_source(locale, tree)
                logger.debug("Loaded data for locale %s", locale)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def locale(self) -> LocaleCode:
        """Normalized locale code, e.g. 'en_GB'."""
        return self._locale

    @property
    def locale_chain(self) -> tuple[LocaleCode, ...]:
        """Locales searched for data, most specific first."""
        return self._chain

    @property
    def random(self) -> RandomService:
        """The RandomService every draw comes from."""
        return self._random

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def providers(self) -> ProviderCatalog:
        """Provider catalog consulted by #{Provider.key} directives."""
        return self._catalog

    @property
    def england_football(self) -> EnglandFootball:
        return self.provider(EnglandFootball)

    @property
    def name(self) -> Name:
        return self.provider(Name)

    @property
    def number(self) -> Number:
        return self.provider(Number)

    @property
    def options(self) -> Options:
        return self.provider(Options)

    # =========================================================================
    # PATTERN GENERATORS
    # =========================================================================

    def numerify(self, template: str) -> str:
        """Replace each '#' with a random digit."""
        return patterns.numerify(template, self._random)

    def letterify(self, template: str, upper: bool | None = None) -> str:
        """Replace each '?' with a random letter.

        Args:
            template: Template text
            upper: True for uppercase, False for lowercase, None for random case
        """
        return patterns.letterify(template, self._random, upper)

    def bothify(self, template: str, upper: bool | None = None) -> str:
        """Replace '#' with digits and '?' with letters."""
        return patterns.bothify(template, self._random, upper)

    def examplify(self, example: str) -> str:
        """Generate text with the same shape as example (case, digits, punctuation)."""
        return patterns.examplify(example, self._random)

    def regexify(self, pattern: str) -> str:
        """Generate a string matching a regex-subset pattern.

        Raises:
            PatternSyntaxError: If the pattern is malformed
        """
        return regexify(pattern, self._random, repeat_cap=self._config.unbounded_repeat_cap)

    def templatify(
        self,
        template: str,
        placeholder: str | Mapping[str, Sequence[str]],
        options: Sequence[str] | None = None,
    ) -> str:
        """Replace placeholder characters with random options.

        Two forms:
            templatify("X-X", "X", ["foo", "bar"])          -> "bar-foo"
            templatify("AB", {"A": ["1", "2"], "B": ["x"]}) -> "2x"

        Raises:
            InvalidArgumentError: If options are empty or not strings, a
                placeholder is not one character, or both a mapping and
                options are given
        """
        if isinstance(placeholder, Mapping):
            if options is not None:
                raise InvalidArgumentError(
                    ErrorTemplate.config_invalid(
                        "options", options, "not allowed with a placeholder mapping"
                    )
                )
            return patterns.templatify_map(template, placeholder, self._random)
        return patterns.templatify(
            template, placeholder, options if options is not None else (), self._random
        )

    # =========================================================================
    # DATA AND EXPRESSIONS
    # =========================================================================

    def resolve(self, key: str) -> str:
        """Generate a value for a dotted data key.

        Example:
            >>> Faker(seed=1).resolve("englandfootball.leagues") != ""
            True

        Raises:
            KeyNotFoundError: If no locale in the chain has a value at key
            EvaluationError: If the chosen value has a bad directive
        """
        return self._resolver.resolve(key)

    def resolve_all(self, key: str) -> tuple[str, ...]:
        """Every raw candidate for key, flattened, without evaluation.

        Raises:
            KeyNotFoundError: If no locale in the chain has a value at key
        """
        return tuple(_flatten(self._resolver.lookup(key)))

    def expression(self, expression: str) -> str:
        """Evaluate template text with #{...} directives.

        Example:
            >>> faker = Faker(seed=1)
            >>> faker.expression("#{regexify '[a-c]{3}'}") in {
            ...     a + b + c for a in "abc" for b in "abc" for c in "abc"}
            True

        Raises:
            EvaluationError: If a directive is malformed or cannot be resolved
        """
        return self._evaluator.evaluate(expression)

    def add_data_source(self, locale: str, path: str | Path) -> None:
        """Merge a YAML data file into a locale's data.

        Keys in the file override existing keys at the same path; other
        keys are kept.

        Raises:
            ConfigurationError: If the locale is invalid or the file is
                unreadable or malformed
        """
        normalized = normalize_locale(locale)
        tree = load_data_file(path)
        self._store.merge_source(normalized, tree)
        logger.info("Added data source %s for locale %s", path, normalized)
        if normalized not in self._chain:
            logger.warning(
                "Locale %s is not in the chain %s; its data will not be used",
                normalized,
                " -> ".join(self._chain),
            )

    # =========================================================================
    # PROVIDERS
    # =========================================================================

    def provider(self, provider_cls: type[P]) -> P:
        """The single instance of provider_cls owned by this Faker."""
        return self._providers.get_or_create(provider_cls, lambda: provider_cls(self))

    def register_provider(self, provider_cls: type[Provider], name: str | None = None) -> None:
        """Make a provider callable from directives on this Faker.

        Raises:
            ConfigurationError: If provider_cls is not a Provider subclass
        """
        self._catalog.register(provider_cls, name)
        logger.debug("Registered provider %s", name or provider_cls.__name__)

    def __repr__(self) -> str:
        return f"Faker(locale={self._locale!r})"


def _flatten(value: DataValue) -> list[str]:
    if isinstance(value, str):
        return [value]
    return [item for child in value for item in _flatten(child)]

"""Locale data loading.

Reads YAML locale data into plain nested dicts for the DataStore. Two
layouts are accepted:

    # locale-rooted layout: locale, then "faker", then categories
    en:
      faker:
        englandfootball:
          teams: ["Arsenal", "Chelsea"]

    # plain layout: categories at the top
    englandfootball:
      teams: ["Arsenal", "Chelsea"]

Components:
    DataLoader - Protocol for built-in locale data lookup (structural typing)
    PackageDataLoader - Loads fakerengine/data/<locale>.yml
    PathDataLoader - Loads <locale> files from a directory template
    load_data_file - Reads one user-supplied file (add_data_source)
    parse_data_source - Validates and normalizes already-parsed YAML

Python 3.13+. Depends on PyYAML.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Protocol

import yaml

from fakerengine.constants import DATA_ROOT_KEY
from fakerengine.diagnostics import ConfigurationError, ErrorTemplate
from fakerengine.localization.types import DataTree, DataValue, LocaleCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "DataLoader",
    # Concrete loaders
    "PackageDataLoader",
    "PathDataLoader",
    # Functions
    "load_data_file",
    "parse_data_source",
]

logger = logging.getLogger(__name__)


class DataLoader(Protocol):
    """Protocol for loading built-in locale data.

    Implementations return the parsed tree for a locale, or None when they
    have no data for it. A missing locale is normal (most chains contain
    locales without their own file); unreadable or malformed data raises.
    """

    def load(self, locale: LocaleCode) -> DataTree | None:
        """Load the data tree for a locale.

        Args:
            locale: POSIX locale code

        Returns:
            Normalized data tree, or None if the loader has no data

        Raises:
            ConfigurationError: If data exists but cannot be parsed
        """


@dataclass(frozen=True, slots=True)
class PackageDataLoader:
    """Loads the data files shipped inside the fakerengine package.

    Attributes:
        package: Package holding <locale>.yml files
    """

    package: str = "fakerengine.data"

    def load(self, locale: LocaleCode) -> DataTree | None:
        """Load fakerengine/data/<locale>.yml if it exists."""
        resource = resources.files(self.package).joinpath(f"{locale}.yml")
        if not resource.is_file():
            return None
        logger.debug("Loading built-in data for locale %s", locale)
        text = resource.read_text(encoding="utf-8")
        return _parse_text(text, f"{self.package}/{locale}.yml")


@dataclass(frozen=True, slots=True)
class PathDataLoader:
    """File system loader using a path template.

    Example:
        >>> loader = PathDataLoader("fixtures/{locale}.yml")
        >>> tree = loader.load("en")
        # Loads from: fixtures/en.yml

    Attributes:
        base_path: Path template with {locale} placeholder
    """

    base_path: str

    def __post_init__(self) -> None:
        """Validate the template at initialization.

        Raises:
            ConfigurationError: If base_path lacks the {locale} placeholder
        """
        if "{locale}" not in self.base_path:
            raise ConfigurationError(
                ErrorTemplate.config_invalid(
                    "base_path", self.base_path, "must contain '{locale}' placeholder"
                )
            )

    def load(self, locale: LocaleCode) -> DataTree | None:
        """Load the file for locale, or None if it does not exist."""
        path = Path(self.base_path.format(locale=locale))
        if not path.is_file():
            return None
        return load_data_file(path)


def load_data_file(path: str | Path) -> DataTree:
    """Read and validate one YAML data source.

    Args:
        path: File to read

    Returns:
        Normalized data tree

    Raises:
        ConfigurationError: If the file is unreadable or malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(ErrorTemplate.source_unreadable(str(path), str(e))) from e
    return _parse_text(text, str(path))


def _parse_text(text: str, origin: str) -> DataTree:
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(ErrorTemplate.source_malformed(origin, str(e))) from e
    return parse_data_source(document, origin)


def parse_data_source(document: object, origin: str = "<data>") -> DataTree:
    """Validate parsed YAML and normalize it into a data tree.

    Unwraps the locale-rooted layout, lower-cases every key and renders
    non-string scalars (numbers, booleans) with str().

    Args:
        document: Result of yaml.safe_load (or an equivalent mapping)
        origin: Description of the source for error messages

    Returns:
        Normalized data tree

    Raises:
        ConfigurationError: If the document is not a mapping of categories
            to strings, lists or nested categories
    """
    if not isinstance(document, Mapping):
        raise ConfigurationError(
            ErrorTemplate.source_malformed(origin, "top level must be a mapping")
        )
    return _normalize_tree(_unwrap(document), origin, ())


def _unwrap(document: Mapping[object, object]) -> Mapping[object, object]:
    """Strip the '<locale>: faker:' envelope if present."""
    if len(document) == 1:
        ((key, value),) = document.items()
        if key == DATA_ROOT_KEY and isinstance(value, Mapping):
            return value
        if isinstance(value, Mapping) and isinstance(value.get(DATA_ROOT_KEY), Mapping):
            return value[DATA_ROOT_KEY]
    return document


def _normalize_tree(
    node: Mapping[object, object], origin: str, path: tuple[str, ...]
) -> DataTree:
    tree: DataTree = {}
    for raw_key, raw_value in node.items():
        key = str(raw_key).lower()
        child_path = (*path, key)
        if isinstance(raw_value, Mapping):
            tree[key] = _normalize_tree(raw_value, origin, child_path)
        else:
            tree[key] = _normalize_value(raw_value, origin, child_path)
    return tree


def _normalize_value(value: object, origin: str, path: tuple[str, ...]) -> DataValue:
    match value:
        case str():
            return value
        case bool() | int() | float():
            return str(value)
        case list() if value:
            return [_normalize_value(item, origin, path) for item in value]
        case list():
            reason = f"'{'.'.join(path)}' is an empty list"
        case _:
            reason = f"'{'.'.join(path)}' has unsupported value {value!r}"
    raise ConfigurationError(ErrorTemplate.source_malformed(origin, reason))

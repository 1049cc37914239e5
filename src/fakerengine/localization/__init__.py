"""Locale data: loaders, the per-locale data store and type aliases."""

from .loading import (
    DataLoader,
    PackageDataLoader,
    PathDataLoader,
    load_data_file,
    parse_data_source,
)
from .store import DataStore, deep_merge
from .types import DataTree, DataValue, DottedKey, LocaleCode

__all__ = [
    "DataLoader",
    "DataStore",
    "DataTree",
    "DataValue",
    "DottedKey",
    "LocaleCode",
    "PackageDataLoader",
    "PathDataLoader",
    "deep_merge",
    "load_data_file",
    "parse_data_source",
]

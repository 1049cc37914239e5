"""Type aliases for locale data.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["DataTree", "DataValue", "DottedKey", "LocaleCode"]

# POSIX locale code: "en", "en_GB", "de_AT"
type LocaleCode = str

# Period-separated path into a locale tree: "englandfootball.teams"
type DottedKey = str

# Leaf value: one string, or candidates (lists may nest)
type DataValue = str | list[DataValue]

# Category mapping; values are leaves or nested categories
type DataTree = dict[str, DataValue | DataTree]

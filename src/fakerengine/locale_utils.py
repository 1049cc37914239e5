"""Locale utilities: BCP-47 normalization and fallback chains.

Centralizes locale format normalization used throughout the codebase.
Locale identifiers are normalized at the system boundary (Faker
construction, add_data_source) and the normalized form is used for data
store keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import re
from typing import TYPE_CHECKING

from fakerengine.constants import ROOT_LOCALE
from fakerengine.diagnostics import ConfigurationError, ErrorTemplate

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "locale_chain",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# Letters and digits separated by '_' (after BCP-47 hyphens are converted).
_LOCALE_PATTERN = re.compile(r"^[A-Za-z0-9]+(?:_[A-Za-z0-9]+)*$")


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    BCP-47 uses hyphens (en-GB), while Babel/POSIX uses underscores (en_GB).
    Subtags get the case Babel gives them: language lower-case, a
    four-letter script title-case, territory and variants upper-case. Data
    file names and locale_chain() use the same form.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-GB", "de_AT")

    Returns:
        POSIX-formatted locale code (e.g., "en_GB", "de_AT")

    Raises:
        ConfigurationError: If the code is empty or contains invalid characters

    Example:
        >>> normalize_locale("en-GB")
        'en_GB'
        >>> normalize_locale("EN")
        'en'
        >>> normalize_locale("zh-hant-tw")
        'zh_Hant_TW'
    """
    normalized = locale_code.strip().replace("-", "_")
    if not _LOCALE_PATTERN.match(normalized):
        raise ConfigurationError(ErrorTemplate.locale_invalid(locale_code))
    language, *subtags = normalized.split("_")
    return "_".join([language.lower(), *(_subtag_case(subtag) for subtag in subtags)])


def _subtag_case(subtag: str) -> str:
    if len(subtag) == 4 and subtag.isalpha():
        return subtag.title()
    return subtag.upper()


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(locale_code.replace("-", "_"))


@functools.lru_cache(maxsize=128)
def locale_chain(locale_code: str) -> tuple[str, ...]:
    """Build the data lookup fallback chain for a locale.

    Order is most specific first: language+script+territory,
    language+territory (or language+script when there is no territory),
    language, then ROOT_LOCALE. Duplicates are removed
    while keeping the first occurrence.

    Identifiers CLDR does not know (private test locales, for example)
    are split on '_' instead of being rejected.

    Args:
        locale_code: BCP-47 or POSIX locale code

    Returns:
        Non-empty tuple of POSIX locale codes ending with ROOT_LOCALE

    Raises:
        ConfigurationError: If the identifier is empty or malformed

    Example:
        >>> locale_chain("en-GB")
        ('en_GB', 'en')
        >>> locale_chain("de_AT")
        ('de_AT', 'de', 'en')
        >>> locale_chain("zh-Hant-TW")
        ('zh_Hant_TW', 'zh_TW', 'zh', 'en')
    """
    normalized = normalize_locale(locale_code)

    # Lazy import: see get_babel_locale
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        parsed = get_babel_locale(normalized)
        language, script, territory = parsed.language, parsed.script, parsed.territory
    except (UnknownLocaleError, ValueError):
        logger.debug("Locale %r unknown to CLDR; splitting identifier", normalized)
        parts = normalized.split("_")
        language = parts[0]
        script = next((p for p in parts[1:] if len(p) == 4 and p.isalpha()), None)
        territory = next((p for p in parts[1:] if p != script), None)

    candidates: list[str] = []
    if script and territory:
        candidates.append(f"{language}_{script}_{territory}")
    if territory:
        candidates.append(f"{language}_{territory}")
    elif script:
        candidates.append(f"{language}_{script}")
    candidates.append(language)
    candidates.append(ROOT_LOCALE)

    # dict.fromkeys() removes duplicates while maintaining insertion order
    return tuple(dict.fromkeys(candidates))

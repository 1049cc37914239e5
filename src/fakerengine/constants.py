"""Shared constants for FakerEngine.

Centralized configuration constants used across the syntax and runtime
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for directive evaluation
- Generation limits: Termination bounds for unbounded regex quantifiers
- Locale defaults: Root of every locale fallback chain
- Syntax markers: Directive delimiters and placeholder characters

Python 3.13+. Zero external dependencies.
"""

import string

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_EXPRESSION_DEPTH",
    # Generation limits
    "UNBOUNDED_REPEAT_CAP",
    # Locale defaults
    "ROOT_LOCALE",
    "DATA_ROOT_KEY",
    # Syntax markers
    "DIRECTIVE_OPEN",
    "DIRECTIVE_CLOSE",
    "DIGIT_PLACEHOLDER",
    "LETTER_PLACEHOLDER",
    # Alphabets
    "ASCII_DIGITS",
    "ASCII_LOWERCASE",
    "ASCII_UPPERCASE",
    "PRINTABLE_ALPHABET",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of directive evaluation.
# Each level is a data value whose directives are evaluated again
# (key -> value -> #{other.key} -> value ...). Real locale data nests
# 2-4 levels; 50 leaves ample room while keeping the Python stack well
# below sys.getrecursionlimit() (each level costs roughly eight frames).
MAX_EXPRESSION_DEPTH: int = 50

# ============================================================================
# GENERATION LIMITS
# ============================================================================

# Extra repetitions allowed for unbounded quantifiers (*, +, {m,}).
# A quantifier with lower bound m draws its count from [m, m + cap].
UNBOUNDED_REPEAT_CAP: int = 10

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Every locale chain terminates here.
ROOT_LOCALE: str = "en"

# Key under which locale-rooted data files nest their categories:
#   en:
#     faker:
#       name: ...
DATA_ROOT_KEY: str = "faker"

# ============================================================================
# SYNTAX MARKERS
# ============================================================================

DIRECTIVE_OPEN: str = "#{"
DIRECTIVE_CLOSE: str = "}"

DIGIT_PLACEHOLDER: str = "#"
LETTER_PLACEHOLDER: str = "?"

# ============================================================================
# ALPHABETS
# ============================================================================

ASCII_DIGITS: str = string.digits
ASCII_LOWERCASE: str = string.ascii_lowercase
ASCII_UPPERCASE: str = string.ascii_uppercase

# Symbol alphabet for "." and negated character classes: printable ASCII
# from space (0x20) to tilde (0x7E).
PRINTABLE_ALPHABET: str = "".join(chr(code) for code in range(0x20, 0x7F))

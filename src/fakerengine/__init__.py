"""FakerEngine - locale-aware fake data generation.

Generates names, codes, identifiers and templated text from locale data
files, regex-subset patterns and #{...} expressions, reproducibly when
seeded.

Public API:
    Faker - Generator bound to one locale chain and one RandomService
    EngineConfig - Depth and repetition limits
    RandomService - Seedable randomness
    Provider - Base class for custom providers (with provider_method)

Exceptions:
    FakerError - Base exception class
    ConfigurationError - Bad locale, data source or setting
    PatternSyntaxError - Malformed regexify pattern
    EvaluationError - Malformed or unresolvable directive
    KeyNotFoundError - Dotted key absent from the locale chain
    InvalidArgumentError - Rejected argument (empty options, bad bound)

Submodules:
    fakerengine.syntax - Expression and regex-subset parsers and AST
    fakerengine.localization - Data loaders and the DataStore
    fakerengine.providers - Built-in providers
    fakerengine.diagnostics - Error types, codes and message templates
"""

from .diagnostics import (
    ConfigurationError,
    EvaluationError,
    FakerError,
    InvalidArgumentError,
    KeyNotFoundError,
    PatternSyntaxError,
)
from .runtime import EngineConfig, Faker, Provider, RandomService, provider_method

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("fakerengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "EngineConfig",
    "EvaluationError",
    "Faker",
    "FakerError",
    "InvalidArgumentError",
    "KeyNotFoundError",
    "PatternSyntaxError",
    "Provider",
    "RandomService",
    "__version__",
    "provider_method",
]

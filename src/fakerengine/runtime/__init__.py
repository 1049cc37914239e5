"""FakerEngine runtime package.

Provides the Faker facade, randomness, pattern generators, regexify,
expression evaluation, key resolution and providers. Depends on the syntax
package for parsing and the localization package for data.

Python 3.13+.
"""

from .builtins import BuiltinRegistry, create_default_builtins
from .engine_config import EngineConfig
from .evaluator import EvaluationContext, ExpressionEvaluator
from .faker import Faker
from .patterns import bothify, examplify, letterify, numerify, templatify, templatify_map
from .providers import Provider, ProviderCatalog, ProviderRegistry, provider_method
from .random_service import RandomService
from .regexify import RegexGenerator, regexify
from .resolver import KeyResolver

__all__ = [
    "BuiltinRegistry",
    "EngineConfig",
    "EvaluationContext",
    "ExpressionEvaluator",
    "Faker",
    "KeyResolver",
    "Provider",
    "ProviderCatalog",
    "ProviderRegistry",
    "RandomService",
    "RegexGenerator",
    "bothify",
    "create_default_builtins",
    "examplify",
    "letterify",
    "numerify",
    "provider_method",
    "regexify",
    "templatify",
    "templatify_map",
]

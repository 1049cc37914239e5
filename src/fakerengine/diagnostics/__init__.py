"""Diagnostic system for FakerEngine errors.

Provides structured error diagnostics with codes, spans and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    ConfigurationError,
    EvaluationError,
    FakerError,
    InvalidArgumentError,
    KeyNotFoundError,
    PatternSyntaxError,
)
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "EvaluationError",
    "FakerError",
    "InvalidArgumentError",
    "KeyNotFoundError",
    "PatternSyntaxError",
    "SourceSpan",
]

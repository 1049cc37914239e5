"""FakerEngine exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic object for rich error
information. Every failure in the engine surfaces as one of these; nothing
falls back silently to an empty or default string.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class FakerError(Exception):
    """Base exception for all FakerEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FakerError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(FakerError):
    """Invalid locale, data source path, data source content or engine setting.

    Raised by add_data_source() and at engine construction.
    """


class PatternSyntaxError(FakerError):
    """Malformed regex-subset pattern.

    Raised before any output is produced.

    Attributes:
        pattern: The offending pattern
        position: Character offset of the offending construct
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        pattern: str = "",
        position: int = 0,
    ) -> None:
        """Initialize PatternSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            pattern: The pattern being parsed
            position: Character offset where parsing failed
        """
        super().__init__(message)
        self.pattern = pattern
        self.position = position


class EvaluationError(FakerError):
    """Directive evaluation failure.

    Examples:
    - Unbalanced #{ ... } markers
    - Unknown builtin or provider
    - Provider key missing from the locale data
    - Nesting deeper than the configured maximum
    """


class KeyNotFoundError(FakerError, LookupError):
    """Dotted key absent across the entire locale chain.

    Attributes:
        key: The key that was looked up
        locale_chain: The locales searched, most specific first
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        key: str = "",
        locale_chain: tuple[str, ...] = (),
    ) -> None:
        """Initialize KeyNotFoundError.

        Args:
            message: Error message string OR Diagnostic object
            key: The key that was looked up
            locale_chain: The locales searched
        """
        super().__init__(message)
        self.key = key
        self.locale_chain = locale_chain


class InvalidArgumentError(FakerError, ValueError):
    """Caller passed an argument outside a generator's domain.

    Examples:
    - Empty options list for templatify
    - Non-positive bound for RandomService.draw
    """

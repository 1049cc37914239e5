"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and consistent, and documents every
    error case the engine can raise.
    """

    # =========================================================================
    # CONFIGURATION ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def locale_invalid(locale: str) -> Diagnostic:
        """Locale identifier cannot be used to build a fallback chain.

        Args:
            locale: The rejected locale identifier

        Returns:
            Diagnostic for LOCALE_INVALID
        """
        msg = f"Invalid locale identifier: {locale!r}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=msg,
            hint="Use a BCP-47 or POSIX identifier such as 'en', 'en-GB' or 'de_AT'",
        )

    @staticmethod
    def source_unreadable(path: str, reason: str) -> Diagnostic:
        """Data source file could not be read.

        Args:
            path: Path of the data source
            reason: Underlying OS error text

        Returns:
            Diagnostic for SOURCE_UNREADABLE
        """
        msg = f"Cannot read data source '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_UNREADABLE,
            message=msg,
            hint="Check that the file exists and is readable",
            source=path,
        )

    @staticmethod
    def source_malformed(path: str, reason: str) -> Diagnostic:
        """Data source content is not a usable YAML mapping.

        Args:
            path: Path (or description) of the data source
            reason: What is wrong with the content

        Returns:
            Diagnostic for SOURCE_MALFORMED
        """
        msg = f"Malformed data source '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_MALFORMED,
            message=msg,
            hint="Data sources must be YAML mappings of categories to strings or lists",
            source=path,
        )

    @staticmethod
    def config_invalid(field_name: str, value: object, reason: str) -> Diagnostic:
        """Engine configuration value rejected.

        Args:
            field_name: Configuration field
            value: Rejected value
            reason: Constraint that was violated

        Returns:
            Diagnostic for CONFIG_INVALID
        """
        msg = f"Invalid configuration {field_name}={value!r}: {reason}"
        return Diagnostic(code=DiagnosticCode.CONFIG_INVALID, message=msg)

    # =========================================================================
    # PATTERN SYNTAX ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def pattern_unbalanced(pattern: str, position: int, construct: str) -> Diagnostic:
        """Unbalanced bracket or parenthesis.

        Args:
            pattern: The pattern being parsed
            position: Offset of the unmatched delimiter
            construct: Human-readable name of the construct

        Returns:
            Diagnostic for PATTERN_UNBALANCED
        """
        msg = f"Unbalanced {construct} at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNBALANCED,
            message=msg,
            span=SourceSpan(position, position + 1),
            hint="Every '[' needs a ']' and every '(' needs a ')'",
            source=pattern,
        )

    @staticmethod
    def pattern_invalid_range(
        pattern: str, position: int, start: str, end: str
    ) -> Diagnostic:
        """Character class range with start after end.

        Args:
            pattern: The pattern being parsed
            position: Offset of the range start
            start: First character of the range
            end: Last character of the range

        Returns:
            Diagnostic for PATTERN_INVALID_RANGE
        """
        msg = f"Invalid character range '{start}-{end}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_INVALID_RANGE,
            message=msg,
            span=SourceSpan(position, position + 3),
            hint="Range start must not come after range end",
            source=pattern,
        )

    @staticmethod
    def pattern_empty_class(pattern: str, position: int) -> Diagnostic:
        """Character class with no members.

        Args:
            pattern: The pattern being parsed
            position: Offset of the opening '['

        Returns:
            Diagnostic for PATTERN_EMPTY_CLASS
        """
        msg = f"Empty character class at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_EMPTY_CLASS,
            message=msg,
            span=SourceSpan(position, position + 1),
            hint="A class must match at least one printable character",
            source=pattern,
        )

    @staticmethod
    def pattern_nothing_to_repeat(pattern: str, position: int, quantifier: str) -> Diagnostic:
        """Quantifier with no preceding atom.

        Args:
            pattern: The pattern being parsed
            position: Offset of the quantifier
            quantifier: The quantifier text

        Returns:
            Diagnostic for PATTERN_NOTHING_TO_REPEAT
        """
        msg = f"Nothing to repeat for quantifier '{quantifier}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NOTHING_TO_REPEAT,
            message=msg,
            span=SourceSpan(position, position + len(quantifier)),
            hint="Escape the character with '\\' to use it literally",
            source=pattern,
        )

    @staticmethod
    def pattern_invalid_quantifier(pattern: str, position: int, text: str) -> Diagnostic:
        """Malformed or inverted bounded repetition.

        Args:
            pattern: The pattern being parsed
            position: Offset of the opening '{'
            text: The quantifier text as written

        Returns:
            Diagnostic for PATTERN_INVALID_QUANTIFIER
        """
        msg = f"Invalid repetition '{text}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_INVALID_QUANTIFIER,
            message=msg,
            span=SourceSpan(position, position + len(text)),
            hint="Use {m}, {m,n} or {m,} with m <= n",
            source=pattern,
        )

    @staticmethod
    def pattern_unsupported(pattern: str, position: int, construct: str) -> Diagnostic:
        """Construct outside the supported regex subset.

        Args:
            pattern: The pattern being parsed
            position: Offset of the construct
            construct: Human-readable name of the construct

        Returns:
            Diagnostic for PATTERN_UNSUPPORTED
        """
        msg = f"Unsupported construct {construct} at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNSUPPORTED,
            message=msg,
            span=SourceSpan(position, position + 1),
            hint="Lookaround and backreferences cannot be generated",
            source=pattern,
        )

    @staticmethod
    def pattern_dangling_escape(pattern: str, position: int) -> Diagnostic:
        """Backslash at the end of the pattern.

        Args:
            pattern: The pattern being parsed
            position: Offset of the backslash

        Returns:
            Diagnostic for PATTERN_DANGLING_ESCAPE
        """
        msg = f"Dangling escape at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_DANGLING_ESCAPE,
            message=msg,
            span=SourceSpan(position, position + 1),
            source=pattern,
        )

    # =========================================================================
    # EVALUATION ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def directive_unterminated(expression: str, position: int) -> Diagnostic:
        """Directive opened with '#{' but never closed.

        Args:
            expression: The expression being parsed
            position: Offset of the opening marker

        Returns:
            Diagnostic for DIRECTIVE_UNTERMINATED
        """
        msg = f"Unterminated directive at position {position}"
        return Diagnostic(
            code=DiagnosticCode.DIRECTIVE_UNTERMINATED,
            message=msg,
            span=SourceSpan(position, position + 2),
            hint="Close the directive with '}'",
            source=expression,
        )

    @staticmethod
    def directive_malformed(expression: str, position: int, reason: str) -> Diagnostic:
        """Directive body does not follow the directive grammar.

        Args:
            expression: The expression being parsed
            position: Offset where parsing failed
            reason: What the parser expected

        Returns:
            Diagnostic for DIRECTIVE_MALFORMED
        """
        msg = f"Malformed directive at position {position}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.DIRECTIVE_MALFORMED,
            message=msg,
            span=SourceSpan(position, position + 1),
            hint="Directives look like #{name 'arg1','arg2'} or #{Provider.key}",
            source=expression,
        )

    @staticmethod
    def builtin_not_found(name: str) -> Diagnostic:
        """Directive names neither a builtin nor a relative key.

        Args:
            name: The directive name

        Returns:
            Diagnostic for BUILTIN_NOT_FOUND
        """
        msg = f"Unknown builtin '{name}'"
        return Diagnostic(
            code=DiagnosticCode.BUILTIN_NOT_FOUND,
            message=msg,
            hint="Builtins: numerify, letterify, bothify, regexify, examplify, templatify",
        )

    @staticmethod
    def builtin_arity_mismatch(name: str, expected: str, received: int) -> Diagnostic:
        """Builtin called with the wrong number of arguments.

        Args:
            name: Builtin name
            expected: Accepted argument count, e.g. "1" or "1-2" or "3+"
            received: Number of arguments supplied

        Returns:
            Diagnostic for BUILTIN_ARITY_MISMATCH
        """
        msg = f"Builtin '{name}' expects {expected} argument(s), got {received}"
        return Diagnostic(code=DiagnosticCode.BUILTIN_ARITY_MISMATCH, message=msg)

    @staticmethod
    def argument_invalid(name: str, argument: str, expected: str) -> Diagnostic:
        """Directive argument cannot be converted to the expected type.

        Args:
            name: Builtin or provider operation name
            argument: The argument as written
            expected: Description of accepted values

        Returns:
            Diagnostic for ARGUMENT_INVALID
        """
        msg = f"Invalid argument {argument!r} for '{name}': expected {expected}"
        return Diagnostic(code=DiagnosticCode.ARGUMENT_INVALID, message=msg)

    @staticmethod
    def provider_not_found(name: str) -> Diagnostic:
        """Provider reference names no registered provider.

        Args:
            name: Provider name as written in the directive

        Returns:
            Diagnostic for PROVIDER_NOT_FOUND
        """
        msg = f"Unknown provider '{name}'"
        return Diagnostic(
            code=DiagnosticCode.PROVIDER_NOT_FOUND,
            message=msg,
            hint="Register the provider with Faker.register_provider()",
        )

    @staticmethod
    def provider_key_not_found(provider: str, key: str) -> Diagnostic:
        """Provider has neither an operation nor data for the key.

        Args:
            provider: Provider name
            key: Method key as written in the directive

        Returns:
            Diagnostic for PROVIDER_KEY_NOT_FOUND
        """
        msg = f"Provider '{provider}' cannot resolve '{key}'"
        return Diagnostic(
            code=DiagnosticCode.PROVIDER_KEY_NOT_FOUND,
            message=msg,
            hint="Check the locale data or the provider's operations",
        )

    @staticmethod
    def max_depth_exceeded(max_depth: int) -> Diagnostic:
        """Directive nesting exceeded the configured maximum.

        Args:
            max_depth: Configured maximum depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum expression depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Check the locale data for values that reference themselves",
        )

    # =========================================================================
    # LOOKUP ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def key_not_found(key: str, locale_chain: Sequence[str]) -> Diagnostic:
        """Dotted key absent in every locale of the chain.

        Args:
            key: The key looked up
            locale_chain: Locales searched, most specific first

        Returns:
            Diagnostic for KEY_NOT_FOUND
        """
        chain = " -> ".join(locale_chain)
        msg = f"Key '{key}' not found in locales {chain}"
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_FOUND,
            message=msg,
            hint="Add the key to a data source with Faker.add_data_source()",
        )

    @staticmethod
    def key_is_category(key: str) -> Diagnostic:
        """Dotted key addresses a category, not a value.

        Args:
            key: The key looked up

        Returns:
            Diagnostic for KEY_IS_CATEGORY
        """
        msg = f"Key '{key}' names a category, not a value"
        return Diagnostic(
            code=DiagnosticCode.KEY_IS_CATEGORY,
            message=msg,
            hint="Append the name of a value inside the category",
        )

    # =========================================================================
    # ARGUMENT ERRORS (5000-5999)
    # =========================================================================

    @staticmethod
    def options_empty(placeholder: str) -> Diagnostic:
        """Templatify called without replacement options.

        Args:
            placeholder: The placeholder character

        Returns:
            Diagnostic for OPTIONS_EMPTY
        """
        msg = f"No options given for placeholder {placeholder!r}"
        return Diagnostic(code=DiagnosticCode.OPTIONS_EMPTY, message=msg)

    @staticmethod
    def placeholder_invalid(placeholder: object) -> Diagnostic:
        """Placeholder is not a single character.

        Args:
            placeholder: The rejected placeholder

        Returns:
            Diagnostic for PLACEHOLDER_INVALID
        """
        msg = f"Placeholder must be a single character, got {placeholder!r}"
        return Diagnostic(code=DiagnosticCode.PLACEHOLDER_INVALID, message=msg)

    @staticmethod
    def option_invalid(placeholder: str, option: object) -> Diagnostic:
        """Replacement option that is not a string.

        Args:
            placeholder: The placeholder character
            option: The rejected option

        Returns:
            Diagnostic for OPTION_INVALID
        """
        msg = f"Options for placeholder {placeholder!r} must be strings, got {option!r}"
        return Diagnostic(
            code=DiagnosticCode.OPTION_INVALID,
            message=msg,
            hint="Pass the options as one list of strings",
        )

    @staticmethod
    def bound_invalid(bound: int) -> Diagnostic:
        """Non-positive bound for a random draw.

        Args:
            bound: The rejected bound

        Returns:
            Diagnostic for BOUND_INVALID
        """
        msg = f"Bound must be positive, got {bound}"
        return Diagnostic(code=DiagnosticCode.BOUND_INVALID, message=msg)

    @staticmethod
    def range_invalid(low: int, high: int) -> Diagnostic:
        """Inclusive range with low above high.

        Args:
            low: Lower bound
            high: Upper bound

        Returns:
            Diagnostic for BOUND_INVALID
        """
        msg = f"Range [{low}, {high}] is empty"
        return Diagnostic(code=DiagnosticCode.BOUND_INVALID, message=msg)

    @staticmethod
    def probability_invalid(probability: float) -> Diagnostic:
        """Probability outside [0, 1].

        Args:
            probability: The rejected probability

        Returns:
            Diagnostic for PROBABILITY_INVALID
        """
        msg = f"Probability must be within [0, 1], got {probability}"
        return Diagnostic(code=DiagnosticCode.PROBABILITY_INVALID, message=msg)

    @staticmethod
    def sequence_empty() -> Diagnostic:
        """Random pick from an empty sequence.

        Returns:
            Diagnostic for SEQUENCE_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.SEQUENCE_EMPTY,
            message="Cannot pick from an empty sequence",
        )

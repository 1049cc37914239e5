"""Tests for diagnostics: codes, spans, templates and the error hierarchy.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from fakerengine.diagnostics import (
    ConfigurationError,
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    EvaluationError,
    FakerError,
    InvalidArgumentError,
    KeyNotFoundError,
    PatternSyntaxError,
    SourceSpan,
)


class TestDiagnosticCode:
    """Codes are unique and grouped by range."""

    def test_codes_are_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low"),
        [
            (DiagnosticCode.LOCALE_INVALID, 1000),
            (DiagnosticCode.PATTERN_UNBALANCED, 2000),
            (DiagnosticCode.DIRECTIVE_UNTERMINATED, 3000),
            (DiagnosticCode.KEY_NOT_FOUND, 4000),
            (DiagnosticCode.OPTIONS_EMPTY, 5000),
        ],
    )
    def test_ranges(self, code: DiagnosticCode, low: int) -> None:
        assert low <= code.value < low + 1000


class TestSourceSpan:
    def test_valid_span(self) -> None:
        span = SourceSpan(2, 5)

        assert (span.start, span.end) == (2, 5)

    def test_negative_start_rejected(self) -> None:
        with pytest.raises(ValueError, match="start"):
            SourceSpan(-1, 0)

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ValueError, match="end"):
            SourceSpan(3, 2)


class TestDiagnosticFormatting:
    """format_error() renders compiler-style output."""

    def test_message_only(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.SEQUENCE_EMPTY, message="empty")

        assert diagnostic.format_error() == "error[SEQUENCE_EMPTY]: empty"
        assert str(diagnostic) == "empty"

    def test_source_and_hint(self) -> None:
        diagnostic = ErrorTemplate.directive_unterminated("#{x", 0)

        lines = diagnostic.format_error().splitlines()

        assert lines[0].startswith("error[DIRECTIVE_UNTERMINATED]")
        assert lines[1] == "  --> #{x"
        assert lines[2].startswith("  = help:")

    def test_control_characters_escaped(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.PATTERN_UNBALANCED, message="bad", source="[a\nb"
        )

        assert "  --> [a\\nb" in diagnostic.format_error()


class TestErrorTemplate:
    """Templates pick the right code and embed the details."""

    def test_key_not_found_lists_chain(self) -> None:
        diagnostic = ErrorTemplate.key_not_found("a.b", ("en_GB", "en"))

        assert diagnostic.code == DiagnosticCode.KEY_NOT_FOUND
        assert "en_GB -> en" in diagnostic.message

    def test_pattern_template_has_span(self) -> None:
        diagnostic = ErrorTemplate.pattern_empty_class("a[]", 1)

        assert diagnostic.code == DiagnosticCode.PATTERN_EMPTY_CLASS
        assert diagnostic.span is not None
        assert diagnostic.span.start == 1
        assert diagnostic.source == "a[]"

    def test_range_invalid_shares_bound_code(self) -> None:
        assert ErrorTemplate.range_invalid(5, 1).code == DiagnosticCode.BOUND_INVALID


class TestErrorHierarchy:
    """Every engine error is a FakerError carrying its diagnostic."""

    @pytest.mark.parametrize(
        "error_cls",
        [ConfigurationError, PatternSyntaxError, EvaluationError, KeyNotFoundError,
         InvalidArgumentError],
    )
    def test_subclasses_faker_error(self, error_cls: type[FakerError]) -> None:
        assert issubclass(error_cls, FakerError)

    def test_builtin_exception_bases(self) -> None:
        assert issubclass(KeyNotFoundError, LookupError)
        assert issubclass(InvalidArgumentError, ValueError)

    def test_diagnostic_attached(self) -> None:
        diagnostic = ErrorTemplate.builtin_not_found("nope")
        error = EvaluationError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()

    def test_plain_message(self) -> None:
        error = ConfigurationError("plain")

        assert error.diagnostic is None
        assert str(error) == "plain"

    def test_key_not_found_attributes(self) -> None:
        error = KeyNotFoundError("missing", key="a.b", locale_chain=("de", "en"))

        assert error.key == "a.b"
        assert error.locale_chain == ("de", "en")

    def test_pattern_syntax_attributes(self) -> None:
        error = PatternSyntaxError("bad", pattern="(a", position=0)

        assert error.pattern == "(a"
        assert error.position == 0

"""Tests for core/depth_guard.py.

Tests DepthGuard context manager, explicit check(), and depth_clamp()
with Hypothesis for property-based testing.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fakerengine.constants import MAX_EXPRESSION_DEPTH
from fakerengine.core.depth_guard import (
    FRAMES_PER_LEVEL,
    DepthGuard,
    DepthLimitExceededError,
    depth_clamp,
)
from fakerengine.diagnostics import DiagnosticCode, EvaluationError

# ============================================================================
# Construction
# ============================================================================


class TestDepthGuardConstruction:
    """Test DepthGuard construction and defaults."""

    def test_default_construction(self) -> None:
        """DepthGuard uses MAX_EXPRESSION_DEPTH by default."""
        guard = DepthGuard()

        assert guard.max_depth == MAX_EXPRESSION_DEPTH
        assert guard.current_depth == 0

    def test_max_depth_constant(self) -> None:
        """MAX_EXPRESSION_DEPTH is set to 50."""
        assert MAX_EXPRESSION_DEPTH == 50

    def test_post_init_clamps_max_depth(self) -> None:
        """__post_init__ clamps max_depth against the recursion limit."""
        limit = sys.getrecursionlimit()
        guard = DepthGuard(max_depth=limit)

        assert guard.max_depth == (limit - 50) // FRAMES_PER_LEVEL


# ============================================================================
# Context Manager
# ============================================================================


class TestDepthGuardContextManager:
    """Test DepthGuard as context manager."""

    def test_nested_levels(self) -> None:
        guard = DepthGuard(max_depth=10)

        with guard:
            assert guard.depth == 1
            with guard:
                assert guard.depth == 2
            assert guard.depth == 1
        assert guard.depth == 0

    def test_limit_boundary(self) -> None:
        """Exactly max_depth levels succeed; one more fails."""
        guard = DepthGuard(max_depth=3)

        with guard, guard, guard:
            assert guard.depth == 3
            with pytest.raises(DepthLimitExceededError), guard:
                pass
            assert guard.depth == 3

    def test_failed_enter_leaves_depth_unchanged(self) -> None:
        guard = DepthGuard(max_depth=1)

        with guard:
            with pytest.raises(DepthLimitExceededError):
                guard.__enter__()
            assert guard.depth == 1
        assert guard.depth == 0

    def test_exception_in_body_restores_depth(self) -> None:
        guard = DepthGuard(max_depth=5)

        with pytest.raises(RuntimeError), guard:
            raise RuntimeError("boom")

        assert guard.depth == 0

    def test_error_is_evaluation_error(self) -> None:
        guard = DepthGuard(max_depth=1)

        with guard, pytest.raises(EvaluationError) as exc_info:
            guard.check()

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.MAX_DEPTH_EXCEEDED


# ============================================================================
# depth_clamp
# ============================================================================


class TestDepthClamp:
    """depth_clamp() against the interpreter recursion limit."""

    @given(requested=st.integers(min_value=1, max_value=50))
    def test_small_depths_unchanged(self, requested: int) -> None:
        assert depth_clamp(requested) == requested

    def test_large_depth_clamped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        max_safe = (sys.getrecursionlimit() - 50) // FRAMES_PER_LEVEL

        with caplog.at_level(logging.WARNING, logger="fakerengine.core.depth_guard"):
            result = depth_clamp(max_safe + 100)

        assert result == max_safe
        assert any("Clamping" in record.message for record in caplog.records)

"""Depth limiting for recursive directive evaluation.

Locale data may embed directives that resolve to more locale data, which
may embed further directives. DepthGuard bounds that recursion so
self-referential data fails with an EvaluationError instead of a
RecursionError.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from fakerengine.constants import MAX_EXPRESSION_DEPTH
from fakerengine.diagnostics import ErrorTemplate, EvaluationError

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)

# Python frames consumed by one level of directive evaluation
# (evaluate -> directive -> provider -> resolve -> evaluate ...).
FRAMES_PER_LEVEL: int = 8


class DepthLimitExceededError(EvaluationError):
    """Raised when directive nesting exceeds the configured maximum.

    Almost always a data value that references itself, directly or
    through a chain of other keys.
    """


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting evaluation depth.

    Usage:
        guard = DepthGuard(max_depth=20)
        with guard:
            result = evaluate(nested_expression)

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_EXPRESSION_DEPTH)
        current_depth: Current nesting depth
    """

    max_depth: int = MAX_EXPRESSION_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Checks the limit BEFORE incrementing: __exit__ is not called when
        __enter__ raises, so incrementing first would leave the guard
        permanently elevated.
        """
        self.check()
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth

    def check(self) -> None:
        """Raise if one more level would exceed the limit.

        Raises:
            DepthLimitExceededError: If depth limit reached
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.max_depth_exceeded(self.max_depth))


def depth_clamp(requested_depth: int, frames_per_level: int = FRAMES_PER_LEVEL) -> int:
    """Clamp requested depth against Python recursion limit.

    Args:
        requested_depth: Desired maximum depth
        frames_per_level: Stack frames one nesting level costs

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(50)
        50
        >>> depth_clamp(500)  # 500 * 8 frames would overflow
        118
    """
    max_safe_depth = (sys.getrecursionlimit() - 50) // frames_per_level
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth

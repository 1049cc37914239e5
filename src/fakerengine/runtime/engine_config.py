"""Engine configuration for Faker.

One frozen dataclass holding the tunable limits, so Faker takes a single
typed object instead of a growing list of keyword arguments.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from fakerengine.constants import MAX_EXPRESSION_DEPTH, UNBOUNDED_REPEAT_CAP
from fakerengine.diagnostics import ConfigurationError, ErrorTemplate

__all__ = ["EngineConfig"]


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable configuration for a Faker.

    All fields have defaults; EngineConfig() is the standard configuration.

    Attributes:
        max_depth: Maximum directive nesting depth (default: 50). Values
            above what the Python recursion limit can support are clamped.
        unbounded_repeat_cap: Extra repetitions allowed for *, + and {m,}
            in regexify patterns (default: 10). 'a*' yields 0 to 10 'a's.
        load_builtin_data: Load the data files shipped with the package
            for every locale of the chain (default: True). Disable to work
            only with add_data_source() data.

    Example:
        >>> from fakerengine import Faker
        >>> faker = Faker(config=EngineConfig(unbounded_repeat_cap=3), seed=1)
        >>> len(faker.regexify("a+")) <= 4
        True
    """

    max_depth: int = MAX_EXPRESSION_DEPTH
    unbounded_repeat_cap: int = UNBOUNDED_REPEAT_CAP
    load_builtin_data: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ConfigurationError: If max_depth is not positive or
                unbounded_repeat_cap is negative
        """
        if self.max_depth < 1:
            raise ConfigurationError(
                ErrorTemplate.config_invalid("max_depth", self.max_depth, "must be at least 1")
            )
        if self.unbounded_repeat_cap < 0:
            raise ConfigurationError(
                ErrorTemplate.config_invalid(
                    "unbounded_repeat_cap", self.unbounded_repeat_cap, "must not be negative"
                )
            )

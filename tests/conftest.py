"""Shared pytest configuration for the fakerengine tests.

Hypothesis example counts are set here and nowhere else. Three profiles:
    dev      500 examples; the default on a workstation
    ci       50 derandomized examples; picked when CI=true
    verbose  100 examples with per-example output

HYPOTHESIS_PROFILE=<name> overrides the automatic choice.

Tests marked @pytest.mark.fuzz are long-running generators of random
templates and patterns. They are skipped unless selected with -m fuzz.
"""

import os
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from fakerengine import EngineConfig, Faker

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile("dev", max_examples=500, phases=_PHASES, derandomize=False)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _select_profile() -> str:
    """Profile name from HYPOTHESIS_PROFILE, then CI, then "dev"."""
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in ("dev", "ci", "verbose"):
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "fuzz: long-running randomized tests, run only with -m fuzz"
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz tests unless the -m expression mentions fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="fuzz test; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def write_data(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a YAML data file under tmp_path and return its path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def bare_faker() -> Faker:
    """Seeded English Faker without the built-in data files."""
    return Faker("en", seed=1234, config=EngineConfig(load_builtin_data=False))

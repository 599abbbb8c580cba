"""Pytest configuration for the numaffix test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from numaffix import SymbolTable

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def symbols() -> SymbolTable:
    """Symbol table whose texts differ from every placeholder character.

    Distinct texts make it observable whether a character was substituted
    or copied literally.
    """
    return SymbolTable(
        plus_sign="<plus>",
        minus_sign="<minus>",
        percent_sign="<pct>",
        permille_sign="<pml>",
        currency_symbol="<cur>",
        currency_code="<iso>",
        currency_name="<name>",
    )


@pytest.fixture
def root_symbols() -> SymbolTable:
    """Symbol table with CLDR root values (+ - % ‰ ¤)."""
    return SymbolTable()

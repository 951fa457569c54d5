"""
Shared pytest fixtures for strutils tests.

Provides common test fixtures for settings, deterministic random sources,
structlog state and sample text across all test modules.
"""

import itertools
import random
import sys
from pathlib import Path

import pytest
import structlog

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from strutils.config import Settings


# -------------------------------------------------------------------------
# Settings Fixtures
# -------------------------------------------------------------------------

@pytest.fixture
def test_settings():
    """
    Provide test configuration settings.

    Returns a real Settings object with debug logging and a fixed seed,
    independent of any STRUTILS_* variables in the environment.
    """
    return Settings(log_level="DEBUG", log_json=False, random_seed=1234)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove STRUTILS_* variables so settings fall back to defaults."""
    for name in ("STRUTILS_LOG_LEVEL", "STRUTILS_LOG_JSON", "STRUTILS_RANDOM_SEED"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# -------------------------------------------------------------------------
# Random Source Fixtures
# -------------------------------------------------------------------------

@pytest.fixture
def zero_rng():
    """Random source that always returns 0.0 (first alphabet entry)."""
    return lambda: 0.0


@pytest.fixture
def top_rng():
    """Random source that always returns the largest float below 1.0."""
    return lambda: 0.9999999999999999


@pytest.fixture
def sequence_rng():
    """
    Provide a factory for random sources cycling through fixed values.

    Example:
        rng = sequence_rng([0.1, 0.5])
    """
    def make(values):
        cycle = itertools.cycle(values)
        return lambda: next(cycle)
    return make


@pytest.fixture
def seeded_rng():
    """Seeded random source; reproducible across runs."""
    return random.Random(42).random


# -------------------------------------------------------------------------
# Logging Fixtures
# -------------------------------------------------------------------------

@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test that configures logging."""
    yield
    structlog.reset_defaults()


# -------------------------------------------------------------------------
# Sample Data Fixtures
# -------------------------------------------------------------------------

@pytest.fixture
def sample_sentences():
    """Short paragraph with four terminated sentences."""
    return "First sentence. Second sentence! Is this the third? Yes."


@pytest.fixture
def unicode_samples():
    """
    Provide strings that exercise multi-byte and astral characters.

    Returns a list covering ASCII, accented Latin, CJK, emoji and mixed text.
    """
    return [
        "",
        "Luffy",
        "café",
        "ワンピース",
        "海賊王に俺はなる",
        "🔥👒",
        "Brook🎸 sings ☠",
        "mixed ñ 😊 text\nwith lines",
    ]


# -------------------------------------------------------------------------
# Pytest Configuration
# -------------------------------------------------------------------------

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "laws: mark test as checking an algebraic law over many inputs"
    )

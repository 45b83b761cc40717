# tests/conftest.py
"""
Pytest configuration and fixtures for the acronyms engine tests.

Provides:
- A fresh registry per test
- Sample acronyms (with and without plural forms)
- Sample document metadata in the list format
- Log capture helpers
"""

import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from A_core.A01_acronym_models import Acronym  # noqa: E402
from B_registry.B01_acronym_registry import AcronymRegistry  # noqa: E402


# =============================================================================
# ENTITY FIXTURES
# =============================================================================

@pytest.fixture
def registry() -> AcronymRegistry:
    """An empty registry, as at the start of a run."""
    return AcronymRegistry()


@pytest.fixture
def rl_acronym() -> Acronym:
    """The Reinforcement Learning acronym, no plural forms."""
    return Acronym(key="RL", shortname="RL", longname="Reinforcement Learning")


@pytest.fixture
def mouse_acronym() -> Acronym:
    """An acronym whose plurals are irregular."""
    return Acronym(
        key="mouse",
        shortname="m.",
        longname="mouse",
        shortplural="mm.",
        longplural="mice",
    )


# =============================================================================
# METADATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_metadata() -> Dict[str, Any]:
    """Document metadata with three definitions in the list format."""
    return {
        "title": "A survey",
        "acronyms": {
            "keys": [
                {"shortname": "RL", "longname": "Reinforcement Learning"},
                {"key": "nlp", "shortname": "NLP", "longname": "natural language processing"},
                {
                    "key": "qa",
                    "shortname": "Q&A",
                    "longname": "question and answer",
                    "longplural": "questions and answers",
                },
            ],
        },
    }


# =============================================================================
# UTILITY FIXTURES
# =============================================================================

@pytest.fixture
def capture_logs(caplog: pytest.LogCaptureFixture):
    """Capture log messages for assertions."""
    caplog.set_level("DEBUG", logger="acronyms")
    yield caplog


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end rendering scenarios"
    )

"""
pytest configuration for becrypt tests.

This file configures pytest to work with the project's test structure.
"""

import io
import sys
from pathlib import Path
from typing import Any, List

import pytest

# Add src and tests directories to Python path
PROJECT_ROOT = Path(__file__).parent.parent
TESTS_DIR = Path(__file__).parent

sys.path.insert(0, str(PROJECT_ROOT / "src"))
sys.path.insert(0, str(TESTS_DIR))

# A syntactically valid bcrypt salt+digest (53 characters)
SAMPLE_DIGEST = "N9qo8uLOickgx2ZMRZoMyeIjZAgcfl7p92ldGxad68LJZdL17lhWy"


def piped_stdin(data: bytes) -> io.TextIOWrapper:
    """Build a non-interactive stdin replacement holding `data`."""
    return io.TextIOWrapper(io.BytesIO(data))


# Configure pytest
def pytest_configure(config: Any) -> None:
    """Configure pytest with project-specific settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def pytest_collection_modifyitems(config: Any, items: List[Any]) -> None:
    """Mark tests that hash at high cost as slow."""
    for item in items:
        if "high_cost" in item.name:
            item.add_marker("slow")


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's BECRYPT_CONFIG from leaking into tests."""
    monkeypatch.delenv("BECRYPT_CONFIG", raising=False)

#!/usr/bin/env python3
"""
Test runner for becrypt.

This script runs all tests in the tests directory through pytest.
"""

import sys
from pathlib import Path

import pytest

TESTS_DIR = Path(__file__).parent


def run_tests() -> int:
    """Run all tests, skipping the slow high-cost hashing ones."""
    return int(pytest.main([str(TESTS_DIR), "-v", "-m", "not slow"]))


if __name__ == "__main__":
    sys.exit(run_tests())

"""Pytest fixtures for pylaslog tests."""

from __future__ import annotations

from pathlib import Path

import pytest

# Test data at repository root
TEST_DATA_DIR = Path(__file__).parent.parent / "test_data"

MINIMAL_HEADER = """~VERSION INFORMATION
 VERS.   2.0  : CWLS LOG ASCII STANDARD -VERSION 2.0
 WRAP.   NO   : ONE LINE PER DEPTH STEP
~WELL INFORMATION
 NULL.    -999.25 : NULL VALUE
~CURVE INFORMATION
 DEPT.M   :  Depth
 DT.US/M  :  Sonic
 GR.GAPI  :  Gamma Ray
"""


@pytest.fixture
def test_data_dir() -> Path:
    """Path to test data directory."""
    return TEST_DATA_DIR


@pytest.fixture
def all_las_files() -> list[Path]:
    """All LAS test files in test_data/."""
    if TEST_DATA_DIR.exists():
        return sorted(TEST_DATA_DIR.glob("*.las"))
    return []


@pytest.fixture
def minimal_header() -> str:
    """~V, ~W and ~C sections declaring DEPT, DT and GR, without ~A."""
    return MINIMAL_HEADER


@pytest.fixture
def example1_content() -> str:
    """Text of the CWLS example1.las sample."""
    return (TEST_DATA_DIR / "example1.las").read_text(encoding="utf-8")

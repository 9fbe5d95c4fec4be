"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add the project root to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


@pytest.fixture
def flat_csv() -> str:
    return 'Sleeve,Colour,Clarity,Rate\nA--1,d,vs1,"₹1,000"\n,,,\n'


@pytest.fixture
def matrix_csv() -> str:
    return "Sleeve,Colour,VVS,VS1\nB1,E,500,\n"

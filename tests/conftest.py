"""Shared pytest fixtures and configuration for the vetkit test suite.

Guidelines
----------
* No internet access in any test.
* File system tests only touch ``tmp_path``.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def existing_file(tmp_path: Path) -> Path:
    """A regular file named ``report.csv`` inside ``tmp_path``."""
    path = tmp_path / "report.csv"
    path.write_text("a,b\n1,2\n", encoding="utf-8")
    return path


@pytest.fixture
def existing_dir(tmp_path: Path) -> Path:
    """An empty directory named ``output`` inside ``tmp_path``."""
    path = tmp_path / "output"
    path.mkdir()
    return path


@pytest.fixture
def missing_path(tmp_path: Path) -> Path:
    """A path inside ``tmp_path`` that does not exist."""
    return tmp_path / "nothing-here.txt"

"""Codebase tests."""

import pathlib
import subprocess
import sys

import pytest

ROOT_DIR = pathlib.Path(__file__).parents[1]

CHECKS = {
    "black": ["black", "--check", "."],
    "isort": ["isort", "--check-only", "."],
    "mypy": ["mypy", "."],
    "pylint": ["pylint", "webarchive"],
}


@pytest.mark.parametrize("tool", sorted(CHECKS))
def test_codebase_passes(tool):
    """Verifies formatting, import order, typing and lint of the project."""
    subprocess.run([sys.executable, "-m", *CHECKS[tool]], check=True, cwd=ROOT_DIR)

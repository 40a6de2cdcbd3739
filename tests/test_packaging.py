"""Tests for the project packaging metadata."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest

pytestmark = pytest.mark.unit


def test_project_readme_is_a_shipped_file() -> None:
    """The readme declared in pyproject.toml exists at the repository root."""

    repo_root = Path(__file__).resolve().parents[1]
    config = tomllib.loads((repo_root / "pyproject.toml").read_text(encoding="utf-8"))

    readme = config["project"]["readme"]

    assert readme == "README.md"
    assert (repo_root / readme).is_file()

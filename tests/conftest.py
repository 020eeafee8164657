"""Shared pytest fixtures for the tbxinit test suite.

Provides reusable fixtures for:
- An isolated environment (no MATLAB_RELEASE / TBXINIT_* variables leaking in)
- A quiet configuration that passes the MATLAB release check
- Scaffolders backed by the bundled or by a throw-away template directory
"""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from tbxinit.config import Config
from tbxinit.scaffolder import ScaffoldRequest, Scaffolder
from tbxinit.scaffolder.templates import DEFAULT_TEMPLATE_DIR


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of every test."""
    for name in (
        "MATLAB_RELEASE",
        "TBXINIT_TEMPLATE_DIR",
        "TBXINIT_MINIMUM_RELEASE",
        "TBXINIT_SKIP_ENV_CHECK",
    ):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> Config:
    """Quiet configuration on a supported (explicit) MATLAB release."""
    return Config(matlab_release="R2024a", verbose=False)


@pytest.fixture
def scaffolder(config: Config) -> Scaffolder:
    """Scaffolder using the bundled templates."""
    return Scaffolder(config)


# ---------------------------------------------------------------------------
# Paths & requests
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Existing parent folder for generated projects."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def banana_request(output_dir: Path) -> ScaffoldRequest:
    """Request for a project whose name is a valid MATLAB identifier."""
    return ScaffoldRequest(root_name="banana", output_folder=output_dir)


@pytest.fixture
def template_copy(tmp_path: Path) -> Path:
    """Writable copy of the bundled templates, for tests that edit them."""
    target = tmp_path / "templates"
    shutil.copytree(DEFAULT_TEMPLATE_DIR, target)
    return target


@pytest.fixture
def expected_files() -> list[str]:
    """Relative paths every ``banana`` project contains."""
    return [
        ".gitattributes",
        ".gitignore",
        "CHECKLIST.md",
        "LICENSE.md",
        "README.md",
        "buildfile.m",
        "packageToolbox.m",
        "tests/banana_test.m",
        "toolbox/banana.m",
        "toolbox/examples/HelpfulExample.mlx",
        "toolbox/gettingStarted.mlx",
        "toolboxOptions.m",
    ]

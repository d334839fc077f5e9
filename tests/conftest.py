"""Shared pytest fixtures for the cargo-casper test suite.

Provides reusable fixtures for:
- Destination paths that do not exist yet
- Scaffold configurations with and without overrides
- A real TemplateRenderer over the shipped templates
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cargo_casper.config import GitOverride, ScaffoldConfig, WorkspaceOverride
from cargo_casper.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Destination for a new project; not created yet."""
    return tmp_path / "my-contract"


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture
def basic_config(project_root: Path) -> ScaffoldConfig:
    """No overrides, no wrapper."""
    return ScaffoldConfig(root_path=project_root)


@pytest.fixture
def wrapper_config(project_root: Path) -> ScaffoldConfig:
    """Same as ``basic_config`` with the rustc wrapper enabled."""
    return ScaffoldConfig(root_path=project_root, use_wrapper=True)


@pytest.fixture
def workspace_config(project_root: Path) -> ScaffoldConfig:
    """Crates redirected to a local casper-node checkout at ``/ws``."""
    return ScaffoldConfig(
        root_path=project_root,
        casper_overrides=WorkspaceOverride(path=Path("/ws")),
    )


@pytest.fixture
def git_config(project_root: Path) -> ScaffoldConfig:
    """Crates redirected to a branch of a remote casper-node repository."""
    return ScaffoldConfig(
        root_path=project_root,
        casper_overrides=GitOverride(
            url="https://github.com/casper-network/casper-node", branch="dev"
        ),
    )


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the templates shipped with the package."""
    return TemplateRenderer()

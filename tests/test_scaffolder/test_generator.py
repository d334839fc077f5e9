"""Tests for the project scaffolding orchestrator.

Covers:
- Generation order and the returned file list
- Wrapper / no-wrapper variants
- Refusal to touch an existing destination
- No rollback when a later step fails
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from cargo_casper.config import ScaffoldConfig
from cargo_casper.errors import DestinationExistsError, FileSystemError
from cargo_casper.scaffolder.generator import ProjectGenerator

pytestmark = pytest.mark.unit

BASE_FILES = [
    "contract/Cargo.toml",
    "contract/src/main.rs",
    "tests/Cargo.toml",
    "tests/src/integration_tests.rs",
    "Makefile",
    ".travis.yml",
]


def _relative(paths: list[Path], root: Path) -> list[str]:
    return [p.relative_to(root).as_posix() for p in paths]


class TestGenerate:
    def test_files_in_order(self, basic_config, project_root):
        written = ProjectGenerator(basic_config).generate()
        assert _relative(written, project_root) == BASE_FILES

    def test_no_helper_without_wrapper(self, basic_config, project_root):
        ProjectGenerator(basic_config).generate()
        assert not (project_root / "helper").exists()

    def test_wrapper_is_last(self, wrapper_config, project_root):
        written = ProjectGenerator(wrapper_config).generate()
        assert _relative(written, project_root) == BASE_FILES + ["helper/wrapper.rs"]

    def test_wrapper_makefile_variant(self, wrapper_config, project_root):
        ProjectGenerator(wrapper_config).generate()
        makefile = (project_root / "Makefile").read_text(encoding="utf-8")
        assert "build-wrapper" in makefile

    def test_creates_nested_root(self, tmp_path: Path):
        root = tmp_path / "a" / "b" / "c"
        ProjectGenerator(ScaffoldConfig(root_path=root)).generate()
        assert (root / "Makefile").is_file()

    def test_shares_one_renderer(self, basic_config):
        gen = ProjectGenerator(basic_config)
        assert gen.contract_gen.renderer is gen.renderer
        assert gen.wrapper_gen.renderer is gen.renderer


class TestExistingDestination:
    def test_existing_directory(self, basic_config, project_root):
        project_root.mkdir()
        with pytest.raises(DestinationExistsError) as exc_info:
            ProjectGenerator(basic_config).generate()
        assert exc_info.value.path == project_root
        assert list(project_root.iterdir()) == []

    def test_existing_file(self, basic_config, project_root):
        project_root.write_text("keep me", encoding="utf-8")
        with pytest.raises(DestinationExistsError):
            ProjectGenerator(basic_config).generate()
        assert project_root.read_text(encoding="utf-8") == "keep me"

    def test_message(self, basic_config, project_root):
        project_root.mkdir()
        with pytest.raises(DestinationExistsError, match="already exists"):
            ProjectGenerator(basic_config).generate()


class TestPartialFailure:
    def test_earlier_files_are_kept(self, basic_config, project_root):
        gen = ProjectGenerator(basic_config)
        error = FileSystemError(
            "write to", project_root / "Makefile", OSError(28, "No space left on device")
        )
        with patch.object(gen.makefile_gen, "create", side_effect=error):
            with pytest.raises(FileSystemError):
                gen.generate()

        assert (project_root / "contract" / "Cargo.toml").is_file()
        assert (project_root / "tests" / "Cargo.toml").is_file()
        assert not (project_root / ".travis.yml").exists()


class TestDanglingSymlink:
    def test_dangling_symlink_counts_as_existing(self, basic_config, project_root, tmp_path):
        project_root.symlink_to(tmp_path / "missing-target")
        with pytest.raises(DestinationExistsError):
            ProjectGenerator(basic_config).generate()
        assert not (tmp_path / "missing-target").exists()

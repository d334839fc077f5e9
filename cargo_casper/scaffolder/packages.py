"""Cargo package generation for the contract and its tests.

Each package is a directory holding a ``Cargo.toml`` built from a manifest
template plus the rendered dependency lines, and one starter source file.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..config import ScaffoldConfig
from ..utils import create_dir_all, write_file
from .dependency import (
    CL_CONTRACT,
    CL_ENGINE_TEST_SUPPORT,
    CL_EXECUTION_ENGINE,
    CL_TYPES,
    render_patch_section,
)
from .templates import Template, TemplateRenderer


class PackageGenerator(ABC):
    """Writes one Cargo package under the project root.

    Subclasses name the package folder, its templates, and the dependency
    lines its manifest needs.
    """

    package_name: str = ""
    manifest_template: Template
    source_template: Template
    source_path: str = ""

    def __init__(self, config: ScaffoldConfig, renderer: TemplateRenderer) -> None:
        self.config = config
        self.renderer = renderer

    @property
    def package_root(self) -> Path:
        return self.config.root_path / self.package_name

    @abstractmethod
    def dependency_lines(self) -> list[str]:
        """Return the rendered dependency lines for the manifest."""

    def render_manifest(self) -> str:
        """Render the package's ``Cargo.toml`` content."""
        return self.renderer.render(
            self.manifest_template,
            {
                "dependencies": self.dependency_lines(),
                "patch_section": render_patch_section(self.config.casper_overrides),
            },
        )

    def create(self) -> list[Path]:
        """Create the package directory, its manifest and its source file.

        Returns:
            The written file paths, manifest first.

        Raises:
            FileSystemError: If any directory or file cannot be written.
        """
        source_file = self.package_root / self.source_path
        create_dir_all(source_file.parent)
        manifest = write_file(self.package_root / "Cargo.toml", self.render_manifest())
        source = write_file(source_file, self.renderer.load(self.source_template))
        return [manifest, source]


class ContractPackageGenerator(PackageGenerator):
    """The Wasm contract crate, built for ``wasm32-unknown-unknown``."""

    package_name = "contract"
    manifest_template = Template.CONTRACT_MANIFEST
    source_template = Template.CONTRACT_MAIN
    source_path = "src/main.rs"

    def dependency_lines(self) -> list[str]:
        overrides = self.config.casper_overrides
        return [
            CL_CONTRACT.render(True, [], overrides),
            CL_TYPES.render(True, [], overrides),
        ]


class TestsPackageGenerator(PackageGenerator):
    """The native crate that runs the contract inside the test engine."""

    package_name = "tests"
    manifest_template = Template.TESTS_MANIFEST
    source_template = Template.TESTS_MAIN
    source_path = "src/integration_tests.rs"

    def dependency_lines(self) -> list[str]:
        overrides = self.config.casper_overrides
        return [
            CL_EXECUTION_ENGINE.render(True, [], overrides),
            CL_ENGINE_TEST_SUPPORT.render(True, ["test-support"], overrides),
            CL_TYPES.render(True, [], overrides),
        ]

"""Fixed-content files copied into the project root.

The Makefile, the Travis CI config and the optional rustc wrapper are written
byte-for-byte from their templates.
"""

from __future__ import annotations

from pathlib import Path

from ..utils import create_dir_all, write_file
from .templates import Template, TemplateRenderer


class StaticFileGenerator:
    """Base for generators that copy one template to one file."""

    filename: str = ""

    def __init__(self, root_path: Path, renderer: TemplateRenderer) -> None:
        self.root_path = root_path
        self.renderer = renderer

    @property
    def output_path(self) -> Path:
        return self.root_path / self.filename

    def _write(self, template: Template) -> Path:
        return write_file(self.output_path, self.renderer.load(template))


class MakefileGenerator(StaticFileGenerator):
    """Writes the ``Makefile`` driving ``prepare``, ``test`` and lint targets."""

    filename = "Makefile"

    def create(self, use_wrapper: bool) -> Path:
        """Write the Makefile, picking the variant that builds the wrapper first."""
        template = Template.MAKEFILE_WITH_WRAPPER if use_wrapper else Template.MAKEFILE
        return self._write(template)


class CiConfigGenerator(StaticFileGenerator):
    """Writes the Travis CI configuration."""

    filename = ".travis.yml"

    def create(self) -> Path:
        return self._write(Template.TRAVIS_YML)


class WrapperGenerator(StaticFileGenerator):
    """Writes ``helper/wrapper.rs``, a rustc wrapper for reproducible Wasm."""

    filename = "helper/wrapper.rs"

    def create(self) -> Path:
        create_dir_all(self.output_path.parent)
        return self._write(Template.WRAPPER)

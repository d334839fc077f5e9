"""cargo-casper scaffolder -- generates Casper contract project skeletons.

Quick usage::

    from pathlib import Path

    from cargo_casper.config import ScaffoldConfig
    from cargo_casper.scaffolder import ProjectGenerator

    config = ScaffoldConfig(root_path=Path("/tmp/my-contract"), use_wrapper=True)
    written = ProjectGenerator(config).generate()
"""

from cargo_casper.scaffolder.dependency import DEPENDENCIES, Dependency, render_patch_section
from cargo_casper.scaffolder.generator import ProjectGenerator
from cargo_casper.scaffolder.templates import Template, TemplateRenderer

__all__ = [
    "DEPENDENCIES",
    "Dependency",
    "ProjectGenerator",
    "Template",
    "TemplateRenderer",
    "render_patch_section",
]

"""Main scaffolding orchestrator.

Takes a ``ScaffoldConfig`` and lays down a complete Casper contract project:
the contract crate, its test crate, a Makefile, a Travis CI config, and
optionally the rustc wrapper used for reproducible Wasm builds.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..config import ScaffoldConfig
from ..errors import DestinationExistsError
from ..utils import create_dir_all
from .packages import ContractPackageGenerator, TestsPackageGenerator
from .static_files import CiConfigGenerator, MakefileGenerator, WrapperGenerator
from .templates import TemplateRenderer


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Runs each generator once, in order.  The first failure propagates to the
    caller; files written by earlier steps are left in place.
    """

    def __init__(
        self, config: ScaffoldConfig, renderer: TemplateRenderer | None = None
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        root = config.root_path
        self.contract_gen = ContractPackageGenerator(config, self.renderer)
        self.tests_gen = TestsPackageGenerator(config, self.renderer)
        self.makefile_gen = MakefileGenerator(root, self.renderer)
        self.ci_gen = CiConfigGenerator(root, self.renderer)
        self.wrapper_gen = WrapperGenerator(root, self.renderer)

    def generate(self) -> list[Path]:
        """Generate the project under ``config.root_path``.

        Returns:
            Every file written, in generation order.

        Raises:
            DestinationExistsError: If the root path already exists.
            FileSystemError: If a directory or file cannot be written.
        """
        root = self.config.root_path
        if os.path.lexists(root):
            raise DestinationExistsError(root)

        create_dir_all(root)

        written: list[Path] = []
        written.extend(self.contract_gen.create())
        written.extend(self.tests_gen.create())
        written.append(self.makefile_gen.create(self.config.use_wrapper))
        written.append(self.ci_gen.create())
        if self.config.use_wrapper:
            written.append(self.wrapper_gen.create())

        return written

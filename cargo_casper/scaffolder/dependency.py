"""Casper crate dependencies referenced by the generated Cargo manifests.

Each ``Dependency`` knows how to render itself as a ``Cargo.toml`` line.  When
a ``CasperOverrides`` is active, versions collapse to the ``*`` wildcard and a
single ``[patch.crates-io]`` block redirects every crate to the override
source.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field

from ..config import CasperOverrides, GitOverride, WorkspaceOverride

WILDCARD_VERSION = "*"


class Dependency(BaseModel):
    """A Casper crate with the version pinned by this release of the tool."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Crate name on crates.io")
    version: str = Field(..., description="Pinned published version")
    workspace_subdir: str = Field(
        ..., description="Location of the crate inside the casper-node workspace"
    )

    def render(
        self,
        default_features: bool = True,
        features: list[str] | None = None,
        overrides: CasperOverrides | None = None,
    ) -> str:
        """Render the dependency as a single ``Cargo.toml`` line.

        The bare ``name = "version"`` form is used only when default features
        are kept and no extra features are requested; anything else becomes an
        inline table.
        """
        features = features or []
        version = WILDCARD_VERSION if overrides is not None else self.version

        if default_features and not features:
            return f'{self.name} = "{version}"'

        output = f'{self.name} = {{ version = "{version}"'
        if not default_features:
            output += ", default-features = false"
        if features:
            output += f", features = {json.dumps(features)}"
        return output + " }"


# ---------------------------------------------------------------------------
# Known crates
# ---------------------------------------------------------------------------

CL_CONTRACT = Dependency(
    name="casper-contract",
    version="4.0.0",
    workspace_subdir="smart_contracts/contract",
)
CL_TYPES = Dependency(
    name="casper-types",
    version="4.0.1",
    workspace_subdir="types",
)
CL_ENGINE_TEST_SUPPORT = Dependency(
    name="casper-engine-test-support",
    version="7.0.1",
    workspace_subdir="execution_engine_testing/test_support",
)
CL_EXECUTION_ENGINE = Dependency(
    name="casper-execution-engine",
    version="7.0.1",
    workspace_subdir="execution_engine",
)

DEPENDENCIES: tuple[Dependency, ...] = (
    CL_CONTRACT,
    CL_TYPES,
    CL_ENGINE_TEST_SUPPORT,
    CL_EXECUTION_ENGINE,
)


# ---------------------------------------------------------------------------
# Patch section
# ---------------------------------------------------------------------------


def render_patch_section(overrides: CasperOverrides | None) -> str:
    """Render the ``[patch.crates-io]`` block shared by every manifest.

    Returns an empty string when no override is active.  Lines are sorted by
    crate name and the block carries no trailing newline.
    """
    if overrides is None:
        return ""

    lines = ["[patch.crates-io]"]
    for dep in sorted(DEPENDENCIES, key=lambda d: d.name):
        if isinstance(overrides, WorkspaceOverride):
            source = f'path = "{(overrides.path / dep.workspace_subdir).as_posix()}"'
        elif isinstance(overrides, GitOverride):
            source = f'git = "{overrides.url}", branch = "{overrides.branch}"'
        else:
            raise TypeError(f"Unsupported override: {overrides!r}")
        lines.append(f"{dep.name} = {{ {source} }}")
    return "\n".join(lines)

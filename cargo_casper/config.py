"""cargo-casper configuration.

Typed, immutable settings resolved once at startup and passed explicitly to
every generator.  All models use Pydantic v2 so they are validated at
construction time.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class WorkspaceOverride(BaseModel):
    """Points every Casper crate at a local checkout of the casper-node workspace."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["workspace"] = "workspace"
    path: Path = Field(..., description="Root of the local casper-node repository")


class GitOverride(BaseModel):
    """Points every Casper crate at a branch of a remote casper-node repository."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["git"] = "git"
    url: str = Field(..., description="Git URL of the casper-node repository")
    branch: str = Field(..., description="Branch to build the crates from")


CasperOverrides = Annotated[
    Union[WorkspaceOverride, GitOverride], Field(discriminator="kind")
]


class ScaffoldConfig(BaseModel):
    """Everything the generators need to lay down a new project.

    Instances are created once by the CLI entry point and then handed to
    ``ProjectGenerator``.
    """

    model_config = ConfigDict(frozen=True)

    root_path: Path = Field(..., description="Destination folder for the new project")
    casper_overrides: CasperOverrides | None = Field(
        default=None,
        description="Optional redirect of all Casper crates to a local or git source",
    )
    use_wrapper: bool = Field(
        default=False,
        description="Whether to emit the rustc wrapper for reproducible Wasm builds",
    )


class IndexConfig(BaseModel):
    """Settings for the published-version self-check."""

    url: str = Field(default="https://index.crates.io")
    timeout: int = Field(default=30, ge=1, description="Per-request timeout in seconds")

    @classmethod
    def from_env(cls) -> "IndexConfig":
        """Build an ``IndexConfig`` from environment variables.

        Recognised variables (all optional):
            CARGO_CASPER_INDEX_URL, CARGO_CASPER_INDEX_TIMEOUT.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("CARGO_CASPER_INDEX_URL"):
            kwargs["url"] = os.environ["CARGO_CASPER_INDEX_URL"]
        if os.environ.get("CARGO_CASPER_INDEX_TIMEOUT"):
            kwargs["timeout"] = int(os.environ["CARGO_CASPER_INDEX_TIMEOUT"])
        return cls(**kwargs)

"""Unit tests for the configuration models (cargo_casper.config)."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from cargo_casper.config import GitOverride, IndexConfig, ScaffoldConfig, WorkspaceOverride


class TestScaffoldConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = ScaffoldConfig(root_path=Path("out"))
        assert config.root_path == Path("out")
        assert config.casper_overrides is None
        assert config.use_wrapper is False

    @pytest.mark.unit
    def test_root_path_required(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig()

    @pytest.mark.unit
    def test_frozen(self):
        config = ScaffoldConfig(root_path=Path("out"))
        with pytest.raises(ValidationError):
            config.use_wrapper = True

    @pytest.mark.unit
    def test_override_from_dict_uses_kind(self):
        config = ScaffoldConfig.model_validate(
            {
                "root_path": "out",
                "casper_overrides": {"kind": "git", "url": "U", "branch": "B"},
            }
        )
        assert config.casper_overrides == GitOverride(url="U", branch="B")

    @pytest.mark.unit
    def test_unknown_override_kind_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig.model_validate(
                {"root_path": "out", "casper_overrides": {"kind": "svn", "url": "U"}}
            )


class TestOverrides:
    @pytest.mark.unit
    def test_workspace_kind(self):
        assert WorkspaceOverride(path=Path("/ws")).kind == "workspace"

    @pytest.mark.unit
    def test_git_requires_branch(self):
        with pytest.raises(ValidationError):
            GitOverride(url="U")


class TestIndexConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = IndexConfig()
        assert config.url == "https://index.crates.io"
        assert config.timeout == 30

    @pytest.mark.unit
    def test_timeout_below_minimum_rejected(self):
        with pytest.raises(ValidationError):
            IndexConfig(timeout=0)

    @pytest.mark.unit
    def test_from_env(self):
        env = {
            "CARGO_CASPER_INDEX_URL": "http://mirror.local",
            "CARGO_CASPER_INDEX_TIMEOUT": "5",
        }
        with patch.dict(os.environ, env, clear=False):
            config = IndexConfig.from_env()
        assert config.url == "http://mirror.local"
        assert config.timeout == 5

    @pytest.mark.unit
    def test_from_env_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = IndexConfig.from_env()
        assert config == IndexConfig()

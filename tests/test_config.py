from __future__ import annotations

from pathlib import Path

import pytest

from tsforge.config import DEFAULT_PACKAGE_MANAGER, ProjectConfig


def test_from_name_uses_name_and_parent(tmp_path: Path):
    config = ProjectConfig.from_name("demo", parent=tmp_path)
    assert config.name == "demo"
    assert config.parent == tmp_path
    assert config.package_manager == DEFAULT_PACKAGE_MANAGER
    assert config.workspace_path == tmp_path / "demo"


def test_from_name_defaults_to_current_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    config = ProjectConfig.from_name("demo")
    assert config.workspace_path == tmp_path / "demo"


def test_from_name_keeps_name_verbatim(tmp_path: Path):
    config = ProjectConfig.from_name(" demo ", parent=tmp_path)
    assert config.name == " demo "
    assert config.workspace_path == tmp_path / " demo "

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tsforge.manifest import (
    DEFAULT_SCRIPTS,
    MANIFEST_FILE,
    ProjectManifest,
    patch_scripts,
    patch_test_script,
)
from tsforge.workspace import Workspace


@pytest.fixture()
def workspace(tmp_path: Path) -> Workspace:
    workspace = Workspace.create(tmp_path, "demo")
    workspace.write_json(
        MANIFEST_FILE,
        {"name": "demo", "version": "1.0.0", "scripts": {"custom": "echo hi"}, "license": "ISC"},
    )
    return workspace


def test_patch_scripts_replaces_scripts_block(workspace: Workspace):
    patch_scripts(workspace)
    data = workspace.read_json(MANIFEST_FILE)
    assert data["scripts"] == DEFAULT_SCRIPTS
    assert list(data) == ["name", "version", "scripts", "license"]


def test_default_scripts_match_expected_commands():
    assert DEFAULT_SCRIPTS == {
        "build": "tsc",
        "start": "node dist/index.js",
        "dev": "ts-node src/index.ts",
        "lint": "eslint . --ext .ts",
        "format": 'prettier --write "src/**/*.ts"',
        "test": 'echo "Error: no test specified" && exit 1',
    }


def test_patch_test_script_rereads_manifest(workspace: Workspace):
    patch_scripts(workspace)
    data = workspace.read_json(MANIFEST_FILE)
    data["description"] = "edited on disk"
    workspace.write_json(MANIFEST_FILE, data)

    patch_test_script(workspace)

    patched = workspace.read_json(MANIFEST_FILE)
    assert patched["scripts"]["test"] == "vitest"
    assert patched["description"] == "edited on disk"
    assert {key: value for key, value in patched["scripts"].items() if key != "test"} == {
        key: value for key, value in DEFAULT_SCRIPTS.items() if key != "test"
    }


def test_load_rejects_malformed_json(workspace: Workspace):
    workspace.write_text(MANIFEST_FILE, "{not json")
    with pytest.raises(json.JSONDecodeError):
        ProjectManifest.load(workspace)


def test_load_rejects_non_object(workspace: Workspace):
    workspace.write_json(MANIFEST_FILE, ["not", "an", "object"])
    with pytest.raises(ValueError):
        ProjectManifest.load(workspace)


def test_scripts_property_creates_missing_block():
    manifest = ProjectManifest({"name": "demo"})
    manifest.set_script("test", "vitest")
    assert manifest.data == {"name": "demo", "scripts": {"test": "vitest"}}

"""Read-modify-write access to the project's ``package.json``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .workspace import Workspace

LOGGER = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"

DEFAULT_TEST_SCRIPT = 'echo "Error: no test specified" && exit 1'
VITEST_TEST_SCRIPT = "vitest"

DEFAULT_SCRIPTS: dict[str, str] = {
    "build": "tsc",
    "start": "node dist/index.js",
    "dev": "ts-node src/index.ts",
    "lint": "eslint . --ext .ts",
    "format": 'prettier --write "src/**/*.ts"',
    "test": DEFAULT_TEST_SCRIPT,
}


@dataclass(slots=True)
class ProjectManifest:
    """In-memory copy of ``package.json``.

    The manifest is a plain JSON object; keys the package manager wrote are kept
    untouched and in their original order.
    """

    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, workspace: Workspace) -> "ProjectManifest":
        payload = workspace.read_json(MANIFEST_FILE)
        if not isinstance(payload, dict):
            raise ValueError(f"{workspace.path(MANIFEST_FILE)} must contain a JSON object")
        return cls(payload)

    def save(self, workspace: Workspace) -> None:
        workspace.write_json(MANIFEST_FILE, self.data)

    @property
    def scripts(self) -> dict[str, Any]:
        return self.data.setdefault("scripts", {})

    def apply_default_scripts(self) -> None:
        """Replace the ``scripts`` block with the fixed project scripts."""

        self.data["scripts"] = dict(DEFAULT_SCRIPTS)

    def set_script(self, name: str, command: str) -> None:
        self.scripts[name] = command


def patch_scripts(workspace: Workspace) -> ProjectManifest:
    """Rewrite the manifest with the default ``scripts`` block."""

    manifest = ProjectManifest.load(workspace)
    manifest.apply_default_scripts()
    manifest.save(workspace)
    LOGGER.debug("patched scripts in %s", workspace.path(MANIFEST_FILE))
    return manifest


def patch_test_script(workspace: Workspace, command: str = VITEST_TEST_SCRIPT) -> ProjectManifest:
    """Re-read the manifest and point its ``test`` script at ``command``."""

    manifest = ProjectManifest.load(workspace)
    manifest.set_script("test", command)
    manifest.save(workspace)
    LOGGER.debug("set test script to %r", command)
    return manifest


__all__ = [
    "DEFAULT_SCRIPTS",
    "DEFAULT_TEST_SCRIPT",
    "MANIFEST_FILE",
    "ProjectManifest",
    "VITEST_TEST_SCRIPT",
    "patch_scripts",
    "patch_test_script",
]

"""Filesystem helpers bound to a single project workspace."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import WorkspaceExistsError

LOGGER = logging.getLogger(__name__)

JSON_INDENT = 2


def dump_json(payload: Any) -> str:
    """Serialise ``payload`` as pretty-printed JSON with two-space indentation."""

    return json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False)


@dataclass(frozen=True, slots=True)
class Workspace:
    """A freshly created project directory.

    Every pipeline step receives the workspace explicitly and resolves its paths
    against :attr:`root`; the process working directory is never changed.
    """

    root: Path

    @classmethod
    def create(cls, parent: str | Path, name: str) -> "Workspace":
        """Create ``parent/name`` and return the workspace rooted there.

        Raises :class:`WorkspaceExistsError` when the directory is already
        present. Missing parents are not created.
        """

        root = Path(parent) / name
        try:
            root.mkdir()
        except FileExistsError as exc:
            raise WorkspaceExistsError(root) from exc
        LOGGER.debug("created workspace %s", root)
        return cls(root)

    def path(self, relative: str | Path) -> Path:
        return self.root / relative

    def make_dir(self, relative: str | Path) -> Path:
        directory = self.path(relative)
        directory.mkdir()
        return directory

    def write_text(self, relative: str | Path, content: str) -> Path:
        destination = self.path(relative)
        destination.write_text(content, encoding="utf-8")
        LOGGER.debug("wrote %s", destination)
        return destination

    def write_json(self, relative: str | Path, payload: Any) -> Path:
        return self.write_text(relative, dump_json(payload))

    def read_json(self, relative: str | Path) -> Any:
        return json.loads(self.path(relative).read_text(encoding="utf-8"))


__all__ = ["JSON_INDENT", "Workspace", "dump_json"]

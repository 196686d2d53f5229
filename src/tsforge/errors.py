"""Custom exception types raised while scaffolding a workspace."""

from __future__ import annotations

from pathlib import Path


class WorkspaceExistsError(FileExistsError):
    """Raised when the target project directory is already present."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{path} already exists")
        self.path = path


__all__ = ["WorkspaceExistsError"]

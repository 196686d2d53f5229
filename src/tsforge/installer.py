"""Package manager invocations behind a replaceable interface."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence

from .config import DEFAULT_PACKAGE_MANAGER
from .workspace import Workspace

LOGGER = logging.getLogger(__name__)


class DependencyInstaller(ABC):
    """Capability for creating a manifest and adding packages to it."""

    @abstractmethod
    def init_manifest(self, workspace: Workspace) -> None:
        """Create the base ``package.json`` inside ``workspace``."""

    @abstractmethod
    def add(self, workspace: Workspace, packages: Sequence[str], *, dev: bool = False) -> None:
        """Add ``packages`` to the manifest, as development dependencies when ``dev``."""


class PackageManagerInstaller(DependencyInstaller):
    """Run a node package manager (``pnpm`` by default) as a subprocess.

    Each command blocks until the process exits. A non-zero exit status raises
    :class:`subprocess.CalledProcessError` and a missing executable raises
    :class:`FileNotFoundError`; neither is handled here.
    """

    def __init__(self, executable: str = DEFAULT_PACKAGE_MANAGER) -> None:
        self.executable = executable

    def init_manifest(self, workspace: Workspace) -> None:
        self._run(workspace, ["init"])

    def add(self, workspace: Workspace, packages: Sequence[str], *, dev: bool = False) -> None:
        if not packages:
            raise ValueError("at least one package is required")
        arguments = ["add"]
        if dev:
            arguments.append("-D")
        arguments.extend(packages)
        self._run(workspace, arguments)

    def command(self, arguments: Sequence[str]) -> list[str]:
        return [self.executable, *arguments]

    def _run(self, workspace: Workspace, arguments: Sequence[str]) -> None:
        command = self.command(arguments)
        LOGGER.debug("running %s in %s", " ".join(command), workspace.root)
        subprocess.run(command, cwd=workspace.root, check=True)


__all__ = ["DependencyInstaller", "PackageManagerInstaller"]

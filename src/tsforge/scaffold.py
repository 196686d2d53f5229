"""Project initialisation pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from .config import ProjectConfig
from .documents import TsConfig
from .extras import Extra, ExtrasSelection, install_extras
from .installer import DependencyInstaller, PackageManagerInstaller
from .manifest import patch_scripts
from .prompt import ExtrasSelector, InteractiveExtrasSelector
from .reporter import Reporter
from .workspace import Workspace

__all__ = ["BASE_DEV_DEPENDENCIES", "PipelineState", "ProjectScaffolder", "ScaffoldResult"]

LOGGER = logging.getLogger(__name__)

BASE_DEV_DEPENDENCIES = ("typescript", "@types/node")


class PipelineState(str, Enum):
    """Stages reached by :class:`ProjectScaffolder`, in execution order."""

    CREATED = "created"
    BOOTSTRAPPED = "bootstrapped"
    FILES_EMITTED = "files_emitted"
    MANIFEST_PATCHED = "manifest_patched"
    EXTRAS_CHOSEN = "extras_chosen"
    EXTRAS_INSTALLED = "extras_installed"


@dataclass(slots=True)
class ScaffoldResult:
    """Outcome of a completed run."""

    workspace: Workspace
    selection: ExtrasSelection
    installed: list[Extra] = field(default_factory=list)


class ProjectScaffolder:
    """Create a TypeScript project and wire in the extras the user picks.

    The steps run strictly in order and any exception aborts the run, leaving
    the workspace as far as it got. Nothing is rolled back. :attr:`state` holds
    the last stage that completed.
    """

    def __init__(
        self,
        installer: DependencyInstaller | None = None,
        selector: ExtrasSelector | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.installer = installer or PackageManagerInstaller()
        self.selector = selector or InteractiveExtrasSelector()
        self.reporter = reporter or Reporter()
        self.state: PipelineState | None = None

    def create(self, config: ProjectConfig) -> ScaffoldResult:
        """Run the whole pipeline for ``config`` and return the new workspace."""

        self.state = None
        self.reporter.info(f"Initialising project: {config.name}")

        workspace = self.create_workspace(config)
        self.bootstrap_manifest(workspace)
        self.emit_static_files(workspace)
        self.patch_manifest(workspace)
        selection = self.choose_extras()
        installed = self.install_extras(workspace, selection)

        self.reporter.success("Project initialised successfully")
        return ScaffoldResult(workspace=workspace, selection=selection, installed=installed)

    def create_workspace(self, config: ProjectConfig) -> Workspace:
        workspace = Workspace.create(config.parent, config.name)
        self._advance(PipelineState.CREATED)
        return workspace

    def bootstrap_manifest(self, workspace: Workspace) -> None:
        self.installer.init_manifest(workspace)
        self.installer.add(workspace, BASE_DEV_DEPENDENCIES, dev=True)
        self._advance(PipelineState.BOOTSTRAPPED)

    def emit_static_files(self, workspace: Workspace) -> None:
        workspace.write_json("tsconfig.json", TsConfig().to_json())
        workspace.make_dir("src")
        workspace.make_dir("dist")
        workspace.write_text("src/index.ts", "")
        self._advance(PipelineState.FILES_EMITTED)

    def patch_manifest(self, workspace: Workspace) -> None:
        patch_scripts(workspace)
        self._advance(PipelineState.MANIFEST_PATCHED)

    def choose_extras(self) -> ExtrasSelection:
        selection = self.selector.select()
        self._advance(PipelineState.EXTRAS_CHOSEN)
        return selection

    def install_extras(self, workspace: Workspace, selection: ExtrasSelection) -> list[Extra]:
        installed = install_extras(selection, workspace, self.installer, self.reporter)
        self._advance(PipelineState.EXTRAS_INSTALLED)
        return installed

    def _advance(self, state: PipelineState) -> None:
        LOGGER.debug("pipeline reached %s", state.value)
        self.state = state

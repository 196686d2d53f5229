"""Scaffold TypeScript projects with optional tooling presets.

The package creates a project directory, bootstraps ``package.json`` through a
node package manager, writes the static build configuration and installs the
extras (lint, format, test, server) the user picks from an interactive prompt.
The pipeline is usable programmatically through :class:`ProjectScaffolder` and
via the ``tsforge init`` command.
"""

from __future__ import annotations

__version__ = "0.0.1"

from .config import ProjectConfig
from .errors import WorkspaceExistsError
from .extras import Extra, ExtrasSelection
from .installer import DependencyInstaller, PackageManagerInstaller
from .manifest import DEFAULT_SCRIPTS, ProjectManifest
from .prompt import ExtrasSelector, InteractiveExtrasSelector, StaticExtrasSelector
from .scaffold import PipelineState, ProjectScaffolder, ScaffoldResult
from .workspace import Workspace

__all__ = [
    "DEFAULT_SCRIPTS",
    "DependencyInstaller",
    "Extra",
    "ExtrasSelection",
    "ExtrasSelector",
    "InteractiveExtrasSelector",
    "PackageManagerInstaller",
    "PipelineState",
    "ProjectConfig",
    "ProjectManifest",
    "ProjectScaffolder",
    "ScaffoldResult",
    "StaticExtrasSelector",
    "Workspace",
    "WorkspaceExistsError",
    "__version__",
]

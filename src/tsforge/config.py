"""Per-run settings shared by the pipeline and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_PACKAGE_MANAGER = "pnpm"


@dataclass(slots=True)
class ProjectConfig:
    """Settings describing a single ``init`` invocation.

    Attributes
    ----------
    name:
        The project name given on the command line. It doubles as the name of
        the workspace directory and is otherwise used verbatim.
    parent:
        Directory in which the workspace is created.
    package_manager:
        Executable invoked for manifest initialisation and dependency installs.
    """

    name: str
    parent: Path
    package_manager: str = DEFAULT_PACKAGE_MANAGER

    @classmethod
    def from_name(
        cls,
        name: str,
        *,
        parent: str | Path | None = None,
        package_manager: str = DEFAULT_PACKAGE_MANAGER,
    ) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` for the project called ``name``.

        Parameters
        ----------
        name:
            The project name, used verbatim. The filesystem decides whether it
            is acceptable when the workspace is created.
        parent:
            Directory that will contain the workspace. Defaults to the current
            working directory.
        package_manager:
            Override the package manager executable.
        """

        base = Path.cwd() if parent is None else Path(parent)
        return cls(name=name, parent=base, package_manager=package_manager)

    @property
    def workspace_path(self) -> Path:
        """Location of the workspace directory for this project."""

        return self.parent / self.name


__all__ = ["DEFAULT_PACKAGE_MANAGER", "ProjectConfig"]

"""Optional tooling presets and their installation steps."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from .documents import EslintConfig, PrettierConfig, render_express_app
from .installer import DependencyInstaller
from .manifest import patch_test_script
from .reporter import Reporter
from .workspace import Workspace

LOGGER = logging.getLogger(__name__)


class Extra(str, Enum):
    """Tooling presets a user may opt into.

    Declaration order is the order in which selected extras are installed.
    """

    ESLINT = "eslint"
    PRETTIER = "prettier"
    VITEST = "vitest"
    EXPRESSJS = "expressjs"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ExtraSpec:
    """Packages required by an extra and whether they are development-only."""

    packages: tuple[str, ...]
    dev: bool = True


EXTRA_SPECS: dict[Extra, ExtraSpec] = {
    Extra.ESLINT: ExtraSpec(("eslint", "@typescript-eslint/parser", "@typescript-eslint/eslint-plugin")),
    Extra.PRETTIER: ExtraSpec(("prettier", "eslint-config-prettier")),
    Extra.VITEST: ExtraSpec(("vitest",)),
    Extra.EXPRESSJS: ExtraSpec(("express", "@types/express"), dev=False),
}


@dataclass(frozen=True, slots=True)
class ExtrasSelection:
    """Set of extras chosen by the user.

    Iteration always follows :class:`Extra` declaration order, whatever order the
    tags were picked in.
    """

    tags: frozenset[Extra] = frozenset()

    @classmethod
    def of(cls, values: Iterable[Extra | str]) -> "ExtrasSelection":
        """Build a selection from extras or their tag strings."""

        return cls(frozenset(Extra(value) for value in values))

    def __iter__(self) -> Iterator[Extra]:
        return (extra for extra in Extra if extra in self.tags)

    def __contains__(self, item: object) -> bool:
        return item in self.tags

    def __len__(self) -> int:
        return len(self.tags)

    def __bool__(self) -> bool:
        return bool(self.tags)


def _configure_eslint(workspace: Workspace) -> str:
    workspace.write_json(".eslintrc.json", EslintConfig().to_json())
    return "Eslint config ✅"


def _configure_prettier(workspace: Workspace) -> str:
    workspace.write_json(".prettierrc.json", PrettierConfig().to_json())
    return "Prettier config ✅"


def _configure_vitest(workspace: Workspace) -> str:
    patch_test_script(workspace)
    return "Vitest script updated in package.json ✅"


def _configure_express(workspace: Workspace) -> str:
    workspace.write_text("src/app.ts", render_express_app())
    return "Express app initialised 🚀"


CONFIGURATORS: dict[Extra, Callable[[Workspace], str]] = {
    Extra.ESLINT: _configure_eslint,
    Extra.PRETTIER: _configure_prettier,
    Extra.VITEST: _configure_vitest,
    Extra.EXPRESSJS: _configure_express,
}


def install_extra(
    extra: Extra,
    workspace: Workspace,
    installer: DependencyInstaller,
    reporter: Reporter,
) -> None:
    """Add the packages for ``extra`` and write its configuration artifact."""

    spec = EXTRA_SPECS[extra]
    LOGGER.debug("installing extra %s", extra.value)
    installer.add(workspace, spec.packages, dev=spec.dev)
    reporter.success(CONFIGURATORS[extra](workspace))


def install_extras(
    selection: ExtrasSelection,
    workspace: Workspace,
    installer: DependencyInstaller,
    reporter: Reporter,
) -> list[Extra]:
    """Install every selected extra in the fixed order and return them."""

    installed: list[Extra] = []
    for extra in selection:
        install_extra(extra, workspace, installer, reporter)
        installed.append(extra)
    return installed


__all__ = [
    "CONFIGURATORS",
    "EXTRA_SPECS",
    "Extra",
    "ExtraSpec",
    "ExtrasSelection",
    "install_extra",
    "install_extras",
]

"""Command line interface for tsforge."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import ProjectConfig
from .installer import DependencyInstaller, PackageManagerInstaller
from .prompt import ExtrasSelector, InteractiveExtrasSelector
from .reporter import Reporter
from .scaffold import ProjectScaffolder

DESCRIPTION = "CLI to scaffold a TypeScript project with optional extras"


def _build_log_handler() -> RichHandler:
    # stdout carries the progress lines; log records go to stderr.
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _configure_logging(level: int = logging.WARNING) -> None:
    logger = logging.getLogger("tsforge")
    if logger.handlers:
        return
    logger.addHandler(_build_log_handler())
    logger.setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tsforge", description=DESCRIPTION)
    parser.add_argument("-V", "--version", action="version", version=__version__)
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="Initialise a new TypeScript project")
    init_parser.add_argument("project_name", metavar="projectName", help="Name of the project directory to create")

    return parser


def _handle_init(
    args: argparse.Namespace,
    *,
    installer: DependencyInstaller | None = None,
    selector: ExtrasSelector | None = None,
    reporter: Reporter | None = None,
) -> int:
    config = ProjectConfig.from_name(args.project_name)
    reporter = reporter or Reporter()
    scaffolder = ProjectScaffolder(
        installer=installer or PackageManagerInstaller(config.package_manager),
        selector=selector or InteractiveExtrasSelector(reporter.console),
        reporter=reporter,
    )
    scaffolder.create(config)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    installer: DependencyInstaller | None = None,
    selector: ExtrasSelector | None = None,
    reporter: Reporter | None = None,
) -> int:
    _configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "init":
        return _handle_init(args, installer=installer, selector=selector, reporter=reporter)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

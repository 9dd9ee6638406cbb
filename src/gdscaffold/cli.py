"""Command line interface for gdscaffold."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .build import BuildInvoker
from .config import DEFAULT_ENGINE_VERSION, ScaffoldSettings
from .progress import ProgressLog
from .scaffold import create_project
from .targets import DEFAULT_TARGETS, TargetResolver
from .templates import DEFAULT_TEMPLATE_FILE, TemplateStore


def _load_templates(path: Path | None) -> TemplateStore:
    if path is not None:
        return TemplateStore.from_file(path)
    local = Path.cwd() / DEFAULT_TEMPLATE_FILE
    if local.is_file():
        return TemplateStore.from_file(local)
    return TemplateStore.from_default()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create Godot projects with a Rust GDExtension crate"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every step to stderr"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="create a new project")
    init_parser.add_argument("name", help="Project name, also used as the crate name")
    init_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory in which the project is created (default: current directory)",
    )
    init_parser.add_argument(
        "--engine-version",
        default=DEFAULT_ENGINE_VERSION,
        help="Minimum Godot version written to the .gdextension manifest",
    )
    init_parser.add_argument(
        "--no-reload",
        dest="reloadable",
        action="store_false",
        help="Disable hot reloading of the extension",
    )
    init_parser.add_argument(
        "-t",
        "--target",
        dest="targets",
        metavar="TARGET",
        action="append",
        default=None,
        help="Target to list in the manifest; repeatable (default: all known targets)",
    )
    init_parser.add_argument(
        "--precompile",
        action="store_true",
        help="Compile the Rust library after creating the project (this takes a while)",
    )
    init_parser.add_argument(
        "--templates",
        type=Path,
        default=None,
        help=f"Template document to use (default: ./{DEFAULT_TEMPLATE_FILE} or the bundled one)",
    )

    targets_parser = subparsers.add_parser(
        "targets", help="list known targets and the library path each one resolves to"
    )
    targets_parser.add_argument(
        "name", nargs="?", default="{project_name}", help="Project name used in the paths"
    )

    return parser


def _handle_init(args: argparse.Namespace) -> int:
    store = _load_templates(args.templates)
    settings = ScaffoldSettings()
    if args.directory is not None:
        args.directory.mkdir(parents=True, exist_ok=True)
        settings.base_dir = args.directory
    invoker = BuildInvoker(command=settings.build_command)
    log = ProgressLog()

    error = create_project(
        args.name,
        store.templates,
        args.engine_version,
        args.reloadable,
        args.targets,
        args.precompile,
        log=log,
        settings=settings,
        invoker=invoker,
    )
    if error is not None:
        log.append(f"Error: {error}")
    else:
        invoker.wait_all()

    sys.stdout.write(log.snapshot())
    return 1 if error is not None else 0


def _handle_targets(args: argparse.Namespace) -> int:
    resolver = TargetResolver()
    for target_id, path in resolver.resolve_many(DEFAULT_TARGETS, args.name):
        sys.stdout.write(f"{target_id}\t{path}\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if args.command == "init":
        return _handle_init(args)
    if args.command == "targets":
        return _handle_targets(args)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""Configuration helpers shared by the materializer and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .targets import DEFAULT_TARGETS
from .templates import ProjectTemplates

__all__ = [
    "DEFAULT_BUILD_COMMAND",
    "DEFAULT_ENGINE_VERSION",
    "PROJECT_DESCRIPTOR",
    "ProjectRequest",
    "ScaffoldSettings",
]


DEFAULT_ENGINE_VERSION = "4.2"
DEFAULT_BUILD_COMMAND: tuple[str, ...] = ("cargo", "build")

PROJECT_DESCRIPTOR = '[gd_project]\nversion=4.0\nrun/main_scene="res://main.tscn"\n'


@dataclass(slots=True)
class ScaffoldSettings:
    """Filesystem layout and tooling used when materializing a project.

    Attributes
    ----------
    base_dir:
        Directory in which the project root is created. Defaults to the
        current working directory at the time the settings are built.
    build_command:
        Command run inside the crate's source directory when precompiling.
    descriptor_name:
        File name of the engine project descriptor written at the root.
    manifest_extension:
        Extension of the extension manifest, ``<name>.<manifest_extension>``.
    build_dir, source_dir:
        Crate directory below the root and the source directory below it.
    """

    base_dir: Path = field(default_factory=Path.cwd)
    build_command: tuple[str, ...] = DEFAULT_BUILD_COMMAND
    descriptor_name: str = "project.godot"
    manifest_extension: str = "gdextension"
    build_dir: str = "rust"
    source_dir: str = "src"

    def project_root(self, name: str) -> Path:
        return Path(self.base_dir) / name

    def crate_dir(self, name: str) -> Path:
        return self.project_root(name) / self.build_dir

    def source_path(self, name: str) -> Path:
        return self.crate_dir(name) / self.source_dir

    def lib_source_file(self, name: str) -> Path:
        return self.source_path(name) / "lib.rs"

    def manifest_file(self, name: str) -> Path:
        return self.project_root(name) / f"{name}.{self.manifest_extension}"


@dataclass(slots=True)
class ProjectRequest:
    """Everything needed to materialize one project.

    ``targets`` keeps the caller's order and duplicates; identifiers that do
    not name a known target are carried along and ignored when the manifest
    is rendered.
    """

    name: str
    templates: ProjectTemplates | None
    version: str = DEFAULT_ENGINE_VERSION
    reloadable: bool = True
    targets: tuple[str, ...] = DEFAULT_TARGETS
    precompile: bool = False

    @classmethod
    def create(
        cls,
        name: str,
        templates: ProjectTemplates | None,
        *,
        version: str = DEFAULT_ENGINE_VERSION,
        reloadable: bool = True,
        targets: Iterable[str] | None = None,
        precompile: bool = False,
    ) -> "ProjectRequest":
        """Build a :class:`ProjectRequest` from discrete values."""

        selected = DEFAULT_TARGETS if targets is None else tuple(targets)
        return cls(
            name=name,
            templates=templates,
            version=version,
            reloadable=reloadable,
            targets=selected,
            precompile=precompile,
        )

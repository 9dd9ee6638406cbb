"""Scaffolding for Godot projects backed by a Rust GDExtension crate.

The package renders a small set of templates (crate manifest, ignore file,
library source and ``.gdextension`` manifest) with project specific values,
writes them into a fresh project tree and can compile the crate in the
background while reporting progress into a shared log.
"""

from __future__ import annotations

from .build import BuildInvoker, BuildOutcome, BuildStatus, BuildTask
from .config import ProjectRequest, ScaffoldSettings
from .errors import (
    BuildFailedError,
    BuildLaunchError,
    EmptyNameError,
    FilesystemWriteError,
    ProjectExistsError,
    ScaffoldError,
    TemplatesUnavailableError,
)
from .naming import to_symbol_case
from .progress import ProgressLog
from .render import ContentRenderer
from .scaffold import ProjectMaterializer, create_project, create_project_in_background
from .targets import DEFAULT_TARGETS, LibraryTarget, TargetResolver, resolve_library_path
from .templates import ProjectTemplates, TemplateStore

__all__ = [
    "BuildFailedError",
    "BuildInvoker",
    "BuildLaunchError",
    "BuildOutcome",
    "BuildStatus",
    "BuildTask",
    "ContentRenderer",
    "DEFAULT_TARGETS",
    "EmptyNameError",
    "FilesystemWriteError",
    "LibraryTarget",
    "ProgressLog",
    "ProjectExistsError",
    "ProjectMaterializer",
    "ProjectRequest",
    "ProjectTemplates",
    "ScaffoldError",
    "ScaffoldSettings",
    "TargetResolver",
    "TemplateStore",
    "TemplatesUnavailableError",
    "create_project",
    "create_project_in_background",
    "resolve_library_path",
    "to_symbol_case",
]

__version__ = "0.1.0"

"""Project materialization: turn a request into files on disk."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Iterable

from .build import BuildInvoker, BuildTask
from .config import DEFAULT_ENGINE_VERSION, PROJECT_DESCRIPTOR, ProjectRequest, ScaffoldSettings
from .errors import (
    EmptyNameError,
    FilesystemWriteError,
    ProjectExistsError,
    ScaffoldError,
    TemplatesUnavailableError,
)
from .progress import ProgressLog
from .render import ContentRenderer
from .templates import ProjectTemplates

__all__ = ["ProjectMaterializer", "create_project", "create_project_in_background"]


LOGGER = logging.getLogger(__name__)


def _make_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemWriteError(path, exc) from exc
    LOGGER.debug("created directory %s", path)


def _write_file(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FilesystemWriteError(path, exc) from exc
    LOGGER.debug("wrote %s (%d bytes)", path, len(content))


class ProjectMaterializer:
    """Create a Godot project with a Rust GDExtension crate."""

    def __init__(
        self,
        settings: ScaffoldSettings | None = None,
        invoker: BuildInvoker | None = None,
    ) -> None:
        self.settings = settings or ScaffoldSettings()
        self.invoker = invoker or BuildInvoker(command=self.settings.build_command)
        self.last_build: BuildTask | None = None

    def validate(self, request: ProjectRequest) -> ProjectTemplates:
        """Check the preconditions of ``request`` without touching the disk."""

        if not request.name:
            raise EmptyNameError()
        root = self.settings.project_root(request.name)
        # Point-in-time check; two simultaneous requests for one name can race.
        if root.exists():
            raise ProjectExistsError(root)
        if request.templates is None:
            raise TemplatesUnavailableError()
        return request.templates

    def materialize(self, request: ProjectRequest, log: ProgressLog) -> None:
        """Write the project described by ``request``.

        Raises
        ------
        EmptyNameError, ProjectExistsError, TemplatesUnavailableError
            Before anything is written or logged.
        FilesystemWriteError
            When a step fails. Files written by earlier steps are kept.
        """

        templates = self.validate(request)
        renderer = ContentRenderer(templates)
        settings = self.settings
        name = request.name

        log.append(f"Creating project '{name}'...")

        root = settings.project_root(name)
        _make_directory(root)
        _write_file(root / settings.descriptor_name, PROJECT_DESCRIPTOR)

        crate_dir = settings.crate_dir(name)
        source_dir = settings.source_path(name)
        _make_directory(crate_dir)
        _make_directory(source_dir)

        _write_file(crate_dir / "Cargo.toml", renderer.build_manifest(name))
        _write_file(crate_dir / ".gitignore", renderer.gitignore())
        _write_file(settings.lib_source_file(name), renderer.lib_source(name))
        _write_file(
            settings.manifest_file(name),
            renderer.manifest(name, request.version, request.reloadable, request.targets),
        )

        log.append(f"Created Godot project '{name}' with Rust integration.")

        if request.precompile:
            self.last_build = self.invoker.invoke_async(settings, name, request.targets, log)
        else:
            log.append("Project created successfully.")


def create_project(
    name: str,
    templates: ProjectTemplates | None,
    version: str = DEFAULT_ENGINE_VERSION,
    reloadable: bool = True,
    targets: Iterable[str] | None = None,
    precompile: bool = False,
    *,
    log: ProgressLog,
    settings: ScaffoldSettings | None = None,
    invoker: BuildInvoker | None = None,
) -> str | None:
    """Materialize a project and return ``None`` or an error message.

    When ``precompile`` is set the build keeps running after this function
    returns; its result is only visible in ``log``.
    """

    request = ProjectRequest.create(
        name,
        templates,
        version=version,
        reloadable=reloadable,
        targets=targets,
        precompile=precompile,
    )
    materializer = ProjectMaterializer(settings, invoker)
    try:
        materializer.materialize(request, log)
    except ScaffoldError as exc:
        LOGGER.debug("project %r not created: %s", name, exc)
        return str(exc)
    return None


def create_project_in_background(
    name: str,
    templates: ProjectTemplates | None,
    version: str = DEFAULT_ENGINE_VERSION,
    reloadable: bool = True,
    targets: Iterable[str] | None = None,
    precompile: bool = False,
    *,
    log: ProgressLog,
    settings: ScaffoldSettings | None = None,
    invoker: BuildInvoker | None = None,
) -> threading.Thread:
    """Run :func:`create_project` on its own thread.

    Errors are reported into ``log`` as ``Error: <message>``. The thread is
    returned so callers may join it; nothing requires them to.
    """

    selected = None if targets is None else tuple(targets)

    def work() -> None:
        error = create_project(
            name,
            templates,
            version,
            reloadable,
            selected,
            precompile,
            log=log,
            settings=settings,
            invoker=invoker,
        )
        if error is not None:
            log.append(f"Error: {error}")

    thread = threading.Thread(target=work, name=f"create-{name or 'project'}")
    thread.start()
    return thread

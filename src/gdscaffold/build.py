"""Background compilation of the generated Rust crate."""

from __future__ import annotations

import logging
import subprocess
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol, Sequence

from .config import DEFAULT_BUILD_COMMAND, ScaffoldSettings
from .errors import BuildFailedError, BuildLaunchError
from .progress import ProgressLog
from .targets import TargetResolver

__all__ = [
    "BuildInvoker",
    "BuildOutcome",
    "BuildRunner",
    "BuildStatus",
    "BuildTask",
    "run_build_command",
]


LOGGER = logging.getLogger(__name__)


class BuildStatus(str, Enum):
    NOT_ATTEMPTED = "not-attempted"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(slots=True, frozen=True)
class BuildOutcome:
    """Result of a build task; ``reason`` is a free-text diagnostic."""

    status: BuildStatus
    reason: str | None = None

    @classmethod
    def not_attempted(cls) -> "BuildOutcome":
        return cls(BuildStatus.NOT_ATTEMPTED)

    @classmethod
    def success(cls) -> "BuildOutcome":
        return cls(BuildStatus.SUCCESS)

    @classmethod
    def failure(cls, reason: str) -> "BuildOutcome":
        return cls(BuildStatus.FAILURE, reason)

    @property
    def ok(self) -> bool:
        return self.status is BuildStatus.SUCCESS


class BuildRunner(Protocol):
    """Callable launching ``command`` in ``cwd`` and returning its exit status."""

    def __call__(self, command: Sequence[str], cwd: Path) -> int: ...


def run_build_command(command: Sequence[str], cwd: Path) -> int:
    """Run ``command`` in ``cwd`` and wait for it without a timeout.

    Output is inherited from the parent process rather than captured.
    """

    try:
        completed = subprocess.run(list(command), cwd=cwd, check=False)
    except OSError as exc:
        raise BuildLaunchError(f"Failed to start build process: {exc}") from exc
    return completed.returncode


class BuildTask:
    """Handle on a build running in the background."""

    def __init__(self) -> None:
        self._outcome = BuildOutcome.not_attempted()
        self._finished = threading.Event()

    @property
    def outcome(self) -> BuildOutcome:
        return self._outcome

    @property
    def done(self) -> bool:
        return self._finished.is_set()

    def wait(self, timeout: float | None = None) -> BuildOutcome:
        """Block until the build finishes or ``timeout`` elapses."""

        self._finished.wait(timeout)
        return self._outcome

    def _finish(self, outcome: BuildOutcome) -> None:
        self._outcome = outcome
        self._finished.set()


class BuildInvoker:
    """Compile a materialized project with the external build tool."""

    def __init__(
        self,
        runner: BuildRunner | None = None,
        *,
        command: Sequence[str] = DEFAULT_BUILD_COMMAND,
        resolver: TargetResolver | None = None,
    ) -> None:
        self.runner: BuildRunner = runner or run_build_command
        self.command = tuple(command)
        self.resolver = resolver or TargetResolver()
        self._tasks: list[BuildTask] = []
        self._tasks_lock = threading.Lock()

    def run(
        self,
        settings: ScaffoldSettings,
        project_name: str,
        targets: Sequence[str],
        log: ProgressLog,
    ) -> BuildOutcome:
        """Compile the project synchronously, reporting into ``log``."""

        log.append("Compiling Rust library...")

        lib_source = settings.lib_source_file(project_name)
        if not lib_source.is_file() or not self.resolver.resolve_many(targets, project_name):
            log.append("Rust library file does not exist.")
            return BuildOutcome.failure("library source missing")

        cwd = settings.source_path(project_name)
        LOGGER.debug("running %s in %s", " ".join(self.command), cwd)
        try:
            returncode = self.runner(self.command, cwd)
            if returncode != 0:
                raise BuildFailedError(returncode)
        except BuildLaunchError as exc:
            log.append(str(exc))
            return BuildOutcome.failure(str(exc))
        except OSError as exc:
            message = f"Failed to start build process: {exc}"
            log.append(message)
            return BuildOutcome.failure(message)
        except BuildFailedError as exc:
            LOGGER.debug("build of %s failed: %s", project_name, exc)
            log.append("Failed to compile Rust library.")
            return BuildOutcome.failure(str(exc))

        log.append("Rust library compiled successfully.\nProject created successfully.")
        return BuildOutcome.success()

    def invoke_async(
        self,
        settings: ScaffoldSettings,
        project_name: str,
        targets: Sequence[str],
        log: ProgressLog,
    ) -> BuildTask:
        """Start :meth:`run` on a new thread and return immediately."""

        task_targets = tuple(targets)

        def work() -> None:
            try:
                outcome = self.run(settings, project_name, task_targets, log)
            except Exception as exc:
                LOGGER.exception("build of %s crashed", project_name)
                log.append("Failed to compile Rust library.")
                outcome = BuildOutcome.failure(f"build task crashed: {exc}")
            task._finish(outcome)

        task = BuildTask()
        thread = threading.Thread(target=work, name=f"build-{project_name}")
        with self._tasks_lock:
            self._tasks = [pending for pending in self._tasks if not pending.done]
            self._tasks.append(task)
        thread.start()
        return task

    def wait_all(self, timeout: float | None = None) -> list[BuildOutcome]:
        """Wait for every pending task and forget the ones that finished."""

        with self._tasks_lock:
            tasks = list(self._tasks)
        outcomes = [task.wait(timeout) for task in tasks]
        with self._tasks_lock:
            self._tasks = [pending for pending in self._tasks if not pending.done]
        return outcomes

    @property
    def pending(self) -> int:
        with self._tasks_lock:
            return sum(1 for task in self._tasks if not task.done)

"""Mapping between build targets and the compiled libraries they produce."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

__all__ = [
    "DEFAULT_TARGETS",
    "LibraryTarget",
    "Platform",
    "Profile",
    "TargetResolver",
    "resolve_library_path",
]


DEFAULT_LIBRARY_ROOT = "res://rust/target"


class Profile(str, Enum):
    """Cargo build profiles."""

    DEBUG = "debug"
    RELEASE = "release"


class Platform(Enum):
    """Platform families and their shared library naming convention."""

    LINUX = ("lib", ".so")
    WINDOWS = ("", ".dll")
    MACOS = ("lib", ".dylib")

    @property
    def prefix(self) -> str:
        return self.value[0]

    @property
    def extension(self) -> str:
        return self.value[1]

    def library_name(self, project_name: str) -> str:
        return f"{self.prefix}{project_name}{self.extension}"


class LibraryTarget(str, Enum):
    """Closed set of targets a ``.gdextension`` manifest can reference."""

    LINUX_DEBUG = "linux.debug.x86_64"
    LINUX_RELEASE = "linux.release.x86_64"
    WINDOWS_DEBUG = "windows.debug.x86_64"
    WINDOWS_RELEASE = "windows.release.x86_64"
    MACOS_DEBUG = "macos.debug"
    MACOS_RELEASE = "macos.release"

    @property
    def platform(self) -> Platform:
        return _TARGET_TABLE[self][0]

    @property
    def profile(self) -> Profile:
        return _TARGET_TABLE[self][1]

    @classmethod
    def lookup(cls, target_id: str) -> "LibraryTarget | None":
        """Return the target named ``target_id`` or ``None`` when unknown."""

        try:
            return cls(target_id)
        except ValueError:
            return None


_TARGET_TABLE: dict[LibraryTarget, tuple[Platform, Profile]] = {
    LibraryTarget.LINUX_DEBUG: (Platform.LINUX, Profile.DEBUG),
    LibraryTarget.LINUX_RELEASE: (Platform.LINUX, Profile.RELEASE),
    LibraryTarget.WINDOWS_DEBUG: (Platform.WINDOWS, Profile.DEBUG),
    LibraryTarget.WINDOWS_RELEASE: (Platform.WINDOWS, Profile.RELEASE),
    LibraryTarget.MACOS_DEBUG: (Platform.MACOS, Profile.DEBUG),
    LibraryTarget.MACOS_RELEASE: (Platform.MACOS, Profile.RELEASE),
}

DEFAULT_TARGETS: tuple[str, ...] = tuple(target.value for target in LibraryTarget)


@dataclass(slots=True, frozen=True)
class TargetResolver:
    """Resolve target identifiers into ``res://`` library paths."""

    root: str = DEFAULT_LIBRARY_ROOT

    def resolve(self, target_id: str, project_name: str) -> str | None:
        """Return the library path for ``target_id`` or ``None`` when unknown."""

        target = LibraryTarget.lookup(target_id)
        if target is None:
            return None
        library = target.platform.library_name(project_name)
        return f"{self.root}/{target.profile.value}/{library}"

    def resolve_many(self, targets: Iterable[str], project_name: str) -> list[tuple[str, str]]:
        """Return ``(target_id, path)`` pairs for every resolvable target.

        Input order and duplicates are preserved; unknown identifiers are
        skipped without error.
        """

        resolved: list[tuple[str, str]] = []
        for target_id in targets:
            path = self.resolve(target_id, project_name)
            if path is not None:
                resolved.append((target_id, path))
        return resolved


_DEFAULT_RESOLVER = TargetResolver()


def resolve_library_path(target_id: str, project_name: str) -> str | None:
    """Resolve ``target_id`` with the default ``res://rust/target`` root."""

    return _DEFAULT_RESOLVER.resolve(target_id, project_name)

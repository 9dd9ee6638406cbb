"""Rendering of the project files from the template set."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from .naming import to_symbol_case
from .targets import TargetResolver
from .templates import ProjectTemplates

__all__ = [
    "DEFAULT_RELOAD_MARKER",
    "DEFAULT_VERSION_MARKER",
    "LIBRARIES_HEADER",
    "NAME_PLACEHOLDER",
    "ContentRenderer",
    "replace_tokens",
]


NAME_PLACEHOLDER = "{project_name}"
LIBRARIES_HEADER = "[libraries]"

# Matched against the template's default-valued lines verbatim. A template
# whose defaults differ is left untouched.
DEFAULT_VERSION_MARKER = "compatibility_minimum = 4.2"
DEFAULT_RELOAD_MARKER = "reloadable = true"


def replace_tokens(template: str, replacements: Mapping[str, str]) -> str:
    """Replace every literal occurrence of each key in ``replacements``.

    Keys are applied in mapping order and are not interpreted as patterns.
    """

    rendered = template
    for token, value in replacements.items():
        rendered = rendered.replace(token, value)
    return rendered


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(slots=True)
class ContentRenderer:
    """Produce the contents of each generated file."""

    templates: ProjectTemplates
    resolver: TargetResolver = field(default_factory=TargetResolver)

    def gitignore(self) -> str:
        return self.templates.gitignore

    def lib_source(self, project_name: str) -> str:
        """Render ``src/lib.rs`` with the symbol-cased project name."""

        return replace_tokens(
            self.templates.lib_source, {NAME_PLACEHOLDER: to_symbol_case(project_name)}
        )

    def build_manifest(self, project_name: str) -> str:
        return replace_tokens(self.templates.build_manifest, {NAME_PLACEHOLDER: project_name})

    def libraries_section(self, project_name: str, targets: Iterable[str]) -> str:
        """Return the ``[libraries]`` section for the resolvable ``targets``.

        The header is always emitted, even when no target resolves.
        """

        lines = [LIBRARIES_HEADER]
        lines.extend(
            f'{target_id} = "{path}"'
            for target_id, path in self.resolver.resolve_many(targets, project_name)
        )
        return "\n".join(lines) + "\n"

    def manifest(
        self,
        project_name: str,
        version: str,
        reloadable: bool,
        targets: Iterable[str],
    ) -> str:
        """Render the ``.gdextension`` manifest.

        Parameters
        ----------
        project_name:
            Raw project name, substituted without symbol casing.
        version:
            Minimum engine version written over the default marker.
        reloadable:
            Hot reload flag written over the default marker.
        targets:
            Target identifiers listed in the appended ``[libraries]``
            section, in order.
        """

        content = replace_tokens(
            self.templates.manifest,
            {
                NAME_PLACEHOLDER: project_name,
                DEFAULT_VERSION_MARKER: f"compatibility_minimum = {version}",
                DEFAULT_RELOAD_MARKER: f"reloadable = {_format_bool(reloadable)}",
            },
        )
        return content + self.libraries_section(project_name, targets)

"""Loading and validation of the project template set."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from .errors import TemplatesUnavailableError

__all__ = ["DEFAULT_TEMPLATE_FILE", "ProjectTemplates", "TemplateStore"]


LOGGER = logging.getLogger(__name__)

DEFAULT_TEMPLATE_FILE = "templates.yaml"


class ProjectTemplates(BaseModel):
    """The four template bodies used to materialize a project.

    The document may use either the descriptive field names or the legacy
    keys (``lib_content``, ``gdextension``, ``cargo_toml``). Other keys are
    ignored; all four bodies are required.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    gitignore: str = Field(..., description="Ignore file written into the Rust crate.")
    lib_source: str = Field(
        ...,
        validation_alias=AliasChoices("lib_source", "lib_content"),
        description="Body of ``src/lib.rs``; ``{project_name}`` is symbol-cased.",
    )
    manifest: str = Field(
        ...,
        validation_alias=AliasChoices("manifest", "gdextension"),
        description="Body of the ``.gdextension`` manifest.",
    )
    build_manifest: str = Field(
        ...,
        validation_alias=AliasChoices("build_manifest", "cargo_toml"),
        description="Body of the crate's ``Cargo.toml``.",
    )


class TemplateStore:
    """Hold the template set loaded once at start-up.

    A store whose document could not be read or validated holds no value;
    every materialization attempted with it fails with
    :class:`~gdscaffold.errors.TemplatesUnavailableError`.
    """

    def __init__(self, templates: ProjectTemplates | None = None) -> None:
        self._templates = templates

    @classmethod
    def from_mapping(cls, data: Any) -> "TemplateStore":
        try:
            return cls(ProjectTemplates.model_validate(data))
        except ValidationError as exc:
            LOGGER.warning("failed to load templates: %s", exc)
            return cls()

    @classmethod
    def from_text(cls, text: str) -> "TemplateStore":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            LOGGER.warning("failed to load templates: %s", exc)
            return cls()
        return cls.from_mapping(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "TemplateStore":
        """Load the YAML template document stored at ``path``."""

        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            LOGGER.warning("failed to load templates from %s: %s", path, exc)
            return cls()
        LOGGER.debug("loaded template document %s", path)
        return cls.from_text(text)

    @classmethod
    def from_default(cls) -> "TemplateStore":
        """Load the template document bundled with the package."""

        text = resources.files("gdscaffold").joinpath("data", DEFAULT_TEMPLATE_FILE).read_text(
            encoding="utf-8"
        )
        return cls.from_text(text)

    @property
    def templates(self) -> ProjectTemplates | None:
        return self._templates

    @property
    def available(self) -> bool:
        return self._templates is not None

    def require(self) -> ProjectTemplates:
        """Return the loaded templates or raise when none are available."""

        if self._templates is None:
            raise TemplatesUnavailableError()
        return self._templates

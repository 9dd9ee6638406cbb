from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from gdscaffold.templates import ProjectTemplates  # noqa: E402


TEMPLATE_DATA = {
    "gitignore": "/target\nCargo.lock\n",
    "lib_content": "struct {project_name};\n\nimpl ExtensionLibrary for {project_name} {}\n",
    "gdextension": (
        "[configuration]\n"
        'entry_symbol = "gdext_rust_init"\n'
        "compatibility_minimum = 4.2\n"
        "reloadable = true\n"
    ),
    "cargo_toml": '[package]\nname = "{project_name}"\nversion = "0.1.0"\n',
}


@pytest.fixture()
def template_data() -> dict[str, str]:
    return dict(TEMPLATE_DATA)


@pytest.fixture()
def templates(template_data: dict[str, str]) -> ProjectTemplates:
    return ProjectTemplates.model_validate(template_data)

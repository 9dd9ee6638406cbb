from __future__ import annotations

from pathlib import Path

import pytest

from gdscaffold.cli import main

TEMPLATE_DOCUMENT = """\
gitignore: |
  /target
lib_content: |
  struct {project_name};
gdextension: |
  compatibility_minimum = 4.2
  reloadable = true
cargo_toml: |
  name = "{project_name}"
"""


@pytest.fixture()
def template_file(tmp_path: Path) -> Path:
    path = tmp_path / "custom.yaml"
    path.write_text(TEMPLATE_DOCUMENT, encoding="utf-8")
    return path


def test_cli_init_creates_project(tmp_path: Path, template_file: Path, capsys: pytest.CaptureFixture[str]):
    output = tmp_path / "output"
    exit_code = main(
        [
            "init",
            "my_game",
            "--directory",
            str(output),
            "--templates",
            str(template_file),
            "--engine-version",
            "4.3",
            "--no-reload",
            "-t",
            "linux.release.x86_64",
            "-t",
            "bogus",
        ]
    )
    assert exit_code == 0
    manifest = (output / "my_game" / "my_game.gdextension").read_text(encoding="utf-8")
    assert manifest == (
        "compatibility_minimum = 4.3\n"
        "reloadable = false\n"
        "[libraries]\n"
        'linux.release.x86_64 = "res://rust/target/release/libmy_game.so"\n'
    )
    assert "Project created successfully." in capsys.readouterr().out


def test_cli_init_uses_bundled_templates(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    assert main(["init", "demo"]) == 0
    assert (tmp_path / "demo" / "rust" / "src" / "lib.rs").is_file()


def test_cli_init_prefers_local_template_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / "templates.yaml").write_text(TEMPLATE_DOCUMENT, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main(["init", "demo"]) == 0
    assert (tmp_path / "demo" / "rust" / "src" / "lib.rs").read_text(encoding="utf-8") == "struct Demo;\n"


def test_cli_init_reports_errors(tmp_path: Path, template_file: Path, capsys: pytest.CaptureFixture[str]):
    (tmp_path / "demo").mkdir()
    exit_code = main(["init", "demo", "-d", str(tmp_path), "--templates", str(template_file)])
    assert exit_code == 1
    assert "Error: Project with this name already exists." in capsys.readouterr().out


def test_cli_init_with_unreadable_templates(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["init", "demo", "-d", str(tmp_path), "--templates", str(tmp_path / "missing.yaml")])
    assert exit_code == 1
    assert "Error: Templates are not available." in capsys.readouterr().out
    assert not (tmp_path / "demo").exists()


def test_cli_targets_lists_paths(capsys: pytest.CaptureFixture[str]):
    assert main(["targets", "Foo"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert lines[0] == "linux.debug.x86_64\tres://rust/target/debug/libFoo.so"
    assert lines[3] == "windows.release.x86_64\tres://rust/target/release/Foo.dll"

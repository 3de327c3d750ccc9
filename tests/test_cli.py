"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from ngdocgen import cli
from ngdocgen.cli import _build_parser
from tests._fixtures.project_builder import ProjectBuilder


def test_cli_run_defaults() -> None:
    args = _build_parser().parse_args(["run"])

    assert args.command == "run"
    assert args.project == "tsconfig.json"
    assert args.output == "./docs"
    assert args.verbose is False


def test_cli_run_accepts_short_options_and_verbose_after_command() -> None:
    args = _build_parser().parse_args(["run", "-p", "app/tsconfig.app.json", "-d", "out", "--verbose"])

    assert args.project == "app/tsconfig.app.json"
    assert args.output == "out"
    assert args.verbose is True


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])

    assert excinfo.value.code == 0
    assert "1.0.0" in capsys.readouterr().out


def test_cli_missing_tsconfig_exits_with_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["run", "--project", str(tmp_path / "missing.json"), "--output", str(tmp_path / "docs")])

    assert excinfo.value.code == 1
    assert "tsconfig file not found" in capsys.readouterr().err
    assert not (tmp_path / "docs").exists()


def test_cli_empty_include_exits_with_error(
    project_builder: ProjectBuilder, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = project_builder.tsconfig([])
    output = tmp_path / "docs"

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["run", "--project", str(config), "--output", str(output)])

    assert excinfo.value.code == 1
    assert "No files specified" in capsys.readouterr().err
    assert not output.exists()


def test_cli_reports_generation_failure(
    project_builder: ProjectBuilder, tmp_path: Path, monkeypatch, capsys: pytest.CaptureFixture[str]
) -> None:
    project_builder.write({"src/a.ts": "export interface A {}"})
    config = project_builder.tsconfig(["src/**/*.ts"])

    def fail(self, source_text, template_text):
        raise RuntimeError("backend offline")

    monkeypatch.setattr("ngdocgen.generator.DocumentationGenerator.generate", fail)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["run", "--project", str(config), "--output", str(tmp_path / "docs")])

    assert excinfo.value.code == 1
    assert "ngdocgen run failed: backend offline" in capsys.readouterr().err


def test_cli_successful_run_exits_normally(
    project_builder: ProjectBuilder, tmp_path: Path, monkeypatch, recording_runner
) -> None:
    project_builder.write({"src/a.ts": "export interface A {}"})
    config = project_builder.tsconfig(["src/**/*.ts"])
    monkeypatch.setattr(
        "ngdocgen.llm.model.ModelHandle.from_config",
        classmethod(lambda cls, config: cls(lambda: recording_runner)),
    )

    cli.main(["run", "--project", str(config), "--output", str(tmp_path / "docs")])

    assert (tmp_path / "docs" / "src" / "A.md").read_text(encoding="utf-8") == "generated #1\n"


def test_cli_run_log_file_receives_progress(
    project_builder: ProjectBuilder, tmp_path: Path, monkeypatch, recording_runner
) -> None:
    project_builder.write({"src/a.ts": "export interface A {}"})
    config = project_builder.tsconfig(["src/**/*.ts"])
    log_file = tmp_path / "run.log"
    monkeypatch.setattr(
        "ngdocgen.llm.model.ModelHandle.from_config",
        classmethod(lambda cls, config: cls(lambda: recording_runner)),
    )

    cli.main(
        ["run", "-p", str(config), "-d", str(tmp_path / "docs"), "--log-file", str(log_file)]
    )

    content = log_file.read_text(encoding="utf-8")
    assert "Generating documentation for A (interface)" in content
    assert "Documentation generated for A at" in content


def test_cli_log_file_defaults_to_none() -> None:
    assert _build_parser().parse_args(["run"]).log_file is None

"""Tests for job construction."""

from __future__ import annotations

from pathlib import Path

from ngdocgen.analyzers.typescript import TypeScriptExtractor
from ngdocgen.config import load_project
from ngdocgen.jobs import iter_jobs, jobs_for_unit
from ngdocgen.models import CLASS, CONSTANT, Declaration, SourceUnit
from tests._fixtures.project_builder import ProjectBuilder


def test_jobs_follow_file_then_kind_then_decorator_order(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "src/app/app.component.ts": """
                export const APP_TITLE = 'demo';

                export interface AppState { ready: boolean; }

                @Component({ selector: 'app-root', template: '' })
                @Injectable()
                export class AppComponent {}

                export class PlainHelper {}
            """,
            "src/core/auth.guard.ts": """
                @Injectable()
                export class AuthGuard implements CanActivate {}
            """,
        }
    )
    config = project_builder.tsconfig(["src/**/*.ts"])
    output_root = Path("/out")

    jobs = list(iter_jobs(load_project(config), output_root))

    assert [(job.declaration_name, job.category, job.trigger) for job in jobs] == [
        ("AppComponent", "component", "Component"),
        ("AppComponent", "service", "Injectable"),
        ("AppState", "interface", "interface"),
        ("APP_TITLE", "constant", "constant"),
        ("AuthGuard", "guard", "Injectable"),
    ]
    assert jobs[0].output_directory == output_root / "src" / "app"
    assert jobs[0].output_file_name == "AppComponent.md"
    assert jobs[0].output_path == jobs[1].output_path
    assert jobs[-1].output_path == output_root / "src" / "core" / "AuthGuard.md"


def test_output_directory_mirrors_source_directory() -> None:
    unit = SourceUnit(
        path=Path("/project/src/foo/bar.ts"),
        relative_path=Path("src/foo/bar.ts"),
        declarations=[Declaration(name="Widget", kind=CLASS, raw_text="", decorators=["Component"])],
    )

    (job,) = jobs_for_unit(unit, Path("docs"))

    assert job.output_path == Path("docs/src/foo/Widget.md")


def test_files_at_project_root_write_to_output_root() -> None:
    unit = SourceUnit(
        path=Path("/project/main.ts"),
        relative_path=Path("main.ts"),
        declarations=[Declaration(name="ENV", kind=CONSTANT, raw_text="ENV = {}", exported=True)],
    )

    (job,) = jobs_for_unit(unit, Path("docs"))

    assert job.output_path == Path("docs/ENV.md")


def test_exported_const_with_two_names_yields_two_jobs(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "src/tokens.ts": """
                const LOCAL = 1;
                export const FIRST = 'a', SECOND = 'b';
            """,
        }
    )
    config = project_builder.tsconfig(["src/**/*.ts"])

    jobs = list(iter_jobs(load_project(config), Path("/out")))

    assert [(job.declaration_name, job.raw_text) for job in jobs] == [
        ("FIRST", "FIRST = 'a'"),
        ("SECOND", "SECOND = 'b'"),
    ]


def test_iter_jobs_is_lazy(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "src/a.ts": "export interface A {}",
            "src/b.ts": "export interface B {}",
        }
    )
    config = project_builder.tsconfig(["src/**/*.ts"])
    parsed: list[Path] = []

    class RecordingExtractor:
        def __init__(self) -> None:
            self._inner = TypeScriptExtractor()

        def extract(self, path: Path, relative_path: Path) -> SourceUnit:
            parsed.append(relative_path)
            return self._inner.extract(path, relative_path)

    jobs = iter_jobs(load_project(config), Path("/out"), extractor=RecordingExtractor())

    assert parsed == []
    first = next(jobs)
    assert first.declaration_name == "A"
    assert parsed == [Path("src/a.ts")]


def test_project_under_bracketed_directory_yields_jobs(tmp_path: Path) -> None:
    root = tmp_path / "app[1]"
    (root / "src").mkdir(parents=True)
    (root / "src" / "a.ts").write_text("export interface A {}", encoding="utf-8")
    (root / "tsconfig.json").write_text('{"include": ["src/**/*.ts"]}', encoding="utf-8")

    jobs = list(iter_jobs(load_project(root / "tsconfig.json"), Path("/out")))

    assert [(job.declaration_name, job.category) for job in jobs] == [("A", "interface")]

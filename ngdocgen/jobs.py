"""Turn a project into a lazy stream of documentation jobs."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from .analyzers.classifier import classify
from .analyzers.typescript import TypeScriptExtractor
from .logging import get_logger
from .models import Job, Project, SourceUnit
from .project import relative_to_root, resolve_source_files

logger = get_logger("jobs")


def iter_jobs(
    project: Project,
    output_root: Path,
    *,
    extractor: TypeScriptExtractor | None = None,
) -> Iterator[Job]:
    """Yield jobs file by file, parsing each file only when the previous one is done."""
    extractor = extractor or TypeScriptExtractor()
    for path in resolve_source_files(project):
        unit = extractor.extract(path, relative_to_root(project.root, path))
        yield from jobs_for_unit(unit, output_root)


def jobs_for_unit(unit: SourceUnit, output_root: Path) -> Iterable[Job]:
    output_directory = Path(output_root) / unit.relative_path.parent
    for declaration in unit.declarations:
        if not declaration.name:
            logger.debug("Skipping unnamed %s in %s", declaration.kind, unit.relative_path)
            continue
        for trigger, category in classify(declaration):
            yield Job(
                declaration_name=declaration.name,
                raw_text=declaration.raw_text,
                category=category,
                output_directory=output_directory,
                output_file_name=f"{declaration.name}.md",
                trigger=trigger,
            )


__all__ = ["iter_jobs", "jobs_for_unit"]

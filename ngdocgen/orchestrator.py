"""Pipeline orchestration for documentation runs."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .analyzers.typescript import TypeScriptExtractor
from .config import NgDocGenConfig, load_project, load_settings
from .generator import DocumentationGenerator
from .jobs import iter_jobs
from .llm.model import ModelHandle, TextRunner
from .logging import get_logger
from .models import Job
from .prompting.builder import PromptBuilder
from .prompting.store import TemplateNotFoundError, TemplateStore
from .writer import DocumentWriter


class Orchestrator:
    """Drives a documentation run: jobs are generated and written one at a time."""

    def __init__(
        self,
        extractor: TypeScriptExtractor | None = None,
        template_store: TemplateStore | None = None,
        generator: DocumentationGenerator | None = None,
        writer: DocumentWriter | None = None,
        llm_runner: TextRunner | None = None,
    ) -> None:
        self.extractor = extractor or TypeScriptExtractor()
        self.writer = writer or DocumentWriter()
        self.logger = get_logger("orchestrator")
        self._template_store = template_store
        self._generator = generator
        self._llm_runner = llm_runner

    def run(self, project_path: str | Path, output_path: str | Path) -> List[Path]:
        """Generate documentation for every classified declaration in the project.

        Configuration errors surface as ConfigError before any job runs.
        Generation and write errors propagate and stop the run; documents
        written earlier are left in place. Returns the written paths in order.
        """
        project = load_project(Path(project_path))
        settings = load_settings(project.root)
        output_root = Path(output_path).expanduser().resolve()
        self.logger.info("Starting documentation run for %s", project.config_path)
        self.logger.debug("Include patterns: %s", ", ".join(project.include))

        template_store = self._resolve_template_store(settings)
        generator = self._resolve_generator(settings)

        output_root.mkdir(parents=True, exist_ok=True)

        written: List[Path] = []
        for job in iter_jobs(project, output_root, extractor=self.extractor):
            path = self._process(job, template_store, generator)
            if path is not None:
                written.append(path)
        return written

    def _process(
        self,
        job: Job,
        template_store: TemplateStore,
        generator: DocumentationGenerator,
    ) -> Path | None:
        try:
            template = template_store.resolve(job.category)
        except TemplateNotFoundError as exc:
            self.logger.error("Template not found for %s: %s", job.trigger, exc.path)
            return None

        self.logger.info(
            "Generating documentation for %s (%s)...", job.declaration_name, job.category
        )
        documentation = generator.generate(job.raw_text, template)
        path = self.writer.write(job.output_directory, job.output_file_name, documentation)
        self.logger.info("Documentation generated for %s at %s", job.declaration_name, path)
        return path

    def _resolve_template_store(self, settings: NgDocGenConfig) -> TemplateStore:
        if self._template_store is not None:
            return self._template_store
        return TemplateStore(settings.templates_dir)

    def _resolve_generator(self, settings: NgDocGenConfig) -> DocumentationGenerator:
        if self._generator is not None:
            return self._generator
        if self._llm_runner is not None:
            runner = self._llm_runner
            model = ModelHandle(lambda: runner)
        else:
            model = ModelHandle.from_config(settings.llm)
        self._generator = DocumentationGenerator(model, PromptBuilder(settings.templates_dir))
        return self._generator


__all__ = ["Orchestrator"]

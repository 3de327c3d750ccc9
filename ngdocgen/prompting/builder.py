"""Builds the generation prompt from a template and a declaration's source."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .constants import DEFAULT_TEMPLATES_DIR, PROMPT_TEMPLATE


class PromptBuilder:
    """Renders ``prompt.j2`` with the category template and the source code.

    A ``prompt.j2`` placed in ``templates_dir`` overrides the bundled one.
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def build(self, code: str, template: str) -> str:
        prompt = self._env.get_template(PROMPT_TEMPLATE)
        return prompt.render(template=template, code=code)

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir and Path(templates_dir) != DEFAULT_TEMPLATES_DIR:
            directories.append(str(templates_dir))
        directories.append(str(DEFAULT_TEMPLATES_DIR))
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, keep_trailing_newline=True)


__all__ = ["PromptBuilder"]

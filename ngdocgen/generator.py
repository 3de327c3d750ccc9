"""Generate Markdown documentation for one declaration."""

from __future__ import annotations

from .llm.model import ModelHandle
from .prompting.builder import PromptBuilder


class DocumentationGenerator:
    """Combines a template with source code and asks the model for Markdown."""

    def __init__(self, model: ModelHandle, prompt_builder: PromptBuilder | None = None) -> None:
        self.model = model
        self.prompt_builder = prompt_builder or PromptBuilder()

    def generate(self, source_text: str, template_text: str) -> str:
        prompt = self.prompt_builder.build(source_text, template_text)
        return self.model.generate(prompt)


__all__ = ["DocumentationGenerator"]

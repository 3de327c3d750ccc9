"""Lookup of per-category documentation templates on disk."""

from __future__ import annotations

from pathlib import Path

from .constants import DEFAULT_TEMPLATES_DIR, TEMPLATE_CATEGORIES, TEMPLATE_SUFFIX


class TemplateNotFoundError(LookupError):
    """Raised when no template file exists for a category."""

    def __init__(self, category: str, path: Path) -> None:
        super().__init__(f"Template not found for {category}: {path}")
        self.category = category
        self.path = path


class TemplateStore:
    """Resolves template categories to the text of ``<category>.md``."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR

    def path_for(self, category: str) -> Path:
        return self.templates_dir / f"{category}{TEMPLATE_SUFFIX}"

    def resolve(self, category: str) -> str:
        path = self.path_for(category)
        if category not in TEMPLATE_CATEGORIES or not path.is_file():
            raise TemplateNotFoundError(category, path)
        return path.read_text(encoding="utf-8")


__all__ = ["TemplateNotFoundError", "TemplateStore"]

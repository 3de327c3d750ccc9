"""Documentation templates and prompt assembly."""

from .builder import PromptBuilder
from .constants import TEMPLATE_CATEGORIES
from .store import TemplateNotFoundError, TemplateStore

__all__ = ["PromptBuilder", "TEMPLATE_CATEGORIES", "TemplateNotFoundError", "TemplateStore"]

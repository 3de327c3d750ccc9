"""Declaration extraction and classification."""

from .classifier import classify, classify_class, classify_injectable
from .typescript import TypeScriptExtractor

__all__ = ["TypeScriptExtractor", "classify", "classify_class", "classify_injectable"]

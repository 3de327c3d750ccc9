"""Local text-generation adapters."""

from .model import ModelHandle
from .runner import LLMRunner

__all__ = ["LLMRunner", "ModelHandle"]

"""Process-wide model handle that is created on first use and then reused."""

from __future__ import annotations

import threading
from typing import Callable, Optional, Protocol

from ..config import LLMConfig
from ..logging import get_logger
from .runner import LLMRunner

logger = get_logger("llm.model")


class TextRunner(Protocol):
    def run(self, prompt: str) -> str: ...


class ModelHandle:
    """Initialize-once gate around a text runner.

    The runner is built by ``factory`` the first time ``ensure_ready`` or
    ``generate`` is called and kept for the lifetime of the handle. Calls are
    serialized; the underlying model is not safe for concurrent use.

    A handle lives as long as the Orchestrator that builds it and is reused
    across its runs. The CLI creates one Orchestrator per process, so there
    the model is initialized once per process.
    """

    def __init__(self, factory: Callable[[], TextRunner]) -> None:
        self._factory = factory
        self._runner: Optional[TextRunner] = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: LLMConfig | None) -> "ModelHandle":
        def _factory() -> TextRunner:
            if config is None:
                return LLMRunner()
            kwargs: dict[str, object] = {}
            if config.base_url:
                kwargs["base_url"] = config.base_url
            if config.api_key:
                kwargs["api_key"] = config.api_key
            if config.temperature is not None:
                kwargs["temperature"] = config.temperature
            if config.max_tokens is not None:
                kwargs["max_tokens"] = config.max_tokens
            if config.request_timeout is not None:
                kwargs["request_timeout"] = config.request_timeout
            return LLMRunner(config.model, **kwargs)  # type: ignore[arg-type]

        return cls(_factory)

    @property
    def ready(self) -> bool:
        return self._runner is not None

    def ensure_ready(self) -> None:
        with self._lock:
            self._ensure_runner()

    def generate(self, prompt: str) -> str:
        with self._lock:
            runner = self._ensure_runner()
            return runner.run(prompt)

    def _ensure_runner(self) -> TextRunner:
        if self._runner is None:
            logger.debug("Initializing text generation model")
            self._runner = self._factory()
        return self._runner


__all__ = ["ModelHandle", "TextRunner"]

"""Shared constants for documentation templates."""

from __future__ import annotations

from pathlib import Path

TEMPLATE_CATEGORIES: tuple[str, ...] = (
    "component",
    "directive",
    "service",
    "guard",
    "interceptor",
    "resolver",
    "pipe",
    "module",
    "interface",
    "enum",
    "type",
    "constant",
)

TEMPLATE_SUFFIX = ".md"

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")

PROMPT_TEMPLATE = "prompt.j2"


__all__ = ["DEFAULT_TEMPLATES_DIR", "PROMPT_TEMPLATE", "TEMPLATE_CATEGORIES", "TEMPLATE_SUFFIX"]

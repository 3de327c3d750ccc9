"""Configuration loading for ngdocgen (tsconfig include patterns and .ngdocgen.yml)."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .models import Project

SETTINGS_FILENAME = ".ngdocgen.yml"


class ConfigError(RuntimeError):
    """Raised when a configuration file is missing or cannot be parsed."""


@dataclass
class LLMConfig:
    """Model runtime settings from .ngdocgen.yml."""

    model: Optional[str] = None
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    request_timeout: Optional[float] = None


@dataclass
class NgDocGenConfig:
    """Tool settings that sit beside the project configuration."""

    root: Path
    llm: Optional[LLMConfig] = None
    templates_dir: Optional[Path] = None


def load_project(config_path: Path) -> Project:
    """Read the tsconfig file and return its include patterns.

    Raises ConfigError when the file does not exist, is not valid JSON, or
    declares no include patterns.
    """
    config_file = Path(config_path).expanduser().resolve()
    if not config_file.is_file():
        raise ConfigError(f"tsconfig file not found at {config_file}")

    try:
        text = config_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {config_file}: {exc}") from exc

    try:
        data = json.loads(_strip_jsonc(text)) if text.strip() else {}
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse {config_file.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a JSON object at the root")

    include = data.get("include") or []
    if not isinstance(include, list) or not all(isinstance(item, str) for item in include):
        raise ConfigError(f"'include' in {config_file.name} must be a list of glob patterns")
    if not include:
        raise ConfigError("No files specified in tsconfig include patterns.")

    return Project(config_path=config_file, root=config_file.parent, include=list(include))


def load_settings(root: Path) -> NgDocGenConfig:
    """Load .ngdocgen.yml from ``root``; defaults apply when the file is absent."""
    root = Path(root).resolve()
    settings_file = root / SETTINGS_FILENAME
    if not settings_file.exists():
        return NgDocGenConfig(root=root)

    text = settings_file.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text) if text.strip() else {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {SETTINGS_FILENAME}: {exc}") from exc
    data = data or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{SETTINGS_FILENAME} must contain a mapping at the root")

    llm_data = _as_dict(data.get("llm"))
    llm = None
    if llm_data:
        llm = LLMConfig(
            model=_as_str(llm_data.get("model")),
            base_url=_as_str(llm_data.get("base_url")),
            api_key=_as_str(llm_data.get("api_key")),
            temperature=_as_float(llm_data.get("temperature")),
            max_tokens=_as_int(llm_data.get("max_tokens")),
            request_timeout=_as_float(llm_data.get("request_timeout")),
        )

    templates_dir_str = _as_str(data.get("templates_dir"))
    templates_dir = root / templates_dir_str if templates_dir_str else None

    return NgDocGenConfig(root=root, llm=llm, templates_dir=templates_dir)


def _strip_jsonc(text: str) -> str:
    """Drop // and /* */ comments and trailing commas outside of string literals."""
    out: List[str] = []
    index = 0
    length = len(text)
    in_string = False
    while index < length:
        char = text[index]
        if in_string:
            out.append(char)
            if char == "\\" and index + 1 < length:
                out.append(text[index + 1])
                index += 2
                continue
            if char == '"':
                in_string = False
            index += 1
            continue
        if char == '"':
            in_string = True
            out.append(char)
            index += 1
        elif text.startswith("//", index):
            newline = text.find("\n", index)
            index = length if newline == -1 else newline
        elif text.startswith("/*", index):
            end = text.find("*/", index + 2)
            index = length if end == -1 else end + 2
        elif char == ",":
            lookahead = _skip_trivia(text, index + 1)
            if lookahead < length and text[lookahead] in "}]":
                index += 1
                continue
            out.append(char)
            index += 1
        else:
            out.append(char)
            index += 1
    return "".join(out)


def _skip_trivia(text: str, index: int) -> int:
    length = len(text)
    while index < length:
        if text[index].isspace():
            index += 1
        elif text.startswith("//", index):
            newline = text.find("\n", index)
            index = length if newline == -1 else newline
        elif text.startswith("/*", index):
            end = text.find("*/", index + 2)
            index = length if end == -1 else end + 2
        else:
            break
    return index


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None

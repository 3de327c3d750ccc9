"""Persist generated documents under the output root."""

from __future__ import annotations

from pathlib import Path


class DocumentWriter:
    """Writes Markdown files, creating parent directories and overwriting existing files."""

    def write(self, output_directory: Path, output_file_name: str, text: str) -> Path:
        directory = Path(output_directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / output_file_name
        path.write_text(text, encoding="utf-8", newline="")
        return path


__all__ = ["DocumentWriter"]

"""Core data models shared across ngdocgen components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

CLASS = "class"
INTERFACE = "interface"
ENUM = "enum"
TYPE_ALIAS = "type"
CONSTANT = "constant"

# Traversal order of declaration groups within one source file.
DECLARATION_KINDS: Tuple[str, ...] = (CLASS, INTERFACE, ENUM, TYPE_ALIAS, CONSTANT)


@dataclass
class Project:
    """Project configuration loaded from a tsconfig-style file."""

    config_path: Path
    root: Path
    include: List[str]


@dataclass
class Declaration:
    """A top-level named construct extracted from a source file."""

    name: Optional[str]
    kind: str
    raw_text: str
    decorators: List[str] = field(default_factory=list)
    implements: List[str] = field(default_factory=list)
    exported: bool = False


@dataclass
class SourceUnit:
    """One parsed source file and the declarations it owns."""

    path: Path
    relative_path: Path
    declarations: List[Declaration] = field(default_factory=list)


@dataclass(frozen=True)
class Job:
    """One documentation request: a declaration, its template category and target file."""

    declaration_name: str
    raw_text: str
    category: str
    output_directory: Path
    output_file_name: str
    trigger: str = ""

    @property
    def output_path(self) -> Path:
        return self.output_directory / self.output_file_name

"""Tree-sitter powered extraction of top-level TypeScript declarations."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser

from ..logging import get_logger
from ..models import (
    CLASS,
    CONSTANT,
    DECLARATION_KINDS,
    ENUM,
    INTERFACE,
    TYPE_ALIAS,
    Declaration,
    SourceUnit,
)

_CLASS_NODES = {"class_declaration", "abstract_class_declaration"}
_KIND_BY_NODE = {
    "interface_declaration": INTERFACE,
    "enum_declaration": ENUM,
    "type_alias_declaration": TYPE_ALIAS,
}

logger = get_logger("analyzers.typescript")


class TypeScriptExtractor:
    """Parses TypeScript files and lists their top-level declarations.

    Declarations come back grouped by kind (classes, interfaces, enums, type
    aliases, constants) and in source order within each group.
    """

    def __init__(self) -> None:
        self._parsers: Dict[str, Parser] = {}

    def extract(self, path: Path, relative_path: Path) -> SourceUnit:
        source_bytes = path.read_bytes()
        unit = SourceUnit(path=path, relative_path=relative_path)
        unit.declarations = self.parse_source(source_bytes, tsx=path.suffix == ".tsx")
        logger.debug("Parsed %s: %d declarations", relative_path, len(unit.declarations))
        return unit

    def parse_source(self, source: bytes | str, *, tsx: bool = False) -> List[Declaration]:
        source_bytes = source.encode("utf-8") if isinstance(source, str) else source
        tree = self._get_parser(tsx).parse(source_bytes)
        found = list(self._collect(tree.root_node))
        ordered: List[Declaration] = []
        for kind in DECLARATION_KINDS:
            ordered.extend(decl for decl in found if decl.kind == kind)
        return ordered

    def _get_parser(self, tsx: bool) -> Parser:
        key = "tsx" if tsx else "typescript"
        parser = self._parsers.get(key)
        if parser is None:
            grammar = tsts.language_tsx() if tsx else tsts.language_typescript()
            parser = Parser(Language(grammar))
            self._parsers[key] = parser
        return parser

    def _collect(self, root: Node) -> Iterator[Declaration]:
        for child in root.named_children:
            if child.type == "export_statement":
                declaration = child.child_by_field_name("declaration")
                if declaration is None:
                    continue
                yield from self._declarations(
                    declaration,
                    wrapper=child,
                    exported=True,
                    outer_decorators=_decorators_of(child),
                )
            else:
                yield from self._declarations(child, wrapper=child, exported=False)

    def _declarations(
        self,
        node: Node,
        *,
        wrapper: Node,
        exported: bool,
        outer_decorators: Iterable[str] = (),
    ) -> Iterator[Declaration]:
        if node.type == "ambient_declaration":
            # `declare class`, `declare enum`, `declare const` ...; `declare module` bodies are skipped.
            for inner in node.named_children:
                yield from self._declarations(
                    inner,
                    wrapper=wrapper,
                    exported=exported,
                    outer_decorators=outer_decorators,
                )
        elif node.type in _CLASS_NODES:
            yield Declaration(
                name=_field_text(node, "name"),
                kind=CLASS,
                raw_text=_text(wrapper),
                decorators=[*outer_decorators, *_decorators_of(node)],
                implements=_implemented_contracts(node),
                exported=exported,
            )
        elif node.type in _KIND_BY_NODE:
            yield Declaration(
                name=_field_text(node, "name"),
                kind=_KIND_BY_NODE[node.type],
                raw_text=_text(wrapper),
                exported=exported,
            )
        elif node.type == "lexical_declaration" and _is_const(node):
            for declarator in node.named_children:
                if declarator.type != "variable_declarator":
                    continue
                name_node = declarator.child_by_field_name("name")
                # Destructuring patterns have no single name to document.
                name = _text(name_node) if name_node is not None and name_node.type == "identifier" else None
                yield Declaration(
                    name=name,
                    kind=CONSTANT,
                    raw_text=_text(declarator),
                    exported=exported,
                )


def _text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace") if node.text is not None else ""


def _field_text(node: Node, field_name: str) -> Optional[str]:
    child = node.child_by_field_name(field_name)
    if child is None:
        return None
    return _text(child) or None


def _is_const(node: Node) -> bool:
    kind = node.child_by_field_name("kind")
    if kind is not None:
        return kind.type == "const"
    return bool(node.children) and node.children[0].type == "const"


def _decorators_of(node: Node) -> List[str]:
    names: List[str] = []
    for child in node.children:
        if child.type != "decorator":
            continue
        name = decorator_name(child)
        if name:
            names.append(name)
    return names


def decorator_name(node: Node) -> Optional[str]:
    """Return the rightmost identifier of a decorator expression.

    ``@Component({...})`` gives ``Component`` and ``@core.Injectable()``
    gives ``Injectable``.
    """
    target = next((child for child in node.named_children if child.type != "comment"), None)
    if target is not None and target.type == "call_expression":
        target = target.child_by_field_name("function")
    if target is not None and target.type == "member_expression":
        target = target.child_by_field_name("property")
    if target is None or target.type not in {"identifier", "property_identifier"}:
        return None
    return _text(target)


def _implemented_contracts(node: Node) -> List[str]:
    contracts: List[str] = []
    for heritage in node.named_children:
        if heritage.type != "class_heritage":
            continue
        for clause in heritage.named_children:
            if clause.type != "implements_clause":
                continue
            contracts.extend(
                _text(contract) for contract in clause.named_children if contract.type != "comment"
            )
    return contracts


__all__ = ["TypeScriptExtractor", "decorator_name"]

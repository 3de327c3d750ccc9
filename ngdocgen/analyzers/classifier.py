"""Map declarations to documentation template categories."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from ..models import CLASS, CONSTANT, ENUM, INTERFACE, TYPE_ALIAS, Declaration

INJECTABLE = "Injectable"

DECORATOR_CATEGORIES: Dict[str, str] = {
    "Component": "component",
    "Directive": "directive",
    "Pipe": "pipe",
    "NgModule": "module",
}

KIND_CATEGORIES: Dict[str, str] = {
    INTERFACE: "interface",
    ENUM: "enum",
    TYPE_ALIAS: "type",
    CONSTANT: "constant",
}

GUARD_CONTRACTS = frozenset({"CanActivate", "CanActivateChild", "CanDeactivate", "CanLoad"})
INTERCEPTOR_CONTRACT = "HttpInterceptor"
RESOLVER_PREFIX = "Resolve<"


def classify_injectable(contracts: Sequence[str]) -> str:
    """Pick the category of an ``@Injectable`` class from its implements list.

    Contracts are compared by their written text, in priority order:
    interceptor, guard, resolver, then service as the fallback.
    """
    if INTERCEPTOR_CONTRACT in contracts:
        return "interceptor"
    if any(contract in GUARD_CONTRACTS for contract in contracts):
        return "guard"
    if any(contract.startswith(RESOLVER_PREFIX) for contract in contracts):
        return "resolver"
    return "service"


def classify_decorator(name: str, contracts: Sequence[str]) -> str | None:
    if name == INJECTABLE:
        return classify_injectable(contracts)
    return DECORATOR_CATEGORIES.get(name)


def classify_class(decorators: Sequence[str], contracts: Sequence[str]) -> List[Tuple[str, str]]:
    """Return ``(decorator, category)`` for every recognised decorator, in order.

    Each decorator is classified on its own, so a class carrying both
    ``@Component`` and ``@Injectable`` yields two entries.
    """
    hits: List[Tuple[str, str]] = []
    for decorator in decorators:
        category = classify_decorator(decorator, contracts)
        if category is not None:
            hits.append((decorator, category))
    return hits


def classify(declaration: Declaration) -> List[Tuple[str, str]]:
    """Return ``(trigger, category)`` pairs for one declaration.

    The trigger is the decorator name for classes and the declaration kind
    otherwise. Nameless declarations and non-exported constants yield nothing.
    """
    if not declaration.name:
        return []
    if declaration.kind == CLASS:
        return classify_class(declaration.decorators, declaration.implements)
    if declaration.kind == CONSTANT and not declaration.exported:
        return []
    category = KIND_CATEGORIES.get(declaration.kind)
    if category is None:
        return []
    return [(declaration.kind, category)]


__all__ = [
    "DECORATOR_CATEGORIES",
    "KIND_CATEGORIES",
    "classify",
    "classify_class",
    "classify_decorator",
    "classify_injectable",
]

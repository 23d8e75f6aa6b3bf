"""
Parser-independent syntax tree for TypeScript modules.

Each node kind is one variant of a small sum type. The analysis passes only
care about import declarations and identifiers; every other construct is kept
as a generic ``Branch`` so that nested declarations and identifiers are still
reachable by a walk over the whole tree.
"""
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple, Union

from ImportTally.sca.constants import SPECIFIER_KINDS


@dataclass(frozen=True)
class Identifier:
    name: str
    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class ImportSpecifier:
    kind: str
    local: Identifier
    imported: Optional[Identifier] = None

    def __post_init__(self):
        if self.kind not in SPECIFIER_KINDS:
            raise ValueError(f"Unknown import specifier kind {self.kind}")


@dataclass(frozen=True)
class ImportDeclaration:
    source: str
    specifiers: Tuple[ImportSpecifier, ...] = ()
    type_only: bool = False


@dataclass(frozen=True)
class Branch:
    kind: str
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Module:
    children: Tuple["Node", ...] = field(default_factory=tuple)


Node = Union[Module, Branch, ImportDeclaration, ImportSpecifier, Identifier]


def children_of(node: Node) -> Tuple[Node, ...]:
    if isinstance(node, (Module, Branch)):
        return node.children
    if isinstance(node, ImportDeclaration):
        return node.specifiers
    if isinstance(node, ImportSpecifier):
        if node.imported is None:
            return (node.local,)
        return (node.imported, node.local)
    if isinstance(node, Identifier):
        return ()
    raise TypeError(f"Not a syntax tree node: {type(node).__name__}")


def walk(node: Node, skip_imports: bool = False) -> Iterator[Node]:
    """
    Depth-first, pre-order walk over ``node`` and all of its descendants.

    Uses an explicit stack so deeply nested modules do not hit the recursion
    limit. With ``skip_imports`` the import declarations are still yielded but
    their specifiers are not descended into.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        if skip_imports and isinstance(current, ImportDeclaration):
            continue
        stack.extend(reversed(children_of(current)))

from dataclasses import dataclass
from typing import FrozenSet, List, Optional

from ImportTally.sca.ts_tree import ImportDeclaration, Node, walk


@dataclass(frozen=True)
class ImportBinding:
    name: str
    kind: str
    source: str
    imported: Optional[str] = None
    type_only: bool = False


class ImportBindingCollector:
    """
    Collects the local names bound by import declarations of a module.

    Every declaration in the tree is visited, not only top-level ones, so
    imports inside ``declare module`` blocks are picked up as well. Re-exports
    (``export { x } from 'y'``) are export statements and bind nothing.
    """

    def __init__(self):
        self.bindings: List[ImportBinding] = []

    def collect(self, module: Node) -> List[ImportBinding]:
        self.bindings = []
        for node in walk(module):
            if isinstance(node, ImportDeclaration):
                self.visit_import_declaration(node)
        return self.bindings

    def visit_import_declaration(self, node: ImportDeclaration):
        for specifier in node.specifiers:
            imported = specifier.imported.name if specifier.imported else None
            self.bindings.append(
                ImportBinding(
                    name=specifier.local.name,
                    kind=specifier.kind,
                    source=node.source,
                    imported=imported,
                    type_only=node.type_only,
                )
            )

    @property
    def names(self) -> FrozenSet[str]:
        return frozenset(binding.name for binding in self.bindings)


def collect_import_bindings(module: Node) -> FrozenSet[str]:
    collector = ImportBindingCollector()
    collector.collect(module)
    return collector.names

from collections import defaultdict
from typing import AbstractSet, Dict

from ImportTally.sca.ts_tree import Identifier, Node, walk


def count_usages(
    module: Node, bindings: AbstractSet[str], include_declarations: bool = False
) -> Dict[str, int]:
    """
    Counts identifier occurrences whose name is one of ``bindings``.

    Matching is by spelling only. A parameter or local variable that shadows an
    imported name is counted as a use of the import.

    Args:
        module (Node): The syntax tree of one module.
        bindings (AbstractSet[str]): Names bound by the module's imports.
        include_declarations (bool): Also count the identifiers inside the
            import declarations themselves, so every specifier counts once.

    Returns:
        Dict[str, int]: Occurrences per name. Names never seen are absent.
    """
    counts = defaultdict(int)
    if not bindings:
        return {}

    for node in walk(module, skip_imports=not include_declarations):
        if isinstance(node, Identifier) and node.name in bindings:
            counts[node.name] += 1

    return dict(counts)

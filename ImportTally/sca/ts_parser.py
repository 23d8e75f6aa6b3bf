import os
from enum import Enum
from typing import List, Optional

import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Parser

from ImportTally.exceptions import ParseError, SourceReadError
from ImportTally.sca.constants import (
    FILE_KINDS,
    IDENTIFIER_NODE_TYPES,
    IMPORT_NODE_TYPE,
    QUALIFIED_TYPE_NODE_TYPE,
)
from ImportTally.sca.ts_tree import (
    Branch,
    Identifier,
    ImportDeclaration,
    ImportSpecifier,
    Module,
)

TS_LANGUAGE = Language(tstypescript.language_typescript())
TSX_LANGUAGE = Language(tstypescript.language_tsx())


class FileKind(Enum):
    TS = FILE_KINDS["TS"]
    TSX = FILE_KINDS["TSX"]

    @staticmethod
    def from_path(path: str) -> "FileKind":
        _, extension = os.path.splitext(path)
        if extension.lower() == FileKind.TSX.value:
            return FileKind.TSX
        return FileKind.TS

    @property
    def language(self) -> Language:
        return TSX_LANGUAGE if self is FileKind.TSX else TS_LANGUAGE


def read_source(path: str, encoding: str = "utf-8") -> str:
    try:
        with open(path, "r", encoding=encoding) as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, str(e)) from e


def parse_source(source: str, file_kind: FileKind, path: str = "<string>") -> Module:
    """
    Parses TypeScript or TSX source text into a ``Module`` tree.

    tree-sitter always returns a tree, recovering from bad input with ERROR
    and missing nodes. Any such node makes the whole file a parse failure.

    Args:
        source (str): The source text.
        file_kind (FileKind): Selects the TypeScript or the TSX grammar.
        path (str): Used in error messages only.

    Returns:
        Module: The converted syntax tree.

    Raises:
        ParseError: If the source is not valid syntax for ``file_kind``.
    """
    parser = Parser(file_kind.language)
    tree = parser.parse(source.encode("utf-8"))
    root = tree.root_node
    if root.has_error:
        raise ParseError(path, _describe_error(root))
    return to_module(root)


def parse_file(path: str) -> Module:
    return parse_source(read_source(path), FileKind.from_path(path), path)


def to_module(ts_root) -> Module:
    # frames: (tree-sitter node, iterator over its named children, converted children)
    stack = [(ts_root, iter(_reference_children(ts_root)), [])]
    while True:
        ts_node, pending, collected = stack[-1]
        child = next(pending, None)
        if child is None:
            stack.pop()
            if not stack:
                return Module(tuple(collected))
            # subtrees without identifiers or imports are dropped
            if collected:
                stack[-1][2].append(Branch(ts_node.type, tuple(collected)))
            continue

        converted = _convert_leaf(child)
        if converted is not None:
            collected.append(converted)
        elif child.named_child_count > 0:
            stack.append((child, iter(_reference_children(child)), []))


def _reference_children(ts_node):
    # in X.Foo only X is a reference, Foo is a member name
    if ts_node.type == QUALIFIED_TYPE_NODE_TYPE:
        module = ts_node.child_by_field_name("module")
        return [module] if module is not None else []
    return ts_node.named_children


def _convert_leaf(ts_node):
    if ts_node.type in IDENTIFIER_NODE_TYPES:
        return _identifier(ts_node)
    if ts_node.type == IMPORT_NODE_TYPE and not _is_require_import(ts_node):
        return _import_declaration(ts_node)
    return None


def _text(ts_node) -> str:
    return ts_node.text.decode("utf-8")


def _identifier(ts_node) -> Identifier:
    return Identifier(
        name=_text(ts_node),
        line=ts_node.start_point[0] + 1,
        column=ts_node.start_point[1],
    )


def _is_require_import(ts_node) -> bool:
    # import x = require('y') is an import-equals declaration, not an ES import
    return any(child.type == "import_require_clause" for child in ts_node.named_children)


def _import_source(ts_node) -> str:
    source = ts_node.child_by_field_name("source")
    if source is None:
        for child in ts_node.named_children:
            if child.type == "from_clause":
                source = child.child_by_field_name("source")
    if source is None:
        return ""
    return _text(source).strip("'\"")


def _import_declaration(ts_node) -> ImportDeclaration:
    specifiers: List[ImportSpecifier] = []
    for child in ts_node.named_children:
        if child.type == "import_clause":
            specifiers.extend(_clause_specifiers(child))

    type_only = any(child.type == "type" for child in ts_node.children[1:2])
    return ImportDeclaration(
        source=_import_source(ts_node),
        specifiers=tuple(specifiers),
        type_only=type_only,
    )


def _clause_specifiers(clause) -> List[ImportSpecifier]:
    specifiers = []
    for child in clause.named_children:
        if child.type == "identifier":
            specifiers.append(ImportSpecifier("DEFAULT", _identifier(child)))
        elif child.type == "namespace_import":
            local = _first_identifier(child)
            if local is not None:
                specifiers.append(ImportSpecifier("NAMESPACE", local))
        elif child.type == "named_imports":
            for spec in child.named_children:
                if spec.type == "import_specifier":
                    specifiers.append(_named_specifier(spec))
    return specifiers


def _named_specifier(spec) -> ImportSpecifier:
    name = spec.child_by_field_name("name")
    alias = spec.child_by_field_name("alias")
    if alias is None:
        return ImportSpecifier("NAMED", _identifier(name))

    imported = _identifier(name) if name.type == "identifier" else None
    return ImportSpecifier("NAMED", _identifier(alias), imported)


def _first_identifier(ts_node) -> Optional[Identifier]:
    for child in ts_node.named_children:
        if child.type == "identifier":
            return _identifier(child)
    return None


def _describe_error(root) -> str:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            line, column = node.start_point[0] + 1, node.start_point[1]
            what = f"missing {node.type}" if node.is_missing else "unexpected syntax"
            return f"{what} at line {line}, column {column}"
        stack.extend(reversed(node.children))
    return "syntax error"

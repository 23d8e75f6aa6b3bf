SPECIFIER_KINDS = ("NAMED", "DEFAULT", "NAMESPACE")

FILE_KINDS = {
    "TS": ".ts",
    "TSX": ".tsx",
}

# tree-sitter node types that become Identifier nodes. Property names
# (``obj.prop``, ``{ key: value }``) are not identifier references.
IDENTIFIER_NODE_TYPES = {
    "identifier",
    "type_identifier",
    "shorthand_property_identifier",
    "shorthand_property_identifier_pattern",
}

IMPORT_NODE_TYPE = "import_statement"

# X.Foo in type position; only the module side X is a reference
QUALIFIED_TYPE_NODE_TYPE = "nested_type_identifier"

EXCLUDED_DIRECTORIES = (
    "node_modules",
    ".vscode",
    ".angular",
    ".git",
)

SOURCE_EXTENSIONS = (".ts", ".tsx")

DECLARATION_SUFFIX = ".d.ts"

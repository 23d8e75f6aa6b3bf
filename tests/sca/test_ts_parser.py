import os
import tempfile
import unittest
from ImportTally.exceptions import ParseError, SourceReadError
from ImportTally.sca.ts_parser import FileKind, parse_file, parse_source, read_source
from ImportTally.sca.ts_tree import Branch, Identifier, ImportDeclaration, walk


def declarations(module):
    return [node for node in walk(module) if isinstance(node, ImportDeclaration)]


def identifier_names(module):
    return [node.name for node in walk(module) if isinstance(node, Identifier)]


class TestFileKind(unittest.TestCase):

    def test_from_path(self):
        self.assertEqual(FileKind.from_path("src/app.ts"), FileKind.TS)
        self.assertEqual(FileKind.from_path("src/App.tsx"), FileKind.TSX)
        self.assertEqual(FileKind.from_path("src/App.TSX"), FileKind.TSX)

    def test_languages_differ(self):
        self.assertIsNot(FileKind.TS.language, FileKind.TSX.language)


class TestParseImports(unittest.TestCase):

    def parse_one(self, code):
        found = declarations(parse_source(code, FileKind.TS))
        self.assertEqual(len(found), 1)
        return found[0]

    def test_named_import(self):
        declaration = self.parse_one("import { useState } from 'react';")
        self.assertEqual(declaration.source, "react")
        self.assertEqual(len(declaration.specifiers), 1)
        specifier = declaration.specifiers[0]
        self.assertEqual(specifier.kind, "NAMED")
        self.assertEqual(specifier.local.name, "useState")
        self.assertIsNone(specifier.imported)

    def test_aliased_import(self):
        specifier = self.parse_one("import { a as b } from 'mod';").specifiers[0]
        self.assertEqual(specifier.local.name, "b")
        self.assertEqual(specifier.imported.name, "a")

    def test_default_import(self):
        specifier = self.parse_one('import React from "react";').specifiers[0]
        self.assertEqual(specifier.kind, "DEFAULT")
        self.assertEqual(specifier.local.name, "React")

    def test_namespace_import(self):
        specifier = self.parse_one("import * as ns from 'mod';").specifiers[0]
        self.assertEqual(specifier.kind, "NAMESPACE")
        self.assertEqual(specifier.local.name, "ns")

    def test_default_and_named(self):
        declaration = self.parse_one("import React, { useEffect, useMemo as memo } from 'react';")
        self.assertEqual(
            [(s.kind, s.local.name) for s in declaration.specifiers],
            [("DEFAULT", "React"), ("NAMED", "useEffect"), ("NAMED", "memo")],
        )

    def test_side_effect_import(self):
        declaration = self.parse_one("import './styles.css';")
        self.assertEqual(declaration.source, "./styles.css")
        self.assertEqual(declaration.specifiers, ())

    def test_type_only_import(self):
        declaration = self.parse_one("import type { Props } from './types';")
        self.assertTrue(declaration.type_only)
        self.assertEqual(declaration.specifiers[0].local.name, "Props")

    def test_require_import_is_not_a_declaration(self):
        module = parse_source("import fs = require('fs');\nfs.readFileSync('a');", FileKind.TS)
        self.assertEqual(declarations(module), [])
        self.assertEqual(identifier_names(module).count("fs"), 2)

    def test_reexport_is_not_a_declaration(self):
        module = parse_source("export { x } from 'y';", FileKind.TS)
        self.assertEqual(declarations(module), [])


class TestParseIdentifiers(unittest.TestCase):

    def test_property_names_are_not_identifiers(self):
        module = parse_source("ns.foo();\nconst o = { key: 1 };", FileKind.TS)
        names = identifier_names(module)
        self.assertIn("ns", names)
        self.assertIn("o", names)
        self.assertNotIn("foo", names)
        self.assertNotIn("key", names)

    def test_shorthand_property_is_identifier(self):
        module = parse_source("const o = { value };", FileKind.TS)
        self.assertIn("value", identifier_names(module))

    def test_type_references_are_identifiers(self):
        module = parse_source("let p: Props;", FileKind.TS)
        self.assertIn("Props", identifier_names(module))

    def test_qualified_type_names(self):
        module = parse_source("let p: React.FC;\nlet q: A.B.C;", FileKind.TS)
        names = identifier_names(module)
        self.assertIn("React", names)
        self.assertIn("A", names)
        self.assertNotIn("FC", names)
        self.assertNotIn("B", names)
        self.assertNotIn("C", names)

    def test_identifier_positions(self):
        module = parse_source("\n  foo;", FileKind.TS)
        identifier = [n for n in walk(module) if isinstance(n, Identifier)][0]
        self.assertEqual((identifier.line, identifier.column), (2, 2))

    def test_jsx_element_names(self):
        module = parse_source("const el = <Button onClick={handle} />;", FileKind.TSX)
        names = identifier_names(module)
        self.assertIn("Button", names)
        self.assertIn("handle", names)
        self.assertNotIn("onClick", names)

    def test_decorators(self):
        code = "@Component({ selector: 'app' })\nclass AppComponent {}"
        module = parse_source(code, FileKind.TS)
        self.assertIn("Component", identifier_names(module))

    def test_nodes_without_identifiers_are_dropped(self):
        module = parse_source("1 + 2;", FileKind.TS)
        self.assertEqual(module.children, ())

    def test_branches_keep_tree_sitter_kind(self):
        module = parse_source("foo();", FileKind.TS)
        self.assertIsInstance(module.children[0], Branch)
        self.assertEqual(module.children[0].kind, "expression_statement")


class TestParseFailures(unittest.TestCase):

    def test_syntax_error(self):
        with self.assertRaises(ParseError) as ctx:
            parse_source("import { from 'react';\nconst = ;", FileKind.TS, "broken.ts")
        self.assertEqual(ctx.exception.path, "broken.ts")
        self.assertIn("broken.ts", str(ctx.exception))

    def test_read_missing_file(self):
        with self.assertRaises(SourceReadError):
            read_source("/does/not/exist.ts")

    def test_parse_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "a.tsx")
            with open(path, "w", encoding="utf-8") as f:
                f.write("import React from 'react';\nexport const A = () => <React.Fragment />;\n")
            module = parse_file(path)
        self.assertEqual(len(declarations(module)), 1)


if __name__ == '__main__':
    unittest.main()

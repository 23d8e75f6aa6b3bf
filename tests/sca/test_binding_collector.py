import unittest
from ImportTally.sca.binding_collector import (
    ImportBinding,
    ImportBindingCollector,
    collect_import_bindings,
)
from ImportTally.sca.ts_parser import FileKind, parse_source
from ImportTally.sca.ts_tree import Branch, Identifier, ImportDeclaration, ImportSpecifier, Module


class TestImportBindingCollector(unittest.TestCase):

    def setUp(self):
        self.collector = ImportBindingCollector()

    def test_initialization(self):
        self.assertEqual(self.collector.bindings, [])
        self.assertEqual(self.collector.names, frozenset())

    def test_no_imports(self):
        module = parse_source("const a = 1;\nconsole.log(a);", FileKind.TS)
        self.assertEqual(collect_import_bindings(module), frozenset())

    def test_named_default_namespace(self):
        code = (
            "import React, { useState } from 'react';\n"
            "import * as path from 'path';\n"
            "import { a as b } from 'mod';\n"
        )
        bindings = self.collector.collect(parse_source(code, FileKind.TS))
        self.assertEqual(
            bindings,
            [
                ImportBinding("React", "DEFAULT", "react"),
                ImportBinding("useState", "NAMED", "react"),
                ImportBinding("path", "NAMESPACE", "path"),
                ImportBinding("b", "NAMED", "mod", imported="a"),
            ],
        )
        self.assertEqual(self.collector.names, frozenset({"React", "useState", "path", "b"}))

    def test_alias_binds_local_name_only(self):
        module = parse_source("import { a as b } from 'mod';", FileKind.TS)
        self.assertEqual(collect_import_bindings(module), frozenset({"b"}))

    def test_reexport_binds_nothing(self):
        module = parse_source("export { x } from 'y';\nexport * from 'z';", FileKind.TS)
        self.assertEqual(collect_import_bindings(module), frozenset())

    def test_nested_declarations(self):
        code = (
            "declare module 'plugin' {\n"
            "  import { Base } from 'core';\n"
            "  export class Plugin extends Base {}\n"
            "}\n"
        )
        module = parse_source(code, FileKind.TS)
        self.assertEqual(collect_import_bindings(module), frozenset({"Base"}))

    def test_hand_built_tree(self):
        inner = ImportDeclaration("inner", (ImportSpecifier("NAMESPACE", Identifier("ns")),))
        module = Module((
            ImportDeclaration("outer", (ImportSpecifier("DEFAULT", Identifier("main")),)),
            Branch("statement_block", (inner,)),
        ))
        self.assertEqual(collect_import_bindings(module), frozenset({"main", "ns"}))

    def test_type_only_flag(self):
        code = "import type { Props } from './types';\nimport { render } from 'lib';"
        bindings = self.collector.collect(parse_source(code, FileKind.TS))
        self.assertEqual([(b.name, b.type_only) for b in bindings], [("Props", True), ("render", False)])

    def test_duplicate_names_are_kept_in_list(self):
        code = "import { x } from 'a';\nimport { x } from 'b';"
        bindings = self.collector.collect(parse_source(code, FileKind.TS))
        self.assertEqual([b.name for b in bindings], ["x", "x"])
        self.assertEqual(self.collector.names, frozenset({"x"}))

    def test_collect_resets_previous_results(self):
        self.collector.collect(parse_source("import a from 'a';", FileKind.TS))
        self.collector.collect(parse_source("import b from 'b';", FileKind.TS))
        self.assertEqual(self.collector.names, frozenset({"b"}))


if __name__ == '__main__':
    unittest.main()

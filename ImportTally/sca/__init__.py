"""
This module initializes the SCA (Static Code Analysis) package of the ImportTally library.
"""
from ImportTally.sca.aggregator import FileUsage, UsageTally, aggregate, merge_usages
from ImportTally.sca.binding_collector import (
    ImportBinding,
    ImportBindingCollector,
    collect_import_bindings,
)
from ImportTally.sca.constants import (
    SPECIFIER_KINDS,
    FILE_KINDS,
    EXCLUDED_DIRECTORIES,
    SOURCE_EXTENSIONS,
)
from ImportTally.sca.ts_parser import FileKind, parse_file, parse_source, read_source
from ImportTally.sca.usage_counter import count_usages

__all__ = [
    "FileUsage",
    "UsageTally",
    "aggregate",
    "merge_usages",
    "ImportBinding",
    "ImportBindingCollector",
    "collect_import_bindings",
    "SPECIFIER_KINDS",
    "FILE_KINDS",
    "EXCLUDED_DIRECTORIES",
    "SOURCE_EXTENSIONS",
    "FileKind",
    "parse_file",
    "parse_source",
    "read_source",
    "count_usages",
]

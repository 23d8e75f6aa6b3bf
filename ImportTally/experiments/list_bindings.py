import logging

from ImportTally.analyzer import ImportUsageAnalyzer
from ImportTally.config import Config


def list_bindings(config: Config, logger: logging.Logger) -> int:
    analyzer = ImportUsageAnalyzer(config, logger)
    total = 0
    for path, bindings in analyzer.collect_bindings():
        if not bindings:
            continue
        print(path)
        for binding in bindings:
            imported = f" ({binding.imported})" if binding.imported else ""
            kind = f"type {binding.kind.lower()}" if binding.type_only else binding.kind.lower()
            print(f"    {kind:<15} {binding.name}{imported} <- {binding.source}")
        total += len(bindings)

    logger.info("Import bindings: %s", str(total))
    return total

import logging
import concurrent.futures
from typing import Iterable, Iterator, List, Optional, Tuple
from tqdm import tqdm

from ImportTally.config import Config
from ImportTally.exceptions import ParseError, SourceReadError
from ImportTally.sca.aggregator import FileUsage, UsageTally, aggregate
from ImportTally.sca.binding_collector import ImportBinding, ImportBindingCollector
from ImportTally.sca.ts_parser import FileKind, parse_source, read_source
from ImportTally.sca.usage_counter import count_usages
from ImportTally.util.source_iterator import SourceFileIterator


class ImportUsageAnalyzer:
    """
    Counts how often imported names are referenced across a TypeScript source tree.

    Each file is read, parsed, and reduced to an immutable ``FileUsage``. Files
    that fail to parse are skipped with a warning and contribute nothing. Files
    that cannot be read are skipped the same way unless ``config.strict`` is set,
    in which case the ``SourceReadError`` propagates and ends the run.

    The per-file results are folded into a ``UsageTally`` by the calling
    thread only, also when files are analysed by a worker pool.
    """

    def __init__(self, config: Config = None, logger: logging.Logger = None):
        self.config = config if config is not None else Config()
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def analyze_source(self, source: str, file_kind: FileKind, path: str = "<string>") -> FileUsage:
        module = parse_source(source, file_kind, path)
        collector = ImportBindingCollector()
        collector.collect(module)
        bindings = collector.names
        counts = count_usages(
            module, bindings, include_declarations=self.config.include_declarations
        )
        return FileUsage(path=path, counts=counts, bindings=bindings)

    def analyze_file(self, path: str) -> FileUsage:
        try:
            source = read_source(path)
        except SourceReadError as e:
            if self.config.strict:
                raise
            self.logger.warning("Skipping unreadable file %s", e)
            return FileUsage.skip(path, str(e))

        try:
            usage = self.analyze_source(source, FileKind.from_path(path), path)
        except ParseError as e:
            self.logger.warning("Skipping file that failed to parse: %s", e)
            return FileUsage.skip(path, str(e))

        self.logger.debug("%s: %d bindings, %d used", path, len(usage.bindings), len(usage.counts))
        return usage

    def analyze_files(self, paths: Iterable[str]) -> Iterator[FileUsage]:
        for path in paths:
            yield self.analyze_file(path)

    def analyze_tree(self, root: Optional[str] = None) -> UsageTally:
        files = self.source_files(root)
        if self.config.workers <= 1:
            return aggregate(self.analyze_files(files))

        paths = files.collect()
        tally = UsageTally()
        with concurrent.futures.ThreadPoolExecutor(max_workers=self.config.workers) as executor:
            futures = [executor.submit(self.analyze_file, path) for path in paths]
            for future in tqdm(
                concurrent.futures.as_completed(futures),
                total=len(futures),
                desc="Analyzed files",
                unit="file",
            ):
                tally.add(future.result())
        return tally

    def collect_bindings(self, root: Optional[str] = None) -> Iterator[Tuple[str, List[ImportBinding]]]:
        for path in self.source_files(root):
            try:
                module = parse_source(read_source(path), FileKind.from_path(path), path)
            except SourceReadError as e:
                if self.config.strict:
                    raise
                self.logger.warning("Skipping unreadable file %s", e)
                continue
            except ParseError as e:
                self.logger.warning("Skipping file that failed to parse: %s", e)
                continue
            yield path, ImportBindingCollector().collect(module)

    def source_files(self, root: Optional[str] = None) -> SourceFileIterator:
        return SourceFileIterator(
            root if root is not None else self.config.root,
            excluded_dirs=self.config.excluded_dirs,
            extensions=self.config.extensions,
        )

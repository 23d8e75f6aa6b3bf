import os
from typing import Iterable, List
from tqdm import tqdm

from ImportTally.sca.constants import (
    DECLARATION_SUFFIX,
    EXCLUDED_DIRECTORIES,
    SOURCE_EXTENSIONS,
)


def is_source_file(filename: str, extensions: Iterable[str] = SOURCE_EXTENSIONS) -> bool:
    if filename.endswith(DECLARATION_SUFFIX):
        return False
    return os.path.splitext(filename)[1] in tuple(extensions)


class SourceFileIterator:
    def __init__(
        self,
        root: str,
        excluded_dirs: Iterable[str] = EXCLUDED_DIRECTORIES,
        extensions: Iterable[str] = SOURCE_EXTENSIONS,
        progress: bool = True,
    ):
        self.root = root
        self.excluded_dirs = set(excluded_dirs)
        self.extensions = tuple(extensions)
        self.progress = progress
        self.results: List[str] = []
        self._iterator: tqdm = None

    def __iter__(self):
        self._collect_files()
        self._iterator = tqdm(
            self.results, desc="Analyzed files", unit="file", disable=not self.progress
        )
        for result in self._iterator:
            yield result

    def collect(self) -> List[str]:
        self._collect_files()
        return list(self.results)

    def _collect_files(self):
        if not os.path.exists(self.root):
            raise FileNotFoundError(f"Source root {self.root} does not exist")
        if not os.path.isdir(self.root):
            raise NotADirectoryError(f"Source root {self.root} is not a directory")

        self.results = []
        for dirpath, dirnames, filenames in os.walk(self.root):
            # pruning in place keeps os.walk out of tooling folders
            dirnames[:] = sorted(d for d in dirnames if d not in self.excluded_dirs)
            for filename in sorted(filenames):
                if is_source_file(filename, self.extensions):
                    self.results.append(os.path.join(dirpath, filename))

from dataclasses import dataclass, field
from functools import reduce
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional


@dataclass(frozen=True)
class FileUsage:
    """Usage counts of one analysed file. ``skipped`` holds the reason when it was not analysed."""

    path: str
    counts: Mapping[str, int] = field(default_factory=dict)
    bindings: FrozenSet[str] = frozenset()
    skipped: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))

    @staticmethod
    def skip(path: str, reason: str) -> "FileUsage":
        return FileUsage(path=path, skipped=reason)


def merge_usages(left: Mapping[str, int], right: Mapping[str, int]) -> Dict[str, int]:
    merged = dict(left)
    for name, count in right.items():
        merged[name] = merged.get(name, 0) + count
    return merged


class UsageTally:
    def __init__(self):
        self.counts: Dict[str, int] = {}
        self.files_analyzed = 0
        self.files_skipped = 0

    def add(self, usage: FileUsage) -> "UsageTally":
        if usage.skipped is not None:
            self.files_skipped += 1
            return self

        self.files_analyzed += 1
        for name, count in usage.counts.items():
            self.counts[name] = self.counts.get(name, 0) + count
        return self

    def __len__(self):
        return len(self.counts)

    def __getitem__(self, name: str) -> int:
        return self.counts.get(name, 0)

    def __contains__(self, name: str) -> bool:
        return name in self.counts

    def __repr__(self):
        return (
            f"UsageTally(names={len(self.counts)}, files_analyzed={self.files_analyzed}, "
            f"files_skipped={self.files_skipped})"
        )


def aggregate(usages: Iterable[FileUsage], tally: Optional[UsageTally] = None) -> UsageTally:
    return reduce(UsageTally.add, usages, tally if tally is not None else UsageTally())

import os
from typing import List, Mapping, Optional, Tuple

import pandas as pd
from pydantic import BaseModel, Field

from ImportTally.sca.aggregator import UsageTally

REPORT_HEADER = "===== Import name / usage count (descending) ====="
NAME_WIDTH = 30


class UsageEntry(BaseModel):
    name: str = Field(..., description="Local name bound by an import declaration.")
    count: int = Field(..., ge=0, description="Identifier occurrences across all files.")

    def __str__(self) -> str:
        return f"{self.name:<{NAME_WIDTH}} {self.count}"


class UsageReport(BaseModel):
    """
    This class is used to serialize the final tally
    """

    entries: List[UsageEntry] = Field(default_factory=list)
    files_analyzed: int = Field(0, ge=0)
    files_skipped: int = Field(0, ge=0)

    @staticmethod
    def from_tally(tally: UsageTally, top: Optional[int] = None) -> "UsageReport":
        return UsageReport(
            entries=[UsageEntry(name=name, count=count) for name, count in sort_usages(tally.counts, top)],
            files_analyzed=tally.files_analyzed,
            files_skipped=tally.files_skipped,
        )

    def __str__(self) -> str:
        return format_report([(entry.name, entry.count) for entry in self.entries])


def sort_usages(counts: Mapping[str, int], top: Optional[int] = None) -> List[Tuple[str, int]]:
    """Orders names by count, most used first. Equal counts are ordered by name."""
    entries = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    if top is not None:
        entries = entries[:top]
    return entries


def format_report(entries: List[Tuple[str, int]]) -> str:
    lines = ["", REPORT_HEADER]
    for name, count in entries:
        lines.append(f"{name:<{NAME_WIDTH}} {count}")
    return "\n".join(lines)


def to_dataframe(entries: List[Tuple[str, int]]) -> pd.DataFrame:
    return pd.DataFrame(entries, columns=["name", "count"])


def save_report(report: UsageReport, path: str) -> str:
    """Writes the report as JSON when ``path`` ends in .json, otherwise as CSV."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    if path.endswith(".json"):
        with open(path, "w", encoding="utf-8") as f:
            f.write(report.model_dump_json(indent=2))
    else:
        entries = [(entry.name, entry.count) for entry in report.entries]
        to_dataframe(entries).to_csv(path, index=False)
    return path

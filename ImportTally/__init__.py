from ImportTally.analyzer import ImportUsageAnalyzer
from ImportTally.config import Config, load_config
from ImportTally.exceptions import ImportTallyError, ParseError, SourceReadError
from ImportTally.report import UsageReport, sort_usages, format_report
from ImportTally.util.source_iterator import SourceFileIterator

__all__ = [
    "ImportUsageAnalyzer",
    "Config",
    "load_config",
    "ImportTallyError",
    "ParseError",
    "SourceReadError",
    "UsageReport",
    "sort_usages",
    "format_report",
    "SourceFileIterator",
]

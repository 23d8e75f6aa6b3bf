import logging

from ImportTally.analyzer import ImportUsageAnalyzer
from ImportTally.config import Config
from ImportTally.report import UsageReport, save_report
from ImportTally.util.draw import Draw


def count_usages(config: Config, logger: logging.Logger) -> UsageReport:
    logger.info("Scanning %s", config.root)

    analyzer = ImportUsageAnalyzer(config, logger)
    tally = analyzer.analyze_tree()
    report = UsageReport.from_tally(tally, top=config.top)

    logger.info("Files analyzed: %s", str(tally.files_analyzed))
    logger.info("Files skipped: %s", str(tally.files_skipped))
    print(report)

    if config.output is not None:
        path = save_report(report, config.output)
        logger.info("Report written to %s", path)

    if config.draw:
        path = Draw().usage_bar_chart([(entry.name, entry.count) for entry in report.entries])
        logger.info("Chart written to %s", path)

    return report

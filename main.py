import sys
import time
import matplotlib

from ImportTally.argparser import argparser
from ImportTally.config import apply_args, load_config
from ImportTally.util.logging import setup_logging


def main(argv=None):
    args = argparser.parse_args(argv)
    config = apply_args(load_config(args.config_path), args)
    logger = setup_logging("main", config.verbose)

    start_time = time.time()
    match args.experiment:
        case "count":
            from ImportTally.experiments.count_usages import count_usages

            count_usages(config, logger)
        case "bindings":
            from ImportTally.experiments.list_bindings import list_bindings

            list_bindings(config, logger)
        case _:
            raise ValueError(f"Unknown experiment {args.experiment}")

    end_time = time.time()
    logger.debug(f"Pipeline took {end_time - start_time}s")


if __name__ == "__main__":
    matplotlib.use("agg")

    main(sys.argv[1:])

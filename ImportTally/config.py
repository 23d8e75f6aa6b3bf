import os
from dataclasses import dataclass, fields
from typing import Optional, Tuple

import yaml
from dotenv import load_dotenv

from ImportTally.sca.constants import EXCLUDED_DIRECTORIES, SOURCE_EXTENSIONS

ENV_PREFIX = "IMPORT_TALLY_"


@dataclass
class Config:
    root: str = "."
    excluded_dirs: Tuple[str, ...] = EXCLUDED_DIRECTORIES
    extensions: Tuple[str, ...] = SOURCE_EXTENSIONS
    include_declarations: bool = False
    strict: bool = False
    workers: int = 1
    top: Optional[int] = None
    verbose: bool = False
    output: Optional[str] = None
    draw: bool = False

    def __post_init__(self):
        self.excluded_dirs = tuple(self.excluded_dirs)
        self.extensions = tuple(self.extensions)
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Builds a Config from defaults, an optional YAML file and the environment.

    Environment variables (a ``.env`` file is honoured) take precedence over
    the YAML file: ``IMPORT_TALLY_EXCLUDED_DIRS`` is a comma-separated list of
    directory names, ``IMPORT_TALLY_WORKERS`` the worker count.
    """
    config_dict = {}
    if config_path is not None:
        with open(config_path, "r") as file:
            config_dict = yaml.safe_load(file) or {}

    known = {f.name for f in fields(Config)}
    unknown = set(config_dict) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    load_dotenv()
    excluded = os.getenv(f"{ENV_PREFIX}EXCLUDED_DIRS")
    if excluded:
        config_dict["excluded_dirs"] = [d.strip() for d in excluded.split(",") if d.strip()]
    workers = os.getenv(f"{ENV_PREFIX}WORKERS")
    if workers:
        config_dict["workers"] = int(workers)

    return Config(**config_dict)


def apply_args(config: Config, args) -> Config:
    """Overrides config values with command line arguments that were given."""
    if args.root is not None:
        config.root = args.root
    if args.output is not None:
        config.output = args.output
    if args.top is not None:
        config.top = args.top
    if args.workers is not None:
        config.workers = args.workers
    config.include_declarations = config.include_declarations or args.include_declarations
    config.strict = config.strict or args.strict
    config.verbose = config.verbose or args.verbose
    config.draw = config.draw or args.draw
    config.__post_init__()
    return config

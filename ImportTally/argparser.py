from argparse import ArgumentParser

argparser = ArgumentParser(description="Count how often imported names are referenced in a TypeScript/TSX source tree.")

argparser.add_argument("-r", "--root", type=str, default=None, help="Root directory to scan (default: current directory)")
argparser.add_argument("-e", "--experiment", type=str, default="count", choices=["count", "bindings"], help="Command to run")
argparser.add_argument("-o", "--output", type=str, default=None, help="Write the report to a .csv or .json file")
argparser.add_argument("-d", "--draw", action="store_true", help="Draw a bar chart of the most used imports with matplotlib")
argparser.add_argument("-t", "--top", type=int, default=None, help="Only report the N most used names")
argparser.add_argument("-w", "--workers", type=int, default=None, help="Number of worker threads analysing files")
argparser.add_argument("-s", "--strict", action="store_true", help="Abort on unreadable files instead of skipping them")
argparser.add_argument("-i", "--include_declarations", action="store_true", help="Also count the identifiers inside import declarations")
argparser.add_argument("-cp", "--config_path", type=str, default=None, help="YAML config file.")
argparser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

"""CLI log inspector: list, read, search, and prune stored log files."""

import argparse
import logging
import os
import sys
from datetime import datetime

from file_logger.config import load_config
from file_logger.dateformat import DateFormat
from file_logger.inspector import list_log_files, read_file, search_files
from file_logger.paths import logs_directory, resolve_base_directory
from file_logger.retention import prune
from file_logger.selector import select

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [file-logger] %(levelname)s %(message)s",
    stream=sys.stderr,
)


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def main():
    parser = argparse.ArgumentParser(description="Inspect stored log files")
    parser.add_argument("--config", help="Optional YAML config file")
    parser.add_argument("--log-dir", help="Directory containing log files (default: <base>/logs)")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--list", action="store_true", help="List all log files")
    group.add_argument("--read", metavar="FILENAME", help="Read a specific log file")
    group.add_argument("--search", metavar="TEXT", help="Search text across all log files")
    group.add_argument("--current", action="store_true", help="Show the file today's records go to")
    group.add_argument("--prune", action="store_true", help="Delete files outside the retention window")
    args = parser.parse_args()

    config = load_config(args.config)
    log_dir = args.log_dir or logs_directory(config.base_dir or resolve_base_directory())
    file_date_format = DateFormat(config.file_date_format)

    if args.list:
        entries = list_log_files(log_dir, file_date_format)
        if not entries:
            print("No log files found.")
            return
        for entry in entries:
            print(f"  {entry.name}  ({_format_size(os.path.getsize(entry.path))})")

    elif args.read:
        try:
            sys.stdout.write(read_file(log_dir, args.read))
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    elif args.search:
        results = search_files(log_dir, args.search, file_date_format)
        if not results:
            print(f"No matches found for '{args.search}'.")
            return
        for filename, line_num, line in results:
            print(f"  [{filename}:{line_num}] {line}")

    elif args.current:
        print(select(log_dir, datetime.now(), config.max_size, file_date_format, config.file_extension))

    elif args.prune:
        deleted = prune(log_dir, datetime.now(), config.number_of_days, file_date_format)
        if not deleted:
            print("Nothing to prune.")
            return
        for name in deleted:
            print(f"  deleted {name}")


if __name__ == "__main__":
    main()

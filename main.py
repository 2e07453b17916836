"""Demo: writes random records through a FileLogWriter until interrupted."""

import argparse
import logging
import random
import signal
import sys
import time

from file_logger.config import load_config
from file_logger.levels import Level
from file_logger.writer import FileLogWriter

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [file-logger] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

_running = True


def _signal_handler(sig, _frame):
    global _running
    logger.info("Shutdown signal received (signal %d), stopping...", sig)
    _running = False


LEVELS = [Level.INFO] * 4 + [Level.DEBUG, Level.VERBOSE, Level.WARNING, Level.ERROR]
TAGS = ["auth-api", "order-svc", "payment-gw", "user-svc", None]
MESSAGES = {
    Level.INFO: [
        "Request processed successfully",
        "Health check passed",
        "Cache hit for user session",
    ],
    Level.DEBUG: ["Entering request handler", "Parsed request body"],
    Level.VERBOSE: ["Token validation started", "Headers normalized"],
    Level.WARNING: ["Slow query detected (>500ms)", "Connection pool nearing capacity"],
    Level.ERROR: ["Failed to connect to database", "Timeout waiting for upstream response"],
}


def main():
    parser = argparse.ArgumentParser(description="Write demo records to rotating log files")
    parser.add_argument("--config", help="Optional YAML config file")
    parser.add_argument("--interval", type=float, default=0.05, help="Seconds between records")
    args = parser.parse_args()

    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    config = load_config(args.config)
    logger.info(
        "Config: number_of_days=%s, max_size=%s, file_date_format=%s, extension=%s",
        config.number_of_days, config.max_size, config.file_date_format, config.file_extension,
    )

    entries_written = 0
    with FileLogWriter(config) as writer:
        while _running:
            level = random.choice(LEVELS)
            error = None
            if level is Level.ERROR:
                error = RuntimeError("upstream unavailable")
            writer.log(level, random.choice(MESSAGES[level]), tag=random.choice(TAGS), error=error)
            entries_written += 1
            time.sleep(args.interval)

    logger.info("Shut down cleanly. Total entries written: %d in %s", entries_written, writer.directory)


if __name__ == "__main__":
    main()

# logger_utils.py - log lines, metrics and timing blocks for the CLI and evaluation

import logging
import os
import time
from datetime import datetime

from rich.logging import RichHandler

# Directory where log files are stored
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "smart_word.log")


def configure_logging(level="WARNING"):
    """Route the stdlib loggers (smart_word.*) through Rich."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=False, show_path=False)],
        force=True,
    )


class Log:
    """Metric lines and timed blocks, printed and appended to the log file."""

    @staticmethod
    def metric(tag, value, unit="", path=None):
        """
        Record a metric (timing, counts, hit rates).
        Prints to the console and also logs it to the file.
        Example: [12:45:02] load dictionary: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        print(line)
        _append(path or DEFAULT_LOG_PATH, line)

    @staticmethod
    def time_block(label, path=None):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("load corpus") as t:
                do_some_work()
            t.elapsed  # seconds
        """
        return _Timer(label, path)


def _append(path, line):
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(line + "\n")


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label, path=None):
        self.label = label
        self.path = path
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """On exit, record how long the block took as a metric."""
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 3), "s", path=self.path)

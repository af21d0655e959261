"""
Logging configuration for lyric-sheet.

This module sets up the logging system with multiple outputs:
    - Console: Colored, tqdm-compatible output
    - log_full_<ts>.log: Complete log of all events (DEBUG and above)
    - log_errors_<ts>.log: Only ERROR and CRITICAL level messages
    - dropped_rows_<ts>.log: Spreadsheet rows that were rejected by the mapper

File outputs are only created when a log directory is configured.
Library code never calls setup_logging(): it only obtains loggers through
get_logger(), so embedding applications keep control of handlers.

Usage:
    from lyric_sheet.core.logger import setup_logging, get_logger

    setup_logging(log_dir)  # Call once at startup (CLI does this)
    logger = get_logger(__name__)  # Get logger for each module

    logger.info("Fetching catalog")
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

from tqdm import tqdm


# Log format for file output (detailed with timestamp)
FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BOLD = "\033[1m"


class ColoredConsoleFormatter(logging.Formatter):
    """
    Custom formatter that adds colors to console output.

    Colors:
        - DEBUG: Blue
        - INFO: Green
        - WARNING: Yellow
        - ERROR: Red
        - CRITICAL: Bold Red
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.BLUE,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        colored_levelname = f"{color}{record.levelname}{Colors.RESET}"
        return f"{colored_levelname}: {record.getMessage()}"


class TqdmLoggingHandler(logging.Handler):
    """
    Logging handler that writes to the console without breaking tqdm progress bars.

    Uses tqdm.write(), which prints above any active progress bar.

    Attributes:
        stream: The output stream (defaults to sys.stderr).
    """

    def __init__(self, stream: TextIO = sys.stderr) -> None:
        super().__init__()
        self.stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            tqdm.write(msg, file=self.stream)
        except Exception:
            self.handleError(record)


class DroppedRowHandler(logging.Handler):
    """
    Handler that captures rejected spreadsheet rows for the dropped rows report.

    This handler listens for log records that carry dropped-row information
    and writes them to dropped_rows.log in a simple, human-readable format:

        songs row 14: missing artist
        ["Some Title", "", ""]

        artists row 3: missing name
        ["", "Sub", "https://..."]

    The handler looks for specific extra fields in log records:
        - 'dropped_row_feed': Feed name ("songs" or "artists")
        - 'dropped_row_index': Zero-based data row index (header excluded)
        - 'dropped_row_reason': Why the row was rejected
        - 'dropped_row_cells': The parsed cells of the row

    Only records containing these fields are written to the report.

    Attributes:
        report_path: Path to the dropped_rows.log file.
        report_file: Open file handle (opened by open()).
    """

    def __init__(self, report_path: Path) -> None:
        super().__init__()
        self.report_path = report_path
        self.report_file: TextIO | None = None

    def open(self) -> None:
        """Open the report file for writing (overwrites existing content)."""
        self.report_file = open(self.report_path, "w", encoding="utf-8")

    def emit(self, record: logging.LogRecord) -> None:
        if not hasattr(record, "dropped_row_reason"):
            return

        if self.report_file is None:
            return

        try:
            feed = getattr(record, "dropped_row_feed", "?")
            index = getattr(record, "dropped_row_index", "?")
            reason = getattr(record, "dropped_row_reason", "")
            cells = getattr(record, "dropped_row_cells", [])

            self.report_file.write(f"{feed} row {index}: {reason}\n")
            self.report_file.write(f"{list(cells)!r}\n\n")
            self.report_file.flush()
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        """
        Close the report file handle.

        Safe to call multiple times.
        """
        if self.report_file is not None:
            try:
                self.report_file.close()
            except OSError:
                pass
            self.report_file = None
        super().close()


class ErrorOnlyFilter(logging.Filter):
    """Filter that only allows ERROR and CRITICAL level records."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def setup_logging(log_dir: Path | None = None, verbose: bool = False) -> None:
    """
    Configure the logging system for the application.

    This function should be called ONCE at application startup, after
    the configuration is loaded but before any feed is fetched.

    Args:
        log_dir: Directory where log files will be created. When None,
                 only the console handler is installed.
        verbose: If True, the console shows DEBUG messages as well.

    Behavior:
        1. Configure root logger level to DEBUG and drop existing handlers
        2. Console handler (TqdmLoggingHandler), level INFO or DEBUG
        3. If log_dir is given (created if missing):
           - log_full_{timestamp}.log, level DEBUG
           - log_errors_{timestamp}.log, ERROR+ through ErrorOnlyFilter
           - dropped_rows_{timestamp}.log via DroppedRowHandler

    Thread Safety:
        This function is NOT thread-safe. Call it once from the main thread.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = TqdmLoggingHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(ColoredConsoleFormatter())
    root_logger.addHandler(console_handler)

    # urllib3 is chatty at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    if log_dir is None:
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")

    full_handler = logging.FileHandler(log_dir / f"log_full_{timestamp}.log", mode="w", encoding="utf-8")
    full_handler.setLevel(logging.DEBUG)
    full_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT))
    root_logger.addHandler(full_handler)

    error_handler = logging.FileHandler(log_dir / f"log_errors_{timestamp}.log", mode="w", encoding="utf-8")
    error_handler.setLevel(logging.DEBUG)  # Filter handles the level restriction
    error_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT))
    error_handler.addFilter(ErrorOnlyFilter())
    root_logger.addHandler(error_handler)

    dropped_handler = DroppedRowHandler(log_dir / f"dropped_rows_{timestamp}.log")
    dropped_handler.open()
    root_logger.addHandler(dropped_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The logger name, typically __name__ of the calling module.
              This creates a hierarchy like 'lyric_sheet.catalog.mapper'.

    Note:
        Loggers obtained before setup_logging() is called propagate to
        whatever handlers the host application installed.
    """
    return logging.getLogger(name)


def log_dropped_row(
    logger: logging.Logger,
    feed: str,
    index: int,
    reason: str,
    cells: list[str]
) -> None:
    """
    Log a spreadsheet row that the mapper rejected.

    Logs at DEBUG level (dropping dirty rows is normal operation) and attaches
    the extra fields DroppedRowHandler uses to write dropped_rows.log.

    Example:
        log_dropped_row(logger, "songs", 14, "missing artist", ["Title", "", ""])
    """
    logger.debug(
        f"Dropped {feed} row {index}: {reason}",
        extra={
            "dropped_row_feed": feed,
            "dropped_row_index": index,
            "dropped_row_reason": reason,
            "dropped_row_cells": list(cells),
        }
    )


def format_summary_message(songs: int, artists: int, dropped: int) -> str:
    """Format the end-of-run catalog summary with colors."""
    return (
        f"Catalog: {Colors.GREEN}{songs}{Colors.RESET} songs, "
        f"{Colors.CYAN}{artists}{Colors.RESET} artists "
        f"(dropped rows: {Colors.YELLOW}{dropped}{Colors.RESET})"
    )


def shutdown_logging() -> None:
    """
    Flush and close all handlers on the root logger.

    Typically called in a finally block at application exit.
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        try:
            handler.flush()
            handler.close()
        except OSError:
            pass
        root_logger.removeHandler(handler)

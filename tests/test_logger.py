"""Test logging helpers"""

import logging

from lyric_sheet.core.logger import (
    ColoredConsoleFormatter,
    DroppedRowHandler,
    ErrorOnlyFilter,
    log_dropped_row,
)


def test_dropped_row_handler_writes_report(tmp_path):
    report_path = tmp_path / "dropped_rows.log"
    handler = DroppedRowHandler(report_path)
    handler.open()

    logger = logging.getLogger("lyric_sheet.tests.dropped")
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        log_dropped_row(logger, "songs", 14, "missing artist", ["Title", "", ""])
        logger.info("unrelated message")
    finally:
        logger.removeHandler(handler)
        handler.close()

    assert report_path.read_text(encoding="utf-8") == "songs row 14: missing artist\n['Title', '', '']\n\n"


def test_handler_close_is_idempotent(tmp_path):
    handler = DroppedRowHandler(tmp_path / "dropped_rows.log")
    handler.open()
    handler.close()
    handler.close()
    assert handler.report_file is None


def test_error_only_filter():
    error_only = ErrorOnlyFilter()
    make = lambda level: logging.LogRecord("x", level, __file__, 1, "msg", None, None)
    assert error_only.filter(make(logging.ERROR))
    assert not error_only.filter(make(logging.WARNING))


def test_colored_formatter_keeps_message():
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    assert ColoredConsoleFormatter().format(record).endswith(": careful")

"""
Exception classes for lyric-sheet.

This module defines all custom exceptions used throughout the application.
Each exception carries a human-readable message plus an optional details
dictionary so callers can log context without parsing strings.

Exception Hierarchy:
    LyricSheetError (base)
        ConfigError - Configuration file issues
        FeedError - Spreadsheet feed issues
            FeedTransportError - Network errors, timeouts, non-2xx responses
            FeedUnavailableError - Feed answered with an HTML page instead of CSV

Row-level problems (missing title, empty artist...) are NOT exceptions:
malformed rows are dropped and optionally reported to a collector.
"""


class LyricSheetError(Exception):
    """
    Base exception for all lyric-sheet errors.

    All custom exceptions in this project inherit from this class,
    allowing callers to catch every pipeline failure with a single
    except clause.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context (e.g., feed name, URL).

    Example:
        try:
            catalog = assemble_catalog(client)
        except LyricSheetError as e:
            logger.error(f"Catalog refresh failed: {e.message}")
            if e.details:
                logger.debug(f"Details: {e.details}")
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error description that will be shown to the user.
            details: Optional dictionary containing additional context about the error.
                     Common keys include:
                     - 'feed': Name of the feed involved ("songs" or "artists")
                     - 'url': URL that caused the error
                     - 'original_error': The underlying exception if wrapping another error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the error message for display."""
        return self.message


class ConfigError(LyricSheetError):
    """
    Raised when there's an issue with the configuration file.

    This is a CRITICAL error for the command line tool.

    Common causes:
        - Explicit config path does not exist
        - config.yaml has invalid YAML syntax
        - Invalid field values (e.g., negative timeout, non-integer column index)

    Example:
        raise ConfigError(
            "'network.timeout' must be a positive number",
            details={'field': 'network.timeout', 'value': -1}
        )
    """
    pass


class FeedError(LyricSheetError):
    """
    Base class for failures fetching one of the spreadsheet feeds.

    Attributes:
        feed: Name of the feed that failed ("songs" or "artists").
    """

    def __init__(self, message: str, feed: str, details: dict | None = None) -> None:
        super().__init__(message, details)
        self.feed = feed
        self.details.setdefault("feed", feed)


class FeedTransportError(FeedError):
    """
    Raised when the HTTP request for a feed fails.

    Covers connection errors, timeouts and non-2xx status codes.
    For the song feed this is fatal once the fallback locator has been
    tried; for the artist feed the pipeline degrades to an empty artist map.

    Example:
        raise FeedTransportError(
            "Request for songs feed failed: 503 Server Error",
            feed="songs",
            details={'url': url, 'status_code': 503}
        )
    """
    pass


class FeedUnavailableError(FeedError):
    """
    Raised when a feed answers with an HTML document instead of CSV.

    Published spreadsheets reply with an HTML page when the sheet
    identifier is wrong or the sheet is not published, so an HTML body
    is treated with the same severity as a transport failure.

    Example:
        raise FeedUnavailableError(
            "Songs feed returned HTML. Check the sheet gid or publish settings.",
            feed="songs",
            details={'url': url}
        )
    """
    pass

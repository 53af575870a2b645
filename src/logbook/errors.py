"""Errors raised by LogBook operations."""

from pathlib import Path


class LogbookError(Exception):
    """Base class for every error surfaced to the user."""

    pass


class ConfigError(LogbookError):
    """Raised when the configuration file is unreadable or invalid."""

    pass


class TemplateError(LogbookError):
    """Raised when a configured template cannot be rendered."""

    pass


class SectionNotFound(LogbookError):
    """Raised when a required heading is absent from a document."""

    def __init__(self, label: str, path: Path | str | None = None):
        self.label = label
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f'"{label}" section not found{where}')


class InvalidMonth(LogbookError, ValueError):
    """Raised for a month name that is not a full English month name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"invalid month name: {name}")


class InvalidWeek(LogbookError, ValueError):
    """Raised for a week number the ISO calendar does not have."""

    def __init__(self, week: int, year: int):
        self.week = week
        self.year = year
        super().__init__(f"ISO year {year} has no week {week}")


class SummarizationFailed(LogbookError):
    """Raised by a summarizer when the external AI command fails."""

    pass


class SummaryGenerationFailed(LogbookError):
    """Raised when a missing summary could not be generated."""

    pass


class ManualSummaryReadFailed(LogbookError):
    """Raised when the manual summary could not be read from input."""

    pass


class JournalIOError(LogbookError):
    """Raised when a journal file cannot be read or written."""

    def __init__(self, message: str, path: Path | str):
        self.path = path
        super().__init__(f"{message}: {path}")


class InvalidYear(LogbookError, ValueError):
    """Raised for a year outside the supported calendar range."""

    def __init__(self, year: int):
        self.year = year
        super().__init__(f"year out of range: {year}")

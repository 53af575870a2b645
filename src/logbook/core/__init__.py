"""Functional core - pure document and calendar logic with no I/O."""

from .document import Document, Region, RegionKind, parse, serialize, find_heading
from .summary import extract_summary, inject_summary, has_summary
from .log import append_log_entry
from .periods import Period, PeriodKind, week_range, month_range, year_range, enumerate_daily_paths
from .review import ReviewEntry, review_body_lines, review_skeleton
from .oneline import embed_one_line_notes, format_one_line_notes, past_dates

__all__ = [
    # Document
    "Document",
    "Region",
    "RegionKind",
    "parse",
    "serialize",
    "find_heading",
    # Summary
    "extract_summary",
    "inject_summary",
    "has_summary",
    # Log
    "append_log_entry",
    # Periods
    "Period",
    "PeriodKind",
    "week_range",
    "month_range",
    "year_range",
    "enumerate_daily_paths",
    # Review
    "ReviewEntry",
    "review_body_lines",
    "review_skeleton",
    # One-line notes
    "embed_one_line_notes",
    "format_one_line_notes",
    "past_dates",
]

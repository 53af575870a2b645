"""Review document assembly - pure logic, no I/O."""

from dataclasses import dataclass
from datetime import date
from itertools import groupby

from .document import Document
from .periods import MONTH_NAMES, Period, PeriodKind

REVIEW_PROMPTS = {
    PeriodKind.WEEK: (
        "Write a summary of the weekly review using the same Language. "
        "Use 1st person and a simple language. Use 200 characters or less."
    ),
    PeriodKind.MONTH: (
        "Write a summary of the monthly review. "
        "Use 1st person and a simple language. Use 200 characters or less."
    ),
    PeriodKind.YEAR: (
        "Write a summary of the yearly review. "
        "Use 1st person and a simple language. Use 200 characters or less."
    ),
}


@dataclass
class ReviewEntry:
    """One daily document retained for a review."""

    day: date
    label: str
    summary: str


def review_title(period: Period) -> str:
    match period.kind:
        case PeriodKind.WEEK:
            return f"# Weekly Review - Week {period.identifier}, {period.year}"
        case PeriodKind.MONTH:
            return f"# Monthly Review - {period.identifier} {period.year}"
        case PeriodKind.YEAR:
            return f"# Yearly Review - {period.year}"


def review_file_name(period: Period) -> str:
    match period.kind:
        case PeriodKind.WEEK:
            return f"review_week_{period.year}_{period.identifier}.md"
        case PeriodKind.MONTH:
            return f"review_month_{period.identifier}_{period.year}.md"
        case PeriodKind.YEAR:
            return f"review_year_{period.year}.md"


def review_skeleton(period: Period) -> Document:
    """A review document holding only its title heading."""
    return Document((review_title(period),))


def no_entries_sentinel(period: Period) -> str:
    return f"No journal entries found for this {period.kind.value}."


def summaries_text(entries: list[ReviewEntry]) -> str:
    """Daily summaries as "label: summary" lines, the input for an AI review summary."""
    return "\n".join(f"{entry.label}: {entry.summary}" for entry in entries if entry.summary)


def _daily_summary_lines(entries: list[ReviewEntry]) -> list[str]:
    lines = ["## Daily Summaries", ""]
    for entry in entries:
        lines.append(f"### {entry.label}")
        if entry.summary:
            lines.append(entry.summary)
        lines.append("")
    return lines


def _monthly_summary_lines(entries: list[ReviewEntry]) -> list[str]:
    lines = ["## Monthly Summaries", ""]
    ordered = sorted(entries, key=lambda entry: entry.day)
    for month, month_entries in groupby(ordered, key=lambda entry: entry.day.month):
        lines.append(f"### {MONTH_NAMES[month - 1]}")
        lines.append("")
        for entry in month_entries:
            lines.append(f"- **{entry.label}**: {entry.summary}")
        lines.append("")
    return lines


def review_body_lines(period: Period, entries: list[ReviewEntry]) -> list[str]:
    """Lines that follow the title and summary of a review."""
    if not entries:
        return [no_entries_sentinel(period)]
    if period.kind is PeriodKind.YEAR:
        return _monthly_summary_lines(entries)
    return _daily_summary_lines(sorted(entries, key=lambda entry: entry.day))


def append_review_body(document: Document, period: Period, entries: list[ReviewEntry]) -> Document:
    """Append the daily or monthly summaries (or the no-entries line) to a review."""
    lines = list(document.lines)
    if lines and lines[-1].strip():
        lines.append("")
    lines.extend(review_body_lines(period, entries))
    return Document(tuple(lines))

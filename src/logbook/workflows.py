"""Shared workflow layer between the CLI and the journal files.

Each operation reads whole documents through the journal store, applies the
pure core logic, and rewrites the result. Nothing is cached between calls.
"""

import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import TextIO

import click

from .adapters.ai_command import CommandSummarizer
from .adapters.file_journal import FileJournalStore
from .config import Config
from .core.document import LOG_LABEL, Document, parse
from .core.log import append_log_entry
from .core.oneline import MISSING, embed_one_line_notes, format_one_line_notes, past_dates
from .core.periods import (
    Period,
    PeriodKind,
    enumerate_daily_paths,
    month_range,
    week_range,
    year_range,
)
from .core.review import (
    REVIEW_PROMPTS,
    ReviewEntry,
    append_review_body,
    review_file_name,
    review_skeleton,
    summaries_text,
)
from .core.summary import content_for_summary, extract_summary, has_summary, inject_summary, section_content
from .errors import (
    JournalIOError,
    ManualSummaryReadFailed,
    SectionNotFound,
    SummarizationFailed,
    SummaryGenerationFailed,
)
from .ports import JournalStore, Summarizer
from .templating import render_daily_template, render_log_entry, render_one_line_note

logger = logging.getLogger(__name__)

MANUAL_SUMMARY_PROMPT = "No AI agent configured. Please enter a manual summary (or leave blank to skip): "


def get_journal(config: Config) -> FileJournalStore:
    """Resolve the journal store from config."""
    return FileJournalStore(config.journal_path, config.daily_file_name)


def build_summarizer(config: Config) -> Summarizer | None:
    """The AI summarizer when enabled, None for manual summaries."""
    if not config.ai_enabled:
        return None
    return CommandSummarizer(config.ai_command)


def _read_existing(store: JournalStore, path: Path) -> Document:
    document = store.read_document(path)
    if document.is_empty:
        raise JournalIOError("journal file does not exist or is empty", path)
    return document


# ============== Summaries ==============


def read_manual_summary(manual_source: TextIO) -> str:
    """Ask for a summary and read one line. Blank means skip."""
    click.echo(MANUAL_SUMMARY_PROMPT, nl=False, err=True)
    try:
        line = manual_source.readline()
    except (OSError, ValueError) as e:
        raise ManualSummaryReadFailed(f"failed to read manual summary: {e}") from e
    if not line:
        raise ManualSummaryReadFailed("failed to read manual summary: end of input")
    return line.strip()


def produce_summary(
    text: str,
    prompt: str,
    summarizer: Summarizer | None,
    manual_source: TextIO | None = None,
) -> str | None:
    """Generate a summary with the AI, or read one from the user.

    Returns None when there is nothing to write.
    """
    if summarizer is None:
        summary = read_manual_summary(manual_source or sys.stdin)
        if not summary:
            click.secho("Manual summary skipped.", fg="yellow", err=True)
            return None
        return summary

    if not text:
        logger.info("Nothing to summarize, skipping AI summary")
        return None
    try:
        return summarizer.generate_summary(text, prompt).strip() or None
    except SummarizationFailed as e:
        raise SummaryGenerationFailed(f"failed to generate summary with AI: {e}") from e


def generate_summary_if_missing(
    store: JournalStore,
    path: Path,
    prompt: str,
    summarizer: Summarizer | None = None,
    manual_source: TextIO | None = None,
    text: str | None = None,
) -> str | None:
    """
    Insert a summary into a document that has none.

    A document that already has a summary is left untouched, so running this
    repeatedly never duplicates the paragraph.

    Args:
        store: Journal store holding the document
        path: Document path
        prompt: Instructions for the AI summarizer
        summarizer: AI summarizer, or None to ask for a manual summary
        manual_source: Line stream for manual summaries (defaults to stdin)
        text: Text to summarize (defaults to the document body)

    Returns:
        The inserted summary, or None if nothing was inserted
    """
    document = _read_existing(store, path)
    if has_summary(document):
        logger.debug(f"{path} already has a summary")
        return None

    if text is None:
        text = content_for_summary(document)

    summary = produce_summary(text, prompt, summarizer, manual_source)
    if summary is None:
        return None

    store.write_document(path, inject_summary(document, summary))
    logger.info(f"Summary added to {path}")
    return summary


def summarize_daily(
    config: Config,
    target: date,
    summarizer: Summarizer | None = None,
    manual_source: TextIO | None = None,
) -> str | None:
    """Generate the summary of a daily note if it is missing."""
    store = get_journal(config)
    path = store.path_for_date(target)
    return generate_summary_if_missing(store, path, config.ai_prompt, summarizer, manual_source)


# ============== Daily notes ==============


def create_or_get_daily_document(config: Config, target: date) -> tuple[Path, bool]:
    """Create the daily note for a date from the template unless it exists.

    Returns the path and whether the file was created.
    """
    config.validate()
    store = get_journal(config)
    store.ensure_directory()

    path = store.path_for_date(target)
    if store.exists(path):
        return path, False

    content = render_daily_template(config.daily_template, target)
    store.write_document(path, parse(content))
    logger.info(f"Created daily journal file {path}")
    return path, True


def append_entry(config: Config, path: Path, text: str, timestamp: datetime) -> None:
    """Render a log entry and append it to the LOG section of a note."""
    store = get_journal(config)
    document = _read_existing(store, path)
    entry_line = render_log_entry(config.log_entry_template, timestamp, text)

    try:
        updated = append_log_entry(document, entry_line)
    except SectionNotFound as e:
        raise SectionNotFound(e.label, path) from None

    store.write_document(path, updated)


def past_summary(
    store: JournalStore,
    config: Config,
    day: date,
    summarizer: Summarizer | None = None,
) -> str:
    """Summary of a past daily note for the one-line notes.

    A note without a summary is summarized from its LOG section when the AI
    is available, and the summary is saved back into that note.
    """
    path = store.path_for_date(day)
    document = store.read_document(path)
    if document.is_empty:
        return MISSING

    summary = extract_summary(document)
    if summary:
        return summary
    if summarizer is None:
        return MISSING

    log_text = section_content(document, LOG_LABEL)
    if not log_text:
        return MISSING

    try:
        summary = summarizer.generate_summary(log_text, config.ai_prompt).strip()
    except SummarizationFailed as e:
        logger.warning(f"Could not summarize {path}: {e}")
        return MISSING
    if not summary:
        return MISSING

    store.write_document(path, inject_summary(document, summary))
    logger.info(f"Summary added to {path}")
    return summary


def finalize_daily_document(
    config: Config,
    path: Path,
    target: date,
    summarizer: Summarizer | None = None,
) -> dict[date, str]:
    """Embed the one-line notes of past dates into a daily note.

    Returns the embedded summaries by date.
    """
    store = get_journal(config)
    notes = {day: past_summary(store, config, day, summarizer) for day in past_dates(target)}
    note_lines = format_one_line_notes(
        notes, lambda day, summary: render_one_line_note(config.one_line_template, day, summary)
    )

    document = _read_existing(store, path)
    try:
        updated = embed_one_line_notes(document, note_lines)
    except SectionNotFound as e:
        raise SectionNotFound(e.label, path) from None

    store.write_document(path, updated)
    return notes


# ============== Reviews ==============


def resolve_period(kind: PeriodKind | str, identifier: int | str | None, year: int) -> Period:
    """Date range of a review period."""
    match PeriodKind(kind):
        case PeriodKind.WEEK:
            return week_range(int(identifier), year)
        case PeriodKind.MONTH:
            return month_range(str(identifier), year)
        case PeriodKind.YEAR:
            return year_range(year)


def collect_review_entries(store: JournalStore, period: Period) -> list[ReviewEntry]:
    """Summaries of the daily notes that exist within a period, in date order."""
    entries = []
    for day, name in enumerate_daily_paths(period, store.file_name_for):
        path = store.path_for(name)
        if not store.exists(path):
            continue
        summary = extract_summary(store.read_document(path))
        entries.append(ReviewEntry(day=day, label=Path(name).stem, summary=summary))
    return entries


def run_review(
    config: Config,
    kind: PeriodKind | str,
    identifier: int | str | None,
    year: int,
    summarizer: Summarizer | None = None,
    manual_source: TextIO | None = None,
) -> Path:
    """
    Generate a weekly, monthly or yearly review file.

    The review gets its own summary (AI or manual), followed by the summaries
    of every daily note in the period.

    Returns:
        Path of the written review file
    """
    config.validate()
    period = resolve_period(kind, identifier, year)
    store = get_journal(config)
    store.ensure_directory()

    entries = collect_review_entries(store, period)
    logger.info(f"Found {len(entries)} journal files between {period.start} and {period.end}")

    path = store.path_for(review_file_name(period))
    store.write_document(path, review_skeleton(period))
    generate_summary_if_missing(
        store,
        path,
        REVIEW_PROMPTS[period.kind],
        summarizer,
        manual_source,
        text=summaries_text(entries),
    )

    document = store.read_document(path)
    store.write_document(path, append_review_body(document, period, entries))
    return path

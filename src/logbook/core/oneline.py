"""One-line notes: summaries of the same day in the past - pure logic, no I/O."""

from datetime import date, timedelta
from typing import Callable

from ..errors import SectionNotFound
from .document import ONE_LINE_LABEL, Document, RegionKind, is_heading
from .periods import shift_months

MISSING = "missing"
BULLET = "* "


def past_dates(target: date) -> list[date]:
    """One week, one month, six months and one to three years before target."""
    dates = [
        target - timedelta(days=7),
        shift_months(target, -1),
        shift_months(target, -6),
    ]
    dates.extend(shift_months(target, -12 * years) for years in range(1, 4))
    return dates


def format_one_line_notes(notes: dict[date, str], render: Callable[[date, str], str]) -> list[str]:
    """Bullet lines for the notes, most recent date first."""
    return [BULLET + render(day, notes[day]) for day in sorted(notes, reverse=True)]


def embed_one_line_notes(document: Document, note_lines: list[str]) -> Document:
    """
    Replace the content of the One-line note section with note_lines.

    The section runs from its heading to the next heading of any level.
    Embedding again replaces the previous notes instead of duplicating them.
    """
    region = document.region(RegionKind.SECTION, ONE_LINE_LABEL)
    if region is None:
        raise SectionNotFound(ONE_LINE_LABEL)

    end = region.start + 1
    while end < len(document.lines) and not is_heading(document.lines[end]):
        end += 1

    return document.splice(region.start + 1, end, note_lines + [""])

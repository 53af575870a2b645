"""LOG section mutation - pure logic, no I/O."""

from ..errors import SectionNotFound
from .document import LOG_LABEL, Document, RegionKind, is_heading


def log_insertion_index(document: Document) -> int:
    """
    Line index where the next LOG entry goes.

    Past the heading, past any blank lines after it, then past the run of
    existing entries. The scan never leaves the LOG section, and a LOG
    section with no entries gets its first one directly under the heading.
    Entries accumulate in arrival order, never sorted.
    """
    region = document.region(RegionKind.SECTION, LOG_LABEL)
    if region is None:
        raise SectionNotFound(LOG_LABEL)

    lines = document.lines
    index = region.start + 1
    while index < region.end and not lines[index].strip():
        index += 1
    if index < len(lines) and is_heading(lines[index]):
        return region.start + 1
    while index < region.end and lines[index].strip() and not is_heading(lines[index]):
        index += 1
    return index


def append_log_entry(document: Document, entry_line: str) -> Document:
    """Insert an already-rendered entry line at the end of the LOG entries."""
    index = log_insertion_index(document)
    return document.splice(index, index, [entry_line])

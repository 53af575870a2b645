"""Pure document model for journal markdown files - no I/O dependencies.

A document is a flat sequence of lines. Headings act as markers that delimit
regions; content between two markers belongs to the first one.
"""

from dataclasses import dataclass
from enum import Enum
from functools import cached_property

HEADING_MARKER = "#"
COMMENT_PREFIX = "<!--"
LOG_LABEL = "LOG"
ONE_LINE_LABEL = "One-line note"
SECTION_LABELS = (LOG_LABEL, ONE_LINE_LABEL)


class RegionKind(Enum):
    """Kinds of spans recognized in a document."""

    TITLE = "title"
    COMMENT = "comment"
    SUMMARY = "summary"
    SECTION = "section"


@dataclass(frozen=True)
class Region:
    """A span of lines, end exclusive."""

    kind: RegionKind
    start: int
    end: int
    label: str = ""

    def __len__(self) -> int:
        return self.end - self.start


def is_comment(line: str) -> bool:
    return line.strip().startswith(COMMENT_PREFIX)


def is_heading(line: str, label: str | None = None, marker: str = HEADING_MARKER) -> bool:
    """Check whether a line is a heading, optionally one for a given label.

    Label matching is a prefix match, so "# LOG (draft)" is a LOG heading.
    """
    stripped = line.strip()
    if label is None:
        return stripped.startswith(marker)
    return stripped.startswith(f"{marker} {label}")


def is_section_heading(line: str) -> bool:
    return any(is_heading(line, label) for label in SECTION_LABELS)


@dataclass(frozen=True)
class Document:
    """An immutable snapshot of one markdown file's lines."""

    lines: tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> "Document":
        """The zero-content document used for files that do not exist."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def title(self) -> str | None:
        return self.lines[0] if self.lines else None

    @cached_property
    def regions(self) -> list[Region]:
        """Regions of this document, computed once, ordered by start line."""
        return scan_regions(self.lines)

    def region(self, kind: RegionKind, label: str | None = None) -> Region | None:
        """First region of a kind (and label, for sections), or None."""
        for region in self.regions:
            if region.kind is kind and (label is None or region.label == label):
                return region
        return None

    def splice(self, start: int, end: int, new_lines: list[str] | tuple[str, ...]) -> "Document":
        """Return a new document with lines[start:end] replaced."""
        return Document(self.lines[:start] + tuple(new_lines) + self.lines[end:])


def parse(raw_text: str) -> Document:
    """Split raw file content into a document.

    Only "\\n" (or "\\r\\n") ends a line, so other Unicode line separators stay
    inside their line. A trailing newline terminates the last line and does
    not add an empty one.
    """
    if not raw_text:
        return Document.empty()
    lines = raw_text.replace("\r\n", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return Document(tuple(lines))


def serialize(document: Document) -> str:
    """Join lines with newlines, ending with exactly one trailing newline."""
    if document.is_empty:
        return ""
    return "\n".join(document.lines).rstrip("\n") + "\n"


def find_heading(document: Document, label: str, marker: str = HEADING_MARKER) -> int | None:
    """Index of the first heading for a label, scanning from the top."""
    for index, line in enumerate(document.lines):
        if is_heading(line, label, marker):
            return index
    return None


def _summary_span(lines: tuple[str, ...]) -> tuple[int, int] | None:
    start = None
    end = None
    for index in range(1, len(lines)):
        line = lines[index]
        stripped = line.strip()

        if is_section_heading(stripped):
            break

        if not stripped:
            if start is not None:
                break
            continue

        if is_comment(stripped):
            continue

        if is_heading(stripped):
            # Sub-headings are skipped before the paragraph, and end it after.
            if start is not None:
                break
            continue

        if start is None:
            start = index
        end = index + 1

    if start is None:
        return None
    return start, end


def scan_regions(lines: tuple[str, ...]) -> list[Region]:
    """Compute the title, comment, summary and section regions of a document."""
    if not lines:
        return []

    regions = [Region(RegionKind.TITLE, 0, 1)]
    if len(lines) > 1 and is_comment(lines[1]):
        regions.append(Region(RegionKind.COMMENT, 1, 2))

    span = _summary_span(lines)
    if span:
        regions.append(Region(RegionKind.SUMMARY, span[0], span[1]))

    headings = [
        (index, label)
        for index, line in enumerate(lines)
        for label in SECTION_LABELS
        if is_heading(line, label)
    ]
    for position, (index, label) in enumerate(headings):
        end = headings[position + 1][0] if position + 1 < len(headings) else len(lines)
        regions.append(Region(RegionKind.SECTION, index, end, label))

    return sorted(regions, key=lambda region: region.start)

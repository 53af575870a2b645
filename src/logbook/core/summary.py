"""Summary extraction and insertion - pure logic, no I/O."""

from .document import ONE_LINE_LABEL, Document, RegionKind, is_comment, parse


def extract_summary(document: Document) -> str:
    """
    Return the first paragraph after the title, or "" when there is none.

    HTML comments are transparent, sub-headings before the paragraph are
    skipped, and the paragraph ends at the first blank line or heading. Lines
    are joined with single spaces, so only the first paragraph counts.
    """
    region = document.region(RegionKind.SUMMARY)
    if region is None:
        return ""
    lines = document.lines[region.start:region.end]
    return " ".join(line.strip() for line in lines if line.strip() and not is_comment(line))


def has_summary(document: Document) -> bool:
    return bool(extract_summary(document))


def inject_summary(document: Document, text: str) -> Document:
    """
    Insert a summary paragraph right after the title and optional comment line.

    Does not check for an existing summary: calling it twice yields two
    paragraphs. Callers gate on extract_summary() first.
    """
    if document.is_empty:
        raise ValueError("cannot insert a summary into a document without a title")

    head = document.lines[:1]
    rest_start = 1
    if document.region(RegionKind.COMMENT) is not None:
        head = document.lines[:2]
        rest_start = 2

    while rest_start < len(document.lines) and not document.lines[rest_start].strip():
        rest_start += 1

    paragraph = parse(text.strip()).lines or ("",)
    return Document(head + paragraph + ("",) + document.lines[rest_start:])


def content_for_summary(document: Document) -> str:
    """Document text without the title, comments and the One-line note section."""
    notes = document.region(RegionKind.SECTION, ONE_LINE_LABEL)
    skipped = range(notes.start, notes.end) if notes is not None else range(0)
    kept = [
        line
        for index, line in enumerate(document.lines)
        if index > 0 and index not in skipped and not is_comment(line)
    ]
    return "\n".join(kept).strip()


def section_content(document: Document, label: str) -> str:
    """Text under a section heading, up to the next recognized section."""
    region = document.region(RegionKind.SECTION, label)
    if region is None:
        return ""
    return "\n".join(document.lines[region.start + 1:region.end]).strip()

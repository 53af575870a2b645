"""File-based journal storage adapter."""

import logging
from datetime import date
from pathlib import Path

from logbook.core.document import Document, parse, serialize
from logbook.errors import JournalIOError
from logbook.templating import render_daily_file_name

logger = logging.getLogger(__name__)


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. Each day gets a markdown file named by
    the daily file name template. Files are always read and rewritten whole.
    """

    def __init__(self, journal_dir: Path | str, file_name_template: str = "{date:%Y-%m-%d}.md"):
        self.journal_dir = Path(journal_dir).expanduser()
        self.file_name_template = file_name_template

    def file_name_for(self, target_date: date) -> str:
        """Render the daily file name for a date."""
        return render_daily_file_name(self.file_name_template, target_date)

    def path_for_date(self, target_date: date) -> Path:
        """Get the file path for a given date."""
        return self.path_for(self.file_name_for(target_date))

    def path_for(self, name: str) -> Path:
        return self.journal_dir / name

    def read_document(self, path: Path) -> Document:
        """Read a document. Returns the empty document if the file does not exist."""
        try:
            return parse(path.read_text())
        except FileNotFoundError:
            logger.debug(f"{path} does not exist, reading as empty document")
            return Document.empty()
        except OSError as e:
            raise JournalIOError(f"failed to read journal file ({e.strerror})", path) from e

    def write_document(self, path: Path, document: Document) -> None:
        """Write/overwrite a document in full."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(serialize(document))
        except OSError as e:
            raise JournalIOError(f"failed to write journal file ({e.strerror})", path) from e
        logger.debug(f"Wrote {len(document.lines)} lines to {path}")

    def exists(self, path: Path) -> bool:
        """Check if a file exists."""
        return path.exists()

    def ensure_directory(self) -> None:
        """Create the journal directory if it doesn't exist."""
        try:
            self.journal_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise JournalIOError(f"failed to create journal directory ({e.strerror})", self.journal_dir) from e

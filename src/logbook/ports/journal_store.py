"""Journal storage interface."""

from datetime import date
from pathlib import Path
from typing import Protocol

from logbook.core.document import Document


class JournalStore(Protocol):
    """Interface for reading and writing whole journal documents."""

    def file_name_for(self, target_date: date) -> str:
        """Render the daily file name for a date."""
        ...

    def path_for_date(self, target_date: date) -> Path:
        """Get the daily file path for a date."""
        ...

    def path_for(self, name: str) -> Path:
        """Resolve a file name inside the journal directory."""
        ...

    def read_document(self, path: Path) -> Document:
        """Read a document. Returns the empty document if the file does not exist."""
        ...

    def write_document(self, path: Path, document: Document) -> None:
        """Write/overwrite a document in full."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if a file exists."""
        ...

    def ensure_directory(self) -> None:
        """Create the journal directory if needed."""
        ...

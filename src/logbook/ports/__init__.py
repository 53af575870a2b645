"""Ports - interfaces/protocols for external dependencies."""

from .journal_store import JournalStore
from .summarizer import Summarizer

__all__ = [
    "JournalStore",
    "Summarizer",
]

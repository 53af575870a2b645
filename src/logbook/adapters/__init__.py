"""Adapters - I/O implementations of ports."""

from .file_journal import FileJournalStore
from .ai_command import CommandSummarizer

__all__ = [
    "FileJournalStore",
    "CommandSummarizer",
]

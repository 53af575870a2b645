"""AI summarizer interface."""

from typing import Protocol


class Summarizer(Protocol):
    """Interface for generating a summary of some text."""

    def generate_summary(self, text: str, prompt: str) -> str:
        """Summarize text following prompt. Raises SummarizationFailed."""
        ...

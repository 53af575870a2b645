"""External AI command adapter - subprocess wrapper for a summarizing CLI."""

import logging
import shlex
import subprocess

from logbook.errors import SummarizationFailed

logger = logging.getLogger(__name__)

PROMPT_PLACEHOLDER = "{PROMPT}"
TEXT_PLACEHOLDER = "{TEXT}"


class CommandSummarizer:
    """
    AI command subprocess adapter.

    Implements Summarizer protocol. The configured command is split like a
    shell command line, then {PROMPT} and {TEXT} are substituted inside each
    argument, e.g. "gemini --prompt '{PROMPT} {TEXT}'". Without a {TEXT}
    placeholder the text is passed on stdin.
    """

    def __init__(self, command: str, timeout: int | None = None):
        self.command = command
        self.timeout = timeout

    def build_args(self, text: str, prompt: str) -> list[str]:
        """Command line arguments with placeholders substituted."""
        try:
            args = shlex.split(self.command)
        except ValueError as e:
            raise SummarizationFailed(f"invalid AI command {self.command!r}: {e}") from e
        if not args:
            raise SummarizationFailed("AI command is empty")
        return [arg.replace(PROMPT_PLACEHOLDER, prompt).replace(TEXT_PLACEHOLDER, text) for arg in args]

    def generate_summary(self, text: str, prompt: str) -> str:
        """Run the command and return its trimmed stdout."""
        args = self.build_args(text, prompt)
        # With {TEXT} in the arguments the command must not wait on the terminal
        if TEXT_PLACEHOLDER in self.command:
            stdin_kwargs = {"stdin": subprocess.DEVNULL}
        else:
            stdin_kwargs = {"input": text}
        logger.debug(f"Running AI command: {args[0]}")
        try:
            proc = subprocess.run(
                args,
                **stdin_kwargs,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise SummarizationFailed(f"AI command not found: {args[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise SummarizationFailed(f"AI command timed out after {self.timeout}s") from e

        if proc.returncode != 0:
            logger.error(f"AI command failed: {proc.stderr}")
            raise SummarizationFailed(f"AI command failed with exit code {proc.returncode}: {proc.stderr.strip()}")

        summary = proc.stdout.strip()
        if not summary:
            raise SummarizationFailed("AI command returned an empty summary")
        return summary

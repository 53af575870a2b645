"""Configuration management for LogBook."""

import logging
import os
import tomllib
from dataclasses import asdict, dataclass, fields
from pathlib import Path

import tomli_w

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = Path(
    os.environ.get("LOGBOOK_CONFIG", Path.home() / ".config" / "logbook" / "config.toml")
)

DEFAULT_DAILY_TEMPLATE = (
    "# {date:%b %d %Y %A}\n"
    "<!-- add today summary below this line. If missing, the AI will generate one "
    "for you according to configuration file -->\n"
    "\n"
    "# One-line note\n"
    "\n"
    "# LOG\n"
    "\n"
)


@dataclass
class Config:
    """LogBook configuration."""

    journal_dir: str = str(Path.home() / ".logbook" / "journal")
    daily_file_name: str = "{date:%Y-%m-%d}.md"
    daily_template: str = DEFAULT_DAILY_TEMPLATE
    log_entry_template: str = "{time:%H:%M} {entry}"
    ai_enabled: bool = False
    # Placeholders {PROMPT} and {TEXT}, e.g. "gemini --prompt '{PROMPT} {TEXT}'"
    ai_command: str = ""
    ai_prompt: str = (
        "Write a summary of the note at the given file. "
        "Use 1st person and a simple language. Use 200 characters or less"
    )
    one_line_template: str = "[[{date:%Y-%m-%d}]]: {summary}"

    @property
    def journal_path(self) -> Path:
        return Path(self.journal_dir).expanduser()

    def validate(self) -> None:
        """Raise ConfigError describing the first invalid setting."""
        for name in ("journal_dir", "daily_file_name", "daily_template", "log_entry_template"):
            if not getattr(self, name):
                raise ConfigError(f"{name} cannot be empty")
        if not self.journal_path.is_absolute():
            raise ConfigError(f"journal_dir must be an absolute path: {self.journal_dir}")
        if self.ai_enabled and not self.ai_prompt:
            raise ConfigError("ai_prompt cannot be empty if AI is enabled")
        if self.ai_enabled and not self.ai_command:
            raise ConfigError("ai_command cannot be empty if AI is enabled")


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from a TOML file, falling back to defaults."""
    path = Path(path) if path else CONFIG_FILE
    config = Config()

    if not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return config

    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"failed to decode config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"failed to read config file {path}: {e}") from e

    known = {f.name for f in fields(Config)}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Ignoring unknown config key: {key}")
            continue
        expected = type(getattr(config, key))
        if not isinstance(value, expected):
            raise ConfigError(f"{key} must be a {expected.__name__}, got {type(value).__name__}")
        setattr(config, key, value)

    return config


def save_config(config: Config, path: Path | str | None = None) -> Path:
    """Write configuration to a TOML file, creating its directory."""
    path = Path(path) if path else CONFIG_FILE
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(tomli_w.dumps(asdict(config)))
    except OSError as e:
        raise ConfigError(f"failed to write config file {path}: {e}") from e
    return path

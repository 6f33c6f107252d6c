"""Configuration management for tasklanes."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.errors import InvalidStatus
from .core.export import EXPORT_FILENAME
from .core.tasks import TaskStatus

logger = logging.getLogger(__name__)

TASKLANES_HOME = Path(os.environ.get("TASKLANES_HOME", Path.home() / "tasklanes"))
CONFIG_FILE = TASKLANES_HOME / "config" / "tasklanes.conf"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """tasklanes configuration."""

    sweep_interval_seconds: int = 60
    export_dir: str = ""
    export_filename: str = EXPORT_FILENAME
    default_tab: TaskStatus = TaskStatus.ACTIVE
    log_level: str = "INFO"

    @property
    def export_path(self) -> Path:
        """Where a download lands when no explicit path is given."""
        base = Path(self.export_dir).expanduser() if self.export_dir else Path.cwd()
        return base / self.export_filename


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config() -> Config:
    """Load configuration from tasklanes.conf file."""
    config = Config()

    if not CONFIG_FILE.exists():
        return config

    for line in CONFIG_FILE.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "sweep_interval_seconds":
                try:
                    interval = int(value)
                except ValueError:
                    logger.warning(f"Invalid SWEEP_INTERVAL_SECONDS: {value}")
                    continue
                if interval <= 0:
                    logger.warning(f"SWEEP_INTERVAL_SECONDS must be positive, got {interval}")
                    continue
                config.sweep_interval_seconds = interval
            case "export_dir":
                config.export_dir = value
            case "export_filename":
                if value:
                    config.export_filename = value
            case "default_tab":
                try:
                    config.default_tab = TaskStatus.parse(value)
                except InvalidStatus:
                    logger.warning(f"Invalid DEFAULT_TAB: {value}")
            case "log_level":
                if value.upper() in LOG_LEVELS:
                    config.log_level = value.upper()
                else:
                    logger.warning(f"Invalid LOG_LEVEL: {value}")

    return config

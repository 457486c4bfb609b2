"""
Configuration management for cidrview.

Loads defaults from environment variables or a .env file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

OUTPUT_FORMATS = ("text", "table", "json")


def check_output_format(output_format: str) -> str:
    """Normalise an output format name, raising ValueError if unknown."""
    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format {output_format!r}, "
            f"expected one of {', '.join(OUTPUT_FORMATS)}"
        )
    return output_format


def check_log_level(level: str) -> str:
    """Normalise a log level name, raising ValueError if unknown."""
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level {level!r}")
    return level


def env_locations() -> list[Path]:
    """Common locations for a .env file, in lookup order."""
    return [
        Path.home() / ".cidrview" / ".env",
        Path.home() / ".config" / "cidrview" / ".env",
        Path.cwd() / ".env",
    ]


def load_env_file() -> Path | None:
    """Load the first .env file found. Existing variables win."""
    for env_path in env_locations():
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


@dataclass
class ReportConfig:
    """Output and logging defaults.

    Values are kept as given; the CLI checks them once flags are applied.
    """

    output_format: str = "text"
    log_level: str = "WARNING"
    log_file: str | None = None

    def __post_init__(self):
        self.output_format = self.output_format.lower()
        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls) -> "ReportConfig":
        """Load configuration from environment variables."""
        load_env_file()
        return cls(
            output_format=os.getenv("CIDRVIEW_FORMAT", "text"),
            log_level=os.getenv("CIDRVIEW_LOG_LEVEL", "WARNING"),
            log_file=os.getenv("CIDRVIEW_LOG_FILE") or None,
        )


# Global config instance
_config: ReportConfig | None = None


def get_config() -> ReportConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ReportConfig.from_env()
    return _config


def set_config(config: ReportConfig | None) -> None:
    """Set the global configuration instance (None forces a reload)."""
    global _config
    _config = config

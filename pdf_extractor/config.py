"""Configuration management for PDF Extractor."""

import os
from dataclasses import dataclass, field
from typing import Optional, Union

from .exceptions import ConfigurationError

DEFAULT_MAX_PAGES = 10000
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ExtractorConfig:
    """Configuration for page extraction.

    Values read from the environment arrive as strings and are checked and
    converted in ``__post_init__``.
    """
    max_pages: Union[int, str] = field(
        default_factory=lambda: os.environ.get("PDF_EXTRACTOR_MAX_PAGES", str(DEFAULT_MAX_PAGES))
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("PDF_EXTRACTOR_LOG_LEVEL", "WARNING")
    )
    producer: str = field(
        default_factory=lambda: os.environ.get("PDF_EXTRACTOR_PRODUCER", "PDF Page Extractor")
    )

    def __post_init__(self) -> None:
        try:
            max_pages = int(self.max_pages)
        except (TypeError, ValueError):
            raise ConfigurationError(
                "PDF_EXTRACTOR_MAX_PAGES", self.max_pages, "a positive integer"
            ) from None
        if max_pages < 1:
            raise ConfigurationError("PDF_EXTRACTOR_MAX_PAGES", self.max_pages, "a positive integer")
        self.max_pages = max_pages

        log_level = str(self.log_level).strip().upper()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError("PDF_EXTRACTOR_LOG_LEVEL", self.log_level, "one of " + ", ".join(LOG_LEVELS))
        self.log_level = log_level


# Global configuration instance
_config: Optional[ExtractorConfig] = None


def get_config() -> ExtractorConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = ExtractorConfig()
    return _config


def reload_config() -> ExtractorConfig:
    """Force reload of configuration from environment."""
    global _config
    _config = ExtractorConfig()
    return _config

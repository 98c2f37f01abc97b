"""Configuration management for catalog fuzzy matching."""

import logging
import math
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _env_threshold() -> float:
    raw = os.getenv("POFUZZY_THRESHOLD", "0.8")
    try:
        return float(raw)
    except ValueError:
        # NaN marks an unparseable value, reported by validate()
        return float("nan")


@dataclass
class Config:
    """Application configuration."""

    # Minimum Jaro similarity between msgids that counts as a fuzzy match
    fuzzy_threshold: float = field(default_factory=_env_threshold)

    log_level: str = field(
        default_factory=lambda: os.getenv("POFUZZY_LOG_LEVEL", "WARNING").upper()
    )

    LOG_LEVELS: tuple = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if math.isnan(self.fuzzy_threshold):
            errors.append(
                f"POFUZZY_THRESHOLD is not a number: {os.getenv('POFUZZY_THRESHOLD')!r}"
            )
        if self.log_level not in self.LOG_LEVELS:
            errors.append(f"POFUZZY_LOG_LEVEL is not a log level: {self.log_level!r}")
        return errors

    @property
    def logging_level(self) -> int:
        """Get the numeric logging level, WARNING if unknown."""
        return getattr(logging, self.log_level, logging.WARNING)


# Global config instance
config = Config()

"""Configuration settings for the TinyMart catalog and cart."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from tinymart.domain.model.value_objects import PersonName


@dataclass(slots=True)
class AppConfig:
    """Top-level configuration for the application."""

    log_level: str = "WARNING"
    """Level passed to ``logging.basicConfig`` by the CLI."""

    output: Literal["console", "log"] = "console"
    """Where cart messages and reports go: the terminal or the log."""

    new_release_year: int = 1975
    """Movies released in this year or later are listed as new releases."""

    default_owner: PersonName = field(default_factory=lambda: PersonName("John", "Smith"))
    """Cart owner used when the CLI is not given one."""


DEFAULT_CONFIG = AppConfig()

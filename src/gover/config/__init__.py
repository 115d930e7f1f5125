"""Configuration management for gover."""

from __future__ import annotations

from gover.config.loader import load_config
from gover.config.models import (
    DEFAULT_CONFIG_FILE,
    ArgConfig,
    GoverConfig,
    Option,
    TemplatesConfig,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "ArgConfig",
    "GoverConfig",
    "Option",
    "TemplatesConfig",
    "load_config",
]

"""Configuration file loading.

Supported formats are YAML (``.yaml``, ``.yml``) and JSON (``.json``).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from gover.config.models import DEFAULT_CONFIG_FILE, GoverConfig
from gover.exceptions import ConfigNotFoundError, ConfigValidationError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
JSON_SUFFIXES = frozenset({".json"})


def load_config_file(path: Path) -> dict[str, Any]:
    """Read a configuration file into a dictionary.

    Args:
        path: Path to the configuration file

    Returns:
        Parsed file content

    Raises:
        ConfigNotFoundError: If the file does not exist or cannot be read
        ConfigValidationError: If the format is unsupported or malformed
    """
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES | JSON_SUFFIXES:
        raise ConfigValidationError(
            f"unsupported config file type: {suffix or '(none)'}\n"
            "expected: .yaml, .yml, .json"
        )

    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigNotFoundError(f"config file not found: {path}") from e
    except OSError as e:
        raise ConfigNotFoundError(f"cannot read config file {path}: {e}") from e

    try:
        if suffix in JSON_SUFFIXES:
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigValidationError(f"cannot decode {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigValidationError(f"{path} must contain a mapping at the top level")
    return data


def load_config(path: Path | str | None = None) -> GoverConfig:
    """Load and validate the gover configuration.

    Args:
        path: Path to the configuration file, defaults to ``./gover.yml``

    Returns:
        Validated configuration

    Raises:
        ConfigNotFoundError: If the file cannot be found
        ConfigValidationError: If the configuration is invalid
    """
    config_path = Path(path) if path else Path(DEFAULT_CONFIG_FILE)
    data = load_config_file(config_path)

    try:
        config = GoverConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"invalid configuration in {config_path}:\n{e}") from e

    logger.debug("Loaded config from %s with %d args", config_path, len(config.args))
    return config

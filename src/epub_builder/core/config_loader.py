"""Load and validate epub-builder.{yaml,json}."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from epub_builder.errors import ConfigError
from epub_builder.models.config import BookConfig

log = logging.getLogger(__name__)

# Fields required in every config
REQUIRED_FIELDS = ["author", "title", "lang", "spine"]

SUPPORTED_SUFFIXES = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def load_config(path: Path) -> BookConfig:
    """Read a JSON or YAML config file into a ``BookConfig``.

    Raises:
        ConfigError: If the file is missing, of an unsupported type, not
            parseable or missing required fields
    """
    if not path.is_file():
        raise ConfigError(f"Config({path}) file not found")

    config_type = SUPPORTED_SUFFIXES.get(path.suffix.lower())
    if config_type is None:
        supported = ", ".join(SUPPORTED_SUFFIXES)
        raise ConfigError(
            f"Config type not supported: {path.name}. Supported formats: {supported}"
        )

    log.info("Use config(%s)", path)
    text = path.read_text(encoding="utf-8")
    try:
        if config_type == "json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not parse {path.name}: {e}") from e

    return parse_config(data, source=path.name)


def parse_config(data: Any, source: str = "config") -> BookConfig:
    """Validate already-parsed config data."""
    if not isinstance(data, dict):
        raise ConfigError(f"{source} must be a mapping, got {type(data).__name__}")

    missing = [key for key in REQUIRED_FIELDS if _is_missing(data.get(key))]
    if missing:
        raise ConfigError(f"{source} missing required fields: {', '.join(missing)}")

    try:
        return BookConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"{source} is invalid: {problems}") from e


def _is_missing(value: Any) -> bool:
    # An empty spine is allowed, an empty string is not
    return value is None or value == ""

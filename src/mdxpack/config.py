"""
Global Configuration and Defaults.

Process-wide settings for a pack run live in one immutable ``PackConfig``
that is built at startup and handed to the packer. Values come from the
defaults below, optionally overridden by a YAML file and then by CLI flags.
"""

import os
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict, PositiveInt, ValidationError, field_validator

from .core.errors import ConfigError

# --- Defaults ---
DEFAULT_OUTPUT_DIR = Path("dist")
DEFAULT_WORDS_PER_FILE = 5000
DEFAULT_SOURCE_EXTENSION = ".mdx"
DEFAULT_OUTPUT_EXTENSION = ".md"

# --- Config file discovery ---
DEFAULT_CONFIG_NAME = ".mdxpack.yaml"
CONFIG_ENV_VAR = "MDXPACK_CONFIG"


class PackConfig(BaseModel):
    """
    Immutable settings for a single pack run.
    """
    output_dir: Path = DEFAULT_OUTPUT_DIR
    default_threshold: PositiveInt = DEFAULT_WORDS_PER_FILE
    source_extension: str = DEFAULT_SOURCE_EXTENSION
    output_extension: str = DEFAULT_OUTPUT_EXTENSION
    fallback_prefix: str = "concatenated"
    max_name_stems: PositiveInt = 3
    sort_entries: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("source_extension", "output_extension")
    @classmethod
    def _require_leading_dot(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"extension must start with '.', got {value!r}")
        return value

    @field_validator("fallback_prefix")
    @classmethod
    def _require_prefix(cls, value: str) -> str:
        if not value:
            raise ValueError("fallback_prefix must not be empty")
        return value

    def with_overrides(self, **overrides: Any) -> "PackConfig":
        """
        Return a validated copy with ``overrides`` applied.

        Keys whose value is None are ignored, so unset CLI options can be
        passed straight through.
        """
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return _validate({**self.model_dump(), **updates}, source="command line")


def _validate(data: Dict[str, Any], source: str) -> PackConfig:
    try:
        return PackConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration ({source}): {e}") from e


def _resolve_config_path(path: Path | str | None) -> Path | None:
    """Return the config file to load, honoring overrides, or None for defaults."""
    candidate = path or os.environ.get(CONFIG_ENV_VAR)
    if candidate:
        return Path(candidate).expanduser()

    default = Path.cwd() / DEFAULT_CONFIG_NAME
    if default.is_file():
        return default
    return None


def load_config(path: Path | str | None = None) -> PackConfig:
    """
    Load pack settings.

    Lookup order: the explicit ``path``, the ``MDXPACK_CONFIG`` environment
    variable, then ``.mdxpack.yaml`` in the working directory. With none of
    those present the built-in defaults are used.

    Raises:
        ConfigError: If the file cannot be read, is not a YAML mapping, or
            contains unknown or invalid keys.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return PackConfig()

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Configuration file not readable: {config_path} ({e})") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Configuration file is not valid YAML: {config_path} ({e})") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration file must contain a mapping: {config_path}")

    return _validate(raw, source=str(config_path))

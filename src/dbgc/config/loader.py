"""Configuration file loading."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from dbgc.config.settings import Settings
from dbgc.models import ReviewLayout

CONFIG_FILENAMES = [".dbgc.yaml", ".dbgc.yml", "dbgc.yaml", "dbgc.yml"]


class ConfigError(Exception):
  """Configuration file is missing or invalid."""


def _find_config_file(config_path: Path | None = None) -> Path | None:
  """Find config file path, or None if no config exists."""
  if config_path:
    if not config_path.exists():
      raise ConfigError(f"Config file not found: {config_path}")
    return config_path

  for filename in CONFIG_FILENAMES:
    path = Path.cwd() / filename
    if path.exists():
      return path

  return None


def load_config(config_path: Path | None = None) -> Settings:
  """Load configuration from file or defaults."""
  path = _find_config_file(config_path)
  if path:
    return _load_from_file(path)
  return Settings()


def _load_from_file(path: Path) -> Settings:
  """Load settings from a YAML file."""
  try:
    with open(path) as f:
      data = yaml.safe_load(f) or {}
  except yaml.YAMLError as e:
    raise ConfigError(f"Invalid YAML in {path}: {e}") from e

  if not isinstance(data, dict):
    raise ConfigError(f"Config file {path} must contain a mapping")

  return _parse_config(data, source=path)


def _parse_config(data: dict, source: Path | None = None) -> Settings:
  """Parse config dict into Settings."""
  where = f" in {source}" if source else ""
  data = dict(data)

  if "layout" in data:
    try:
      data["layout"] = ReviewLayout(data["layout"])
    except ValueError:
      raise ConfigError(f"Unknown layout '{data['layout']}'{where}") from None

  if "extensions" in data:
    data["extensions"] = [str(ext).lstrip(".") for ext in data["extensions"]]

  try:
    return Settings(**data)
  except ValidationError as e:
    raise ConfigError(f"Invalid configuration{where}: {e}") from e

"""Configuration file loading."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from shadlint.config.settings import Settings

CONFIG_FILENAMES = [".shadlint.yaml", ".shadlint.yml", "shadlint.yaml", "shadlint.yml"]


class ConfigError(Exception):
  """Configuration file is invalid."""


def _find_config_file(config_path: Path | None = None, cwd: Path | None = None) -> Path | None:
  """Find config file path, or None if no config exists."""
  if config_path:
    if not config_path.exists():
      raise FileNotFoundError(f"Config file not found: {config_path}")
    return config_path

  base = cwd or Path.cwd()
  for filename in CONFIG_FILENAMES:
    path = base / filename
    if path.exists():
      return path

  return None


def load_config(config_path: Path | None = None, cwd: Path | None = None) -> Settings:
  """Load configuration from file or defaults."""
  path = _find_config_file(config_path, cwd)
  if path:
    return _load_from_file(path)
  return Settings()


def _load_from_file(path: Path) -> Settings:
  """Load settings from a YAML file."""
  try:
    with open(path, encoding="utf-8") as f:
      data = yaml.safe_load(f) or {}
  except yaml.YAMLError as e:
    raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

  if not isinstance(data, dict):
    raise ConfigError(f"Config file {path} must contain a mapping")

  try:
    settings = _parse_config(data)
  except ValidationError as e:
    raise ConfigError(f"Invalid config file {path}: {e}") from e

  # Rule file paths are relative to the config file that names them
  if settings.rules_file and not settings.rules_file.is_absolute():
    settings.rules_file = path.parent / settings.rules_file
  return settings


def _parse_config(data: dict) -> Settings:
  """Parse config dict into Settings."""
  data = dict(data)
  for key in ("enable", "disable", "extensions"):
    if isinstance(data.get(key), str):
      data[key] = [part.strip() for part in data[key].split(",") if part.strip()]

  return Settings.model_validate(data)

"""Rule loading and validation."""

import re
from pathlib import Path
from typing import Any, Iterable, Sequence

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from shadlint.models import RuleEntry, Severity
from shadlint.rules.defaults import DEFAULT_RULES

INLINE_SOURCE = "<inline>"
BUILTIN_SOURCE = "<builtin>"

RuleSource = str | Path | Sequence[dict[str, Any]] | None


class LoadError(Exception):
  """Rule source missing or malformed."""


class RuleDefinition(BaseModel):
  """Raw rule as written in a rule file."""

  model_config = ConfigDict(extra="forbid")

  id: str = Field(min_length=1)
  title: str = Field(min_length=1)
  pattern: str = Field(min_length=1)
  severity: Severity
  message: str = Field(min_length=1)
  suggestion: str | None = None
  extensions: list[str] = Field(default_factory=list)
  ignore_case: bool = False

  @field_validator("extensions")
  @classmethod
  def _normalize_extensions(cls, value: list[str]) -> list[str]:
    return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value]


def load(source: RuleSource = None) -> tuple[RuleEntry, ...]:
  """Load an ordered, validated rule set.

  Args:
    source: Path to a YAML rule file, a sequence of rule mappings,
            or None for the bundled defaults.

  Returns:
    Tuple of RuleEntry in source order.

  Raises:
    LoadError: If the source is unreadable or malformed.
  """
  if source is None:
    return _build_entries(DEFAULT_RULES, BUILTIN_SOURCE)

  if isinstance(source, (str, Path)):
    path = Path(source)
    return _build_entries(_read_rule_file(path), str(path))

  return _build_entries(source, INLINE_SOURCE)


def select(
  rules: Sequence[RuleEntry],
  enable: Iterable[str] | None = None,
  disable: Iterable[str] | None = None,
) -> tuple[RuleEntry, ...]:
  """Filter a loaded rule set by id, preserving order.

  Raises:
    LoadError: If an id in enable or disable is not in the rule set.
  """
  known = {rule.id for rule in rules}
  enabled = set(enable or [])
  disabled = set(disable or [])

  unknown = sorted((enabled | disabled) - known)
  if unknown:
    raise LoadError(f"Unknown rule id(s): {', '.join(unknown)}")

  return tuple(
    rule for rule in rules
    if (not enabled or rule.id in enabled) and rule.id not in disabled
  )


def _read_rule_file(path: Path) -> list[Any]:
  """Read a YAML rule file into a list of raw rule mappings."""
  if not path.is_file():
    raise LoadError(f"Rule file not found: {path}")

  try:
    with open(path, encoding="utf-8") as f:
      data = yaml.safe_load(f)
  except (OSError, UnicodeDecodeError) as e:
    raise LoadError(f"Cannot read rule file {path}: {e}") from e
  except yaml.YAMLError as e:
    raise LoadError(f"Invalid YAML in rule file {path}: {e}") from e

  if isinstance(data, dict) and "rules" in data:
    data = data["rules"]

  if not isinstance(data, list) or not data:
    raise LoadError(f"Rule file {path} must contain a non-empty list of rules")

  return data


def _build_entries(raw_rules: Sequence[Any], origin: str) -> tuple[RuleEntry, ...]:
  """Validate raw rule mappings and compile them into entries."""
  entries: list[RuleEntry] = []
  seen: set[str] = set()

  for index, raw in enumerate(raw_rules, start=1):
    if not isinstance(raw, dict):
      raise LoadError(f"{origin}: rule #{index} must be a mapping")

    try:
      definition = RuleDefinition.model_validate(raw)
    except ValidationError as e:
      label = raw.get("id") or f"#{index}"
      raise LoadError(f"{origin}: invalid rule {label}: {_first_error(e)}") from e

    if definition.id in seen:
      raise LoadError(f"{origin}: duplicate rule id {definition.id}")
    seen.add(definition.id)

    entries.append(_to_entry(definition, origin))

  return tuple(entries)


def _to_entry(definition: RuleDefinition, origin: str) -> RuleEntry:
  flags = re.IGNORECASE if definition.ignore_case else 0
  try:
    pattern = re.compile(definition.pattern, flags)
  except re.error as e:
    raise LoadError(
      f"{origin}: rule {definition.id} has an invalid pattern: {e}"
    ) from e

  return RuleEntry(
    id=definition.id,
    title=definition.title,
    pattern=pattern,
    severity=definition.severity,
    message=definition.message,
    suggestion=definition.suggestion,
    extensions=tuple(definition.extensions),
  )


def _first_error(error: ValidationError) -> str:
  """Render the first pydantic error as 'field: message'."""
  first = error.errors()[0]
  location = ".".join(str(part) for part in first["loc"]) or "rule"
  return f"{location}: {first['msg']}"

"""Core domain models for linting."""

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class Severity(Enum):
  """Rule severity levels, most severe first."""

  CRITICAL = "critical"
  IMPORTANT = "important"
  NICE_TO_HAVE = "nice-to-have"

  @property
  def rank(self) -> int:
    """Numeric rank, higher is more severe."""
    return _SEVERITY_RANKS[self]

  def at_least(self, threshold: "Severity") -> bool:
    return self.rank >= threshold.rank


_SEVERITY_RANKS = {
  Severity.CRITICAL: 3,
  Severity.IMPORTANT: 2,
  Severity.NICE_TO_HAVE: 1,
}


@dataclass(frozen=True)
class RuleEntry:
  """A single loaded rule.

  Entries are created once by the rule store and shared by reference
  with every Violation they produce.
  """

  id: str
  title: str
  pattern: re.Pattern[str]
  severity: Severity
  message: str
  suggestion: str | None = None
  extensions: tuple[str, ...] = ()

  def applies_to(self, path: str) -> bool:
    """Check if this rule should run against the given path.

    Paths without a suffix (such as ``<stdin>``) get every rule.
    """
    if not self.extensions:
      return True
    _, ext = os.path.splitext(path)
    if not ext:
      return True
    return ext.lower() in self.extensions


@dataclass(frozen=True)
class Violation:
  """A rule pattern matched on one line of a file."""

  path: str
  line: int
  rule: RuleEntry
  snippet: str
  column: int = 1

  @property
  def rule_id(self) -> str:
    return self.rule.id

  @property
  def severity(self) -> Severity:
    return self.rule.severity

  @property
  def message(self) -> str:
    return self.rule.message


@dataclass(frozen=True)
class LintResult:
  """Result of a lint run."""

  violations: Sequence[Violation]
  files_checked: int = 0
  fail_on: Severity = Severity.CRITICAL

  @property
  def has_critical(self) -> bool:
    """Check if result contains CRITICAL severity violations."""
    return self.fails(Severity.CRITICAL)

  @property
  def failed(self) -> bool:
    """Check if any violation reaches the configured fail threshold."""
    return self.fails(self.fail_on)

  def fails(self, threshold: Severity) -> bool:
    """Check if any violation is at or above the threshold."""
    return any(v.severity.at_least(threshold) for v in self.violations)

  def counts_by_severity(self) -> dict[Severity, int]:
    return count_by_severity(self.violations)


def count_by_severity(violations: Sequence[Violation]) -> dict[Severity, int]:
  """Count violations per severity."""
  counts: dict[Severity, int] = {}
  for violation in violations:
    counts[violation.severity] = counts.get(violation.severity, 0) + 1
  return counts

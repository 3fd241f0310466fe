"""Rule loading and matching."""

from shadlint.rules.matcher import MatchError, RuleMatcher, check
from shadlint.rules.store import LoadError, RuleDefinition, load, select

__all__ = [
  "LoadError",
  "MatchError",
  "RuleDefinition",
  "RuleMatcher",
  "check",
  "load",
  "select",
]

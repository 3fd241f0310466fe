"""Line-by-line rule matching."""

import re
from typing import Sequence

from shadlint.models import RuleEntry, Violation
from shadlint.sources import STDIN_NAME, SourceFile

# Line terminators editors and compilers agree on
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class MatchError(Exception):
  """A rule carries a pattern that cannot be used.

  Rules from the store are always compiled, so this indicates a bug
  in the caller rather than bad input.
  """


class RuleMatcher:
  """Applies rule patterns to source text.

  The matcher holds no state between calls; the same input always
  produces the same ordered violations.

  Example:
    matcher = RuleMatcher()
    violations = matcher.check("const x: any = 1;", rules, "a.ts")
  """

  def check(
    self,
    text: str,
    rules: Sequence[RuleEntry],
    path: str = STDIN_NAME,
  ) -> list[Violation]:
    """Check text against every applicable rule.

    Args:
      text: Raw file content.
      rules: Loaded rule set, in the order violations should be reported.
      path: File path used for extension filtering and reporting.

    Returns:
      Violations ordered by line, then rule order, then column.

    Raises:
      MatchError: If a rule pattern is not a usable regex.
    """
    applicable = [(rule, _compiled(rule)) for rule in rules if rule.applies_to(path)]
    if not applicable:
      return []

    violations: list[Violation] = []

    for line_no, line in enumerate(split_lines(text), start=1):
      for rule, pattern in applicable:
        for match in pattern.finditer(line):
          violations.append(Violation(
            path=path,
            line=line_no,
            rule=rule,
            snippet=match.group(0),
            column=match.start() + 1,
          ))

    return violations

  def check_many(
    self,
    files: Sequence[SourceFile],
    rules: Sequence[RuleEntry],
  ) -> list[Violation]:
    """Check several files, keeping file order."""
    violations: list[Violation] = []
    for source in files:
      violations.extend(self.check(source.text, rules, source.path))
    return violations


def check(
  text: str,
  rules: Sequence[RuleEntry],
  path: str = STDIN_NAME,
) -> list[Violation]:
  """Check text with a fresh RuleMatcher."""
  return RuleMatcher().check(text, rules, path)


def _compiled(rule: RuleEntry) -> re.Pattern[str]:
  """Return the rule's compiled pattern, compiling stray strings."""
  if isinstance(rule.pattern, re.Pattern):
    return rule.pattern
  try:
    return re.compile(rule.pattern)
  except (re.error, TypeError) as e:
    raise MatchError(f"Rule {rule.id} has an unusable pattern: {e}") from e


def split_lines(text: str) -> list[str]:
  """Split text on CRLF, CR and LF only.

  Form feeds, vertical tabs and Unicode separators stay inside a line.
  """
  lines = _LINE_BREAK.split(text)
  if lines and lines[-1] == "":
    lines.pop()
  return lines

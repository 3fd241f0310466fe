"""Tests for rule matching."""

import re

import pytest
from shadlint.models import RuleEntry, Severity
from shadlint.rules.matcher import MatchError, RuleMatcher, check, split_lines
from shadlint.sources import SourceFile


def _rule(rule_id: str, pattern: str, extensions: tuple[str, ...] = ()) -> RuleEntry:
  return RuleEntry(
    id=rule_id,
    title=rule_id.lower(),
    pattern=re.compile(pattern),
    severity=Severity.IMPORTANT,
    message=f"{rule_id} matched",
    extensions=extensions,
  )


class TestCheck:
  @pytest.fixture
  def matcher(self) -> RuleMatcher:
    return RuleMatcher()

  def test_any_token_single_violation(self, matcher: RuleMatcher, any_rule: RuleEntry) -> None:
    violations = matcher.check("const x: any = 1;", [any_rule])

    assert len(violations) == 1
    assert violations[0].rule is any_rule
    assert violations[0].line == 1
    assert violations[0].snippet == "any"
    assert violations[0].column == 10

  def test_clean_text_no_violations(self, matcher: RuleMatcher, any_rule: RuleEntry) -> None:
    text = "const x: number = 1;\nconst company = 'acme';"

    assert matcher.check(text, [any_rule]) == []

  def test_empty_text(self, matcher: RuleMatcher, any_rule: RuleEntry) -> None:
    assert matcher.check("", [any_rule]) == []

  def test_no_rules(self, matcher: RuleMatcher) -> None:
    assert matcher.check("anything", []) == []

  def test_orders_by_line_then_rule(self, matcher: RuleMatcher) -> None:
    first = _rule("FIRST", "b")
    second = _rule("SECOND", "a")
    text = "ab\nba"

    violations = matcher.check(text, [first, second])

    assert [(v.line, v.rule_id) for v in violations] == [
      (1, "FIRST"),
      (1, "SECOND"),
      (2, "FIRST"),
      (2, "SECOND"),
    ]

  def test_multiple_matches_on_line(self, matcher: RuleMatcher) -> None:
    rule = _rule("R", r"\bany\b")

    violations = matcher.check("(a: any, b: any) => a", [rule])

    assert [v.column for v in violations] == [5, 13]

  def test_line_endings(self, matcher: RuleMatcher, any_rule: RuleEntry) -> None:
    violations = matcher.check("ok\r\nx: any\rz: any\n", [any_rule])

    assert [v.line for v in violations] == [2, 3]

  def test_form_feed_stays_in_line(self, matcher: RuleMatcher, any_rule: RuleEntry) -> None:
    text = "// section\f\nconst a = 1;\nconst x: any = 1;\n"

    violations = matcher.check(text, [any_rule], "a.ts")

    assert [v.line for v in violations] == [3]

  def test_unicode_separators_stay_in_line(self, matcher: RuleMatcher, any_rule: RuleEntry) -> None:
    text = "a\u2028b\x85c\vd\nx: any"

    assert [v.line for v in matcher.check(text, [any_rule])] == [2]

  def test_path_recorded(self, matcher: RuleMatcher, any_rule: RuleEntry) -> None:
    violations = matcher.check("x: any", [any_rule], "src/a.ts")

    assert violations[0].path == "src/a.ts"

  def test_default_path_is_stdin(self, matcher: RuleMatcher, any_rule: RuleEntry) -> None:
    assert matcher.check("x: any", [any_rule])[0].path == "<stdin>"

  def test_extension_filter(self, matcher: RuleMatcher) -> None:
    rule = _rule("TSX", "div", extensions=(".tsx",))

    assert matcher.check("<div />", [rule], "a.css") == []
    assert len(matcher.check("<div />", [rule], "a.tsx")) == 1

  def test_deterministic(self, matcher: RuleMatcher) -> None:
    rules = [_rule("A", "a"), _rule("B", "b")]
    text = "abc\nbca\ncab"

    assert matcher.check(text, rules) == matcher.check(text, rules)

  def test_binary_like_text_does_not_raise(self, matcher: RuleMatcher, any_rule: RuleEntry) -> None:
    text = "\x00\x01� any \x7f"

    assert len(matcher.check(text, [any_rule])) == 1

  def test_string_pattern_is_compiled(self, matcher: RuleMatcher) -> None:
    rule = RuleEntry(
      id="RAW",
      title="raw",
      pattern="any",  # type: ignore[arg-type]
      severity=Severity.CRITICAL,
      message="m",
    )

    assert len(matcher.check("x: any", [rule])) == 1

  def test_broken_pattern_raises_match_error(self, matcher: RuleMatcher) -> None:
    rule = RuleEntry(
      id="BROKEN",
      title="broken",
      pattern="(unclosed",  # type: ignore[arg-type]
      severity=Severity.CRITICAL,
      message="m",
    )

    with pytest.raises(MatchError, match="BROKEN"):
      matcher.check("anything", [rule])


class TestCheckMany:
  def test_keeps_file_order(self, any_rule: RuleEntry) -> None:
    files = [
      SourceFile(path="b.ts", text="x: any"),
      SourceFile(path="a.ts", text="clean\ny: any"),
    ]

    violations = RuleMatcher().check_many(files, [any_rule])

    assert [(v.path, v.line) for v in violations] == [("b.ts", 1), ("a.ts", 2)]


def test_module_level_check(any_rule: RuleEntry) -> None:
  assert len(check("const x: any = 1;", [any_rule])) == 1


class TestSplitLines:
  def test_terminators(self) -> None:
    assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]

  def test_trailing_terminator(self) -> None:
    assert split_lines("a\nb\n") == ["a", "b"]

  def test_blank_lines_kept(self) -> None:
    assert split_lines("a\n\nb") == ["a", "", "b"]

  def test_empty(self) -> None:
    assert split_lines("") == []

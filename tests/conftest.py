"""Pytest fixtures."""

import re

import pytest
from shadlint.models import RuleEntry, Severity, Violation


@pytest.fixture
def any_rule() -> RuleEntry:
  return RuleEntry(
    id="TS001",
    title="no-explicit-any",
    pattern=re.compile(r"\bany\b"),
    severity=Severity.CRITICAL,
    message="Explicit 'any' disables type checking",
    suggestion="Use 'unknown' with narrowing",
  )


@pytest.fixture
def console_rule() -> RuleEntry:
  return RuleEntry(
    id="GEN001",
    title="no-console-log",
    pattern=re.compile(r"console\.log"),
    severity=Severity.IMPORTANT,
    message="Debug console output left in code",
  )


@pytest.fixture
def sample_violations(any_rule: RuleEntry, console_rule: RuleEntry) -> list[Violation]:
  return [
    Violation(path="app.ts", line=1, rule=any_rule, snippet="any", column=10),
    Violation(path="app.ts", line=4, rule=console_rule, snippet="console.log", column=3),
  ]


@pytest.fixture
def rule_file_content() -> str:
  return """
rules:
  - id: TS001
    title: no-explicit-any
    pattern: ':\\s*any\\b'
    severity: critical
    message: Explicit any
    extensions: [ts, tsx]
  - id: GEN001
    title: no-console-log
    pattern: 'console\\.log'
    severity: important
    message: Console output
    suggestion: Remove it
"""

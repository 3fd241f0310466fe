"""Output formatting for lint violations."""

import json
from abc import ABC, abstractmethod
from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from shadlint.models import Severity, Violation, count_by_severity

NO_VIOLATIONS = "No violations found."


def summarize(violations: Sequence[Violation]) -> str:
  """Summarize violations as a single sentence with severity counts."""
  if not violations:
    return NO_VIOLATIONS

  by_severity = count_by_severity(violations)

  parts = [
    f"{by_severity[sev]} {sev.value}"
    for sev in Severity
    if sev in by_severity
  ]

  count = len(violations)
  return f"Found {count} violation{'s' if count != 1 else ''}: {', '.join(parts)}."


class OutputFormatter(ABC):
  """Base output formatter."""

  @abstractmethod
  def format(self, violations: Sequence[Violation]) -> str:
    """Format violations for output."""
    ...


class TextFormatter(OutputFormatter):
  """Plain text formatter, one line per violation."""

  def format(self, violations: Sequence[Violation]) -> str:
    if not violations:
      return NO_VIOLATIONS

    lines = []
    for v in violations:
      lines.append(
        f"{v.path}:{v.line}:{v.column}: {v.severity.value.upper()} "
        f"[{v.rule_id}] {v.message}"
      )
      if v.rule.suggestion:
        lines.append(f"    suggestion: {v.rule.suggestion}")

    lines.append("")
    lines.append(summarize(violations))
    return "\n".join(lines)


class TerminalFormatter(OutputFormatter):
  """Rich table formatter, rendered to a string."""

  SEVERITY_STYLES = {
    Severity.CRITICAL: "bold red",
    Severity.IMPORTANT: "yellow",
    Severity.NICE_TO_HAVE: "blue",
  }

  def __init__(self, console: Console | None = None):
    self.console = console or Console()

  def format(self, violations: Sequence[Violation]) -> str:
    with self.console.capture() as capture:
      self._print_violations(violations)
    return capture.get().rstrip("\n")

  def _print_violations(self, violations: Sequence[Violation]) -> None:
    if not violations:
      self.console.print(f"[green]{NO_VIOLATIONS}[/green]")
      return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Severity", width=12)
    table.add_column("Location", min_width=20)
    table.add_column("Rule", width=8)
    table.add_column("Issue", min_width=40)

    for v in violations:
      style = self.SEVERITY_STYLES.get(v.severity, "")
      message = Text(v.message)
      message.append(f"\n{v.snippet}", style="dim")
      if v.rule.suggestion:
        message.append(f"\nSuggestion: {v.rule.suggestion}", style="dim")

      table.add_row(
        Text(v.severity.value.upper(), style=style),
        Text(f"{v.path}:{v.line}:{v.column}"),
        v.rule_id,
        message,
      )

    self.console.print(table)
    self.console.print(f"\n[dim]{summarize(violations)}[/dim]")


class JsonFormatter(OutputFormatter):
  """JSON output formatter."""

  def format(self, violations: Sequence[Violation]) -> str:
    data = {
      "summary": summarize(violations),
      "violations": [
        {
          "file": v.path,
          "line": v.line,
          "column": v.column,
          "rule": v.rule_id,
          "title": v.rule.title,
          "severity": v.severity.value,
          "message": v.message,
          "snippet": v.snippet,
          "suggestion": v.rule.suggestion,
        }
        for v in violations
      ],
    }
    return json.dumps(data, indent=2)


class MarkdownFormatter(OutputFormatter):
  """Markdown output formatter."""

  def format(self, violations: Sequence[Violation]) -> str:
    lines = [
      "# Style Review",
      "",
      "## Summary",
      "",
      summarize(violations),
      "",
    ]

    if not violations:
      return "\n".join(lines)

    lines.extend(["## Violations", ""])
    for v in violations:
      lines.append(f"### [{v.severity.value.upper()}] {v.path}:{v.line}")
      lines.append("")
      lines.append(f"**{v.rule_id}** ({v.rule.title}): {v.message}")
      lines.append("")
      lines.append(f"`{v.snippet}`")
      if v.rule.suggestion:
        lines.append("")
        lines.append(f"**Suggestion:** {v.rule.suggestion}")
      lines.append("")

    return "\n".join(lines)


class GitHubFormatter(OutputFormatter):
  """GitHub Actions workflow command formatter for PR annotations."""

  def format(self, violations: Sequence[Violation]) -> str:
    lines = []
    for v in violations:
      level = self._severity_to_level(v.severity)
      location = f"file={v.path},line={v.line},col={v.column}"
      message = f"[{v.rule_id}] {v.message}"
      message = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
      lines.append(f"::{level} {location}::{message}")
    return "\n".join(lines)

  def _severity_to_level(self, severity: Severity) -> str:
    if severity == Severity.CRITICAL:
      return "error"
    if severity == Severity.IMPORTANT:
      return "warning"
    return "notice"


FORMATTERS: dict[str, type[OutputFormatter]] = {
  "text": TextFormatter,
  "terminal": TerminalFormatter,
  "json": JsonFormatter,
  "markdown": MarkdownFormatter,
  "github": GitHubFormatter,
}


def get_formatter(format_type: str) -> OutputFormatter:
  """Get formatter by type name."""
  formatter_class = FORMATTERS.get(format_type)
  if not formatter_class:
    raise ValueError(f"Unknown format: {format_type}")
  return formatter_class()


def format(violations: Sequence[Violation]) -> str:
  """Format violations as plain text."""
  return TextFormatter().format(violations)

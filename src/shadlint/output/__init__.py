"""Output formatting."""

from shadlint.output.formatter import (
    FORMATTERS,
    GitHubFormatter,
    JsonFormatter,
    MarkdownFormatter,
    OutputFormatter,
    TerminalFormatter,
    TextFormatter,
    format,
    get_formatter,
    summarize,
)

__all__ = [
  "FORMATTERS",
  "GitHubFormatter",
  "JsonFormatter",
  "MarkdownFormatter",
  "OutputFormatter",
  "TerminalFormatter",
  "TextFormatter",
  "format",
  "get_formatter",
  "summarize",
]

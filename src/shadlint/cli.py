"""CLI interface using Typer."""

import os
import sys
import traceback
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shadlint import __version__
from shadlint.config import ConfigError
from shadlint.lint import Linter, resolve_settings
from shadlint.models import LintResult, Severity
from shadlint.output import FORMATTERS, get_formatter
from shadlint.rules import LoadError, MatchError
from shadlint.sources import FileError

app = typer.Typer(
  name="shadlint",
  help="Style-guide linter for React, TypeScript, Tailwind and ShadCN code",
  no_args_is_help=False,
)

console = Console()
err_console = Console(stderr=True)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def _is_debug() -> bool:
  return os.environ.get("SHADLINT_DEBUG", "").lower() in ("1", "true", "yes")


def version_callback(value: bool) -> None:
  if value:
    console.print(f"shadlint {__version__}")
    raise typer.Exit()


@app.command()
def main(
  files: Optional[list[str]] = typer.Argument(
    None,
    help="Files, directories or glob patterns to lint; '-' reads standard input",
  ),
  format_type: str = typer.Option(
    None, "--format", "-f", help=f"Output format: {', '.join(FORMATTERS)}"
  ),
  rules: Path = typer.Option(None, "--rules", "-r", help="YAML rule file (default: built-in rules)"),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  enable: str = typer.Option(None, "--enable", help="Only run these rule ids (comma-separated)"),
  disable: str = typer.Option(None, "--disable", help="Skip these rule ids (comma-separated)"),
  fail_on: Optional[Severity] = typer.Option(
    None, "--fail-on", help="Lowest severity that makes the exit code 1 (default: critical)"
  ),
  extensions: str = typer.Option(
    None, "--ext", help="File suffixes collected from directories (comma-separated, e.g. tsx,css)"
  ),
  list_rules: bool = typer.Option(False, "--list-rules", help="List loaded rules and exit"),
  verbose: bool = typer.Option(False, "--verbose", help="Print progress to stderr"),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show full traceback on errors"),
  version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
  """Lint source files against the style guide.

  With no file arguments, reads source text from standard input.
  Exits 1 when a violation at or above the fail threshold is found.
  """
  show_traceback = debug or _is_debug()

  try:
    settings = resolve_settings(
      config_path=config,
      rules_file=rules,
      enable=_parse_ids(enable),
      disable=_parse_ids(disable),
      fail_on=fail_on,
      format_type=format_type,
      extensions=_parse_ids(extensions),
    )
    formatter = get_formatter(settings.format)
    linter = Linter(settings, verbose=verbose)

    if list_rules:
      _print_rules(linter)
      raise typer.Exit(EXIT_OK)

    result = _run(linter, files)
    typer.echo(formatter.format(result.violations))

  except typer.Exit:
    raise
  except (LoadError, FileError, ConfigError, FileNotFoundError, ValueError) as e:
    err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
    raise typer.Exit(EXIT_ERROR) from None
  except MatchError as e:
    err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
    if show_traceback:
      err_console.print(traceback.format_exc(), markup=False)
    raise typer.Exit(EXIT_ERROR) from None
  except Exception as e:
    err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
    if show_traceback:
      err_console.print("\n[dim]Traceback:[/dim]")
      err_console.print(traceback.format_exc(), markup=False)
    raise typer.Exit(EXIT_ERROR) from None

  if result.failed:
    raise typer.Exit(EXIT_VIOLATIONS)


def _run(linter: Linter, files: list[str] | None) -> LintResult:
  """Lint named files, or standard input when none (or '-') is given."""
  patterns = [f for f in files or [] if f != "-"]
  if patterns:
    return linter.lint_files(patterns)

  if not files and sys.stdin.isatty():
    raise FileError("No files given and nothing piped on standard input")
  return linter.lint_text(sys.stdin.read())


def _parse_ids(value: str | None) -> list[str] | None:
  """Parse a comma-separated list of rule ids or suffixes."""
  if not value:
    return None
  ids = [part.strip() for part in value.split(",") if part.strip()]
  return ids or None


def _print_rules(linter: Linter) -> None:
  table = Table(show_header=True, header_style="bold")
  table.add_column("Id", width=8)
  table.add_column("Title", min_width=20)
  table.add_column("Severity", width=12)
  table.add_column("Files")

  for rule in linter.rules:
    table.add_row(
      rule.id,
      rule.title,
      rule.severity.value,
      " ".join(rule.extensions) or "all",
    )

  console.print(table)


if __name__ == "__main__":
  app()

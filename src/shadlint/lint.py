"""Core lint orchestration."""

from pathlib import Path

from rich.console import Console

from shadlint.config import Settings, load_config
from shadlint.models import LintResult, RuleEntry, Severity
from shadlint.rules import RuleMatcher, load, select
from shadlint.sources import STDIN_NAME, SourceFile, collect_files

_console = Console(stderr=True)


class Linter:
  """Runs a loaded rule set over source files."""

  def __init__(self, settings: Settings | None = None, verbose: bool = False):
    self.settings = settings or Settings()
    self.verbose = verbose
    self._matcher = RuleMatcher()
    self.rules = self._load_rules()

  def _load_rules(self) -> tuple[RuleEntry, ...]:
    """Load and filter rules. Raises LoadError before any checking."""
    rules = load(self.settings.rules_file)
    rules = select(rules, self.settings.enable, self.settings.disable)
    if self.verbose:
      origin = self.settings.rules_file or "built-in rules"
      _console.print(f"[dim]Loaded {len(rules)} rule(s) from {origin}[/dim]")
    return rules

  def lint_files(self, patterns: list[str], cwd: Path | None = None) -> LintResult:
    """Lint files matching the given paths, directories or globs."""
    files = collect_files(patterns, cwd, extensions=self.settings.extensions)
    return self._lint(files)

  def lint_text(self, text: str, path: str | None = None) -> LintResult:
    """Lint raw text, e.g. from standard input."""
    return self._lint([SourceFile(path=path or STDIN_NAME, text=text)])

  def _lint(self, files: list[SourceFile]) -> LintResult:
    if self.verbose:
      _console.print(f"[dim]Checking {len(files)} file(s)[/dim]")

    violations = self._matcher.check_many(files, self.rules)
    return LintResult(
      violations=violations,
      files_checked=len(files),
      fail_on=self.settings.fail_on,
    )


def resolve_settings(
  config_path: Path | None = None,
  rules_file: Path | None = None,
  enable: list[str] | None = None,
  disable: list[str] | None = None,
  fail_on: Severity | None = None,
  format_type: str | None = None,
  extensions: list[str] | None = None,
) -> Settings:
  """Load config and apply command-line overrides."""
  settings = load_config(config_path).model_copy(deep=True)

  if rules_file:
    settings.rules_file = rules_file
  if enable:
    settings.enable = enable
  if disable:
    settings.disable = [*settings.disable, *disable]
  if fail_on:
    settings.fail_on = fail_on
  if format_type:
    settings.format = format_type
  if extensions:
    settings.extensions = extensions

  return settings


def run_lint(
  files: list[str] | None = None,
  stdin_text: str | None = None,
  rules_file: Path | None = None,
  config_path: Path | None = None,
  enable: list[str] | None = None,
  disable: list[str] | None = None,
  fail_on: Severity | None = None,
  extensions: list[str] | None = None,
  settings: Settings | None = None,
  verbose: bool = False,
) -> LintResult:
  """Run a lint with the given options.

  Exactly one of files or stdin_text is linted; files win when both
  are given.
  """
  if settings is None:
    settings = resolve_settings(
      config_path=config_path,
      rules_file=rules_file,
      enable=enable,
      disable=disable,
      fail_on=fail_on,
      extensions=extensions,
    )

  linter = Linter(settings, verbose=verbose)

  if files:
    return linter.lint_files(files)
  return linter.lint_text(stdin_text or "")

"""Source file collection from paths, directories, globs and stdin."""

import glob as globmod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, TextIO

STDIN_NAME = "<stdin>"

DEFAULT_EXTENSIONS: tuple[str, ...] = (
  ".ts",
  ".tsx",
  ".js",
  ".jsx",
  ".mjs",
  ".cjs",
  ".mts",
  ".cts",
  ".css",
)

# Directories never worth linting
_EXCLUDED_DIRS: set[str] = {
  "node_modules",
  ".git",
  "dist",
  "build",
  ".next",
  "out",
  "coverage",
  ".turbo",
  ".vercel",
  "storybook-static",
}


class FileError(Exception):
  """File operation failed."""


@dataclass(frozen=True)
class SourceFile:
  """Text of one file to lint."""

  path: str
  text: str


def read_stdin(stream: TextIO) -> SourceFile:
  """Read all of a text stream as a single source."""
  return SourceFile(path=STDIN_NAME, text=stream.read())


def collect_files(
  patterns: list[str],
  cwd: Path | None = None,
  extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[SourceFile]:
  """Resolve patterns to files and read them.

  Args:
    patterns: File paths, directories or glob patterns.
    cwd: Base directory for relative patterns (default: current dir).
    extensions: Suffixes picked up when expanding a directory.

  Raises:
    FileError: If nothing matches or a file cannot be read.
  """
  base_path = cwd or Path.cwd()
  exts = tuple(_normalize_extension(e) for e in extensions)
  resolved = _resolve_patterns(patterns, base_path, exts)

  if not resolved:
    raise FileError(_no_files_error(patterns, base_path))

  return [_read_file(p, base_path) for p in resolved]


def _normalize_extension(ext: str) -> str:
  ext = ext.lower()
  return ext if ext.startswith(".") else f".{ext}"


def _resolve_patterns(
  patterns: list[str],
  base_path: Path,
  extensions: tuple[str, ...],
) -> list[Path]:
  """Expand each pattern and return unique, non-excluded file paths."""
  seen: set[Path] = set()
  result: list[Path] = []

  for pattern in patterns:
    for path in _expand_pattern(pattern, base_path, extensions):
      if path in seen:
        continue
      seen.add(path)
      result.append(path)

  return result


def _expand_pattern(
  pattern: str,
  base_path: Path,
  extensions: tuple[str, ...],
) -> list[Path]:
  """Expand a single pattern to matching files.

  Paths that exist on disk are taken literally, so names such as
  ``app/[slug]/page.tsx`` are never read as glob syntax.
  """
  p = Path(pattern)
  full_path = p if p.is_absolute() else base_path / p

  if full_path.is_file():
    # Explicitly named files are linted even inside excluded dirs
    return [full_path]

  if full_path.is_dir():
    escaped = Path(globmod.escape(str(full_path)))
    matches: list[Path] = []
    for ext in extensions:
      matches.extend(_glob_files(str(escaped / "**" / f"*{ext}"), root=full_path))
    return matches

  if _is_glob(pattern):
    return _glob_files(str(full_path), root=_glob_root(full_path))

  return []


def _glob_files(pattern: str, root: Path) -> list[Path]:
  """Glob recursively, keeping files not under an excluded dir below root."""
  return [
    path
    for path in (Path(match) for match in sorted(globmod.glob(pattern, recursive=True)))
    if path.is_file() and not _is_excluded(path, root)
  ]


def _is_glob(pattern: str) -> bool:
  return any(c in pattern for c in "*?[")


def _glob_root(path: Path) -> Path:
  """Longest leading part of a glob path that holds no glob syntax."""
  parts: list[str] = []
  for part in path.parts:
    if _is_glob(part):
      break
    parts.append(part)
  return Path(*parts) if parts else Path(path.anchor)


def _is_excluded(path: Path, root: Path) -> bool:
  """Check for excluded directories between root and path."""
  try:
    parts = path.relative_to(root).parts[:-1]
  except ValueError:
    return False
  return bool(set(parts) & _EXCLUDED_DIRS)


def _no_files_error(patterns: list[str], base_path: Path) -> str:
  """Generate a helpful error message when no files are found."""
  dirs = [p for p in patterns if (base_path / p).is_dir() or Path(p).is_dir()]

  if dirs:
    return (
      f"No lintable files found in: {', '.join(dirs)}\n"
      "Try naming files directly, e.g.:\n"
      f"  shadlint '{dirs[0]}/**/*.tsx'"
    )

  return (
    f"No files matched: {', '.join(patterns)}\n"
    "Use glob patterns like: shadlint 'src/**/*.tsx'"
  )


def _read_file(file_path: Path, base_path: Path) -> SourceFile:
  try:
    rel_path = str(file_path.relative_to(base_path))
  except ValueError:
    rel_path = str(file_path)

  try:
    text = file_path.read_text(encoding="utf-8")
  except (OSError, UnicodeDecodeError) as e:
    raise FileError(f"Cannot read {rel_path}: {e}") from e

  return SourceFile(path=rel_path, text=text)

"""Source file enumeration and text I/O."""

import subprocess
from pathlib import Path
from typing import Iterable


class FileError(Exception):
  """File operation failed."""


def collect_source_files(
  path: Path,
  extensions: Iterable[str],
  exclude_dirs: Iterable[str] = (),
  respect_gitignore: bool = True,
) -> list[Path]:
  """Return the source files to scan under path, sorted.

  An explicit file is returned unchanged, whatever its extension.
  Directories are walked recursively and filtered by extension,
  excluded directory names and, inside a git work tree, .gitignore.
  """
  if not path.exists():
    raise FileError(f"Path not found: {path}")

  if path.is_file():
    return [path]

  suffixes = {f".{ext.lstrip('.')}" for ext in extensions}
  excluded = set(exclude_dirs)

  found = sorted(
    p for p in path.rglob("*")
    if p.suffix in suffixes
    and p.is_file()
    and not excluded.intersection(p.relative_to(path).parts)
  )

  if respect_gitignore:
    return _filter_gitignored(found, path)
  return found


def _find_git_root(start: Path) -> Path | None:
  """Walk upward to the directory holding .git (dir, or file for worktrees)."""
  current = start.resolve()
  for candidate in (current, *current.parents):
    if (candidate / ".git").exists():
      return candidate
  return None


def _filter_gitignored(paths: list[Path], base_path: Path) -> list[Path]:
  """Drop paths git reports as ignored; keep everything outside a repo."""
  if not paths:
    return []

  git_root = _find_git_root(base_path)
  if git_root is None:
    return paths

  by_rel: dict[str, Path] = {}
  for p in paths:
    try:
      by_rel[str(p.resolve().relative_to(git_root))] = p
    except ValueError:
      return paths

  # -z keeps filenames with newlines intact
  try:
    result = subprocess.run(
      ["git", "check-ignore", "--stdin", "-z"],
      cwd=git_root,
      input="\0".join(by_rel.keys()),
      capture_output=True,
      text=True,
    )
  except FileNotFoundError:
    return paths

  ignored = {p for p in result.stdout.split("\0") if p}
  return [p for rel, p in by_rel.items() if rel not in ignored]


def read_source(path: Path, encoding: str = "utf-8") -> str:
  """Read a source file without newline translation.

  Line endings are kept as-is so that line numbers computed by counting
  '\\n' agree between discovery and rewriting.

  Raises:
    FileError: If the file cannot be read or decoded.
  """
  try:
    with open(path, encoding=encoding, newline="") as f:
      return f.read()
  except (OSError, UnicodeDecodeError) as e:
    raise FileError(f"Cannot read {path}: {e}") from e


def write_source(path: Path, content: str, encoding: str = "utf-8") -> None:
  """Write content back in place without newline translation."""
  try:
    with open(path, "w", encoding=encoding, newline="") as f:
      f.write(content)
  except OSError as e:
    raise FileError(f"Cannot write {path}: {e}") from e

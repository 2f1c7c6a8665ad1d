"""Statement discovery over whole-file buffers."""

import re
from bisect import bisect_left
from pathlib import Path
from typing import Iterable, Sequence

from dbgc.files import read_source
from dbgc.models import Match
from dbgc.patterns import PatternSet, build_pattern_set

# A statement is disabled when its first line starts with a line comment
_COMMENTED = re.compile(r"^\s*//")


def is_commented(line: str) -> bool:
  """Check whether a line begins with a // comment marker."""
  return _COMMENTED.match(line) is not None


def render(raw_lines: Sequence[str]) -> str:
  """Collapse spanned lines into one whitespace-normalized display line."""
  return " ".join(" ".join(raw_lines).split())


class StatementFinder:
  """Finds diagnostic-output statements with a fixed pattern set.

  The finder works on the whole file as one buffer so that a call whose
  opening and terminator sit on different lines is still one match. Line
  numbers come from counting newlines before the match offsets.

  Example:
    finder = StatementFinder(build_pattern_set(detect_all=False))
    active = finder.find(paths, find_commented=False)
  """

  def __init__(self, patterns: PatternSet, encoding: str = "utf-8"):
    self.patterns = patterns
    self.encoding = encoding

  def find(self, file_paths: Iterable[Path], find_commented: bool) -> list[Match]:
    """Find matches in each file, in file order then line order.

    Raises:
      FileError: On the first file that cannot be read or decoded.
    """
    matches: list[Match] = []
    for path in file_paths:
      content = read_source(path, self.encoding)
      matches.extend(self.find_in_content(path, content, find_commented))
    return matches

  def find_in_content(
    self,
    file_path: Path,
    content: str,
    find_commented: bool,
  ) -> list[Match]:
    """Find matches in already-read file content."""
    return [
      m for m in self.scan(file_path, content)
      if is_commented(m.raw_lines[0]) == find_commented
    ]

  def scan(self, file_path: Path, content: str) -> list[Match]:
    """Return every statement, commented or not, one per start line.

    Hits are ordered by offset, then by family evaluation order; only the
    first hit starting on a given line is kept.
    """
    newlines = [i for i, ch in enumerate(content) if ch == "\n"]
    lines = content.split("\n")

    candidates = sorted(self.patterns.scan(content), key=lambda c: (c.start, c.order))

    seen: set[int] = set()
    matches: list[Match] = []
    for candidate in candidates:
      start_line = bisect_left(newlines, candidate.start) + 1
      if start_line in seen:
        continue
      seen.add(start_line)

      end_line = bisect_left(newlines, candidate.end) + 1
      raw_lines = tuple(line.rstrip("\r") for line in lines[start_line - 1:end_line])
      matches.append(Match(
        file_path=file_path,
        start_line=start_line,
        end_line=end_line,
        rendered_text=render(raw_lines),
        raw_lines=raw_lines,
        family=candidate.family,
      ))

    return matches


def find_statements(
  file_paths: Iterable[Path],
  find_commented: bool,
  detect_all: bool,
  families: list[str] | None = None,
  encoding: str = "utf-8",
) -> list[Match]:
  """Find commented or active statements across files.

  Args:
    file_paths: Files to scan, already filtered by the caller.
    find_commented: Return disabled statements if True, active ones if False.
    detect_all: Match every output statement instead of only those whose
      arguments contain "debug" or "DEBUG".
    families: Optional subset of recognizer family names.
    encoding: Text encoding used to decode the files.
  """
  finder = StatementFinder(build_pattern_set(detect_all, families), encoding=encoding)
  return finder.find(file_paths, find_commented)

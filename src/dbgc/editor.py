"""In-place rewriting of matched statements."""

import re
from collections import defaultdict
from pathlib import Path
from typing import Sequence

from dbgc.files import FileError, read_source, write_source
from dbgc.models import EditFailure, EditReport, Match, Operation

COMMENT_MARKER = "//"

_LEADING_COMMENT = re.compile(r"^(\s*)// ?")


def comment_line(line: str) -> str:
  """Insert a line comment before the first non-whitespace character.

  Lines that are already commented come back unchanged.
  """
  if _LEADING_COMMENT.match(line):
    return line
  body = line.lstrip()
  indent = line[:len(line) - len(body)]
  return f"{indent}{COMMENT_MARKER} {body}"


def uncomment_line(line: str) -> str:
  """Strip a leading // and at most one following space."""
  return _LEADING_COMMENT.sub(r"\1", line, count=1)


def split_lines(content: str) -> list[str]:
  """Split on '\\n', dropping the empty tail left by a final newline.

  A '\\r' before each '\\n' stays on its line so CRLF files round-trip.
  """
  lines = content.split("\n")
  if lines and lines[-1] == "":
    lines.pop()
  return lines


def toggle_lines(lines: list[str], matches: Sequence[Match], enable: bool) -> list[str]:
  """Comment or uncomment the first line of each match.

  Matches are applied from the bottom of the file up. Only the first line
  of a multi-line statement is touched.
  """
  result = list(lines)
  edit = uncomment_line if enable else comment_line
  for m in sorted(matches, key=lambda m: m.start_line, reverse=True):
    idx = m.start_line - 1
    if idx < len(result):
      result[idx] = edit(result[idx])
  return result


def delete_lines(lines: list[str], matches: Sequence[Match]) -> list[str]:
  """Remove every line spanned by any match.

  Spans are merged as a set of indices first, so overlapping or
  duplicated matches never shift one another.
  """
  doomed: set[int] = set()
  for m in matches:
    doomed.update(range(m.start_line - 1, m.end_line))
  return [line for idx, line in enumerate(lines) if idx not in doomed]


def rewrite(content: str, matches: Sequence[Match], operation: Operation) -> str:
  """Apply an operation to one file's content and return the new content."""
  lines = split_lines(content)
  if operation == Operation.DELETE:
    lines = delete_lines(lines, matches)
  else:
    lines = toggle_lines(lines, matches, enable=operation == Operation.ENABLE)
  return "\n".join(lines) + "\n"


def group_by_file(matches: Sequence[Match]) -> dict[Path, list[Match]]:
  """Group matches by owning file, keeping input order within a file."""
  grouped: dict[Path, list[Match]] = defaultdict(list)
  for m in matches:
    grouped[m.file_path].append(m)
  return dict(grouped)


def apply_changes(
  matches: Sequence[Match],
  operation: Operation,
  encoding: str = "utf-8",
) -> EditReport:
  """Rewrite every file owning a selected match.

  Each file is read once, transformed in memory and written once. A file
  that fails is recorded and the remaining files are still processed;
  files already written stay written.

  Returns:
    EditReport listing written files, the statement count and failures.
  """
  written: list[Path] = []
  failures: list[EditFailure] = []
  applied = 0

  grouped = group_by_file(matches)
  for file_path in sorted(grouped):
    file_matches = grouped[file_path]
    try:
      content = read_source(file_path, encoding)
      write_source(file_path, rewrite(content, file_matches, operation), encoding)
    except FileError as e:
      failures.append(EditFailure(file_path=file_path, message=str(e)))
      continue
    written.append(file_path)
    applied += len(file_matches)

  return EditReport(files_written=written, statements=applied, failures=failures)

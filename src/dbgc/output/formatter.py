"""Console rendering of matches and run results."""

import json
import re
from abc import ABC, abstractmethod
from collections import defaultdict
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.text import Text

from dbgc.models import Match, Outcome, ProcessResult, statement_kind

FILE_STYLE = "magenta"
LINE_STYLE = "green"
MARKER_STYLE = "bold red"

_MARKER = re.compile(r"debug|DEBUG")


def highlight_markers(text: str) -> Text:
  """Return text with the marker words highlighted."""
  rendered = Text(text)
  rendered.highlight_regex(_MARKER, style=MARKER_STYLE)
  return rendered


def match_line(m: Match) -> Text:
  """Render `line:statement` for one match, ripgrep style."""
  line = Text(str(m.start_line), style=LINE_STYLE)
  if m.is_multiline:
    line.append(f"-{m.end_line}", style=LINE_STYLE)
  line.append(":")
  line.append_text(highlight_markers(m.rendered_text))
  return line


def group_sorted(matches: Sequence[Match]) -> list[tuple[Path, list[Match]]]:
  """Group matches by file; files sorted by path, matches by line."""
  grouped: dict[Path, list[Match]] = defaultdict(list)
  for m in matches:
    grouped[m.file_path].append(m)
  return [
    (path, sorted(grouped[path], key=lambda m: m.start_line))
    for path in sorted(grouped)
  ]


def print_matches(console: Console, matches: Sequence[Match], detect_all: bool = False) -> None:
  """Print every match grouped under its file."""
  kind = statement_kind(detect_all)
  console.print(f"\nFound {len(matches)} {kind} statement(s):\n", highlight=False)
  for path, file_matches in group_sorted(matches):
    console.print(Text(str(path), style=FILE_STYLE))
    for m in file_matches:
      console.print(match_line(m))
    console.print()


class OutputFormatter(ABC):
  """Base result formatter."""

  @abstractmethod
  def format(self, result: ProcessResult) -> str:
    """Format a run result for output."""
    ...


class TerminalFormatter(OutputFormatter):
  """Rich terminal report line."""

  def __init__(self, console: Console | None = None):
    self.console = console or Console()

  def format(self, result: ProcessResult) -> str:
    self.console.print(self._outcome_text(result))
    if result.report:
      for failure in result.report.failures:
        self.console.print(Text(f"Failed: {failure.message}", style="red"))
    return ""

  def _outcome_text(self, result: ProcessResult) -> Text:
    count = len(result.selected)
    verb = result.operation.verb

    if result.outcome == Outcome.NO_MATCHES:
      return Text(f"No matching {result.kind} statements found.", style="yellow")
    if result.outcome == Outcome.CANCELLED:
      return Text("\nOperation cancelled. No statements were changed.", style="yellow")
    if result.outcome == Outcome.DRY_RUN:
      return Text(f"\n[DRY RUN] Would {verb} {count} statement(s).", style="cyan")

    applied = result.report.statements if result.report else count
    style = "green" if not result.has_failures else "yellow"
    return Text(f"\nSuccessfully processed {applied} statement(s).", style=style)


class JsonFormatter(OutputFormatter):
  """JSON output formatter."""

  def format(self, result: ProcessResult) -> str:
    data = {
      "operation": result.operation.value,
      "outcome": result.outcome.value,
      "detect_all": result.detect_all,
      "found": result.found,
      "selected": [
        {
          "file": str(m.file_path),
          "start_line": m.start_line,
          "end_line": m.end_line,
          "family": m.family,
          "text": m.rendered_text,
        }
        for m in result.selected
      ],
      "processed": result.report.statements if result.report else 0,
      "failures": [
        {"file": str(f.file_path), "message": f.message}
        for f in (result.report.failures if result.report else [])
      ],
    }
    return json.dumps(data, indent=2)


def get_formatter(format_type: str, console: Console | None = None) -> OutputFormatter:
  """Get formatter by type name."""
  if format_type == "terminal":
    return TerminalFormatter(console)
  if format_type == "json":
    return JsonFormatter()
  raise ValueError(f"Unknown format: {format_type}")

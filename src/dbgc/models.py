"""Core domain models for statement toggling."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Sequence


class Operation(Enum):
  """What to do with the selected statements."""

  ENABLE = "enable"
  DISABLE = "disable"
  DELETE = "delete"

  @property
  def verb(self) -> str:
    """Verb used in prompts and reports."""
    return {
      Operation.ENABLE: "uncomment",
      Operation.DISABLE: "comment out",
      Operation.DELETE: "delete",
    }[self]

  @property
  def searches_commented(self) -> bool:
    """Population searched when enabling or disabling."""
    return self == Operation.ENABLE


class ReviewLayout(Enum):
  """Interactive review rendering."""

  LIST = "list"
  TABLE = "table"


class Outcome(Enum):
  """Terminal outcome of one pipeline run."""

  NO_MATCHES = "no_matches"
  CANCELLED = "cancelled"
  DRY_RUN = "dry_run"
  APPLIED = "applied"


def statement_kind(detect_all: bool) -> str:
  """Describe what was searched for: every output statement or debug ones."""
  return "output" if detect_all else "debug"


@dataclass(frozen=True)
class Match:
  """One diagnostic-output statement found in a source file."""

  file_path: Path
  start_line: int
  end_line: int
  rendered_text: str
  raw_lines: tuple[str, ...] = ()
  family: str = ""

  def __post_init__(self) -> None:
    if self.start_line < 1 or self.end_line < self.start_line:
      raise ValueError(
        f"Invalid span {self.start_line}-{self.end_line} in {self.file_path}"
      )

  @property
  def is_multiline(self) -> bool:
    return self.end_line > self.start_line


@dataclass(frozen=True)
class EditFailure:
  """A file the mutation engine could not rewrite."""

  file_path: Path
  message: str


@dataclass(frozen=True)
class EditReport:
  """Result of applying an operation to a set of matches."""

  files_written: Sequence[Path] = field(default_factory=list)
  statements: int = 0
  failures: Sequence[EditFailure] = field(default_factory=list)

  @property
  def ok(self) -> bool:
    return not self.failures


@dataclass(frozen=True)
class ProcessResult:
  """Summary of one enable/disable/delete run."""

  operation: Operation
  outcome: Outcome
  found: int = 0
  selected: Sequence[Match] = field(default_factory=list)
  report: EditReport | None = None
  detect_all: bool = False

  @property
  def has_failures(self) -> bool:
    return self.report is not None and not self.report.ok

  @property
  def kind(self) -> str:
    """Statement kind used in messages for this detection mode."""
    return statement_kind(self.detect_all)

"""Pipeline orchestration: find, review, mutate, report."""

from pathlib import Path

from rich.console import Console

from dbgc.config import Settings, load_config
from dbgc.editor import apply_changes
from dbgc.files import collect_source_files
from dbgc.finder import StatementFinder
from dbgc.models import Match, Operation, Outcome, ProcessResult, ReviewLayout
from dbgc.patterns import build_pattern_set
from dbgc.review import Reviewer, get_reviewer

_console = Console(stderr=True)


class Processor:
  """Runs one enable, disable or delete pass over a path.

  All discovery finishes before the reviewer runs, and the reviewer
  returns before any file is written, so a cancel never leaves a
  partially applied run behind.
  """

  def __init__(
    self,
    settings: Settings | None = None,
    reviewer: Reviewer | None = None,
    dry_run: bool = False,
  ):
    self.settings = settings or Settings()
    self.reviewer = reviewer or get_reviewer(
      self.settings.interactive,
      self.settings.layout,
      detect_all=self.settings.detect_all,
    )
    self.dry_run = dry_run
    self._finder = StatementFinder(
      build_pattern_set(self.settings.detect_all, self.settings.families),
      encoding=self.settings.encoding,
    )

  def collect(self, path: Path) -> list[Path]:
    """Enumerate the source files under path."""
    return collect_source_files(
      path,
      self.settings.extensions,
      self.settings.exclude_dirs,
      self.settings.respect_gitignore,
    )

  def discover(self, path: Path, operation: Operation) -> list[Match]:
    """Find the population the operation acts on.

    Delete searches active statements first, then commented ones.
    """
    files = self.collect(path)
    with _console.status(f"Scanning {len(files)} file(s)..."):
      if operation == Operation.DELETE:
        return (
          self._finder.find(files, find_commented=False)
          + self._finder.find(files, find_commented=True)
        )
      return self._finder.find(files, find_commented=operation.searches_commented)

  def process(self, path: Path, operation: Operation) -> ProcessResult:
    """Run the full pipeline for one operation."""
    matches = self.discover(path, operation)
    if not matches:
      return ProcessResult(
        operation=operation,
        outcome=Outcome.NO_MATCHES,
        detect_all=self.settings.detect_all,
      )

    selected = self.reviewer.review(matches, operation)
    if not selected:
      return ProcessResult(
        operation=operation,
        outcome=Outcome.CANCELLED,
        found=len(matches),
        detect_all=self.settings.detect_all,
      )

    if self.dry_run:
      return ProcessResult(
        operation=operation,
        outcome=Outcome.DRY_RUN,
        found=len(matches),
        selected=selected,
        detect_all=self.settings.detect_all,
      )

    report = apply_changes(selected, operation, encoding=self.settings.encoding)
    return ProcessResult(
      operation=operation,
      outcome=Outcome.APPLIED,
      found=len(matches),
      selected=selected,
      report=report,
      detect_all=self.settings.detect_all,
    )


def process_path(
  path: Path,
  operation: Operation,
  assume_yes: bool = False,
  detect_all: bool | None = None,
  interactive: bool | None = None,
  layout: ReviewLayout | None = None,
  dry_run: bool = False,
  no_ignore: bool = False,
  config_path: Path | None = None,
  console: Console | None = None,
) -> ProcessResult:
  """Run an operation with config-file settings overridden by flags."""
  settings = load_config(config_path).model_copy(deep=True)

  if detect_all:
    settings.detect_all = True
  if layout:
    settings.layout = layout
    settings.interactive = True
  if interactive:
    settings.interactive = True
  if no_ignore:
    settings.respect_gitignore = False
    settings.exclude_dirs = []

  reviewer = get_reviewer(
    settings.interactive,
    settings.layout,
    assume_yes=assume_yes,
    console=console,
    detect_all=settings.detect_all,
  )
  processor = Processor(settings, reviewer=reviewer, dry_run=dry_run)
  return processor.process(path, operation)

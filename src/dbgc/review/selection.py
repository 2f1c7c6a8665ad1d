"""Terminal-independent selection state for interactive review."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Sequence

from dbgc.models import Match


class ReviewState(Enum):
  """Lifecycle of one review session."""

  BROWSING = "browsing"
  CONFIRMED = "confirmed"
  CANCELLED = "cancelled"


class Action(Enum):
  """Input events the review session reacts to."""

  UP = "up"
  DOWN = "down"
  TOGGLE = "toggle"
  TOGGLE_ALL = "toggle_all"
  NEXT_FILE = "next_file"
  PREV_FILE = "prev_file"
  CONFIRM = "confirm"
  CANCEL = "cancel"


class RowKind(Enum):
  HEADER = "header"
  MATCH = "match"


@dataclass(frozen=True)
class Row:
  """One rendered line of the review list."""

  kind: RowKind
  file_path: Path
  index: int | None = None

  @property
  def selectable(self) -> bool:
    return self.kind == RowKind.MATCH


class SelectionState:
  """Chosen flags, cursor and focused file over a fixed match sequence.

  Two views are supported. The list view shows every file, each under a
  non-selectable header row. The per-file view shows one file at a time
  and switches between files without touching the chosen flags, which are
  always global.

  The cursor is tracked as an index into ``matches``, never as a row
  position, so it always points at a selectable row.
  """

  def __init__(
    self,
    matches: Sequence[Match],
    chosen: bool = True,
    per_file: bool = False,
  ):
    self.matches: tuple[Match, ...] = tuple(matches)
    self.chosen: list[bool] = [chosen] * len(self.matches)
    self.per_file = per_file
    self.state = ReviewState.BROWSING

    self._by_file: dict[Path, list[int]] = {}
    for i, m in enumerate(self.matches):
      self._by_file.setdefault(m.file_path, []).append(i)
    self.files: tuple[Path, ...] = tuple(self._by_file)

    self.file_index = 0
    self.cursor: int | None = self._first_visible()

  @property
  def current_file(self) -> Path | None:
    if not self.files:
      return None
    if self.per_file:
      return self.files[self.file_index]
    if self.cursor is None:
      return None
    return self.matches[self.cursor].file_path

  def visible_indices(self) -> list[int]:
    """Match indices in display order for the active view."""
    if not self.files:
      return []
    if self.per_file:
      return list(self._by_file[self.files[self.file_index]])
    return [i for f in self.files for i in self._by_file[f]]

  def rows(self) -> list[Row]:
    """Rows to render, including file headers in the list view."""
    if self.per_file:
      return [
        Row(RowKind.MATCH, self.matches[i].file_path, i)
        for i in self.visible_indices()
      ]

    rows: list[Row] = []
    for f in self.files:
      rows.append(Row(RowKind.HEADER, f))
      rows.extend(Row(RowKind.MATCH, f, i) for i in self._by_file[f])
    return rows

  def cursor_row(self) -> int | None:
    """Row position of the cursor within rows()."""
    if self.cursor is None:
      return None
    for pos, row in enumerate(self.rows()):
      if row.index == self.cursor:
        return pos
    return None

  @property
  def selected_count(self) -> int:
    return sum(self.chosen)

  @property
  def total(self) -> int:
    return len(self.matches)

  def file_counts(self, file_path: Path) -> tuple[int, int]:
    """Selected and total matches for one file."""
    indices = self._by_file.get(file_path, [])
    return sum(self.chosen[i] for i in indices), len(indices)

  def move(self, step: int) -> None:
    """Move the cursor among selectable rows, wrapping at both ends."""
    order = self.visible_indices()
    if not order or self.cursor is None:
      return
    pos = order.index(self.cursor) if self.cursor in order else 0
    self.cursor = order[(pos + step) % len(order)]

  def select_row(self, position: int) -> bool:
    """Put the cursor on the match shown at a row position.

    Header rows and positions outside the view are rejected.
    """
    rows = self.rows()
    if self.state != ReviewState.BROWSING or not 0 <= position < len(rows):
      return False
    row = rows[position]
    if not row.selectable:
      return False
    self.cursor = row.index
    return True

  def toggle(self) -> None:
    if self.cursor is not None:
      self.chosen[self.cursor] = not self.chosen[self.cursor]

  def toggle_all(self) -> None:
    """Select everything unless everything is already selected."""
    value = not all(self.chosen)
    self.chosen = [value] * len(self.matches)

  def switch_file(self, step: int) -> None:
    """Show another file and put the cursor on its first row."""
    if not self.per_file or not self.files:
      return
    self.file_index = (self.file_index + step) % len(self.files)
    self.cursor = self._first_visible()

  def confirm(self) -> None:
    self.state = ReviewState.CONFIRMED

  def cancel(self) -> None:
    self.state = ReviewState.CANCELLED

  def handle(self, action: Action) -> ReviewState:
    """Apply one input event; ignored once the session has ended."""
    if self.state != ReviewState.BROWSING:
      return self.state

    if action == Action.UP:
      self.move(-1)
    elif action == Action.DOWN:
      self.move(1)
    elif action == Action.TOGGLE:
      self.toggle()
    elif action == Action.TOGGLE_ALL:
      self.toggle_all()
    elif action == Action.NEXT_FILE:
      self.switch_file(1)
    elif action == Action.PREV_FILE:
      self.switch_file(-1)
    elif action == Action.CONFIRM:
      self.confirm()
    elif action == Action.CANCEL:
      self.cancel()

    return self.state

  def result(self) -> list[Match]:
    """Chosen matches in input order; empty unless confirmed."""
    if self.state != ReviewState.CONFIRMED:
      return []
    return [m for m, keep in zip(self.matches, self.chosen) if keep]

  def _first_visible(self) -> int | None:
    order = self.visible_indices()
    return order[0] if order else None


def run_actions(state: SelectionState, actions: Iterable[Action]) -> list[Match]:
  """Drive a session with a scripted event sequence.

  Events after the session ends are ignored. A script that never confirms
  leaves the session browsing, which yields an empty result.
  """
  for action in actions:
    if state.handle(action) != ReviewState.BROWSING:
      break
  return state.result()

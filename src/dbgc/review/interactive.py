"""Keyboard-driven checkbox review in a Textual app."""

from typing import Sequence

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import DataTable, Footer, Header, Static

from dbgc.models import Match, Operation, ReviewLayout
from dbgc.output.formatter import FILE_STYLE, LINE_STYLE, highlight_markers
from dbgc.review.selection import Action, ReviewState, RowKind, SelectionState

CHECKED = "[x]"
UNCHECKED = "[ ]"


class ReviewApp(App[list[Match]]):
  """Full-screen selection list over a SelectionState.

  Every key press is turned into one Action and fed to the state; the
  table is redrawn after each event. The app exits with the chosen
  matches on confirm and with an empty list on cancel. Textual's driver
  owns raw mode and restores the terminal on every exit path.
  """

  CSS = """
  #summary {
    height: 1;
    padding: 0 1;
    background: $boost;
  }
  #matches {
    height: 1fr;
  }
  """

  BINDINGS = [
    Binding("up,k", "review('up')", "Up", show=False, priority=True),
    Binding("down,j", "review('down')", "Down", show=False, priority=True),
    Binding("space", "review('toggle')", "Toggle", priority=True),
    Binding("a", "review('toggle_all')", "Toggle All", priority=True),
    Binding("right,tab", "review('next_file')", "Next File", priority=True),
    Binding("left,shift+tab", "review('prev_file')", "Prev File", priority=True),
    Binding("enter", "review('confirm')", "Confirm", priority=True),
    Binding("escape,q,ctrl+c", "review('cancel')", "Cancel", priority=True),
  ]

  def __init__(self, selection: SelectionState, operation: Operation):
    super().__init__()
    self.selection = selection
    self.operation = operation
    self.title = "dbgc"
    self.sub_title = f"Select statements to {operation.verb}"

  def compose(self) -> ComposeResult:
    yield Header()
    yield Static(id="summary")
    yield DataTable(id="matches", cursor_type="row")
    yield Footer()

  def on_mount(self) -> None:
    table = self.query_one("#matches", DataTable)
    table.add_columns(" ", "Line", "Statement")
    self._render_view()

  def action_review(self, name: str) -> None:
    state = self.selection.handle(Action(name))
    if state == ReviewState.BROWSING:
      self._render_view()
    else:
      self.exit(self.selection.result())

  def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
    # the mouse can move the table cursor without a key binding
    if self.selection.select_row(event.cursor_row):
      return
    position = self.selection.cursor_row()
    if position is not None and position != event.cursor_row:
      event.data_table.move_cursor(row=position)

  def _render_view(self) -> None:
    self.query_one("#summary", Static).update(self._summary_text())

    table = self.query_one("#matches", DataTable)
    table.clear()
    for row in self.selection.rows():
      if row.kind == RowKind.HEADER:
        selected, total = self.selection.file_counts(row.file_path)
        label = Text(f"{row.file_path} ({selected}/{total})", style=f"bold {FILE_STYLE}")
        table.add_row(Text(""), Text(""), label)
        continue

      m = self.selection.matches[row.index]
      mark = CHECKED if self.selection.chosen[row.index] else UNCHECKED
      table.add_row(
        Text(mark, style="bold" if self.selection.chosen[row.index] else "dim"),
        Text(str(m.start_line), style=LINE_STYLE),
        highlight_markers(m.rendered_text),
      )

    position = self.selection.cursor_row()
    if position is not None:
      table.move_cursor(row=position)

  def _summary_text(self) -> Text:
    summary = Text(
      f"Selected {self.selection.selected_count}/{self.selection.total}",
      style="bold",
    )
    if self.selection.per_file and self.selection.current_file is not None:
      position = f"  File {self.selection.file_index + 1}/{len(self.selection.files)}: "
      summary.append(position)
      summary.append(str(self.selection.current_file), style=FILE_STYLE)
    return summary


class InteractiveReviewer:
  """Interactive front end.

  The list layout shows all files at once and starts with every match
  chosen. The table layout shows one file at a time and starts with
  nothing chosen.
  """

  def __init__(self, layout: ReviewLayout = ReviewLayout.LIST):
    self.layout = layout

  def session(self, matches: Sequence[Match]) -> SelectionState:
    """Create the selection state for this layout's defaults."""
    per_file = self.layout == ReviewLayout.TABLE
    return SelectionState(matches, chosen=not per_file, per_file=per_file)

  def review(self, matches: Sequence[Match], operation: Operation) -> list[Match]:
    selection = self.session(matches)
    ReviewApp(selection, operation).run()
    return selection.result()

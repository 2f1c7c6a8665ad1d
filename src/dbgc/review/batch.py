"""Display-and-confirm review."""

from typing import Callable, Sequence

from rich.console import Console

from dbgc.models import Match, Operation
from dbgc.output import print_matches

YES_ANSWERS = ("y", "yes")


class BatchReviewer:
  """Prints every match grouped by file and asks one yes/no question.

  "y" or "yes" keeps the whole set; any other answer selects nothing.
  """

  def __init__(
    self,
    console: Console | None = None,
    assume_yes: bool = False,
    ask: Callable[[str], str] | None = None,
    detect_all: bool = False,
  ):
    self.console = console or Console()
    self.assume_yes = assume_yes
    self.detect_all = detect_all
    self._ask = ask or self.console.input

  def review(self, matches: Sequence[Match], operation: Operation) -> list[Match]:
    print_matches(self.console, matches, self.detect_all)

    if self.assume_yes:
      return list(matches)

    answer = self._ask(f"Do you want to {operation.verb} these statements? (y/n): ")
    if answer.strip().lower() in YES_ANSWERS:
      return list(matches)
    return []

"""Review front ends that narrow matches before any file is changed."""

from rich.console import Console

from dbgc.models import ReviewLayout
from dbgc.review.base import Reviewer
from dbgc.review.batch import BatchReviewer
from dbgc.review.interactive import InteractiveReviewer, ReviewApp
from dbgc.review.selection import Action, ReviewState, SelectionState, run_actions


def get_reviewer(
  interactive: bool,
  layout: ReviewLayout = ReviewLayout.LIST,
  assume_yes: bool = False,
  console: Console | None = None,
  detect_all: bool = False,
) -> Reviewer:
  """Pick the review front end for the run."""
  if interactive:
    return InteractiveReviewer(layout)
  return BatchReviewer(console=console, assume_yes=assume_yes, detect_all=detect_all)


__all__ = [
  "Action",
  "BatchReviewer",
  "InteractiveReviewer",
  "ReviewApp",
  "ReviewState",
  "Reviewer",
  "SelectionState",
  "get_reviewer",
  "run_actions",
]

"""Review front-end abstraction."""

from typing import Protocol, Sequence

from dbgc.models import Match, Operation


class Reviewer(Protocol):
  """Narrows discovered matches to the ones the operator wants changed.

  Implementations must return a subset of ``matches`` and must return an
  empty list when the operator cancels. They never touch files.
  """

  def review(self, matches: Sequence[Match], operation: Operation) -> list[Match]:
    """Return the matches chosen for the operation."""
    ...

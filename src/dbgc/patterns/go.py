"""Go fmt and log output calls."""

from dbgc.patterns.base import BALANCED_ARGS_NO_TERMINATOR
from dbgc.patterns.registry import register_family


class GoOutputFamily:
  """Detects fmt.Print*/Fprint*/Sprint* and log.Print*/Fatal*/Panic* calls.

  Go has no statement terminator, so the statement ends at the
  parenthesis closing the call.
  """

  FMT_FUNCTIONS = (
    "Fprintf", "Fprintln", "Fprint",
    "Sprintf", "Sprintln", "Sprint",
    "Printf", "Println", "Print",
  )
  LOG_FUNCTIONS = (
    "Printf", "Println", "Print",
    "Fatalf", "Fatalln", "Fatal",
    "Panicf", "Panicln", "Panic",
  )

  @property
  def name(self) -> str:
    return "go-print"

  @property
  def pattern(self) -> str:
    fmt_names = "|".join(self.FMT_FUNCTIONS)
    log_names = "|".join(self.LOG_FUNCTIONS)
    return (
      r"(?<![\w.])(?:fmt\.(?:" + fmt_names + r")|log\.(?:" + log_names + r"))\s*\("
      r"(?P<args>" + BALANCED_ARGS_NO_TERMINATOR + r")\)"
    )


def _create_go_output() -> GoOutputFamily:
  return GoOutputFamily()


register_family("go-print", _create_go_output, priority=40)

"""C standard library output calls."""

from dbgc.patterns.base import BALANCED_ARGS
from dbgc.patterns.registry import register_family


class CCallFamily:
  """Detects printf-style calls from the C standard library.

  Covers the printf, puts and putc families plus POSIX write() and
  perror(). An optional std:: prefix is accepted so C++ sources calling
  std::printf are picked up too. Method calls such as obj.write() are not.
  """

  FUNCTIONS = (
    "printf_debug",
    "snprintf",
    "sprintf",
    "fprintf",
    "dprintf",
    "printf",
    "fputchar",
    "putchar",
    "fputs",
    "fputc",
    "puts",
    "perror",
    "write",
  )

  @property
  def name(self) -> str:
    return "c-call"

  @property
  def pattern(self) -> str:
    names = "|".join(self.FUNCTIONS)
    return (
      r"(?<![\w.>:])(?:std::)?(?:" + names + r")\s*\("
      r"(?P<args>" + BALANCED_ARGS + r")\)\s*;"
    )


def _create_c_call() -> CCallFamily:
  return CCallFamily()


register_family("c-call", _create_c_call, priority=10)

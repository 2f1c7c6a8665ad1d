"""Java console output calls."""

from dbgc.patterns.base import BALANCED_ARGS
from dbgc.patterns.registry import register_family


class JavaOutputFamily:
  """Detects System.out / System.err print calls."""

  @property
  def name(self) -> str:
    return "java-print"

  @property
  def pattern(self) -> str:
    return (
      r"\bSystem\s*\.\s*(?:out|err)\s*\.\s*(?:println|printf|print|format)\s*\("
      r"(?P<args>" + BALANCED_ARGS + r")\)\s*;"
    )


def _create_java_output() -> JavaOutputFamily:
  return JavaOutputFamily()


register_family("java-print", _create_java_output, priority=30)

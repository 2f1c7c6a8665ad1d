"""C++ iostream insertion chains."""

from dbgc.patterns.registry import register_family


class CppStreamFamily:
  """Detects `std::cout << ... ;` style insertion chains.

  The chain runs to the first semicolon, so backslash-continued string
  literals and operators split over several lines are one statement.
  """

  @property
  def name(self) -> str:
    return "cpp-stream"

  @property
  def pattern(self) -> str:
    return r"(?<![\w:])(?:std::)?(?:cout|cerr|clog)\s*<<(?P<args>[^;]*);"


def _create_cpp_stream() -> CppStreamFamily:
  return CppStreamFamily()


register_family("cpp-stream", _create_cpp_stream, priority=20)

"""Output formatting."""

from dbgc.output.formatter import (
  JsonFormatter,
  OutputFormatter,
  TerminalFormatter,
  get_formatter,
  print_matches,
)

__all__ = [
  "OutputFormatter",
  "TerminalFormatter",
  "JsonFormatter",
  "get_formatter",
  "print_matches",
]

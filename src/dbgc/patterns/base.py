"""Recognizer abstractions for diagnostic-output statements."""

import re
from dataclasses import dataclass
from typing import Iterator, Protocol, Sequence

# Case-sensitive marker words for diagnostic-only mode
MARKER = re.compile(r"debug|DEBUG")

# Parenthesis group balanced up to two levels deep, closing paren excluded.
# Statement-terminated languages also exclude ';' so a match never runs past
# the end of its own statement.
BALANCED_ARGS = r"(?:[^();]|\((?:[^();]|\([^();]*\))*\))*"
BALANCED_ARGS_NO_TERMINATOR = r"(?:[^()]|\((?:[^()]|\([^()]*\))*\))*"


class PatternError(Exception):
  """A language family pattern failed to compile."""


class LanguageFamily(Protocol):
  """Protocol for a family of output statements sharing one syntax.

  Each family contributes a single regular expression. The expression must
  define a named group ``args`` covering the statement's argument text, which
  is where diagnostic-only mode looks for the marker words.

  Example:
    class MyFamily:
      @property
      def name(self) -> str:
        return "shell-echo"

      @property
      def pattern(self) -> str:
        return r"\\becho\\s+(?P<args>[^\\n]*)"
  """

  @property
  def name(self) -> str:
    """Short family name (e.g., 'c-call')."""
    ...

  @property
  def pattern(self) -> str:
    """Regular expression source with an ``args`` group."""
    ...


@dataclass(frozen=True)
class CompiledFamily:
  """A family paired with its compiled expression."""

  name: str
  regex: re.Pattern[str]


@dataclass(frozen=True)
class Candidate:
  """One raw regex hit before line mapping and de-duplication."""

  start: int
  end: int
  order: int
  family: str


class PatternSet:
  """Compiled recognizers for one detection mode.

  Built once per invocation and shared across every file; holds no
  mutable state.
  """

  def __init__(self, families: Sequence[LanguageFamily], detect_all: bool = False):
    self.detect_all = detect_all
    self._compiled = tuple(_compile(family) for family in families)

  def scan(self, content: str) -> Iterator[Candidate]:
    """Yield every accepted hit of every family, family by family."""
    for order, family in enumerate(self._compiled):
      for m in family.regex.finditer(content):
        if self.accepts(m.group("args") or ""):
          yield Candidate(start=m.start(), end=m.end(), order=order, family=family.name)

  def accepts(self, args: str) -> bool:
    """Check argument text against the detection mode."""
    return self.detect_all or MARKER.search(args) is not None


def _compile(family: LanguageFamily) -> CompiledFamily:
  try:
    regex = re.compile(family.pattern, re.MULTILINE)
  except re.error as e:
    raise PatternError(f"Invalid pattern for family '{family.name}': {e}") from e

  if "args" not in regex.groupindex:
    raise PatternError(f"Pattern for family '{family.name}' has no 'args' group")

  return CompiledFamily(name=family.name, regex=regex)

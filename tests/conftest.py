"""Pytest fixtures."""

from pathlib import Path
from typing import Callable

import pytest
from dbgc.models import Match


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
  """Write content under tmp_path and return the file path."""
  def _write(name: str, content: str) -> Path:
    path = tmp_path / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content.encode("utf-8"))
    return path

  return _write


@pytest.fixture
def make_match() -> Callable[..., Match]:
  def _make(
    file_path: str | Path,
    start_line: int,
    end_line: int | None = None,
    text: str = 'printf("debug");',
  ) -> Match:
    return Match(
      file_path=Path(file_path),
      start_line=start_line,
      end_line=end_line or start_line,
      rendered_text=text,
      raw_lines=(text,),
      family="c-call",
    )

  return _make


@pytest.fixture
def scenario_c() -> str:
  """A C file with an active debug printf on line 10 and a commented one on 20."""
  lines = [
    "#include <stdio.h>",
    "",
    "int compute(int x) {",
    "  return x * 2;",
    "}",
    "",
    "int main(void) {",
    "  int x = compute(21);",
    '  printf("result: %d\\n", x);',
    '    printf("debug: %d", x);',
    "  if (x > 40) {",
    "    x -= 40;",
    "  }",
    "",
    "",
    "",
    "",
    "",
    "",
    '  // printf("debug: old");',
    "  return 0;",
    "}",
  ]
  return "\n".join(lines) + "\n"

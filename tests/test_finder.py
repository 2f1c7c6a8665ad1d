"""Tests for statement discovery."""

from pathlib import Path
from typing import Callable

import pytest
from dbgc.files import FileError
from dbgc.finder import StatementFinder, find_statements, is_commented, render
from dbgc.patterns import build_pattern_set

JAVA_MULTILINE = """public class TestMultiline {
    public static void main(String[] args) {
        System.out.println("debug: single line");

        System.out.printf(
            "debug: multiline message with value: %d\\n",
            computeValue()
        );

        System.out.println(
            "Results: x=" + 10 + ", sum=" + (10 + 20)
        );
    }
}
"""

RUST_MIXED = """fn main() {
    // println!("debug: this is commented");
    println!("Active debug message");
    // dbg!(variable);
    eprintln!(
        "debug: value {}",
        compute()
    );
}
"""


def _finder(detect_all: bool = False) -> StatementFinder:
  return StatementFinder(build_pattern_set(detect_all=detect_all))


class TestHelpers:
  def test_is_commented(self) -> None:
    assert is_commented('// printf("x");')
    assert is_commented('    \t// printf("x");')
    assert not is_commented('printf("x"); // trailing')

  def test_render_collapses_whitespace(self) -> None:
    assert render(["  printf(", '      "debug",', "      x);  "]) == 'printf( "debug", x);'


class TestFindInContent:
  def test_single_line_spans(self) -> None:
    matches = _finder().find_in_content(Path("T.java"), JAVA_MULTILINE, find_commented=False)

    assert [(m.start_line, m.end_line) for m in matches] == [(3, 3), (5, 8)]
    assert all(m.family == "java-print" for m in matches)

  def test_multiline_span_counts_physical_lines(self) -> None:
    matches = _finder().find_in_content(Path("T.java"), JAVA_MULTILINE, find_commented=False)
    multi = matches[1]

    assert multi.end_line - multi.start_line + 1 == 4
    assert len(multi.raw_lines) == 4
    assert multi.raw_lines[0] == "        System.out.printf("
    assert multi.rendered_text == (
      'System.out.printf( "debug: multiline message with value: %d\\n", computeValue() );'
    )

  def test_all_mode_adds_unmarked_statements(self) -> None:
    matches = _finder(detect_all=True).find_in_content(
      Path("T.java"), JAVA_MULTILINE, find_commented=False
    )
    assert [(m.start_line, m.end_line) for m in matches] == [(3, 3), (5, 8), (10, 12)]

  def test_detection_mode_boundary(self) -> None:
    content = 'int main() {\n  printf("hello %d", x);\n}\n'

    assert _finder(detect_all=False).find_in_content(Path("a.c"), content, False) == []
    assert len(_finder(detect_all=True).find_in_content(Path("a.c"), content, False)) == 1

  def test_commented_population(self) -> None:
    matches = _finder().find_in_content(Path("main.rs"), RUST_MIXED, find_commented=True)
    assert [m.start_line for m in matches] == [2]

  def test_active_population(self) -> None:
    matches = _finder().find_in_content(Path("main.rs"), RUST_MIXED, find_commented=False)
    assert [(m.start_line, m.end_line) for m in matches] == [(3, 3), (5, 8)]

  def test_commented_state_uses_first_line_only(self) -> None:
    content = 'printf("debug %d",\n// not a statement start\n  x);\n'

    active = _finder().find_in_content(Path("a.c"), content, find_commented=False)
    commented = _finder().find_in_content(Path("a.c"), content, find_commented=True)

    assert [(m.start_line, m.end_line) for m in active] == [(1, 3)]
    assert commented == []

  def test_same_line_statements_collapse(self) -> None:
    content = 'printf("debug a"); printf("debug b");\n'
    matches = _finder().find_in_content(Path("a.c"), content, find_commented=False)

    assert len(matches) == 1
    assert matches[0].start_line == 1

  def test_leftmost_family_wins_on_shared_line(self) -> None:
    content = 'std::cout << "x" << std::endl; printf("y");\n'
    matches = _finder(detect_all=True).find_in_content(Path("a.cpp"), content, False)

    assert len(matches) == 1
    assert matches[0].family == "cpp-stream"

  def test_crlf_line_numbers(self) -> None:
    content = 'int x;\r\nprintf("debug");\r\nputs("debug");\r\n'
    matches = _finder().find_in_content(Path("a.c"), content, find_commented=False)

    assert [m.start_line for m in matches] == [2, 3]
    assert matches[0].raw_lines == ('printf("debug");',)

  def test_deterministic(self) -> None:
    finder = _finder(detect_all=True)
    first = finder.find_in_content(Path("main.rs"), RUST_MIXED, find_commented=False)
    second = finder.find_in_content(Path("main.rs"), RUST_MIXED, find_commented=False)
    assert first == second

  def test_scan_returns_both_populations(self) -> None:
    matches = _finder(detect_all=True).scan(Path("main.rs"), RUST_MIXED)
    assert [m.start_line for m in matches] == [2, 3, 4, 5]


class TestFind:
  def test_scenario_disable_population(
    self,
    write_file: Callable[[str, str], Path],
    scenario_c: str,
  ) -> None:
    path = write_file("main.c", scenario_c)
    matches = find_statements([path], find_commented=False, detect_all=False)

    assert len(matches) == 1
    assert matches[0].file_path == path
    assert matches[0].start_line == 10

  def test_scenario_enable_population(
    self,
    write_file: Callable[[str, str], Path],
    scenario_c: str,
  ) -> None:
    path = write_file("main.c", scenario_c)
    matches = find_statements([path], find_commented=True, detect_all=False)

    assert [m.start_line for m in matches] == [20]

  def test_files_in_given_order(self, write_file: Callable[[str, str], Path]) -> None:
    b = write_file("b.go", 'package main\nfunc f() {\n\tfmt.Println("debug b")\n}\n')
    a = write_file("a.c", 'void f() { puts("debug a"); }\n')

    matches = find_statements([b, a], find_commented=False, detect_all=False)
    assert [m.file_path for m in matches] == [b, a]

  def test_undecodable_file_aborts(self, write_file: Callable[[str, str], Path]) -> None:
    good = write_file("good.c", 'puts("debug");\n')
    bad = good.parent / "bad.c"
    bad.write_bytes(b'puts("\xff\xfe debug");\n')

    with pytest.raises(FileError, match="bad.c"):
      find_statements([bad, good], find_commented=False, detect_all=False)

  def test_family_restriction(self, write_file: Callable[[str, str], Path]) -> None:
    path = write_file("mixed.cpp", 'printf("debug");\nstd::cout << "debug";\n')

    matches = find_statements([path], False, False, families=["cpp-stream"])
    assert [m.start_line for m in matches] == [2]

"""Tests for language family recognizers."""

import pytest
from dbgc.patterns import PatternError, PatternSet, build_pattern_set, get_families, list_families


def _families_in(content: str, detect_all: bool = True) -> list[str]:
  patterns = build_pattern_set(detect_all=detect_all)
  return [c.family for c in sorted(patterns.scan(content), key=lambda c: (c.start, c.order))]


class _BrokenFamily:
  @property
  def name(self) -> str:
    return "broken"

  @property
  def pattern(self) -> str:
    return r"printf\((?P<args>"


class _NoArgsFamily:
  @property
  def name(self) -> str:
    return "no-args"

  @property
  def pattern(self) -> str:
    return r"printf\(.*\);"


class TestRegistry:
  def test_families_in_evaluation_order(self) -> None:
    assert list_families() == [
      "c-call",
      "cpp-stream",
      "java-print",
      "go-print",
      "rust-macro",
    ]

  def test_subset_keeps_evaluation_order(self) -> None:
    families = get_families(["rust-macro", "c-call"])
    assert [f.name for f in families] == ["c-call", "rust-macro"]

  def test_unknown_family_rejected(self) -> None:
    with pytest.raises(PatternError, match="Unknown families: python"):
      get_families(["python"])


class TestPatternSet:
  def test_invalid_regex_is_pattern_error(self) -> None:
    with pytest.raises(PatternError, match="broken"):
      PatternSet([_BrokenFamily()])

  def test_missing_args_group_is_pattern_error(self) -> None:
    with pytest.raises(PatternError, match="no 'args' group"):
      PatternSet([_NoArgsFamily()])

  def test_diagnostic_mode_requires_marker(self) -> None:
    patterns = build_pattern_set(detect_all=False)
    assert patterns.accepts('"debug: x"')
    assert patterns.accepts('"DEBUG x"')
    assert not patterns.accepts('"Debug x"')
    assert not patterns.accepts('"hello"')

  def test_all_mode_accepts_anything(self) -> None:
    patterns = build_pattern_set(detect_all=True)
    assert patterns.accepts('"hello"')


class TestCCallFamily:
  @pytest.mark.parametrize("line", [
    'printf("debug: %d\\n", x);',
    'fprintf(stderr, "DEBUG: testing fprintf\\n");',
    'puts("debug: testing puts");',
    'perror("debug");',
    'write(1, "debug", sizeof(buf) - 1);',
    'std::printf("debug %s", name);',
    'printf_debug("debug: value");',
  ])
  def test_detects_calls(self, line: str) -> None:
    assert _families_in(line, detect_all=False) == ["c-call"]

  def test_ignores_method_calls(self) -> None:
    assert _families_in('stream.write("debug");') == []
    assert _families_in('self->write("debug");') == []

  def test_requires_terminator(self) -> None:
    assert _families_in('printf("debug")') == []

  def test_marker_must_be_in_arguments(self) -> None:
    assert _families_in('printf_debug("value");', detect_all=False) == []
    assert _families_in('fputc(\'D\', stderr); // no debug keyword', detect_all=False) == []


class TestCppStreamFamily:
  def test_detects_cout_chain(self) -> None:
    assert _families_in('std::cout << "debug: " << x << std::endl;') == ["cpp-stream"]

  def test_detects_unqualified_cerr(self) -> None:
    assert _families_in('cerr << "oops" << endl;') == ["cpp-stream"]

  def test_chain_spans_continuation_lines(self) -> None:
    content = 'std::cout << "debug: this is a very \\\nlong message" << std::endl;'
    assert _families_in(content, detect_all=False) == ["cpp-stream"]


class TestJavaOutputFamily:
  @pytest.mark.parametrize("line", [
    'System.out.println("debug: single line");',
    'System.err.printf("debug: %d%n", calculate(5, multiply(2, 3)));',
    'System.out.print("DEBUG");',
    'System.out.format("debug %s", s);',
  ])
  def test_detects_print_calls(self, line: str) -> None:
    assert _families_in(line, detect_all=False) == ["java-print"]


class TestGoOutputFamily:
  @pytest.mark.parametrize("line", [
    'fmt.Println("debug: x")',
    'fmt.Fprintf(os.Stderr, "DEBUG: code=%d\\n", 500)',
    'log.Printf("debug: value=%d", 42)',
    'log.Fatal("debug: fatal error")',
  ])
  def test_detects_calls_without_terminator(self, line: str) -> None:
    assert _families_in(line, detect_all=False) == ["go-print"]

  def test_composite_literal_arguments(self) -> None:
    content = 'result := fmt.Sprintf(\n\t"debug: result=%v",\n\tmap[string]int{\n\t\t"a": 1,\n\t})'
    assert _families_in(content, detect_all=False) == ["go-print"]

  def test_ignores_other_packages(self) -> None:
    assert _families_in('logger.Println("debug")') == []


class TestRustMacroFamily:
  @pytest.mark.parametrize("line", [
    'println!("debug: single line");',
    'eprintln!("DEBUG: error message");',
    'log::debug!("debug: {}", x);',
  ])
  def test_detects_macros(self, line: str) -> None:
    assert _families_in(line, detect_all=False) == ["rust-macro"]

  def test_dbg_in_tail_position(self) -> None:
    assert _families_in("    dbg!(42)\n") == ["rust-macro"]

  def test_plain_function_call_not_matched(self) -> None:
    assert _families_in('println("debug");') == []

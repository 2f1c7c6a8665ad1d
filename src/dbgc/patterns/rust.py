"""Rust printing and debugging macros."""

from dbgc.patterns.base import BALANCED_ARGS_NO_TERMINATOR
from dbgc.patterns.registry import register_family


class RustMacroFamily:
  """Detects `name!(args);` output macros.

  The trailing semicolon is optional so that dbg! in tail position
  (`dbg!(value)` as a block's last expression) is still found. The
  log crate's debug! and trace! macros are included, optionally
  qualified as log::debug!.
  """

  MACROS = ("eprintln", "println", "eprint", "print", "dbg", "debug", "trace")

  @property
  def name(self) -> str:
    return "rust-macro"

  @property
  def pattern(self) -> str:
    names = "|".join(self.MACROS)
    return (
      r"(?<![\w:!])(?:log::)?(?:" + names + r")!\s*\("
      r"(?P<args>" + BALANCED_ARGS_NO_TERMINATOR + r")\)(?:[ \t]*;)?"
    )


def _create_rust_macro() -> RustMacroFamily:
  return RustMacroFamily()


register_family("rust-macro", _create_rust_macro, priority=50)

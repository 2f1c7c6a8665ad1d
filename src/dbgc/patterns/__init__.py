"""Per-language recognizers for diagnostic-output statements."""

from dbgc.patterns.base import LanguageFamily, PatternError, PatternSet
from dbgc.patterns.registry import (
  FamilyRegistry,
  build_pattern_set,
  get_families,
  list_families,
)

__all__ = [
  "FamilyRegistry",
  "LanguageFamily",
  "PatternError",
  "PatternSet",
  "build_pattern_set",
  "get_families",
  "list_families",
]

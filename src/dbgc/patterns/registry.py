"""Language family registration and discovery."""

from typing import Callable

from dbgc.patterns.base import LanguageFamily, PatternError, PatternSet

FamilyFactory = Callable[[], LanguageFamily]

_families: dict[str, tuple[int, FamilyFactory]] = {}


def register_family(name: str, factory: FamilyFactory, priority: int) -> None:
  """Register a family factory.

  Args:
    name: Unique family name (e.g., 'c-call').
    factory: Callable that returns a LanguageFamily instance.
    priority: Evaluation order; lower runs first and wins ties when two
      families match at the same position.
  """
  _families[name] = (priority, factory)


def _ordered() -> list[tuple[str, FamilyFactory]]:
  FamilyRegistry.load_all()
  entries = sorted(_families.items(), key=lambda item: (item[1][0], item[0]))
  return [(name, factory) for name, (_, factory) in entries]


def get_families(names: list[str] | None = None) -> list[LanguageFamily]:
  """Get family instances in evaluation order.

  Args:
    names: Optional subset of family names to keep.

  Raises:
    PatternError: If a requested name is not registered.
  """
  ordered = _ordered()
  if names is None:
    return [factory() for _, factory in ordered]

  known = {name for name, _ in ordered}
  unknown = [n for n in names if n not in known]
  if unknown:
    available = ", ".join(name for name, _ in ordered)
    raise PatternError(f"Unknown families: {', '.join(unknown)}. Available: {available}")

  return [factory() for name, factory in ordered if name in names]


def list_families() -> list[str]:
  """List registered family names in evaluation order."""
  return [name for name, _ in _ordered()]


def build_pattern_set(detect_all: bool = False, names: list[str] | None = None) -> PatternSet:
  """Compile the recognizers for one invocation."""
  return PatternSet(get_families(names), detect_all=detect_all)


class FamilyRegistry:
  """Registry for lazy family loading."""

  @staticmethod
  def load_all() -> None:
    """Load all family modules to trigger registration."""
    from dbgc.patterns import (  # noqa: F401
      c_calls,
      cpp_streams,
      go,
      java,
      rust,
    )

"""Application settings."""

from pydantic import BaseModel, ConfigDict, Field

from dbgc.models import ReviewLayout

DEFAULT_EXTENSIONS = ["c", "h", "cc", "cpp", "cxx", "hh", "hpp", "hxx", "java", "go", "rs"]

DEFAULT_EXCLUDE_DIRS = [
  ".git",
  "node_modules",
  "target",
  "build",
  "dist",
  "vendor",
  "__pycache__",
  ".venv",
  "venv",
]


class Settings(BaseModel):
  """Application configuration."""

  model_config = ConfigDict(use_enum_values=False, extra="forbid")

  detect_all: bool = False
  interactive: bool = False
  layout: ReviewLayout = ReviewLayout.LIST
  extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
  exclude_dirs: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
  respect_gitignore: bool = True
  encoding: str = "utf-8"
  families: list[str] | None = None

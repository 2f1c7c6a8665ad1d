"""Source file discovery and I/O."""

from dbgc.files.collector import (
  FileError,
  collect_source_files,
  read_source,
  write_source,
)

__all__ = [
  "FileError",
  "collect_source_files",
  "read_source",
  "write_source",
]

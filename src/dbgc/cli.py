"""CLI interface using Typer."""

import os
import traceback
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from dbgc import __version__
from dbgc.config import ConfigError
from dbgc.files import FileError
from dbgc.models import Operation, ReviewLayout
from dbgc.output import get_formatter
from dbgc.patterns import PatternError
from dbgc.processor import process_path

app = typer.Typer(
  name="dbgc",
  help="Recursively toggle debug print statements in C, C++, Java, Go and Rust code",
  no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _is_debug() -> bool:
  return os.environ.get("DBGC_DEBUG", "").lower() in ("1", "true", "yes")


def version_callback(value: bool) -> None:
  if value:
    console.print(f"dbgc {__version__}")
    raise typer.Exit()


@app.callback()
def main(
  version: bool = typer.Option(
    None, "--version", "-v", callback=version_callback, is_eager=True,
    help="Show version and exit",
  ),
) -> None:
  """Find, comment out, uncomment or delete debug output statements."""


PathArg = typer.Argument(None, help="File or directory (defaults to current directory)")
YesOpt = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt")
AllOpt = typer.Option(False, "--all", "-a", help="Detect all output statements, not just debug ones")
InteractiveOpt = typer.Option(
  False, "--interactive", "-i", help="Pick statements in an interactive list"
)
PerFileOpt = typer.Option(
  False, "--per-file", "-p", help="Interactive review one file at a time (implies -i)"
)
DryRunOpt = typer.Option(
  False, "--dry-run", "-d", help="Show what would change without modifying files"
)
FormatOpt = typer.Option("terminal", "--format", help="Result format: terminal, json")
ConfigOpt = typer.Option(None, "--config", "-c", help="Config file path")
NoIgnoreOpt = typer.Option(False, "--no-ignore", help="Scan .gitignore'd and excluded directories")
DebugOpt = typer.Option(False, "--debug", help="Show full traceback on errors")


@app.command()
def off(
  path: Optional[Path] = PathArg,
  yes: bool = YesOpt,
  all_output: bool = AllOpt,
  interactive: bool = InteractiveOpt,
  per_file: bool = PerFileOpt,
  dry_run: bool = DryRunOpt,
  format_type: str = FormatOpt,
  config: Optional[Path] = ConfigOpt,
  no_ignore: bool = NoIgnoreOpt,
  debug: bool = DebugOpt,
) -> None:
  """Comment out debug statements."""
  _run(Operation.DISABLE, path, yes, all_output, interactive, per_file,
       dry_run, format_type, config, no_ignore, debug)


@app.command()
def on(
  path: Optional[Path] = PathArg,
  yes: bool = YesOpt,
  all_output: bool = AllOpt,
  interactive: bool = InteractiveOpt,
  per_file: bool = PerFileOpt,
  dry_run: bool = DryRunOpt,
  format_type: str = FormatOpt,
  config: Optional[Path] = ConfigOpt,
  no_ignore: bool = NoIgnoreOpt,
  debug: bool = DebugOpt,
) -> None:
  """Uncomment debug statements."""
  _run(Operation.ENABLE, path, yes, all_output, interactive, per_file,
       dry_run, format_type, config, no_ignore, debug)


@app.command()
def delete(
  path: Optional[Path] = PathArg,
  yes: bool = YesOpt,
  all_output: bool = AllOpt,
  interactive: bool = InteractiveOpt,
  per_file: bool = PerFileOpt,
  dry_run: bool = DryRunOpt,
  format_type: str = FormatOpt,
  config: Optional[Path] = ConfigOpt,
  no_ignore: bool = NoIgnoreOpt,
  debug: bool = DebugOpt,
) -> None:
  """Delete debug statements, commented or not."""
  _run(Operation.DELETE, path, yes, all_output, interactive, per_file,
       dry_run, format_type, config, no_ignore, debug)


def _run(
  operation: Operation,
  path: Path | None,
  yes: bool,
  all_output: bool,
  interactive: bool,
  per_file: bool,
  dry_run: bool,
  format_type: str,
  config: Path | None,
  no_ignore: bool,
  debug: bool,
) -> None:
  show_traceback = debug or _is_debug()
  # keep stdout a single JSON document
  review_console = err_console if format_type == "json" else console

  try:
    formatter = get_formatter(format_type, console)
    result = process_path(
      path or Path("."),
      operation,
      assume_yes=yes,
      detect_all=all_output,
      interactive=interactive,
      layout=ReviewLayout.TABLE if per_file else None,
      dry_run=dry_run,
      no_ignore=no_ignore,
      config_path=config,
      console=review_console,
    )

    output = formatter.format(result)
    if output:
      typer.echo(output)

  except (FileError, ConfigError, PatternError, ValueError) as e:
    console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
    raise typer.Exit(1) from None
  except Exception as e:
    console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
    if show_traceback:
      console.print("\n[dim]Traceback:[/dim]")
      console.print(traceback.format_exc())
    raise typer.Exit(1) from None

  if result.has_failures:
    raise typer.Exit(1)


if __name__ == "__main__":
  app()

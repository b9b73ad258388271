"""CLI entrypoints."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wildrename.errors import MappingError
from wildrename.models.rename import RenamePlan
from wildrename.processors.file_matcher import resolve_arguments
from wildrename.processors.rename_processor import DEFAULT_DIRECTORY, RenameProcessor


console = Console()

QUOTING_EPILOG = """\b
Quote both patterns for best results. An unquoted "*.html" is expanded by the
shell into the matching filenames, which are then taken as more files to
rename. With `shopt -s nullglob` an unquoted pattern that matches nothing is
dropped entirely, so the final REPLACE argument must always be quoted.

\b
Destination files are never overwritten. Alias this command to "ren" or "rn"
as preferred.
"""


def _print_plan(plan: RenamePlan) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Original", style="cyan")
    table.add_column("New Name", style="green")

    for mapping in plan.mappings:
        table.add_row(escape(mapping.source_name), escape(mapping.dest_name))

    console.print(table)
    console.print()


@click.command("wildrename", context_settings=dict(show_default=True), epilog=QUOTING_EPILOG)
@click.argument("patterns", nargs=-1, required=True)
@click.option(
    "-d",
    "--dir",
    "directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=DEFAULT_DIRECTORY,
    help="Directory containing the files to rename.",
)
@click.option(
    "-n",
    "--dry-run",
    is_flag=True,
    default=False,
    help="Show what would be renamed without renaming anything.",
)
@click.option(
    "-i",
    "--interactive",
    is_flag=True,
    default=False,
    help="Prompt before each rename.",
)
@click.option("-v", "--verbose", "verbosity", count=True, help="Increase output; repeat for more detail.")
@click.version_option(package_name="wildrename")
def cli(
    patterns: tuple[str, ...],
    directory: Path,
    dry_run: bool,
    interactive: bool,
    verbosity: int,
) -> None:
    """Rename files via DOS-style wildcards.

    The last argument is the REPLACE pattern; everything before it selects the
    files to rename. Each pattern may contain one "*" wildcard.

    Examples:

        wildrename "*.htm" "*.html"

        wildrename "img*" "photo*"

        wildrename --dry-run "*.*" "backup_*.*"
    """
    if len(patterns) < 2:
        raise click.UsageError(f"Invalid parameter count (only {len(patterns)} given, need at least 2).")

    *search_arguments, replace_pattern = patterns

    if dry_run:
        console.print("[yellow]Dry run: no files will be renamed.[/yellow]")

    processor = RenameProcessor(directory=directory, verbosity=verbosity)

    try:
        search_pattern, candidates = resolve_arguments(search_arguments, directory)
        plan = processor.generate_renames(search_pattern, replace_pattern, candidates)
    except (MappingError, FileExistsError, FileNotFoundError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise SystemExit(1) from e

    if verbosity > 0 or interactive:
        console.print("[bold]Proposed renames:[/bold]")
        _print_plan(plan)

    renames = processor._resolve_full_paths(plan)

    if interactive:
        renames = [
            (source, target) for source, target in renames if click.confirm(f"Rename {source.name} to {target.name}?")
        ]
        if not renames:
            console.print("[yellow]No files were renamed.[/yellow]")
            return

    try:
        count = processor.apply_renames(renames, dry_run=dry_run)
    except (FileNotFoundError, FileExistsError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise SystemExit(1) from e

    if dry_run:
        console.print(f"\nDry run complete. {count} file(s) would be renamed.")
    else:
        console.print(f"[bold green]Renamed {count} file(s).[/bold green]")

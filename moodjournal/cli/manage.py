"""Journal maintenance commands for MoodJournal CLI.

Handles the manual weekly reset and CSV export.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from moodjournal.config import get_export_dir
from moodjournal.errors import StorageUnavailable
from moodjournal.export import DEFAULT_EXPORT_NAME, write_csv

console = Console()


@click.command()
@click.option("--yes", "-y", is_flag=True, default=False, help="Skip the confirmation prompt.")
@click.pass_obj
def reset(obj: dict, yes: bool) -> None:
    """Delete all entries and start a new week.

    This cannot be undone. The automatic reset will not run again
    until next week.
    """
    journal = obj["journal"]

    if not yes:
        click.confirm(
            f"Delete all {len(journal.mood_list)} entries?", abort=True
        )

    try:
        removed = journal.reset_week_manual()
    except StorageUnavailable as e:
        console.print(Panel(
            f"[red]Reset failed:[/red]\n\n{e}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    console.print(f"[bold green]Week reset[/bold green] - removed {removed} entries")


@click.command()
@click.option(
    "--output", "-o", "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Output file (default: {DEFAULT_EXPORT_NAME} in the export directory).",
)
@click.pass_obj
def export(obj: dict, output_path: Optional[Path]) -> None:
    """Export all entries to CSV, newest first.

    \b
    Examples:
      moodjournal export
      moodjournal export -o ~/Desktop/moods.csv
    """
    if output_path is None:
        output_path = get_export_dir(obj["config"]) / DEFAULT_EXPORT_NAME

    try:
        count = write_csv(obj["journal"].mood_list, output_path)
    except OSError as e:
        console.print(Panel(
            f"[red]Export failed:[/red]\n\n{e}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    console.print(Panel(
        f"[bold green]Exported {count} entries[/bold green]\n\n{output_path}",
        title="[bold]CSV Export[/bold]",
        border_style="green",
    ))

"""Entry commands for MoodJournal CLI.

Handles recording moods and listing the mood history.
"""

from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from moodjournal.cli.render import format_entry_time, mood_color
from moodjournal.errors import InvalidMoodValue, StorageUnavailable

console = Console()


@click.command("log")
@click.argument("mood", type=int)
@click.option("--note", "-n", default="", help="Optional note for this entry.")
@click.pass_obj
def log_mood(obj: dict, mood: int, note: str) -> None:
    """Record a mood rating.

    MOOD is a rating from 1 (awful) to 5 (great).

    \b
    Examples:
      moodjournal log 4
      moodjournal log 2 --note "slept badly"
    """
    journal = obj["journal"]

    try:
        entry = journal.add_mood(mood, note)
    except InvalidMoodValue as e:
        console.print(Panel(
            f"[red]{e}[/red]",
            title="[bold red]Invalid Mood[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)
    except StorageUnavailable as e:
        console.print(Panel(
            f"[red]Failed to save mood:[/red]\n\n{e}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    color = mood_color(entry.mood)
    console.print(
        f"[bold green]Saved[/bold green] mood [{color}]{entry.mood}[/{color}]"
        f" (entry #{entry.id})"
    )
    console.print(
        f"[bold]Weekly average:[/bold] {journal.weekly_average_mood:.1f}"
    )


@click.command()
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="Show only the N most recent entries.",
)
@click.pass_obj
def history(obj: dict, limit: Optional[int]) -> None:
    """Display mood history, newest first.

    \b
    Examples:
      moodjournal history            # All entries
      moodjournal history --limit 5  # Last 5 entries
    """
    entries = obj["journal"].mood_list
    if limit is not None:
        entries = entries[:limit]

    if not entries:
        console.print(Panel(
            "[dim]No moods recorded this week[/dim]",
            title="[bold]Mood History[/bold]",
            border_style="dim",
        ))
        return

    table = Table(
        title="Mood History",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("ID", justify="right", style="dim")
    table.add_column("When", style="dim")
    table.add_column("Mood", justify="center")
    table.add_column("Note")

    for entry in entries:
        color = mood_color(entry.mood)
        table.add_row(
            str(entry.id),
            format_entry_time(entry),
            f"[{color}]{entry.mood}[/{color}]",
            escape(entry.note) if entry.note else "[dim]-[/dim]",
        )

    console.print(table)
    console.print(f"\n[bold]Total Entries:[/bold] {len(entries)}")

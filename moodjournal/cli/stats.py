"""Weekly statistics command for MoodJournal CLI."""

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from moodjournal.cli.render import mood_color
from moodjournal.models import DayMood
from moodjournal.models.entry import MAX_MOOD

console = Console()

BAR_WIDTH = 20


def render_bar(avg_mood: float, width: int = BAR_WIDTH) -> str:
    """Render an average mood (0-5) as a horizontal block bar."""
    mood = min(max(avg_mood, 0.0), MAX_MOOD)
    filled = round(width * mood / MAX_MOOD)
    return "█" * filled + "·" * (width - filled)


def build_series_table(series: tuple[DayMood, ...]) -> Table:
    """Build the daily mood chart for the last 7 days."""
    table = Table(
        title="Daily Mood (Last 7 Days)",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("Day", style="bold")
    table.add_column("Date", style="dim")
    table.add_column("Avg", justify="right")
    table.add_column("Chart")

    for dm in series:
        color = mood_color(dm.avg_mood)
        avg_str = f"{dm.avg_mood:.1f}" if dm.avg_mood > 0 else "-"
        table.add_row(
            dm.day_label,
            dm.day.isoformat(),
            f"[{color}]{avg_str}[/{color}]",
            f"[{color}]{render_bar(dm.avg_mood)}[/{color}]",
        )

    return table


@click.command()
@click.pass_obj
def stats(obj: dict) -> None:
    """Show the weekly average and a 7-day mood chart.

    The average covers every entry from the last 7 calendar days,
    including today. Days without entries show as empty bars.
    """
    journal = obj["journal"]
    average = journal.weekly_average_mood
    color = mood_color(average)

    console.print(Panel(
        f"[bold {color}]{average:.1f}[/bold {color}] / 5",
        title="[bold]Weekly Average Mood[/bold]",
        border_style=color,
    ))
    console.print(build_series_table(journal.daily_series))

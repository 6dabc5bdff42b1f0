"""Main CLI entry point for MoodJournal.

The group callback opens the database once per process, runs the weekly
auto-reset, and hands the journal to subcommands through the click context.
"""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from moodjournal.cli.entries import history, log_mood
from moodjournal.cli.manage import export, reset
from moodjournal.cli.stats import stats
from moodjournal.config import get_db_path, load_config
from moodjournal.db import EntryStore, ResetTracker
from moodjournal.errors import ConfigError, StorageUnavailable
from moodjournal.journal import MoodJournal

# Console for rich output
console = Console()


def _configure_logging(verbose: bool) -> None:
    """Route library logging through rich when --verbose is given."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def open_journal(db_path: Path) -> MoodJournal:
    """Construct the process-wide store, tracker and journal."""
    store = EntryStore(db_path)
    tracker = ResetTracker(db_path)
    return MoodJournal(store, tracker)


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="moodjournal")
@click.option(
    "--db", "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Database file (overrides the config file).",
)
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.config/moodjournal/config.toml).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    db_path: Optional[Path],
    config_path: Optional[Path],
    verbose: bool,
) -> None:
    """MoodJournal - track your daily mood from the terminal.

    Record a mood from 1 (awful) to 5 (great) with an optional note,
    review the last 7 days, and start fresh every week.

    \b
    Quick Start:
      moodjournal log 4 --note "good run"  # Record a mood
      moodjournal stats                    # Weekly average and daily chart
      moodjournal export                   # Write entries to CSV
    """
    ctx.ensure_object(dict)
    _configure_logging(verbose)

    try:
        config = load_config(config_path)
        journal = open_journal(db_path or get_db_path(config))
        if journal.auto_reset_if_new_week():
            console.print("[dim]New week started - journal cleared.[/dim]")
    except (ConfigError, StorageUnavailable) as e:
        console.print(Panel(
            f"[red]Could not open the journal:[/red]\n\n{e}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    ctx.obj["config"] = config
    ctx.obj["journal"] = journal
    ctx.call_on_close(journal.close)


cli.add_command(log_mood)
cli.add_command(history)
cli.add_command(stats)
cli.add_command(reset)
cli.add_command(export)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

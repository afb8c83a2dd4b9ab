"""
Progress Display - Rich-based terminal view of saved progress.

Shows the unlocked Classic level, per-level checkpoints and the
Survival/Hardcore high scores.
"""

from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..games.snake.progress import ProgressRecord


def build_checkpoint_table(record: ProgressRecord) -> Table:
    """
    Build a table of Classic checkpoints.

    Args:
        record: Progress record to display

    Returns:
        Table with one row per completed level
    """
    table = Table(title="Classic checkpoints", expand=False)
    table.add_column("Level", justify="right", style="cyan")
    table.add_column("Snake length", justify="right")
    table.add_column("Score", justify="right", style="green")

    for level, data in sorted(record.level_data.items()):
        table.add_row(str(level), str(data.snake_length), str(data.score))

    if not record.level_data:
        table.add_row("-", "-", "-")

    return table


def build_progress_panel(record: ProgressRecord) -> Panel:
    """Build the full progress panel."""
    summary = Text()
    summary.append("Max unlocked level: ", style="bold")
    summary.append(f"{record.max_unlocked_level}\n", style="cyan")
    summary.append("Survival high score: ", style="bold")
    summary.append(f"{record.survival_high_score}\n", style="green")
    summary.append("Hardcore high score: ", style="bold")
    summary.append(f"{record.hardcore_high_score}", style="red")

    return Panel(
        Group(summary, build_checkpoint_table(record)),
        title="[bold]gridsnake progress[/bold]",
        border_style="blue",
    )


def show_progress(record: ProgressRecord, console: Optional[Console] = None) -> None:
    """Print the progress panel."""
    console = console or Console()
    console.print(build_progress_panel(record))

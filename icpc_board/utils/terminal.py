"""Rich rendering helpers for the terminal."""

from rich.table import Table

from ..board.models import CellState, Outcome, ProblemView, RankChange, Snapshot
from .formatting import format_cell

SNAPSHOT_TITLES = {
    "flush": "Scoreboard",
    "scroll_start": "Frozen Scoreboard",
    "scroll_end": "Final Scoreboard",
}


def create_table(title: str, headers: list) -> Table:
    """Create a formatted table for display."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for header in headers:
        table.add_column(header)
    return table


def format_outcome_color(outcome: Outcome) -> str:
    """Format a submission outcome with appropriate color."""
    text = outcome.value
    if outcome is Outcome.ACCEPTED:
        return f"[green]{text}[/green]"
    elif outcome in (Outcome.WRONG_ANSWER, Outcome.RUNTIME_ERROR):
        return f"[red]{text}[/red]"
    elif outcome is Outcome.TIME_LIMIT_EXCEED:
        return f"[magenta]{text}[/magenta]"
    return text


def format_cell_color(view: ProblemView) -> str:
    """Scoreboard cell with color by display state."""
    text = format_cell(view)
    state = view.state
    if state is CellState.SOLVED:
        return f"[green]{text}[/green]"
    elif state is CellState.UNSOLVED:
        return f"[red]{text}[/red]"
    elif state is CellState.HIDDEN:
        return f"[yellow]{text}[/yellow]"
    return f"[dim]{text}[/dim]"


def render_snapshot(snapshot: Snapshot) -> Table:
    """Build a table for a ranking snapshot."""
    letters = [view.problem for view in snapshot.rows[0].problems] if snapshot.rows else []
    table = create_table(
        SNAPSHOT_TITLES.get(snapshot.trigger, "Scoreboard"),
        ["#", "Team", "Solved", "Penalty"] + letters,
    )
    for row in snapshot.rows:
        table.add_row(
            str(row.rank),
            row.team,
            str(row.solved),
            str(row.penalty),
            *(format_cell_color(view) for view in row.problems),
        )
    return table


def format_change_color(change: RankChange) -> str:
    return (
        f"[bold]{change.team}[/bold] [cyan]{change.old_rank} -> {change.new_rank}[/cyan] "
        f"overtakes [bold]{change.overtaken}[/bold] "
        f"([green]{change.solved}[/green] solved, {change.penalty} penalty)"
    )

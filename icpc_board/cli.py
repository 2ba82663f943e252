"""Command-line interface for icpc_board."""

import sys
from typing import Optional

import click
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .board.models import RankChange, Snapshot
from .config import GlobalConfig, LocalConfig
from .feed import ContestSession, DirectiveError, Step, parse_directive
from .feed.directives import QuerySubmission
from .utils.formatting import format_change, format_row, status_lines
from .utils.terminal import (
    format_change_color,
    format_outcome_color,
    render_snapshot,
)


console = Console()


def setup_logging(debug: bool) -> None:
    """Send loguru output to stderr so stdout only carries the scoreboard."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "WARNING")


@click.group()
@click.version_option(version=__version__)
def cli():
    """icpc_board - ICPC contest scoreboard with freeze and scroll."""
    pass


class PlainPrinter:
    """Prints steps in the classic line-oriented format."""

    def __init__(self, print_flush: bool = False):
        self.print_flush = print_flush

    def show(self, step: Step) -> None:
        for line in status_lines(step.directive, step.result):
            click.echo(line)
        for event in step.events:
            if isinstance(event, RankChange):
                click.echo(format_change(event))
            elif isinstance(event, Snapshot):
                if event.trigger == "flush" and not self.print_flush:
                    continue
                for row in event.rows:
                    click.echo(format_row(row))


class TablePrinter:
    """Prints steps with rich tables and colors."""

    def __init__(self, out: Console, print_flush: bool = False):
        self.out = out
        self.print_flush = print_flush

    def show(self, step: Step) -> None:
        lines = status_lines(step.directive, step.result)
        if step.result.ok and isinstance(step.directive, QuerySubmission) and step.result.value:
            submission = step.result.value
            lines[-1] = (
                f"{submission.team} {submission.problem} "
                f"{format_outcome_color(submission.outcome)} {submission.timestamp}"
            )
            self.out.print(lines[0], markup=False, highlight=False)
            self.out.print(lines[-1], highlight=False)
        else:
            for line in lines:
                style = None if step.result.ok else "red"
                self.out.print(line, markup=False, highlight=False, style=style)

        for event in step.events:
            if isinstance(event, RankChange):
                self.out.print(format_change_color(event), highlight=False)
            elif isinstance(event, Snapshot):
                if event.trigger == "flush" and not self.print_flush:
                    continue
                self.out.print(render_snapshot(event))


@cli.command()
@click.argument("feed", type=click.File("r"), default="-")
@click.option("--table/--plain", default=None, help="Render scoreboards as tables")
@click.option("--color/--no-color", default=None, help="Colored table output")
@click.option(
    "-p",
    "--penalty",
    type=click.IntRange(min=0),
    help="Penalty minutes per wrong attempt",
)
@click.option(
    "--print-flush/--no-print-flush",
    default=None,
    help="Also print the scoreboard on FLUSH",
)
@click.option("--debug", is_flag=True, default=False, help="Enable debug output")
def run(
    feed,
    table: Optional[bool],
    color: Optional[bool],
    penalty: Optional[int],
    print_flush: Optional[bool],
    debug: bool,
):
    """Replay a directive feed (FILE or stdin) and print the results."""
    setup_logging(debug)

    global_config = GlobalConfig.load()
    local_config = LocalConfig.load() or LocalConfig()

    if table is None:
        table = global_config.table
    if color is None:
        color = global_config.color
    if penalty is None:
        penalty = local_config.penalty_minutes
    if print_flush is None:
        print_flush = local_config.print_flush

    logger.debug(f"Penalty {penalty} minutes, table={table}, print_flush={print_flush}")

    if table:
        printer = TablePrinter(Console(no_color=not color), print_flush)
    else:
        printer = PlainPrinter(print_flush)

    session = ContestSession(penalty_minutes=penalty)
    for step in session.run(feed):
        printer.show(step)


@cli.command()
@click.argument("feed", type=click.File("r"))
def check(feed):
    """Validate a directive file without running it."""
    errors = []
    count = 0
    for number, line in enumerate(feed, 1):
        try:
            directive = parse_directive(line)
        except DirectiveError as e:
            errors.append((number, line.strip(), str(e)))
            continue
        if directive is not None:
            count += 1

    if not errors:
        console.print(f"[green]{count} directives OK[/green]")
        return

    table = Table(title="Invalid Directives", show_header=True, header_style="bold cyan")
    table.add_column("Line", style="cyan")
    table.add_column("Text", style="white")
    table.add_column("Error", style="red")
    for number, text, message in errors:
        table.add_row(str(number), text, message)

    console.print(table)
    console.print(f"[red]{len(errors)} invalid line(s), {count} valid directive(s)[/red]")
    sys.exit(1)


@cli.group()
def config():
    """Manage scoreboard configuration."""
    pass


@config.command(name="show")
def config_show():
    """Display local and global configuration."""
    global_config = GlobalConfig.load()
    local_path = LocalConfig.find_config()
    local_config = LocalConfig.load(local_path) if local_path else None

    table = Table(title="Configuration", show_header=True, header_style="bold cyan")
    table.add_column("Scope", style="cyan")
    table.add_column("Key", style="yellow")
    table.add_column("Value", style="white")

    table.add_row("global", "table", str(global_config.table))
    table.add_row("global", "color", str(global_config.color))

    if local_config is None:
        local_config = LocalConfig()
        scope = "default"
    else:
        scope = "local"
    table.add_row(scope, "penalty_minutes", str(local_config.penalty_minutes))
    table.add_row(scope, "print_flush", str(local_config.print_flush))

    console.print(table)
    if local_path:
        console.print(f"[bold cyan]Local config:[/bold cyan] {local_path}")


@config.command(name="set")
@click.option("-p", "--penalty", type=int, help="Penalty minutes per wrong attempt")
@click.option("--print-flush/--no-print-flush", default=None)
@click.option("--table/--plain", default=None)
@click.option("--color/--no-color", default=None)
def config_set(
    penalty: Optional[int],
    print_flush: Optional[bool],
    table: Optional[bool],
    color: Optional[bool],
):
    """Update configuration values."""
    if penalty is not None and penalty < 0:
        console.print("[red]Penalty must be non-negative[/red]")
        return

    if penalty is not None or print_flush is not None:
        local_path = LocalConfig.find_config()
        local_config = (LocalConfig.load(local_path) if local_path else None) or LocalConfig()
        if penalty is not None:
            local_config.penalty_minutes = penalty
        if print_flush is not None:
            local_config.print_flush = print_flush
        saved = local_config.save(local_path)
        console.print(f"[green]Saved local config to {saved}[/green]")

    if table is not None or color is not None:
        global_config = GlobalConfig.load()
        if table is not None:
            global_config.table = table
        if color is not None:
            global_config.color = color
        saved = global_config.save()
        console.print(f"[green]Saved global config to {saved}[/green]")


@cli.command()
def version():
    """Show version information."""
    console.print(f"[bold cyan]icpc_board[/bold cyan] version [green]{__version__}[/green]")
    console.print("ICPC contest scoreboard with freeze and scroll")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()

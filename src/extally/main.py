import typer
from pathlib import Path
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typing import List, Optional

from .config_loader import ConfigLoader, ConfigError
from .logger import configure, get_logger, set_debug_mode
from .reader import InputReadError, open_input
from .tally import ExtensionTally, ReportRow, format_report

app = typer.Typer(
    help="Count file paths read from standard input by extension",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)
logger = get_logger("extally.main")


@app.command()
def main(
    input_file: Optional[Path] = typer.Argument(
        None, help="File listing one path per line (default: standard input)",
        show_default=False, allow_dash=True,
    ),
    table: bool = typer.Option(False, "--table", help="Render the report as a table"),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="YAML configuration file"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Read paths until end of input, then print extension counts in ascending order."""
    try:
        settings = ConfigLoader(config_path=config)
    except ConfigError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)

    configure(settings.log_level, settings.log_file)
    if debug:
        set_debug_mode()

    tally = ExtensionTally()
    try:
        with open_input(input_file) as lines:
            tally.ingest_all(lines)
    except InputReadError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    rows = tally.report()
    logger.info(f"Read {tally.total} paths with {len(rows)} distinct extensions")

    if table or settings.table:
        _print_table(rows, tally.total)
    else:
        for line in format_report(rows):
            typer.echo(line)


def _print_table(rows: List[ReportRow], total: int):
    if not rows:
        console.print("[yellow]No paths read[/yellow]")
        return

    table = Table(title="Extension Counts", caption=f"Total: {total}")
    table.add_column("Extension", style="cyan", no_wrap=True)
    table.add_column("Count", style="magenta", justify="right")

    for label, count in rows:
        table.add_row(escape(label), str(count))

    console.print(table)


if __name__ == "__main__":
    app()

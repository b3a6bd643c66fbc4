#!/usr/bin/env python3
"""
suiterun CLI - deterministic test orchestration

Main entrypoint for the suiterun command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import plan, seed
from suiterun.logging_config import setup_logging

app = typer.Typer(
    name="suiterun",
    help="Deterministic test orchestration CLI",
    add_completion=False,
)

console = Console()

app.command("plan")(plan.plan_command)
app.command("seed")(seed.seed_command)


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from suiterun import __version__ as core_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]suiterun CLI[/bold]", f"v{__version__}")
    table.add_row("Core", f"v{core_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    setup_logging()
    app()


if __name__ == "__main__":
    main()

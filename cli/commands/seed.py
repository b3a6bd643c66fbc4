"""
Seed command: derive the run seed for a start time
"""

import json
import time
import typer
from typing import Optional
from rich.console import Console

from suiterun.core.seed import derive_seed

console = Console()


def seed_command(
    at_time: Optional[int] = typer.Option(
        None, "--time", "-t", help="Start time in epoch milliseconds (default: now)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Print the seed a run started at --time would use.

    Examples:
        suiterun seed
        suiterun seed --time 1700000000000
    """
    start = at_time if at_time is not None else int(time.time() * 1000)
    seed = derive_seed(start)

    if json_output:
        print(json.dumps({"time": start, "seed": seed}))
    else:
        console.print(f"Time: [cyan]{start}[/cyan]")
        console.print(f"Seed: [yellow]{seed}[/yellow]")

"""
Plan command: seed, filter and flatten a suite and list the resulting units
"""

import typer
from typing import Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from suiterun.core.canonical import canonical_json_str
from suiterun.core.clock import DeterministicClock, SystemClock
from suiterun.core.errors import ConfigurationError
from suiterun.lifecycle import Lifecycle, PlanDelegate, decode_flags, run_program

from ._flags import load_suite, merge_flags

console = Console()


def plan_command(
    suite_ref: str = typer.Option(..., "--suite", "-s", help="Suite as module:attribute"),
    flags: Optional[str] = typer.Option(None, "--flags", help="Startup flags as JSON (null or object)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Explicit run seed"),
    fuzz: Optional[int] = typer.Option(None, "--fuzz", help="Trials per fuzz test"),
    report: Optional[str] = typer.Option(None, "--report", help="json, chalk or junit"),
    include: Optional[str] = typer.Option(None, "--include", help="Keep tests whose labels match"),
    exclude: Optional[str] = typer.Option(None, "--exclude", help="Drop tests whose labels match"),
    at_time: Optional[int] = typer.Option(None, "--time", "-t", help="Start time in epoch milliseconds"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show the units a run would hand to its runner, in order.

    Examples:
        suiterun plan --suite tests.suites:ALL
        suiterun plan --suite tests.suites:ALL --include Parser --seed 42
        suiterun plan --suite tests.suites:ALL --flags '{"seed": "42", "report": "json"}'
    """
    try:
        value = merge_flags(
            flags, seed=seed, fuzz=fuzz, report=report, include=include, exclude=exclude
        )
        config = decode_flags(value)
        suite = load_suite(suite_ref)
        lifecycle = Lifecycle(config, suite, PlanDelegate())
        clock = DeterministicClock(at_time) if at_time is not None else SystemClock()
        payload = run_program(lifecycle, clock).delegate_state
    except (ConfigurationError, ImportError, AttributeError) as e:
        if json_output:
            print(canonical_json_str({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    if json_output:
        print(canonical_json_str(payload.to_dict()))
        return

    console.print(f"Seed: [yellow]{payload.initial_seed}[/yellow]  Fuzz runs: [cyan]{payload.fuzz_runs}[/cyan]")
    console.print(f"Mode: [cyan]{payload.mode.value}[/cyan]  Report: [cyan]{payload.report.value}[/cyan]")

    table = Table(title="Units")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Id", style="dim")
    table.add_column("Labels", style="green")
    table.add_column("Focus")
    table.add_column("Seed", justify="right")

    for idx, unit in enumerate(payload.units):
        table.add_row(
            str(idx),
            unit.unit_id[:12],
            escape(" › ".join(unit.labels)),
            unit.focus.value,
            "" if unit.seed is None else str(unit.seed),
        )

    console.print(table)

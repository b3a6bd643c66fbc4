"""
Tests for the suiterun CLI.
"""

import json

from typer.testing import CliRunner

from cli.main import app
from suiterun.core.seed import derive_seed

runner = CliRunner()

SUITE_REF = "suiterun.tests.sample_suite:SUITE"


def test_plan_json_lists_units_in_order():
    result = runner.invoke(app, ["plan", "--suite", SUITE_REF, "--seed", "42", "--time", "1000", "--json"])

    assert result.exit_code == 0, result.output
    plan = json.loads(result.stdout)
    assert plan["initial_seed"] == 42
    assert plan["fuzz_runs"] == 100
    assert plan["mode"] == "skipping"
    assert [u["labels"] for u in plan["units"]] == [
        ["Sample", "Arithmetic", "addition"],
        ["Sample", "Arithmetic", "subtraction"],
        ["Sample", "Lists", "reverse twice is identity"],
    ]


def test_plan_flags_and_filters():
    flags = json.dumps({"seed": "5", "report": "junit", "include": "Arithmetic"})
    result = runner.invoke(
        app,
        ["plan", "--suite", "suiterun.tests.sample_suite:build", "--flags", flags, "--exclude", "sub", "--json"],
    )

    assert result.exit_code == 0, result.output
    plan = json.loads(result.stdout)
    assert plan["report"] == "junit"
    assert plan["include"] == "Arithmetic"
    assert plan["exclude"] == "sub"
    assert [u["labels"][-1] for u in plan["units"]] == ["addition"]


def test_plan_time_derives_seed():
    result = runner.invoke(app, ["plan", "--suite", SUITE_REF, "--time", "1700000000123", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["initial_seed"] == derive_seed(1700000000123)


def test_plan_bad_report_exits_2():
    result = runner.invoke(app, ["plan", "--suite", SUITE_REF, "--report", "bogus"])

    assert result.exit_code == 2
    assert "bogus" in result.output


def test_plan_bad_suite_reference_exits_2():
    result = runner.invoke(app, ["plan", "--suite", "no-colon-here", "--json"])

    assert result.exit_code == 2
    assert "module:attribute" in json.loads(result.stdout)["error"]


def test_plan_table_output():
    result = runner.invoke(app, ["plan", "--suite", SUITE_REF, "--seed", "3", "--time", "1"])

    assert result.exit_code == 0, result.output
    assert "addition" in result.stdout
    assert "skipping" in result.stdout


def test_seed_json():
    result = runner.invoke(app, ["seed", "--time", "1700000000123", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"time": 1700000000123, "seed": derive_seed(1700000000123)}


def test_plan_failing_suite_factory_exits_2():
    result = runner.invoke(app, ["plan", "--suite", "suiterun.tests.sample_suite:broken", "--json"])

    assert result.exit_code == 2
    error = json.loads(result.stdout)["error"]
    assert "RuntimeError" in error
    assert "suite construction failed" in error

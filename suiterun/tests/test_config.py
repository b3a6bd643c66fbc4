"""
Tests for startup flags decoding.
"""

import pytest

from suiterun.core.errors import ConfigurationError
from suiterun.lifecycle.config import DEFAULT_FUZZ_RUNS, ReportKind, StartupConfig, decode_flags
from suiterun.suite.filters import FilterSpec


def test_null_flags_give_defaults():
    config = decode_flags(None)

    assert config.seed is None
    assert config.paths == ()
    assert config.report is ReportKind.CHALK
    assert config.fuzz_runs == DEFAULT_FUZZ_RUNS == 100
    assert config.filters == ()


def test_decode_full_object():
    """{seed:"42", paths:["a.test"], report:"json"} decodes field by field."""
    config = decode_flags({"seed": "42", "paths": ["a.test"], "report": "json"})

    assert config.seed == 42
    assert config.report is ReportKind.JSON
    assert config.paths == ("a.test",)


def test_null_seed_is_absent():
    config = decode_flags({"seed": None, "paths": [], "report": "junit"})

    assert config.seed is None
    assert config.report is ReportKind.JUNIT


def test_unknown_report_fails_with_value():
    with pytest.raises(ConfigurationError) as excinfo:
        decode_flags({"report": "bogus"})

    assert str(excinfo.value) == "Invalid --report argument: bogus"


@pytest.mark.parametrize("seed", ["abc", "4.2", "", 42])
def test_non_integer_seed_fails(seed):
    with pytest.raises(ConfigurationError, match="Invalid --seed argument"):
        decode_flags({"seed": seed, "paths": [], "report": "chalk"})


def test_negative_seed_string_accepted():
    assert decode_flags({"seed": "-17"}).seed == -17


def test_paths_must_be_strings():
    with pytest.raises(ConfigurationError, match="paths"):
        decode_flags({"paths": "a.test"})


def test_non_object_flags_fail():
    with pytest.raises(ConfigurationError, match="expected null or an object"):
        decode_flags(["a.test"])


def test_fuzz_override():
    assert decode_flags({"fuzz": 5}).fuzz_runs == 5

    with pytest.raises(ConfigurationError, match="fuzz"):
        decode_flags({"fuzz": 0})


def test_filter_order_follows_key_order():
    config = decode_flags({"exclude": "slow", "report": "chalk", "include": "Parser"})

    assert config.filters == (FilterSpec(False, "slow"), FilterSpec(True, "Parser"))
    assert config.include == "Parser"
    assert config.exclude == "slow"


def test_at_most_one_filter_of_each_kind():
    with pytest.raises(ConfigurationError, match="include"):
        StartupConfig(filters=(FilterSpec(True, "a"), FilterSpec(True, "b")))


@pytest.mark.parametrize("fuzz", [True, "5", 2.0])
def test_fuzz_must_be_a_real_integer(fuzz):
    with pytest.raises(ConfigurationError, match="fuzz"):
        decode_flags({"fuzz": fuzz})

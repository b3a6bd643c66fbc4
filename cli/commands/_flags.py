"""
Shared option handling: --flags JSON merged with individual options.
"""

import importlib
import json
from typing import Any, Optional

from suiterun.core.errors import ConfigurationError
from suiterun.suite.tree import Node


def merge_flags(flags_json: Optional[str], **options: Any) -> Any:
    """
    Build the structured flags value.

    Options that are set override keys of the --flags object. The seed is
    re-encoded as a string, matching the wire format.
    """
    try:
        base = json.loads(flags_json) if flags_json else None
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid --flags JSON: {e}") from e

    overrides = {k: v for k, v in options.items() if v is not None}
    if not overrides or (base is not None and not isinstance(base, dict)):
        return base

    merged = dict(base or {})
    for key, value in overrides.items():
        merged[key] = str(value) if key == "seed" else value
    return merged


def load_suite(ref: str) -> Node:
    """
    Resolve "package.module:attribute" to a suite tree.

    The attribute may be a tree or a zero-argument callable returning one.
    """
    module_name, _, attr = ref.partition(":")
    if not module_name or not attr:
        raise ConfigurationError(f"Invalid --suite reference (expected module:attribute): {ref}")
    module = importlib.import_module(module_name)
    suite = getattr(module, attr)
    if not callable(suite):
        return suite
    try:
        return suite()
    except Exception as e:
        raise ConfigurationError(f"Suite factory {ref} raised {type(e).__name__}: {e}") from e

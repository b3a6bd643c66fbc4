"""
Deterministic Test Orchestration

Turns hierarchical suite declarations into seeded, filtered, flattened units
and hands them to a runner delegate through a guarded two-phase lifecycle.
"""

__version__ = "0.1.0"

"""
Test suite for deterministic orchestration.

Focus areas:
- Seed derivation determinism
- Filter folding and pruning
- Flattening order, labels and laziness
- Lifecycle transition guards
"""

"""
suiterun CLI - deterministic test orchestration

Commands:
- suiterun seed - Derive the run seed for a start time
- suiterun plan - Seed, filter and flatten a suite, then list its units
- suiterun version
"""

__version__ = "0.1.0"

"""
Stable identifier generation.

Units are identified by their label path, never by position or randomness.
"""

import hashlib


def stable_id(*parts: str) -> str:
    """
    Generate stable ID derived from inputs (no randomness).

    Args:
        *parts: String parts to combine into ID

    Returns:
        SHA-256 hash as hex string

    Example:
        stable_id("Parser", "handles empty input") -> "9c1e..."
    """
    raw = "\x1f".join(parts).encode("utf-8")
    return hashlib.sha256(raw).hexdigest()


def stable_int(*parts: str, bits: int = 32) -> int:
    """Fold stable_id(*parts) down to an unsigned integer of `bits` bits."""
    return int(stable_id(*parts), 16) & ((1 << bits) - 1)

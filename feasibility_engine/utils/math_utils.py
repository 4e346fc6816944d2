"""
Small numeric helpers shared by the scoring modules.

``round_half_up`` exists because Python's built-in ``round()`` uses banker's
rounding (``round(12.5) == 12``). Feasibility percentages round halves up
(12.5 → 13) so that a score sitting exactly on a band edge is promoted.
"""

from __future__ import annotations

import math


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return math.floor(value + 0.5)

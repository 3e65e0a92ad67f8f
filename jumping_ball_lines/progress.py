"""Progress mapping helpers for staggering motion inside one node's step."""

import math


def clamp_remaining(progress: float, i: int, n: int) -> float:
    """Progress left over for phase i of n equal phases (never negative)."""
    return max(0.0, progress - i / n)


def sub_phase(progress: float, i: int, n: int) -> float:
    """
    Map global progress onto phase i of n equal phases.

    Returns 0 before the phase starts, rises linearly to 1 while the phase
    runs, and stays at 1 once it is over.

    Example:
        sub_phase(0.5, 0, 2) -> 1.0
        sub_phase(0.5, 1, 2) -> 0.0
        sub_phase(1.0, 1, 2) -> 1.0
    """
    return min(1 / n, clamp_remaining(progress, i, n)) * n


def oscillate(progress: float) -> float:
    """Sine arc: 0 at the start, 1 at the midpoint, back to 0 at the end."""
    return math.sin(progress * math.pi)

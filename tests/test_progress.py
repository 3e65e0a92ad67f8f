#!/usr/bin/env python3
"""Tests for the progress mapping helpers."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from jumping_ball_lines import clamp_remaining, oscillate, sub_phase


def test_clamp_remaining():
    """Remaining progress for a phase never goes negative."""
    print("\n=== Test: clamp_remaining ===")

    assert clamp_remaining(0.75, 1, 2) == 0.25
    assert clamp_remaining(0.2, 1, 2) == 0.0
    assert clamp_remaining(0.0, 0, 3) == 0.0

    print("✓ clamp_remaining clamps at zero")


def test_sub_phase_two_phases():
    """Second phase only starts once the first phase's share is used up."""
    print("\n=== Test: sub_phase with two phases ===")

    assert sub_phase(0.5, 0, 2) == 1.0
    assert sub_phase(0.5, 1, 2) == 0.0
    assert sub_phase(1.0, 1, 2) == 1.0
    assert sub_phase(0.25, 0, 2) == 0.5
    assert sub_phase(0.75, 1, 2) == 0.5

    print("✓ sub_phase staggers phases")


def test_sub_phase_flat_after_phase_ends():
    print("\n=== Test: sub_phase stays at 1 after its phase ===")

    for progress in (0.34, 0.5, 0.9, 1.0):
        assert abs(sub_phase(progress, 0, 3) - 1.0) < 1e-9

    print("✓ sub_phase saturates")


def test_oscillate():
    """Rises to 1 at the midpoint and falls back to 0."""
    print("\n=== Test: oscillate ===")

    assert oscillate(0.0) == 0.0
    assert abs(oscillate(0.5) - 1.0) < 1e-12
    assert abs(oscillate(1.0)) < 1e-12
    assert abs(oscillate(0.25) - oscillate(0.75)) < 1e-12

    print("✓ oscillate goes out and back")


if __name__ == "__main__":
    test_clamp_remaining()
    test_sub_phase_two_phases()
    test_sub_phase_flat_after_phase_ends()
    test_oscillate()
    print("\nAll progress tests passed!")

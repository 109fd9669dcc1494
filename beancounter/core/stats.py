"""Coordinate and statistics helpers shared by the board."""

from __future__ import annotations

from typing import Sequence


def is_valid_position(x: int, y: int, slot_count: int) -> bool:
    """Whether ``(x, y)`` lies on the triangular peg grid."""
    return 0 <= y < slot_count and 0 <= x <= y


def landing_slot(right_turns: int, slot_count: int) -> int:
    """Slot reached after ``right_turns`` right decisions on this board."""
    return min(max(right_turns, 0), slot_count - 1)


def half_of(total: int) -> int:
    """Number of beans a half filter removes (the larger half survives)."""
    return total // 2


def weighted_slot_mean(counts: Sequence[int]) -> float:
    """Mean slot index over all slotted beans.

    Returns 0.0 when no bean has been slotted.
    """
    total = sum(counts)
    if total == 0:
        return 0.0
    return sum(i * count for i, count in enumerate(counts)) / total

"""Bean counter board: the steppable Galton box state machine.

Beans are dropped from the opening at the top. Every time a bean hits a peg
its movement policy decides whether it falls left or right, and the beans
pile up in the slots at the bottom. Only one bean enters per step, so each
row holds at most one in-flight bean.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from overrides import override  # type: ignore

from beancounter.core.bean import Bean
from beancounter.core.exceptions import BoardIndexError
from beancounter.core.stats import half_of, weighted_slot_mean
from beancounter.interfaces.board import Board

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InFlightBean:
    """A bean sitting above peg ``x`` of its row."""

    x: int
    bean: Bean


class BoardEngine(Board):
    """Owns the grid, the remaining pool and the slots.

    The grid keeps one optional cell per row since a row never holds more
    than one bean. Slots keep beans oldest arrival first.
    """

    def __init__(self, slot_count: int):
        if slot_count < 1:
            raise ValueError("slot_count must be >= 1")
        self._slot_count = slot_count
        self._rows: list[Optional[InFlightBean]] = [None] * slot_count
        self._slots: list[deque[Bean]] = [deque() for _ in range(slot_count)]
        self._remaining: deque[Bean] = deque()

    @property
    @override
    def slot_count(self) -> int:
        return self._slot_count

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self, beans: Sequence[Bean]) -> None:
        """Hard reset with a fresh set of beans.

        Slots and grid are emptied, ``beans`` become the pool in the given
        order and the first one is placed at (0, 0).
        """
        for slot in self._slots:
            slot.clear()
        self._clear_rows()
        self._remaining = deque()
        self._enqueue(beans)
        self._insert_next()
        logger.debug(
            "Reset board: %d slots, %d beans", self._slot_count, len(beans)
        )

    @override
    def repeat(self) -> None:
        """Scoop up every in-flight and slotted bean and start over.

        In-flight beans are collected top row first, then slotted beans in
        slot order, oldest first. They join the back of the pool and the
        first bean of the pool drops in at (0, 0).
        """
        collected = list(self._drain_rows())
        for slot in self._slots:
            collected.extend(slot)
            slot.clear()
        self._enqueue(collected)
        self._insert_next()
        logger.debug("Repeat: %d beans back in circulation", self.total_bean_count())

    @override
    def advance_step(self) -> bool:
        """Advance the machine one step.

        The bottom-row bean drops into its slot, every other in-flight bean
        falls one row, and a new bean enters at the top if any remain.

        Returns:
            Whether the state changed. False means the machine is finished.
        """
        if self.is_finished():
            return False

        bottom = self._slot_count - 1
        cell = self._rows[bottom]
        if cell is not None:
            self._slots[cell.x].append(cell.bean)
            self._rows[bottom] = None

        # Bottom-up so a bean moved into row y + 1 is not moved again
        for y in range(self._slot_count - 2, -1, -1):
            cell = self._rows[y]
            if cell is None:
                continue
            x = cell.x + 1 if cell.bean.decide_next() else cell.x
            self._rows[y + 1] = InFlightBean(x, cell.bean)
            self._rows[y] = None

        self._insert_next()

        if self.is_finished():
            logger.debug("Board drained: slots=%s", self.get_slot_counts())
        return True

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @override
    def get_remaining_bean_count(self) -> int:
        return len(self._remaining)

    @override
    def get_in_flight_x(self, y: int) -> Optional[int]:
        self._check_index("row", y)
        cell = self._rows[y]
        return None if cell is None else cell.x

    def get_in_flight_count(self) -> int:
        return sum(1 for cell in self._rows if cell is not None)

    @override
    def get_slot_count(self, i: int) -> int:
        self._check_index("slot", i)
        return len(self._slots[i])

    def get_slot_beans(self, i: int) -> list[Bean]:
        """Beans in slot ``i``, oldest arrival first."""
        self._check_index("slot", i)
        return list(self._slots[i])

    @override
    def get_slot_counts(self) -> list[int]:
        return [len(slot) for slot in self._slots]

    def count_beans_in_slots(self) -> int:
        return sum(len(slot) for slot in self._slots)

    def get_average_slot_bean_count(self) -> float:
        """Average slot index over all slotted beans (0.0 when empty)."""
        return weighted_slot_mean(self.get_slot_counts())

    def total_bean_count(self) -> int:
        """Beans in circulation: remaining, in flight and slotted."""
        return (
            self.get_remaining_bean_count()
            + self.get_in_flight_count()
            + self.count_beans_in_slots()
        )

    @override
    def is_finished(self) -> bool:
        """No bean left to insert and nothing in flight."""
        return not self._remaining and self.get_in_flight_count() == 0

    # ------------------------------------------------------------------
    # Half filters
    # ------------------------------------------------------------------

    def upper_half(self) -> None:
        """Keep the upper half of the slotted beans.

        Removes floor(N / 2) beans starting from slot 0 upwards, oldest first
        within a slot. With an odd N the larger half remains.
        """
        removed = self._remove_half(range(self._slot_count))
        logger.debug("upper_half removed %d beans", removed)

    def lower_half(self) -> None:
        """Keep the lower half of the slotted beans.

        Removes floor(N / 2) beans starting from the last slot downwards,
        oldest first within a slot. With an odd N the larger half remains.
        """
        removed = self._remove_half(range(self._slot_count - 1, -1, -1))
        logger.debug("lower_half removed %d beans", removed)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _remove_half(self, slot_order: Iterable[int]) -> int:
        to_remove = half_of(self.count_beans_in_slots())
        removed = 0
        for i in slot_order:
            slot = self._slots[i]
            while slot and removed < to_remove:
                slot.popleft()
                removed += 1
            if removed == to_remove:
                break
        return removed

    def _enqueue(self, beans: Iterable[Bean]) -> None:
        for bean in beans:
            bean.reset_progress()
            self._remaining.append(bean)

    def _insert_next(self) -> None:
        if self._remaining:
            self._rows[0] = InFlightBean(0, self._remaining.popleft())

    def _drain_rows(self) -> Iterator[Bean]:
        for y, cell in enumerate(self._rows):
            if cell is not None:
                self._rows[y] = None
                yield cell.bean

    def _clear_rows(self) -> None:
        for y in range(self._slot_count):
            self._rows[y] = None

    def _check_index(self, axis: str, index: int) -> None:
        if not 0 <= index < self._slot_count:
            raise BoardIndexError(axis, index, self._slot_count)

    def __repr__(self) -> str:
        return (
            f"BoardEngine(slot_count={self._slot_count}, "
            f"remaining={self.get_remaining_bean_count()}, "
            f"in_flight={self.get_in_flight_count()}, "
            f"slots={self.get_slot_counts()})"
        )

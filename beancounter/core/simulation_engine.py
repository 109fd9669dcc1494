"""Simulation engine for driving a board to completion."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from beancounter.core.exceptions import SimulationError

if TYPE_CHECKING:
    from beancounter.core.bean import Bean
    from beancounter.interfaces.board import Board

logger = logging.getLogger(__name__)

StepObserver = Callable[["Board"], None]


class SimulationEngine:
    """Minimal simulation engine.

    This delegates every state change to the board's reset/repeat/advance_step
    methods and only owns the run loop.

    Args:
        max_steps: Optional cap on the steps a single run may take. A board
            with N beans and S slots always finishes within N + S steps.
    """

    def __init__(self, max_steps: Optional[int] = None):
        if max_steps is not None and max_steps < 0:
            raise ValueError("max_steps must be >= 0")
        self._max_steps = max_steps

    @property
    def max_steps(self) -> Optional[int]:
        return self._max_steps

    def run(self, board: "Board", observer: Optional[StepObserver] = None) -> int:
        """Advance the board until it reports no further change.

        Args:
            board: Board to drive
            observer: Called with the board after every state-changing step

        Returns:
            Number of state-changing steps taken

        Raises:
            SimulationError: if the board is still changing after max_steps
        """
        steps = 0
        while board.advance_step():
            steps += 1
            if observer is not None:
                observer(board)
            if (
                self._max_steps is not None
                and steps >= self._max_steps
                and not board.is_finished()
            ):
                raise SimulationError(steps)
        logger.debug("Run finished after %d steps", steps)
        return steps

    def step(self, board: "Board", steps: int = 1) -> bool:
        """Advance the board by up to ``steps`` steps.

        Returns:
            Whether the last advance changed state. Stops early once the
            board has finished.
        """
        if steps < 0:
            raise ValueError("steps must be >= 0")
        changed = False
        for _ in range(steps):
            changed = board.advance_step()
            if not changed:
                break
        return changed

    def reset(self, board: "Board", beans: Sequence["Bean"]) -> None:
        """Reset the board with a fresh set of beans."""
        board.reset(beans)

    def repeat(self, board: "Board") -> None:
        """Put every bean back into circulation."""
        board.repeat()

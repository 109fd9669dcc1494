"""Board abstraction - behavioral contract.

A Board is the steppable Galton box state machine: a triangular grid of
in-flight beans, a pool of beans waiting at the top and the slots at the
bottom. The simulation engine and the text formatter depend only on this
interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from beancounter.core.bean import Bean


class Board(ABC):
    """Base class for bean counter boards.

    Logical coordinates for a 4-slot board::

                         (0, 0)
                  (0, 1)        (1, 1)
           (0, 2)        (1, 2)        (2, 2)
     (0, 3)       (1, 3)        (2, 3)       (3, 3)
    [Slot0]       [Slot1]       [Slot2]      [Slot3]
    """

    @property
    @abstractmethod
    def slot_count(self) -> int:
        """Number of slots (and rows of pegs)."""
        ...

    @abstractmethod
    def reset(self, beans: Sequence[Bean]) -> None:
        """Hard reset: empty the board and load ``beans`` into the pool."""
        ...

    @abstractmethod
    def advance_step(self) -> bool:
        """Advance one step; False once the board has drained."""
        ...

    @abstractmethod
    def repeat(self) -> None:
        """Scoop every bean back into the pool and start over."""
        ...

    @abstractmethod
    def is_finished(self) -> bool:
        """True when no bean remains in the pool or on the grid."""
        ...

    @abstractmethod
    def get_remaining_bean_count(self) -> int:
        """Beans waiting to be inserted."""
        ...

    @abstractmethod
    def get_in_flight_x(self, y: int) -> Optional[int]:
        """Column of the in-flight bean in row ``y``, or None."""
        ...

    @abstractmethod
    def get_slot_count(self, i: int) -> int:
        """Beans in slot ``i``."""
        ...

    @abstractmethod
    def get_slot_counts(self) -> list[int]:
        """Beans in every slot, lowest index first."""
        ...

"""Movement policy abstraction - behavioral contract.

A movement policy decides, one peg at a time, whether its bean falls to the
right or to the left. The board only ever talks to this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class MovementPolicy(ABC):
    """Per-bean left/right decision logic.

    Every concrete policy (RandomPolicy, SkillPolicy) must inherit from this
    class and implement all abstract members.
    """

    @property
    @abstractmethod
    def skill_level(self) -> Optional[int]:
        """Fixed skill level, or None for a luck-mode policy."""
        ...

    @property
    @abstractmethod
    def steps_taken(self) -> int:
        """Progress counter for the current run (starts at 1)."""
        ...

    @abstractmethod
    def decide_next(self) -> bool:
        """Return True to go right at the current peg, False to go left."""
        ...

    @abstractmethod
    def reset_progress(self) -> None:
        """Restart progress when the bean re-enters circulation."""
        ...

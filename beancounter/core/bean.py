"""Bean: identity plus the movement policy it owns."""

from __future__ import annotations

import itertools
from typing import Optional

# Importing the policy module registers the built-in modes
import beancounter.core.policy  # noqa: F401  # pylint: disable=unused-import
from beancounter.core.registry import create_policy
from beancounter.interfaces.policy import MovementPolicy
from beancounter.interfaces.random_source import RandomSource
from beancounter.utils.consts import ModeNames

_BEAN_IDS = itertools.count()


class Bean:
    """A bean dropped into the board.

    The board asks the bean which way to fall at every peg and resets its
    progress whenever it re-enters circulation. Everything mode-specific lives
    in the owned policy.
    """

    def __init__(self, policy: MovementPolicy, bean_id: Optional[int] = None):
        self._policy = policy
        self._bean_id = next(_BEAN_IDS) if bean_id is None else bean_id

    @classmethod
    def create(cls, slot_count: int, is_luck: bool, rng: RandomSource) -> "Bean":
        """Build a luck-mode or skill-mode bean sharing ``rng``."""
        mode = ModeNames.LUCK if is_luck else ModeNames.SKILL
        return cls.for_mode(mode, slot_count, rng)

    @classmethod
    def for_mode(cls, mode: str, slot_count: int, rng: RandomSource) -> "Bean":
        """Build a bean whose policy comes from the registry entry ``mode``."""
        return cls(create_policy(mode, slot_count, rng))

    @property
    def bean_id(self) -> int:
        return self._bean_id

    @property
    def policy(self) -> MovementPolicy:
        return self._policy

    @property
    def skill_level(self) -> Optional[int]:
        """Skill level, or None in luck mode."""
        return self._policy.skill_level

    @property
    def is_luck(self) -> bool:
        return self._policy.skill_level is None

    @property
    def steps_taken(self) -> int:
        return self._policy.steps_taken

    def decide_next(self) -> bool:
        """True to fall right at the current peg."""
        return self._policy.decide_next()

    def reset_progress(self) -> None:
        self._policy.reset_progress()

    def __repr__(self) -> str:
        return f"Bean(id={self._bean_id}, policy={self._policy!r})"

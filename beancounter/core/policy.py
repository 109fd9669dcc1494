"""Concrete movement policies: luck (coin flip) and skill (deterministic)."""

from __future__ import annotations

import math
from typing import Optional

from overrides import override  # type: ignore

from beancounter.core.registry import register_policy
from beancounter.core.stats import landing_slot
from beancounter.interfaces.policy import MovementPolicy
from beancounter.interfaces.random_source import RandomSource
from beancounter.utils.consts import INITIAL_STEPS_TAKEN, RIGHT_PROBABILITY, ModeNames


def draw_skill_level(slot_count: int, rng: RandomSource) -> int:
    """Draw a skill level from N(slot_count * p, slot_count * p * (1 - p)).

    Consumes exactly one gaussian sample. Halves round up, so 2.5 becomes 3.
    The result is not clamped to the slot range.
    """
    mean = slot_count * RIGHT_PROBABILITY
    stdev = math.sqrt(slot_count * RIGHT_PROBABILITY * (1 - RIGHT_PROBABILITY))
    return math.floor(rng.gauss(0.0, 1.0) * stdev + mean + 0.5)


class RandomPolicy(MovementPolicy):
    """Luck mode: each peg is a fair coin flip from the shared source."""

    def __init__(self, slot_count: int, rng: RandomSource):
        self._slot_count = slot_count
        self._rng = rng
        self._steps_taken = INITIAL_STEPS_TAKEN

    @property
    @override
    def skill_level(self) -> Optional[int]:
        return None

    @property
    @override
    def steps_taken(self) -> int:
        return self._steps_taken

    @override
    def decide_next(self) -> bool:
        return self._rng.randint(0, 1) == 1

    @override
    def reset_progress(self) -> None:
        self._steps_taken = INITIAL_STEPS_TAKEN

    def __repr__(self) -> str:
        return f"RandomPolicy(slot_count={self._slot_count})"


class SkillPolicy(MovementPolicy):
    """Skill mode: go right ``skill_level`` times, then left for every other peg.

    The skill level is drawn once at construction and survives every
    repeat of the experiment. Decisions never touch the random source.
    """

    def __init__(
        self,
        slot_count: int,
        rng: Optional[RandomSource] = None,
        skill_level: Optional[int] = None,
    ):
        if skill_level is None:
            if rng is None:
                raise ValueError("SkillPolicy needs a random source or a skill level")
            skill_level = draw_skill_level(slot_count, rng)
        self._slot_count = slot_count
        self._skill_level = skill_level
        self._steps_taken = INITIAL_STEPS_TAKEN

    @classmethod
    def with_level(cls, slot_count: int, skill_level: int) -> "SkillPolicy":
        """Build a policy with a fixed skill level instead of a drawn one."""
        return cls(slot_count, skill_level=skill_level)

    @property
    @override
    def skill_level(self) -> int:
        return self._skill_level

    @property
    @override
    def steps_taken(self) -> int:
        return self._steps_taken

    @property
    def expected_slot(self) -> int:
        """Slot this bean always lands in."""
        return landing_slot(self._skill_level, self._slot_count)

    @override
    def decide_next(self) -> bool:
        if self._steps_taken <= self._skill_level:
            self._steps_taken += 1
            return True
        return False

    @override
    def reset_progress(self) -> None:
        self._steps_taken = INITIAL_STEPS_TAKEN

    def __repr__(self) -> str:
        return f"SkillPolicy(slot_count={self._slot_count}, skill_level={self._skill_level})"


register_policy(ModeNames.LUCK, RandomPolicy)
register_policy(ModeNames.SKILL, SkillPolicy)

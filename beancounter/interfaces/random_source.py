"""Random source interface shared by every bean of an experiment."""

from __future__ import annotations

from typing import Protocol


class RandomSource(Protocol):
    """Anything that can produce the draws a movement policy consumes.

    ``random.Random`` satisfies this protocol. A single instance is passed by
    reference to every bean so a fixed seed and a fixed call order reproduce
    the same experiment.
    """

    def gauss(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        """Return a normally distributed sample."""
        ...

    def randint(self, a: int, b: int) -> int:
        """Return a uniform integer in ``[a, b]``."""
        ...

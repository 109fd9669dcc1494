"""Interface abstractions for the bean counter.

Defines behavioral contracts that all implementations must satisfy:
- Board: steppable Galton box state machine (abstract base class)
- MovementPolicy: per-bean left/right decision (abstract base class)
- RandomSource: random draws shared by the beans of one experiment (protocol)
"""

from beancounter.interfaces.board import Board
from beancounter.interfaces.policy import MovementPolicy
from beancounter.interfaces.random_source import RandomSource

__all__ = [
    "Board",
    "MovementPolicy",
    "RandomSource",
]

"""Core modules for the bean counter.

Core infrastructure:
- exceptions: package exception hierarchy
- stats: coordinate and slot statistics helpers
- registry: mode name to movement policy factory
- policy: RandomPolicy (luck) and SkillPolicy (skill)
- bean: Bean, owner of one movement policy
- board: BoardEngine, the steppable Galton box
- simulation_engine: run loop around a board
"""

from beancounter.core.bean import Bean
from beancounter.core.board import BoardEngine, InFlightBean
from beancounter.core.exceptions import (
    BeanCounterError,
    BoardIndexError,
    ConfigurationError,
    SimulationError,
)
from beancounter.core.policy import RandomPolicy, SkillPolicy, draw_skill_level
from beancounter.core.registry import (
    PolicyRegistry,
    create_policy,
    list_available_modes,
    register_policy,
)
from beancounter.core.simulation_engine import SimulationEngine
from beancounter.core.stats import weighted_slot_mean

__all__ = [
    # Exceptions
    "BeanCounterError",
    "BoardIndexError",
    "ConfigurationError",
    "SimulationError",
    # Policies
    "RandomPolicy",
    "SkillPolicy",
    "draw_skill_level",
    "PolicyRegistry",
    "create_policy",
    "list_available_modes",
    "register_policy",
    # Board
    "Bean",
    "BoardEngine",
    "InFlightBean",
    "SimulationEngine",
    "weighted_slot_mean",
]

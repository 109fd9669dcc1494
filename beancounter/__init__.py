"""Bean Counter (Galton box) simulator.

Beans fall through a triangular board of pegs, turning left or right at each
peg, and pile up in the slots at the bottom. In luck mode every turn is a
coin flip and the slots approximate a binomial distribution; in skill mode
each bean's path is fixed by a skill level drawn once from a normal
distribution.

Architecture:
- interfaces: Board, MovementPolicy and RandomSource contracts
- core: BoardEngine state machine, policies, beans, run loop
- utils: YAML configuration, text rendering, constants
- cli: command-line driver

Getting started:
    import random
    from beancounter import Bean, BoardEngine, SimulationEngine

    rng = random.Random(42)
    board = BoardEngine(10)
    board.reset([Bean.create(10, True, rng) for _ in range(400)])
    SimulationEngine().run(board)
    print(board.get_slot_counts())
"""

# Core abstractions
from beancounter.interfaces.board import Board
from beancounter.interfaces.policy import MovementPolicy
from beancounter.interfaces.random_source import RandomSource

from beancounter.core.bean import Bean
from beancounter.core.board import BoardEngine
from beancounter.core.exceptions import (
    BeanCounterError,
    BoardIndexError,
    ConfigurationError,
    SimulationError,
)
from beancounter.core.policy import RandomPolicy, SkillPolicy
from beancounter.core.registry import create_policy, list_available_modes, register_policy
from beancounter.core.simulation_engine import SimulationEngine
from beancounter.utils.config_loader import ExperimentConfig, load_config

__all__ = [
    # Interfaces
    "Board",
    "MovementPolicy",
    "RandomSource",
    # Engine
    "Bean",
    "BoardEngine",
    "SimulationEngine",
    "RandomPolicy",
    "SkillPolicy",
    # Mode registry
    "create_policy",
    "list_available_modes",
    "register_policy",
    # Configuration
    "ExperimentConfig",
    "load_config",
    # Errors
    "BeanCounterError",
    "BoardIndexError",
    "ConfigurationError",
    "SimulationError",
]

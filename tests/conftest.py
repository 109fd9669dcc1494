"""
Pytest configuration and shared fixtures for the bean counter test suite.
"""

import itertools
import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'beancounter' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class ScriptedRandom:
    """Deterministic stand-in for random.Random.

    ``bits`` feeds randint(0, 1) and ``gaussians`` feeds gauss(); both are
    consumed in order and may be infinite iterators.
    """

    def __init__(self, bits=(), gaussians=()):
        self._bits = iter(bits)
        self._gaussians = iter(gaussians)
        self.randint_calls = 0
        self.gauss_calls = 0

    def randint(self, a: int, b: int) -> int:
        assert (a, b) == (0, 1)
        self.randint_calls += 1
        return next(self._bits)

    def gauss(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        assert (mu, sigma) == (0.0, 1.0)
        self.gauss_calls += 1
        return next(self._gaussians)


@pytest.fixture
def scripted_rng():
    """Factory fixture building ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def always_right_rng():
    return ScriptedRandom(bits=itertools.repeat(1))


@pytest.fixture
def always_left_rng():
    return ScriptedRandom(bits=itertools.repeat(0))


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def valid_experiment_config_dict():
    """
    Fixture providing a complete valid experiment configuration dictionary.
    """
    return {
        "slot_count": 4,
        "bean_count": 6,
        "mode": "skill",
        "seed": 3,
        "debug": False,
    }


@pytest.fixture
def temp_config_yaml_file(temp_yaml_file, valid_experiment_config_dict):
    """
    Fixture that creates a temporary YAML file with valid configuration.

    Yields:
        Path: Path to the temporary YAML file with valid configuration
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_experiment_config_dict, f)

    yield temp_yaml_file


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
    config.addinivalue_line("markers", "unit: marks tests as unit tests")

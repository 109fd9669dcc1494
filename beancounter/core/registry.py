"""Movement policy registry and factory.

Maps mode names ("luck", "skill") to policy factories. Policy modules call
register_policy() at import time, so importing beancounter.core.policy is
enough to make the built-in modes available.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from beancounter.interfaces.policy import MovementPolicy
    from beancounter.interfaces.random_source import RandomSource

PolicyFactory = Callable[[int, "RandomSource"], "MovementPolicy"]


class PolicyRegistry:
    """Registry of available movement policies.

    A factory is called as ``factory(slot_count, rng)`` and must return a
    fresh MovementPolicy for one bean.

    THREAD SAFETY: Not thread-safe. All registration should happen during
    module initialization.
    """

    def __init__(self):
        self._policies: dict[str, PolicyFactory] = {}

    def register(self, name: str, factory: PolicyFactory) -> None:
        """Register a policy factory under a mode name."""
        if name in self._policies:
            raise ValueError(f"Mode '{name}' already registered")
        self._policies[name] = factory

    def get(self, name: str) -> PolicyFactory:
        """Get a policy factory by mode name."""
        if name not in self._policies:
            raise ValueError(
                f"Unknown mode '{name}'. Available: {list(self._policies.keys())}"
            )
        return self._policies[name]

    def list_modes(self) -> list[str]:
        """List all registered mode names."""
        return list(self._policies.keys())

    def create(self, name: str, slot_count: int, rng: RandomSource) -> MovementPolicy:
        """Build a policy for one bean."""
        factory = self.get(name)
        return factory(slot_count, rng)


# Global registry
_REGISTRY = PolicyRegistry()


def register_policy(name: str, factory: PolicyFactory) -> None:
    """Register a policy factory globally."""
    _REGISTRY.register(name, factory)


def get_policy(name: str) -> PolicyFactory:
    """Get a policy factory by mode name."""
    return _REGISTRY.get(name)


def create_policy(name: str, slot_count: int, rng: RandomSource) -> MovementPolicy:
    """Create a policy instance by mode name."""
    return _REGISTRY.create(name, slot_count, rng)


def list_available_modes() -> list[str]:
    """List all registered mode names."""
    return _REGISTRY.list_modes()

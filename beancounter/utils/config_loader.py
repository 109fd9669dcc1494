"""Helpers for loading and validating bean counter experiment configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml  # type: ignore[import-untyped]

from beancounter.core.exceptions import ConfigurationError
from beancounter.core.registry import list_available_modes
from beancounter.utils.consts import ModeNames

# Bundled defaults live next to the package modules
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config.yaml"


@dataclass(frozen=True)
class ExperimentConfig:
    slot_count: int
    bean_count: int
    mode: str = ModeNames.LUCK
    seed: Optional[int] = None
    debug: bool = False

    @property
    def is_luck(self) -> bool:
        return self.mode == ModeNames.LUCK


# Cache for the bundled default configuration
_LOADER_CACHE: dict[str, ExperimentConfig] = {}


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError("Config file must contain a mapping")
    return raw


def _require_int(raw: dict[str, Any], key: str, minimum: int) -> int:
    if key not in raw:
        raise ConfigurationError(key, "missing required key")
    value = raw[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(key, f"expected an integer, got {value!r}")
    if value < minimum:
        raise ConfigurationError(key, f"must be >= {minimum}, got {value}")
    return value


def _optional_seed(raw: dict[str, Any]) -> Optional[int]:
    seed = raw.get("seed")
    if seed is None:
        return None
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ConfigurationError("seed", f"expected an integer, got {seed!r}")
    return seed


def _validate_mode(mode: Any) -> str:
    modes = list_available_modes()
    if mode not in modes:
        raise ConfigurationError("mode", f"must be one of {modes}, got {mode!r}")
    return mode


def parse_config(raw: dict[str, Any]) -> ExperimentConfig:
    """Build an ExperimentConfig from an already-parsed mapping.

    Raises:
        ConfigurationError: on missing keys, wrong types or unknown modes
    """
    debug = raw.get("debug", False)
    if not isinstance(debug, bool):
        raise ConfigurationError("debug", f"expected a boolean, got {debug!r}")

    return ExperimentConfig(
        slot_count=_require_int(raw, "slot_count", minimum=1),
        bean_count=_require_int(raw, "bean_count", minimum=0),
        mode=_validate_mode(raw.get("mode", ModeNames.LUCK)),
        seed=_optional_seed(raw),
        debug=debug,
    )


def load_config(path: Optional[str] = None) -> ExperimentConfig:
    """Load and validate an experiment configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled
            beancounter/config.yaml.

    Returns:
        ExperimentConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = DEFAULT_CONFIG_PATH if path is None else Path(path)
    raw = _load_yaml_file(p)

    return parse_config(raw)


def get_config() -> ExperimentConfig:
    """Return the bundled default configuration, loading it once."""
    key = str(DEFAULT_CONFIG_PATH)
    if key not in _LOADER_CACHE:
        _LOADER_CACHE[key] = load_config()
    return _LOADER_CACHE[key]


def clear_config_cache() -> None:
    """Clear the cached default configuration.

    Subsequent calls to get_config() reload from disk.
    """
    _LOADER_CACHE.clear()

"""Custom exceptions used throughout the beancounter package."""

from typing import Any, Optional


class BeanCounterError(Exception):
    """Base exception for all bean counter errors.

    All package-specific exceptions inherit from this class so callers can
    catch every bean counter failure with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(BeanCounterError):
    """Raised when an experiment configuration is invalid.

    This includes:
    - Unreadable or malformed YAML
    - Missing required keys (slot_count, bean_count)
    - Values of the wrong type or out of range
    - Unknown movement mode
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class BoardIndexError(BeanCounterError, IndexError):
    """Raised when a row or slot index falls outside the board.

    Reading row ``y`` or slot ``i`` requires ``0 <= index < slot_count``.
    Violating that is a programming error, so it fails fast like any other
    out-of-range sequence access.
    """

    def __init__(
        self,
        axis: str,
        index: int,
        limit: int,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details.update({"axis": axis, "index": index, "limit": limit})
        message = f"{axis} index {index} out of range [0, {limit})"
        super().__init__(message=message, details=details)
        self.axis = axis
        self.index = index
        self.limit = limit


class SimulationError(BeanCounterError):
    """Raised when a run does not drain within its max_steps limit."""

    def __init__(
        self,
        steps: int,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if message is None:
            message = f"Board did not finish within {steps} steps"
        details = details or {}
        details["steps"] = steps
        super().__init__(message=message, details=details)
        self.steps = steps

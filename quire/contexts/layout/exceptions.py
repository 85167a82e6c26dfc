"""Custom exceptions for the layout context."""

from pathlib import Path
from typing import Optional


class InvalidLayoutConfigError(ValueError):
    """
    Exception raised when a layout configuration is unusable.

    Raised for unknown keys in YAML overrides and for geometry that leaves no
    room for content (margins wider than the page, top margin below the
    bottom break line).

    Attributes:
        message: Error description
        config_path: YAML file the bad values came from, if any
        original_error: Underlying OmegaConf error, if any
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.original_error = original_error

        parts = [message]

        if config_path:
            parts.append(f"\nConfig file: {config_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))

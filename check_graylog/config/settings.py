"""Environment settings."""

import os
from typing import Optional


# export NCG2=debug
DEBUG_ENV = "NCG2"


class Settings:
    """Application settings from environment variables."""

    @staticmethod
    def get(key: str, default: Optional[str] = None, required: bool = False) -> str:
        """
        Get environment variable value.

        Args:
            key: Environment variable name
            default: Default value if not set
            required: Whether the variable is required

        Returns:
            str: Environment variable value

        Raises:
            ValueError: If required variable is not set
        """
        value = os.getenv(key, default)
        if required and not value:
            raise ValueError(f"Required environment variable not set: {key}")
        return value or ""

    @staticmethod
    def debug_enabled() -> bool:
        """Any non-empty value of NCG2 turns on diagnostic output."""
        return bool(Settings.get(DEBUG_ENV))

"""
Centralized configuration management for fakerest.

Provides a unified interface for accessing environment variables and
configuration with defaults and validation.
"""

import os
from pathlib import Path
from typing import Optional

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"

DECODERS = ("json", "positional")


class Config:
    """
    Centralized configuration management.

    Every setting is optional; with a clean environment the demo talks to the
    public JSONPlaceholder service and writes into the current directory.
    """

    @staticmethod
    def get(key: str, default: Optional[str] = None, required: bool = False) -> str:
        """
        Get an environment variable with optional default and validation.

        Args:
            key: Environment variable name
            default: Default value if not set
            required: If True, raise ValueError if not set

        Returns:
            Environment variable value or default

        Raises:
            ValueError: If required=True and variable is not set
        """
        value = os.getenv(key, default)
        if required and value is None:
            raise ValueError(f"Required environment variable {key} is not set")
        return value or ""

    @staticmethod
    def base_url() -> str:
        """
        Get the base URL of the remote REST service.

        Returns:
            Base URL without a trailing slash (FAKEREST_BASE_URL or the public service)
        """
        return Config.get("FAKEREST_BASE_URL", DEFAULT_BASE_URL).rstrip("/")

    @staticmethod
    def timeout() -> Optional[float]:
        """
        Get the per-request timeout in seconds.

        Returns:
            Timeout in seconds, or None to wait indefinitely

        Raises:
            ValueError: If FAKEREST_TIMEOUT is not a positive number
        """
        raw = Config.get("FAKEREST_TIMEOUT")
        if not raw:
            return None
        try:
            value = float(raw)
        except ValueError:
            raise ValueError(f"FAKEREST_TIMEOUT must be a number, got {raw!r}") from None
        if value <= 0:
            raise ValueError(f"FAKEREST_TIMEOUT must be positive, got {raw!r}")
        return value

    @staticmethod
    def decoder() -> str:
        """
        Get the name of the response decoding strategy.

        Returns:
            "json" (default) or "positional"

        Raises:
            ValueError: If FAKEREST_DECODER names an unknown strategy
        """
        name = Config.get("FAKEREST_DECODER", "json").strip().lower()
        if name not in DECODERS:
            raise ValueError(
                f"Unknown decoder {name!r} in FAKEREST_DECODER. Expected one of: {', '.join(DECODERS)}"
            )
        return name

    @staticmethod
    def output_dir() -> Path:
        """
        Get the directory where file artifacts are written.

        Checks FAKEREST_OUTPUT_DIR environment variable first, then defaults
        to the current working directory.

        Returns:
            Path to output directory
        """
        env_dir = os.getenv("FAKEREST_OUTPUT_DIR")
        if env_dir:
            return Path(env_dir).resolve()
        return Path.cwd()


# Global config instance for convenience
config = Config()

"""Configuration loaded from environment variables."""

import os


def _get_env_int(key: str, default: str) -> int:
    """Get integer environment variable with validation."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid integer value for {key}")


def _get_env_log_level(key: str, default: str) -> str:
    """Get logging level name with validation."""
    level = os.getenv(key, default).strip().upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"Invalid log level for {key}: {level}")
    return level


class Config:
    """Centralized configuration from environment variables."""

    # Logging
    LOG_LEVEL: str = _get_env_log_level("LOG_LEVEL", "INFO")

    # Output of the batch CLI (JSON list of results)
    OUTPUT_FILE: str = os.getenv("OUTPUT_FILE", "data/decoded.json")

    # Upper bound on encoded input accepted by the HTTP API
    MAX_ENCODED_LENGTH: int = _get_env_int("MAX_ENCODED_LENGTH", "1024")


config = Config()

"""Runtime configuration for word-stems service layers.

The counting pipeline itself takes no configuration; these settings only
affect logging and the MCP tools.
"""

from dataclasses import dataclass
import logging
import os


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_log_level(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class ServiceConfig:
    log_level: int
    max_file_bytes: int


def get_service_config() -> ServiceConfig:
    """Load service config from environment variables."""
    return ServiceConfig(
        log_level=_env_log_level("WORD_STEMS_LOG_LEVEL", logging.WARNING),
        max_file_bytes=max(1, _env_int("WORD_STEMS_MAX_FILE_BYTES", 16 * 1024 * 1024)),
    )

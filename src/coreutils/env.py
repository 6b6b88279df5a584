from dotenv import load_dotenv
import logging
import os

load_dotenv()  # take environment variables from .env


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def env_get_log_level(default: int = logging.INFO) -> int:
    """Resolve LOG_LEVEL (e.g. "debug", "WARNING") to a logging level."""
    name = env_get("LOG_LEVEL")
    if not name:
        return default

    level = logging.getLevelName(name.strip().upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else default

import logging
import os
from datetime import datetime
from typing import Optional

from src.coreutils.env import env_get, env_get_log_level

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: Optional[int] = None):
    """Setup basic logging configuration

    Level falls back to LOG_LEVEL, then INFO. A dated log file is written
    only when LOG_DIR is set.
    """
    if level is None:
        level = env_get_log_level()

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_dir = env_get("LOG_DIR")
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            logging.FileHandler(
                os.path.join(
                    log_dir, f"arrays_{datetime.now().strftime('%Y-%m-%d')}.log"
                )
            )
        )

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    return logging.getLogger(__name__)

import logging
import os
from typing import Optional

ENV_LOG_LEVEL = "IDEATOGAME_LOG_LEVEL"
PACKAGE_LOGGER = "ideatogame"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def resolve_level(default_level: int = logging.INFO) -> int:
    """Return the level named by IDEATOGAME_LOG_LEVEL, or ``default_level``."""
    level_name = os.getenv(ENV_LOG_LEVEL, "").strip()
    if not level_name:
        return default_level
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else default_level


def configure_logging(
    default_level: int = logging.INFO,
    *,
    package_level: Optional[int] = None,
    force: bool = False,
) -> int:
    """Configure the root logger for a game or tool embedding the runtime.

    The root level comes from IDEATOGAME_LOG_LEVEL when set. ``package_level``
    tunes only the ``ideatogame`` loggers (e.g. DEBUG for save I/O while the
    game itself stays at INFO). ``force`` replaces handlers already installed
    on the root logger. Returns the root level applied.
    """
    level = resolve_level(default_level)
    logging.basicConfig(level=level, format=LOG_FORMAT, force=force)
    if package_level is not None:
        logging.getLogger(PACKAGE_LOGGER).setLevel(package_level)
    return level

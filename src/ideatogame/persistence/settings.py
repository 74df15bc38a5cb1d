from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .filesystem import (
    DEFAULT_FILE_EXTENSION,
    DEFAULT_FILE_NAME,
    DEFAULT_SUB_DIRECTORY,
    FileSystemPersistenceStrategy,
)
from .paths import APP_NAME, ENV_DATA_DIR

logger = logging.getLogger(__name__)


@dataclass
class PersistenceSettings:
    """Where and how the default strategy stores slot files."""

    app_name: str = APP_NAME
    app_author: Optional[str] = None
    sub_directory: str = DEFAULT_SUB_DIRECTORY
    file_name: str = DEFAULT_FILE_NAME
    file_extension: str = DEFAULT_FILE_EXTENSION
    data_dir: Optional[Path] = None  # None: platform user data dir

    @classmethod
    def from_env(cls, **overrides) -> "PersistenceSettings":
        """Create settings, taking data_dir from IDEATOGAME_DATA_DIR when set."""
        settings = cls(**overrides)
        env_dir = os.getenv(ENV_DATA_DIR)
        if env_dir and settings.data_dir is None:
            settings.data_dir = Path(env_dir).expanduser().resolve()
            logger.debug("Using data dir from %s: %s", ENV_DATA_DIR, settings.data_dir)
        return settings


def create_default_strategy(settings: Optional[PersistenceSettings] = None) -> FileSystemPersistenceStrategy:
    settings = settings or PersistenceSettings.from_env()
    return FileSystemPersistenceStrategy(
        sub_directory=settings.sub_directory,
        file_name=settings.file_name,
        file_extension=settings.file_extension,
        root_dir=settings.data_dir,
        app_name=settings.app_name,
        app_author=settings.app_author,
    )

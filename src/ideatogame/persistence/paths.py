from __future__ import annotations

import logging
import os
from pathlib import Path, PurePath
from typing import Optional

from platformdirs import user_data_dir

logger = logging.getLogger(__name__)

APP_NAME = "IdeaToGame"

# Environment variable override (useful for tests and portable installs)
ENV_DATA_DIR = "IDEATOGAME_DATA_DIR"


def default_data_root(app_name: str = APP_NAME, app_author: Optional[str] = None) -> Path:
    """Return the platform-specific root directory for application data.

    Linux: ~/.local/share/<app_name> (or $XDG_DATA_HOME/<app_name>)
    macOS: ~/Library/Application Support/<app_name>
    Windows: %LOCALAPPDATA%\\<app_author>\\<app_name>

    IDEATOGAME_DATA_DIR takes precedence when set.
    """
    override = os.getenv(ENV_DATA_DIR)
    if override:
        return Path(override).expanduser().resolve()
    return Path(user_data_dir(appname=app_name, appauthor=app_author or False))


def normalize_separators(path: str) -> str:
    """Replace both '/' and '\\' with the host separator."""
    return path.replace("\\", os.sep).replace("/", os.sep)


def normalize_sub_directory(sub_directory: str) -> str:
    return normalize_separators(sub_directory).strip(os.sep)


def file_stem(file_name: str) -> str:
    """Reduce a configured file name to its bare stem ("saves/Game.json" -> "Game")."""
    stem = PurePath(normalize_separators(file_name)).stem
    if not stem:
        raise ValueError(f"Invalid save file name: {file_name!r}")
    return stem


def clean_extension(extension: str) -> str:
    return extension.replace(".", "")


def slot_file_name(stem: str, slot_index: int, extension: str) -> str:
    name = f"{stem}_Slot{slot_index:02d}"
    if extension:
        name += f".{extension}"
    return name


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path

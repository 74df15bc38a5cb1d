from __future__ import annotations

import asyncio
import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from .errors import SerializationError, SlotNotFoundError, StorageUnavailableError
from .paths import (
    APP_NAME,
    clean_extension,
    default_data_root,
    ensure_dir,
    file_stem,
    normalize_sub_directory,
    slot_file_name,
)
from .strategies import PersistenceStrategy
from .values import check_slot_index

logger = logging.getLogger(__name__)

DEFAULT_SUB_DIRECTORY = "PersistenceSystem"
DEFAULT_FILE_NAME = "Save"
DEFAULT_FILE_EXTENSION = "ideatogame"


class FileSystemPersistenceStrategy(PersistenceStrategy):
    """Strategy that stores each slot as one file on the local disk.

    File layout::

        <root_dir>/<sub_directory>/<file_name>_Slot<NN>.<file_extension>

    where NN is the slot index padded to at least two digits. Saves overwrite
    the slot file in place; there is no temporary file or backup.
    """

    def __init__(
        self,
        sub_directory: str = DEFAULT_SUB_DIRECTORY,
        file_name: str = DEFAULT_FILE_NAME,
        file_extension: str = DEFAULT_FILE_EXTENSION,
        root_dir: Optional[Union[str, Path]] = None,
        app_name: str = APP_NAME,
        app_author: Optional[str] = None,
    ) -> None:
        self.root_dir = Path(root_dir) if root_dir is not None else default_data_root(app_name, app_author)
        self.sub_directory = normalize_sub_directory(sub_directory)
        self.file_name = file_stem(file_name)
        self.file_extension = clean_extension(file_extension)
        self.save_dir = self.root_dir / self.sub_directory if self.sub_directory else self.root_dir

        suffix = re.escape(f".{self.file_extension}") if self.file_extension else ""
        self._slot_pattern = re.compile(rf"^{re.escape(self.file_name)}_Slot(\d+){suffix}$")
        logger.debug("Slot files resolve under %s", self.save_dir)

    def slot_path(self, slot_index: int) -> Path:
        check_slot_index(slot_index)
        return self.save_dir / slot_file_name(self.file_name, slot_index, self.file_extension)

    # Public API

    async def save(self, slot_index: int, data: str) -> None:
        path = self.slot_path(slot_index)
        await asyncio.to_thread(self._write, path, data)
        logger.info("Saved slot %d to %s", slot_index, path)

    async def load(self, slot_index: int) -> str:
        path = self.slot_path(slot_index)
        text = await asyncio.to_thread(self._read, slot_index, path)
        logger.info("Loaded slot %d from %s", slot_index, path)
        return text

    def has_slot(self, slot_index: int) -> bool:
        return self.slot_path(slot_index).is_file()

    def list_slots(self) -> List[int]:
        """Return the indices of all slot files present on disk, ascending."""
        if not self.save_dir.is_dir():
            return []
        found = set()
        for entry in self.save_dir.iterdir():
            match = self._slot_pattern.match(entry.name)
            if match and entry.is_file():
                found.add(int(match.group(1)))
        return sorted(found)

    def delete_slot(self, slot_index: int) -> bool:
        """Remove a slot file. Returns False if it did not exist."""
        path = self.slot_path(slot_index)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            logger.error("Failed to delete slot %d at %s: %s", slot_index, path, exc)
            raise StorageUnavailableError(f"Cannot delete {path}: {exc}") from exc
        logger.info("Deleted slot %d at %s", slot_index, path)
        return True

    # Internal utilities

    def _write(self, path: Path, data: str) -> None:
        try:
            ensure_dir(path.parent)
        except OSError as exc:
            logger.error("Failed to create save directory '%s': %s", path.parent, exc)
            raise StorageUnavailableError(f"Cannot create save directory {path.parent}: {exc}") from exc
        try:
            with path.open("w", encoding="utf-8") as f:
                f.write(data)
        except OSError as exc:
            logger.error("Failed to write %s: %s", path, exc)
            raise StorageUnavailableError(f"Cannot write {path}: {exc}") from exc
        logger.debug("Wrote %d characters to %s", len(data), path)

    def _read(self, slot_index: int, path: Path) -> str:
        try:
            with path.open("r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError as exc:
            raise SlotNotFoundError(slot_index, f"Save file not found: {path}") from exc
        except UnicodeDecodeError as exc:
            raise SerializationError(f"Save file {path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            logger.error("Failed to read %s: %s", path, exc)
            raise StorageUnavailableError(f"Cannot read {path}: {exc}") from exc

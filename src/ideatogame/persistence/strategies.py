from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict

from .errors import SlotNotFoundError

logger = logging.getLogger(__name__)


class SaveStrategy(ABC):
    """Abstract interface for writing serialized save data to a slot."""

    @abstractmethod
    async def save(self, slot_index: int, data: str) -> None:
        """Persist ``data`` as the full content of ``slot_index``, replacing any previous content."""


class LoadStrategy(ABC):
    """Abstract interface for reading serialized save data from a slot."""

    @abstractmethod
    async def load(self, slot_index: int) -> str:
        """Return the text most recently saved to ``slot_index``.

        Raises SlotNotFoundError if the slot has never been saved.
        """


class PersistenceStrategy(SaveStrategy, LoadStrategy):
    """A strategy that can both save and load."""


class InMemoryPersistenceStrategy(PersistenceStrategy):
    """Test/deterministic strategy that holds slot data in memory only."""

    def __init__(self) -> None:
        self._slots: Dict[int, str] = {}
        self.save_calls = 0
        self.load_calls = 0

    async def save(self, slot_index: int, data: str) -> None:
        self.save_calls += 1
        self._slots[slot_index] = data
        logger.debug("Stored %d characters in memory slot %d", len(data), slot_index)

    async def load(self, slot_index: int) -> str:
        self.load_calls += 1
        try:
            return self._slots[slot_index]
        except KeyError:
            raise SlotNotFoundError(slot_index) from None

    def has_slot(self, slot_index: int) -> bool:
        return slot_index in self._slots

    def raw(self, slot_index: int) -> str:
        """Return the stored text for a slot without counting a load."""
        return self._slots[slot_index]

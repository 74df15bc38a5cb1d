from __future__ import annotations

import asyncio
import copy
import logging
from typing import Any, Dict, List, Optional

from .codec import decode_bag, encode_bag
from .errors import NoActiveSlotError, TypeMismatchError
from .settings import create_default_strategy
from .strategies import LoadStrategy, PersistenceStrategy, SaveStrategy
from .values import check_slot_index, kind_for_type, kind_of, matches, validate

logger = logging.getLogger(__name__)

NO_SLOT = -1


class Persistence:
    """In-memory bag of game data that can be saved to and loaded from slots.

    Create one instance per running game and pass it to whatever needs to
    persist state. Values written with :meth:`store` live only in memory until
    :meth:`save_at_slot` or :meth:`save_at_current_slot` is awaited;
    :meth:`load_from_slot` replaces the whole bag with the slot's content.

    Saves and loads on one instance are serialized by an internal lock. The
    synchronous :meth:`store`/:meth:`get` calls are not: a value stored while a
    load is pending is discarded when the load completes.

    The current slot index only changes after a save or load succeeded, so a
    failed operation never leaves a misleading "current slot" behind.
    """

    def __init__(
        self,
        save_strategy: Optional[SaveStrategy] = None,
        load_strategy: Optional[LoadStrategy] = None,
    ) -> None:
        self._current_slot_index = NO_SLOT
        self._data: Dict[str, Any] = {}
        self._lock = asyncio.Lock()
        if save_strategy is None and load_strategy is None:
            save_strategy = create_default_strategy()
        self.configure(save_strategy, load_strategy)

    @property
    def current_slot_index(self) -> int:
        """Index of the slot last saved or loaded, or NO_SLOT (-1)."""
        return self._current_slot_index

    @property
    def save_strategy(self) -> SaveStrategy:
        return self._save_strategy

    @property
    def load_strategy(self) -> LoadStrategy:
        return self._load_strategy

    def has_loaded_data(self) -> bool:
        return self._current_slot_index != NO_SLOT

    def configure(
        self,
        save_strategy: Optional[SaveStrategy],
        load_strategy: Optional[LoadStrategy] = None,
    ) -> None:
        """Install the strategies used by subsequent saves and loads.

        Pass a single PersistenceStrategy to use it for both, or one
        SaveStrategy and one LoadStrategy.
        """
        if load_strategy is None:
            if not isinstance(save_strategy, PersistenceStrategy):
                raise TypeError(
                    "A single strategy must implement both save and load "
                    f"(got {type(save_strategy).__name__})"
                )
            load_strategy = save_strategy
        if not isinstance(save_strategy, SaveStrategy):
            raise TypeError(f"{type(save_strategy).__name__} is not a SaveStrategy")
        if not isinstance(load_strategy, LoadStrategy):
            raise TypeError(f"{type(load_strategy).__name__} is not a LoadStrategy")

        self._save_strategy = save_strategy
        self._load_strategy = load_strategy
        logger.debug(
            "Configured save=%s load=%s",
            type(save_strategy).__name__,
            type(load_strategy).__name__,
        )

    # Bag access

    def store(self, key: str, value: Any) -> None:
        """Store a copy of ``value`` under ``key``, replacing any existing value.

        Later changes to the caller's object do not reach the bag.
        """
        if not isinstance(key, str):
            raise TypeError(f"Keys must be strings, got {type(key).__name__}")
        validate(value, path=f"value for {key!r}")
        self._data[key] = copy.deepcopy(value)

    def get(self, key: str, default: Any = None, expected_type: Optional[type] = None) -> Any:
        """Return the value stored under ``key``, or ``default`` if absent.

        The value's type is checked against ``expected_type``, or against the
        type of ``default`` when no expected type is given and the default is
        not None. A mismatch raises TypeMismatchError.
        """
        if key not in self._data:
            return default
        value = self._data[key]

        if expected_type is not None:
            expected = kind_for_type(expected_type)
            if expected is None:
                raise TypeError(f"Unsupported expected type {expected_type.__name__}")
        elif default is not None:
            expected = kind_for_type(type(default))
        else:
            expected = None

        if expected is not None and not matches(value, expected):
            actual = kind_of(value)
            raise TypeMismatchError(key, expected.value, actual.value if actual else type(value).__name__)
        return value

    def remove(self, key: str) -> bool:
        """Drop ``key`` from the bag. Returns False if it was absent."""
        return self._data.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        """Empty the in-memory bag. Saved slots are not touched."""
        self._data = {}

    def keys(self) -> List[str]:
        return list(self._data)

    def snapshot(self) -> Dict[str, Any]:
        """Return a deep copy of the bag."""
        return copy.deepcopy(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    # Slot I/O

    async def save_at_current_slot(self) -> None:
        if not self.has_loaded_data():
            raise NoActiveSlotError("No slot has been saved or loaded yet; use save_at_slot()")
        await self.save_at_slot(self._current_slot_index)

    async def save_at_slot(self, slot_index: int) -> None:
        check_slot_index(slot_index)
        async with self._lock:
            text = encode_bag(self._data)
            await self._save_strategy.save(slot_index, text)
            self._current_slot_index = slot_index
        logger.info("Saved %d keys to slot %d", len(self._data), slot_index)

    async def load_from_slot(self, slot_index: int) -> None:
        check_slot_index(slot_index)
        async with self._lock:
            text = await self._load_strategy.load(slot_index)
            data = decode_bag(text)
            self._data = data
            self._current_slot_index = slot_index
        logger.info("Loaded %d keys from slot %d", len(data), slot_index)


_MISSING = object()

"""Slot-based persistence for IdeaToGame titles.

This package provides:
- Persistence, an in-memory key/value bag saved to and loaded from numbered slots
- Save/load strategy interfaces so the storage medium can be swapped
- A filesystem strategy writing one JSON file per slot under the user data dir
- An in-memory strategy for tests and headless runs
"""

from .errors import (
    PersistenceError,
    StorageUnavailableError,
    SlotNotFoundError,
    SerializationError,
    UnsupportedValueError,
    TypeMismatchError,
    NoActiveSlotError,
    InvalidSlotError,
)
from .strategies import SaveStrategy, LoadStrategy, PersistenceStrategy, InMemoryPersistenceStrategy
from .filesystem import FileSystemPersistenceStrategy
from .settings import PersistenceSettings, create_default_strategy
from .store import NO_SLOT, Persistence
from .values import ValueKind

__all__ = [
    "NO_SLOT",
    "Persistence",
    "PersistenceSettings",
    "create_default_strategy",
    "SaveStrategy",
    "LoadStrategy",
    "PersistenceStrategy",
    "InMemoryPersistenceStrategy",
    "FileSystemPersistenceStrategy",
    "ValueKind",
    "PersistenceError",
    "StorageUnavailableError",
    "SlotNotFoundError",
    "SerializationError",
    "UnsupportedValueError",
    "TypeMismatchError",
    "NoActiveSlotError",
    "InvalidSlotError",
]

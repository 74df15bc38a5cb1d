class PersistenceError(Exception):
    """Base exception for save/load errors."""


class StorageUnavailableError(PersistenceError):
    """Raised when the storage medium cannot be created, read or written."""


class SlotNotFoundError(PersistenceError, LookupError):
    """Raised when loading a slot that has never been saved."""

    def __init__(self, slot_index: int, message: str = "") -> None:
        self.slot_index = slot_index
        super().__init__(message or f"No save data found for slot {slot_index}")


class SerializationError(PersistenceError, ValueError):
    """Raised when the bag cannot be encoded, or stored text cannot be decoded."""


class UnsupportedValueError(SerializationError, TypeError):
    """Raised when storing a value that has no JSON representation."""


class TypeMismatchError(PersistenceError, TypeError):
    """Raised when a stored value does not have the type the caller expects."""

    def __init__(self, key: str, expected: str, actual: str) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(f"Value for key {key!r} is {actual}, expected {expected}")


class NoActiveSlotError(PersistenceError):
    """Raised when saving to the current slot before any slot was saved or loaded."""


class InvalidSlotError(PersistenceError, ValueError):
    """Raised for slot indices that are not non-negative integers."""

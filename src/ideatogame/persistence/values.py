"""Value model for the persistence bag.

A bag value is one of a closed set of JSON-representable variants. Values are
checked when they enter the bag so that anything stored can be written to a
slot and read back unchanged, and typed lookups can report mismatches instead
of silently coercing.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Dict, Optional

from .errors import InvalidSlotError, UnsupportedValueError


class ValueKind(Enum):
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    TEXT = "text"
    LIST = "list"
    MAPPING = "mapping"


_KIND_BY_TYPE: Dict[type, ValueKind] = {
    type(None): ValueKind.NULL,
    bool: ValueKind.BOOL,
    int: ValueKind.INT,
    float: ValueKind.FLOAT,
    str: ValueKind.TEXT,
    list: ValueKind.LIST,
    dict: ValueKind.MAPPING,
}


def kind_of(value: Any) -> Optional[ValueKind]:
    """Return the variant tag of ``value``, or None if it is not a bag value.

    Only the shallow type is inspected; use :func:`validate` for nested data.
    """
    if isinstance(value, bool):
        return ValueKind.BOOL
    for py_type, kind in _KIND_BY_TYPE.items():
        if py_type is not bool and isinstance(value, py_type):
            return kind
    return None


def kind_for_type(expected_type: type) -> Optional[ValueKind]:
    return _KIND_BY_TYPE.get(expected_type)


def validate(value: Any, path: str = "value") -> None:
    """Raise UnsupportedValueError unless ``value`` is representable in a slot."""
    kind = kind_of(value)
    if kind is None:
        raise UnsupportedValueError(
            f"{path} has unsupported type {type(value).__name__}; "
            "expected int, float, bool, str, list, dict or None"
        )
    if kind is ValueKind.FLOAT and not math.isfinite(value):
        raise UnsupportedValueError(f"{path} is a non-finite float ({value!r})")
    if kind is ValueKind.LIST:
        for i, item in enumerate(value):
            validate(item, f"{path}[{i}]")
    elif kind is ValueKind.MAPPING:
        for key, item in value.items():
            if not isinstance(key, str):
                raise UnsupportedValueError(
                    f"{path} has non-string key {key!r} ({type(key).__name__})"
                )
            validate(item, f"{path}[{key!r}]")


def matches(value: Any, expected: ValueKind) -> bool:
    """Whether a stored value satisfies an expected kind.

    Integers satisfy a float expectation (JSON writers may emit 1.0 as 1).
    Booleans never satisfy an integer expectation.
    """
    actual = kind_of(value)
    if actual is expected:
        return True
    return expected is ValueKind.FLOAT and actual is ValueKind.INT


def check_slot_index(slot_index: Any) -> int:
    """Return ``slot_index`` if it is a non-negative int, else raise InvalidSlotError."""
    if isinstance(slot_index, bool) or not isinstance(slot_index, int):
        raise InvalidSlotError(
            f"Slot index must be an int, got {type(slot_index).__name__}"
        )
    if slot_index < 0:
        raise InvalidSlotError(f"Slot index must be non-negative, got {slot_index}")
    return slot_index

from __future__ import annotations

import json
from typing import Any, Dict

from .errors import SerializationError, UnsupportedValueError
from .values import validate


def encode_bag(bag: Dict[str, Any]) -> str:
    """Encode the whole bag to compact JSON text."""
    try:
        return json.dumps(bag, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot encode save data: {e}") from e


def decode_bag(text: str) -> Dict[str, Any]:
    """Decode slot text into a fresh bag.

    A JSON ``null`` document, or blank text, yields an empty bag. Malformed
    text, documents that are not JSON objects, and values that could not be
    saved again (NaN, Infinity, overflowing numbers) raise SerializationError.
    """
    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SerializationError(
            f"Save data must be a JSON object, got {type(data).__name__}"
        )
    try:
        validate(data, path="save data")
    except UnsupportedValueError as e:
        raise SerializationError(f"Unsupported value in save data: {e}") from e
    return data

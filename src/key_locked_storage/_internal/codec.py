"""JSON encoding of stored values."""

from __future__ import annotations

import json
from typing import Any

from key_locked_storage.exceptions import EncodingError


def encode(value: Any) -> str:
    """Serialize *value* to JSON text.

    ``NaN`` and infinities are rejected so that every stored blob is valid
    JSON for engines with a native JSON type.
    """
    try:
        return json.dumps(value, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise EncodingError("encode", str(exc)) from exc


def decode(text: str | bytes) -> Any:
    """Parse stored JSON text.  Malformed content is an error, never ``None``."""
    try:
        return json.loads(text)
    except ValueError as exc:
        raise EncodingError("decode", str(exc)) from exc

"""JSON boundary between logical values and stored text."""

import json
from typing import Any, Optional

from webstorage.errors import DeserializationError, SerializationError


def dumps(value: Any) -> str:
    """Encode a value as compact JSON text.

    Raises:
        SerializationError: If the value is not JSON-serialisable, is cyclic,
            or contains NaN/Infinity
    """
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(f"Value must be JSON-serialisable: {exc}") from exc


def loads(text: str, key: Optional[str] = None) -> Any:
    """Decode stored JSON text.

    Args:
        text: Text read from the backing store
        key: Key the text was read from, reported on failure

    Raises:
        DeserializationError: If the text is not valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DeserializationError(
            f"Stored value for '{key}' is not valid JSON: {exc.msg}", key=key
        ) from exc
    except RecursionError as exc:
        raise DeserializationError(
            f"Stored value for '{key}' is nested too deeply to decode", key=key
        ) from exc

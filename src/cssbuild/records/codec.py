"""JSON codec for plain records.

``from_json`` binds parsed fields to a caller-supplied class without running
its constructor, so the class's methods become available on the result::

    rect = from_json(Rectangle, '{"width":10,"height":20}')
    rect.area()  # => 200
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from cssbuild.errors import RecordDecodeError, RecordEncodeError

__all__ = ["to_json", "from_json"]

logger = logging.getLogger("cssbuild.records")

T = TypeVar("T")


def _encode_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if hasattr(value, "__dict__"):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """Serialise *value* to compact JSON text, e.g. ``[1,2,3]``."""
    try:
        return json.dumps(value, separators=(",", ":"), default=_encode_default)
    except (TypeError, ValueError) as exc:
        raise RecordEncodeError(str(exc), cause=exc) from exc


def from_json(prototype: type[T], text: str) -> T:
    """Parse *text* and return it as an instance of *prototype*.

    The top-level JSON value must be an object; each key becomes an
    attribute of the returned instance.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecordDecodeError(f"Invalid JSON: {exc}", cause=exc) from exc

    if not isinstance(data, dict):
        raise RecordDecodeError(
            f"Expected a JSON object for {prototype.__name__}, "
            f"got {type(data).__name__}"
        )

    obj = prototype.__new__(prototype)
    try:
        for key, value in data.items():
            # object.__setattr__ also works for frozen dataclasses
            object.__setattr__(obj, key, value)
    except (TypeError, AttributeError) as exc:
        raise RecordDecodeError(
            f"Cannot set field {key!r} on {prototype.__name__}: {exc}", cause=exc
        ) from exc
    logger.debug("Decoded %s with fields %s", prototype.__name__, list(data))
    return obj

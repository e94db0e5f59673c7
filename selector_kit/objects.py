"""Object factory and JSON helpers."""

import json
import logging
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class Rectangle:
    """A rectangle with a computed area."""

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def _to_serializable(obj: Any) -> Any:
    """Fallback for json.dumps: dataclasses as fields, objects as attributes."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Serialize an object to compact JSON.

    Args:
        obj: A JSON-compatible value, dataclass instance, or plain object

    Returns:
        JSON string without whitespace between tokens
    """
    return json.dumps(obj, separators=(",", ":"), default=_to_serializable)


def from_json(cls: type, text: str) -> Any:
    """Create an instance of cls whose attributes come from a JSON object.

    The instance is created without calling ``cls.__init__``; parsed keys
    become instance attributes as-is, and methods come from ``cls``.

    Raises:
        TypeError: If the JSON does not decode to an object
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

    obj = cls.__new__(cls)
    obj.__dict__.update(data)
    logger.debug(f"Loaded {cls.__name__} with fields {sorted(data)}")
    return obj

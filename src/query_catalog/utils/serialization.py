"""JSON rendering of database documents using orjson.

orjson handles datetime and plain containers natively. BSON types
such as ObjectId and Decimal128 need a default handler.
"""

from typing import Any

import orjson
from bson import Decimal128, ObjectId


def _default_handler(obj: Any) -> Any:
    """
    Custom default handler for types orjson doesn't handle natively.

    Args:
        obj: Object to serialize

    Returns:
        JSON-serializable representation

    Raises:
        TypeError: If object cannot be serialized
    """
    if isinstance(obj, ObjectId):
        return str(obj)

    if isinstance(obj, Decimal128):
        return str(obj.to_decimal())

    if isinstance(obj, (bytes, bytearray)):
        try:
            return obj.decode("utf-8")
        except UnicodeDecodeError:
            return obj.hex()

    raise TypeError(f"Object of type {type(obj)} is not JSON serializable")


def dumps(obj: Any) -> str:
    """
    Serialize object to a compact JSON string using orjson.

    Args:
        obj: Object to serialize

    Returns:
        JSON string
    """
    return orjson.dumps(obj, default=_default_handler).decode("utf-8")

"""Shared serialization utilities for sinks and the presentation layer."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def to_dict(obj: Any, camel_case: bool = False) -> dict:
    """Convert a record or view model to a JSON-ready dictionary.

    Parameters
    ----------
    obj : Any
        Dataclass instance or plain dict.
    camel_case : bool
        Rename dataclass field names to camelCase (``occupancy_rate`` ->
        ``occupancyRate``), the shape the dashboard pages read. Keys of
        data-valued dicts (categories, transaction types) are kept verbatim.

    Returns
    -------
    dict
        Serialized dictionary.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return {
            _key(f.name, camel_case): serialize_value(getattr(obj, f.name), camel_case)
            for f in fields(obj)
        }
    elif isinstance(obj, dict):
        return serialize_value(obj, camel_case)
    else:
        return {"value": str(obj)}


def serialize_value(value: Any, camel_case: bool = False) -> Any:
    """Serialize a value for JSON output.

    Decimals become strings so that no precision is lost.
    """
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return to_dict(value, camel_case)
    elif isinstance(value, dict):
        return {str(k): serialize_value(v, camel_case) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v, camel_case) for v in value]
    return value


def camelize(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _key(name: str, camel_case: bool) -> str:
    return camelize(name) if camel_case else name

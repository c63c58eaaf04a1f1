"""
JSON value tree used as the wire representation.

Values are the built-in types produced by the json module: None, bool,
int, float, str, list and dict.
"""

import json
import math
from typing import Any, Union

from geojson_codec.errors import MalformedJSONError

JSONValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]

_EXACT_INT_LIMIT = 2**53


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid JSON")


def parse(text: str | bytes | bytearray) -> JSONValue:
    """
    Parse JSON text into a value tree.

    NaN and Infinity literals are rejected.

    Raises:
        MalformedJSONError: If the text is not valid JSON.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedJSONError(f"Input is not UTF-8: {e}") from e
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedJSONError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise MalformedJSONError("JSON is nested too deeply") from e


def serialize(
    value: JSONValue,
    indent: int | None = None,
    sort_keys: bool = False,
    ensure_ascii: bool = False,
) -> str:
    """Serialize a value tree. Compact separators are used unless indent is set."""
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        value,
        indent=indent,
        sort_keys=sort_keys,
        ensure_ascii=ensure_ascii,
        separators=separators,
        allow_nan=False,
    )


def is_number(value: Any) -> bool:
    """True for JSON numbers. Booleans are not numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    if not is_number(value):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def normalize_number(value: float) -> int | float:
    """
    Return the minimal presentation of a number.

    Integral floats that an IEEE double represents exactly as integers
    become ints so they are written without a decimal point (1.0 -> 1).
    Other floats are left for json to write with the shortest round-trip
    representation (1e+300).
    """
    if isinstance(value, float) and value.is_integer() and abs(value) < _EXACT_INT_LIMIT:
        return int(value)
    return value


def json_type_name(value: Any) -> str:
    """Name of the JSON kind of a value, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__

"""
Base interface shared by every GeoJSON object type.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum
from typing import Any, TypeVar

from geojson_codec.errors import GeoJSONException, InvalidGeoJSONObjectError
from geojson_codec.json_value import JSONValue, json_type_name

T = TypeVar("T", bound="GeoJSONObject")


class GeoJSONType(str, Enum):
    """The nine values of the GeoJSON `type` member."""

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"

    @property
    def is_geometry(self) -> bool:
        return self not in (GeoJSONType.FEATURE, GeoJSONType.FEATURE_COLLECTION)

    def __str__(self) -> str:
        return self.value


class GeoJSONObject(ABC):
    """
    Abstract base class for GeoJSON values.

    Concrete types are frozen dataclasses whose constructors validate their
    invariants and raise InvalidGeoJSONObjectError when they do not hold.
    Each type declares:

    - `type`: its discriminant.
    - `prefix`: the member its payload is stored under.
    """

    type: GeoJSONType
    prefix: str = "coordinates"

    @abstractmethod
    def encode(self) -> JSONValue:
        """Encode the payload only, without the `type` wrapper."""

    @classmethod
    @abstractmethod
    def decode(cls: type[T], value: Any, path: str = "$") -> T:
        """
        Decode the payload stored under `prefix`.

        Args:
            value: JSON value found under the prefix member.
            path: Location of `value`, used in error messages.

        Raises:
            InvalidGeoJSONObjectError: If the value does not describe a valid instance.
        """

    def members(self) -> dict[str, JSONValue]:
        """Object members carrying this value, excluding `type`."""
        return {self.prefix: self.encode()}

    def to_dict(self) -> dict[str, JSONValue]:
        """Encode as a complete GeoJSON object."""
        return {"type": self.type.value, **self.members()}

    @classmethod
    def is_geometry(cls) -> bool:
        return cls.type.is_geometry

    @classmethod
    def from_members(cls: type[T], members: dict[str, Any], path: str = "$") -> T:
        """Decode from a GeoJSON object whose `type` already matched this class."""
        if cls.prefix not in members:
            raise InvalidGeoJSONObjectError(
                f"{cls.type.value} is missing the '{cls.prefix}' member", path
            )
        return cls.decode(members[cls.prefix], f"{path}.{cls.prefix}")

    @classmethod
    def get_info(cls) -> dict[str, Any]:
        """
        Get type information.

        Returns:
            Dictionary with the discriminant, prefix and geometry flag.
        """
        return {
            "type": cls.type.value,
            "prefix": cls.prefix,
            "geometry": cls.is_geometry(),
        }

    @classmethod
    def _construct(cls: type[T], path: str, *args: Any, **kwargs: Any) -> T:
        """Call the validating constructor, locating any failure at `path`."""
        try:
            return cls(*args, **kwargs)
        except GeoJSONException as e:
            raise e.at(path) from None


def expect_array(value: Any, path: str, what: str) -> list[Any]:
    """Return `value` if it is a JSON array, else raise an invalid-object error."""
    if not isinstance(value, list):
        raise InvalidGeoJSONObjectError(
            f"Expected an array of {what}, got {json_type_name(value)}", path
        )
    return value


def freeze_items(items: Any, item_class: type, owner: str) -> tuple[Any, ...]:
    """Freeze `items` into a tuple, checking every element is an `item_class`."""
    if isinstance(items, (str, bytes, dict)) or not isinstance(items, Iterable):
        raise InvalidGeoJSONObjectError(
            f"{owner} expects a sequence of {item_class.__name__}, got {type(items).__name__}"
        )
    frozen = tuple(items)
    for i, item in enumerate(frozen):
        if not isinstance(item, item_class):
            raise InvalidGeoJSONObjectError(
                f"{owner} item {i} is a {type(item).__name__}, expected {item_class.__name__}"
            )
    return frozen

"""
Feature and FeatureCollection types.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Union

from geojson_codec.base import GeoJSONObject, GeoJSONType, expect_array, freeze_items
from geojson_codec.errors import InvalidGeoJSONObjectError
from geojson_codec.geometry import Geometry
from geojson_codec.json_value import JSONValue, is_number, json_type_name, normalize_number
from geojson_codec.registry import decode_object, register_type

FeatureId = Union[str, int, float]


def _is_valid_id(value: Any) -> bool:
    return value is None or isinstance(value, str) or is_number(value)


@register_type
@dataclass(frozen=True)
class Feature(GeoJSONObject):
    """
    A geometry paired with arbitrary properties.

    The geometry and the identifier are optional. Properties are passed
    through as an opaque JSON value (normally an object or null) and are
    copied on the way in and out so the feature stays immutable.
    """

    geometry: Geometry | None = None
    properties: JSONValue = field(default=None, hash=False)
    id: FeatureId | None = None

    type = GeoJSONType.FEATURE
    prefix = "geometry"

    def __post_init__(self) -> None:
        if self.geometry is not None:
            if not isinstance(self.geometry, GeoJSONObject) or not self.geometry.is_geometry():
                raise InvalidGeoJSONObjectError(
                    f"Feature geometry must be a geometry, got {type(self.geometry).__name__}"
                )
        if not _is_valid_id(self.id):
            raise InvalidGeoJSONObjectError(
                f"Feature id must be a string or a number, got {type(self.id).__name__}"
            )
        object.__setattr__(self, "properties", copy.deepcopy(self.properties))

    def encode(self) -> JSONValue:
        return self.geometry.to_dict() if self.geometry is not None else None

    def members(self) -> dict[str, JSONValue]:
        members: dict[str, JSONValue] = {
            "geometry": self.encode(),
            "properties": copy.deepcopy(self.properties),
        }
        if self.id is not None:
            members["id"] = normalize_number(self.id) if is_number(self.id) else self.id
        return members

    @classmethod
    def decode(cls, value: Any, path: str = "$") -> "Feature":
        """Decode a `geometry` member. Null means a feature without geometry."""
        if value is None:
            return cls()
        return cls._construct(path, geometry=decode_object(value, path, geometry_only=True))

    @classmethod
    def from_members(cls, members: dict[str, Any], path: str = "$") -> "Feature":
        geometry = None
        if members.get("geometry") is not None:
            geometry = decode_object(members["geometry"], f"{path}.geometry", geometry_only=True)

        feature_id = members.get("id")
        if not _is_valid_id(feature_id):
            raise InvalidGeoJSONObjectError(
                f"Expected 'id' to be a string or a number, got {json_type_name(feature_id)}",
                f"{path}.id",
            )

        return cls._construct(
            path,
            geometry=geometry,
            properties=members.get("properties"),
            id=feature_id,
        )


@register_type
@dataclass(frozen=True)
class FeatureCollection(GeoJSONObject):
    """A possibly empty sequence of features."""

    features: tuple[Feature, ...] = ()

    type = GeoJSONType.FEATURE_COLLECTION
    prefix = "features"

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "features", freeze_items(self.features, Feature, "FeatureCollection")
        )

    def encode(self) -> JSONValue:
        return [feature.to_dict() for feature in self.features]

    @classmethod
    def decode(cls, value: Any, path: str = "$") -> "FeatureCollection":
        items = expect_array(value, path, "features")
        features = []
        for i, item in enumerate(items):
            decoded = decode_object(item, f"{path}[{i}]")
            if not isinstance(decoded, Feature):
                raise InvalidGeoJSONObjectError(
                    f"Expected a Feature, got {decoded.type.value}", f"{path}[{i}]"
                )
            features.append(decoded)
        return cls._construct(path, features)

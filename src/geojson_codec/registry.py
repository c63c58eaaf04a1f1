"""
Type registry mapping `type` discriminants to GeoJSON classes.
"""

import logging
from typing import Any, TypeVar

from geojson_codec.base import GeoJSONObject
from geojson_codec.errors import InvalidGeoJSONObjectError
from geojson_codec.json_value import json_type_name

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=type[GeoJSONObject])


class TypeRegistry:
    """
    Registry of GeoJSON object types.

    Dispatches a decoded JSON object to the class named by its `type` member.
    """

    _types: dict[str, type[GeoJSONObject]] = {}

    @classmethod
    def register(cls, object_class: C) -> C:
        """
        Register a GeoJSON object class.

        Can be used as a decorator:
            @TypeRegistry.register
            class Point(GeoJSONObject):
                ...

        Args:
            object_class: The class to register.

        Returns:
            The same class (for decorator use).
        """
        cls._types[object_class.type.value] = object_class
        logger.debug("Registered GeoJSON type %s", object_class.type.value)
        return object_class

    @classmethod
    def lookup(cls, type_name: Any, path: str = "$") -> type[GeoJSONObject]:
        """
        Get the class registered for a `type` value.

        Raises:
            InvalidGeoJSONObjectError: If the type is missing or not recognized.
        """
        if type_name is None:
            raise InvalidGeoJSONObjectError("Object has no 'type' member", path)
        if not isinstance(type_name, str):
            raise InvalidGeoJSONObjectError(
                f"Expected 'type' to be a string, got {json_type_name(type_name)}",
                f"{path}.type",
            )
        if type_name not in cls._types:
            raise InvalidGeoJSONObjectError(
                f"Unknown GeoJSON type: {type_name}. Supported: {', '.join(cls._types)}",
                f"{path}.type",
            )
        return cls._types[type_name]

    @classmethod
    def decode_object(
        cls,
        value: Any,
        path: str = "$",
        geometry_only: bool = False,
    ) -> GeoJSONObject:
        """
        Decode a complete GeoJSON object.

        Args:
            value: JSON value expected to be a GeoJSON object.
            path: Location of `value`, used in error messages.
            geometry_only: Reject Feature and FeatureCollection.

        Returns:
            The decoded value.

        Raises:
            InvalidGeoJSONObjectError: If the object or anything nested in it is invalid.
        """
        if not isinstance(value, dict):
            raise InvalidGeoJSONObjectError(
                f"Expected a GeoJSON object, got {json_type_name(value)}", path
            )

        object_class = cls.lookup(value.get("type"), path)
        if geometry_only and not object_class.is_geometry():
            raise InvalidGeoJSONObjectError(
                f"Expected a geometry, got {object_class.type.value}", path
            )
        return object_class.from_members(value, path)

    @classmethod
    def get_supported_types(cls) -> list[dict[str, Any]]:
        """
        Get information about all registered types.

        Returns:
            List of type info dictionaries, in registration order.
        """
        return [object_class.get_info() for object_class in cls._types.values()]

    @classmethod
    def is_supported(cls, type_name: str) -> bool:
        return type_name in cls._types


# Convenience functions
def register_type(object_class: C) -> C:
    """Register a type. See TypeRegistry.register."""
    return TypeRegistry.register(object_class)


def decode_object(value: Any, path: str = "$", geometry_only: bool = False) -> GeoJSONObject:
    """Decode a GeoJSON object. See TypeRegistry.decode_object."""
    return TypeRegistry.decode_object(value, path, geometry_only)


def get_supported_types() -> list[dict[str, Any]]:
    """Get supported types. See TypeRegistry.get_supported_types."""
    return TypeRegistry.get_supported_types()

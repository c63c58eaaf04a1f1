"""
geojson-codec - Decode, validate and encode GeoJSON.

Supports every GeoJSON object type:
- Point, MultiPoint
- LineString, MultiLineString
- Polygon, MultiPolygon
- GeometryCollection
- Feature, FeatureCollection
"""

__version__ = "0.1.0"

from geojson_codec.base import GeoJSONObject, GeoJSONType
from geojson_codec.config import CodecConfig
from geojson_codec.errors import (
    ERROR_DOMAIN,
    ErrorCode,
    GeoJSONError,
    GeoJSONException,
    InvalidGeoJSONObjectError,
    MalformedJSONError,
)
from geojson_codec.feature import Feature, FeatureCollection
from geojson_codec.geojson import GeoJSON, decode, dumps, encode, loads
from geojson_codec.geometry import (
    Geometry,
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geojson_codec.json_value import JSONValue, parse, serialize
from geojson_codec.registry import get_supported_types

__all__ = [
    # Codec
    "GeoJSON",
    "decode",
    "dumps",
    "encode",
    "loads",
    "parse",
    "serialize",
    "JSONValue",
    "CodecConfig",
    # Types
    "GeoJSONObject",
    "GeoJSONType",
    "Geometry",
    "Point",
    "MultiPoint",
    "LineString",
    "LinearRing",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "Feature",
    "FeatureCollection",
    "get_supported_types",
    # Errors
    "ERROR_DOMAIN",
    "ErrorCode",
    "GeoJSONError",
    "GeoJSONException",
    "InvalidGeoJSONObjectError",
    "MalformedJSONError",
    # Version
    "__version__",
]

"""
GeoJSON root value and the decode/encode entry points.

Decoding never raises for bad input: the returned root either holds a
decoded value or an attached GeoJSONError.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Type, TypeVar

from geojson_codec.base import GeoJSONObject, GeoJSONType, freeze_items
from geojson_codec.config import CodecConfig
from geojson_codec.errors import (
    GeoJSONError,
    GeoJSONException,
    InvalidGeoJSONObjectError,
    MalformedJSONError,
)
from geojson_codec.feature import Feature, FeatureCollection
from geojson_codec.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geojson_codec.json_value import (
    JSONValue,
    is_finite_number,
    json_type_name,
    normalize_number,
    parse,
    serialize,
)
from geojson_codec.registry import decode_object

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=GeoJSONObject)


def _check_bbox(bbox: Any) -> tuple[float, ...]:
    values = freeze_items(bbox, object, "bbox")
    if len(values) not in (4, 6):
        raise InvalidGeoJSONObjectError(f"bbox has {len(values)} values, needs 4 or 6")
    for v in values:
        if not is_finite_number(v):
            raise InvalidGeoJSONObjectError(f"bbox value {v!r} is not a finite number")
    return tuple(float(v) for v in values)


@dataclass(frozen=True)
class GeoJSON:
    """
    Root of a GeoJSON document.

    Holds exactly one of:

    - `value`: the decoded Point, LineString, ..., Feature or FeatureCollection.
    - `error`: why decoding failed.

    A successful root may also carry a `bbox` and a `crs` member, which are
    passed through unchanged.
    """

    value: GeoJSONObject | None = None
    error: GeoJSONError | None = None
    bbox: tuple[float, ...] | None = None
    crs: JSONValue = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("GeoJSON must hold exactly one of a value or an error")
        if self.value is not None and not isinstance(self.value, GeoJSONObject):
            raise ValueError(f"Not a GeoJSON object: {type(self.value).__name__}")
        if self.error is not None and (self.bbox is not None or self.crs is not None):
            raise ValueError("A failed GeoJSON root cannot carry bbox or crs")

        if self.bbox is not None:
            object.__setattr__(self, "bbox", _check_bbox(self.bbox))
        if self.crs is not None:
            if not isinstance(self.crs, dict):
                raise InvalidGeoJSONObjectError(
                    f"crs must be an object or null, got {json_type_name(self.crs)}"
                )
            object.__setattr__(self, "crs", copy.deepcopy(self.crs))

    @classmethod
    def failure(cls, error: GeoJSONError) -> "GeoJSON":
        """Build a root carrying only an error."""
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def type(self) -> GeoJSONType | None:
        """Discriminant of the held value, or None when decoding failed."""
        return self.value.type if self.value is not None else None

    def is_geometry(self) -> bool:
        """True when the held value is one of the seven geometry types."""
        return self.value is not None and self.value.is_geometry()

    def _variant(self, variant: Type[V]) -> V | None:
        if self.value is not None and self.value.type is variant.type:
            return self.value  # type: ignore[return-value]
        return None

    @property
    def point(self) -> Point | None:
        return self._variant(Point)

    @property
    def multi_point(self) -> MultiPoint | None:
        return self._variant(MultiPoint)

    @property
    def line_string(self) -> LineString | None:
        return self._variant(LineString)

    @property
    def multi_line_string(self) -> MultiLineString | None:
        return self._variant(MultiLineString)

    @property
    def polygon(self) -> Polygon | None:
        return self._variant(Polygon)

    @property
    def multi_polygon(self) -> MultiPolygon | None:
        return self._variant(MultiPolygon)

    @property
    def geometry_collection(self) -> GeometryCollection | None:
        return self._variant(GeometryCollection)

    @property
    def feature(self) -> Feature | None:
        return self._variant(Feature)

    @property
    def feature_collection(self) -> FeatureCollection | None:
        return self._variant(FeatureCollection)

    def encode(self) -> dict[str, JSONValue]:
        """
        Encode as a JSON object tree.

        Raises:
            ValueError: If this root holds an error instead of a value.
        """
        if self.value is None:
            raise ValueError(f"Cannot encode a GeoJSON root that failed to decode: {self.error}")

        result = self.value.to_dict()
        if self.bbox is not None:
            result["bbox"] = [normalize_number(v) for v in self.bbox]
        if self.crs is not None:
            result["crs"] = copy.deepcopy(self.crs)
        return result

    def to_json(self, config: CodecConfig | None = None) -> str:
        """Encode as JSON text. Compact unless the config sets an indent."""
        config = config or CodecConfig()
        return serialize(
            self.encode(),
            indent=config.indent,
            sort_keys=config.sort_keys,
            ensure_ascii=config.ensure_ascii,
        )


def _decode_root(value: Any) -> GeoJSON:
    obj = decode_object(value, "$")

    bbox = value.get("bbox")
    if bbox is not None:
        try:
            bbox = _check_bbox(bbox)
        except GeoJSONException as e:
            raise e.at("$.bbox") from None

    crs = value.get("crs")
    if crs is not None and not isinstance(crs, dict):
        raise InvalidGeoJSONObjectError(
            f"Expected 'crs' to be an object or null, got {json_type_name(crs)}", "$.crs"
        )

    return GeoJSON(obj, bbox=bbox, crs=crs)


def decode(value: JSONValue) -> GeoJSON:
    """
    Decode a parsed JSON value into a GeoJSON root.

    Args:
        value: JSON value tree, as returned by json.loads.

    Returns:
        A root holding the decoded value, or an INVALID_GEOJSON_OBJECT error.
    """
    try:
        return _decode_root(value)
    except GeoJSONException as e:
        logger.debug("GeoJSON decode failed: %s", e)
        return GeoJSON.failure(e.to_error())
    except RecursionError:
        logger.debug("GeoJSON decode failed: document nested too deeply")
        return GeoJSON.failure(
            InvalidGeoJSONObjectError("Document is nested too deeply").to_error()
        )


def loads(text: str | bytes | bytearray) -> GeoJSON:
    """
    Decode GeoJSON text.

    Args:
        text: JSON text, as str or UTF-8 bytes.

    Returns:
        A root holding the decoded value, or an error: INVALID_JSON when the
        text does not parse, INVALID_GEOJSON_OBJECT when it is not GeoJSON.
    """
    try:
        value = parse(text)
    except MalformedJSONError as e:
        logger.debug("GeoJSON parse failed: %s", e)
        return GeoJSON.failure(e.to_error())
    return decode(value)


def encode(obj: GeoJSON | GeoJSONObject) -> dict[str, JSONValue]:
    """Encode a root or a bare GeoJSON object as a complete JSON object tree."""
    if isinstance(obj, GeoJSONObject):
        return obj.to_dict()
    return obj.encode()


def dumps(obj: GeoJSON | GeoJSONObject, config: CodecConfig | None = None) -> str:
    """Encode a root or a bare GeoJSON object as JSON text."""
    if isinstance(obj, GeoJSONObject):
        obj = GeoJSON(obj)
    return obj.to_json(config)

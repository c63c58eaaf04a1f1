"""
Geometry types: Point, LineString, Polygon, their multi variants and
GeometryCollection.

Every type is an immutable value. Constructors validate the GeoJSON
invariants and raise InvalidGeoJSONObjectError when they do not hold;
they never coerce or drop data.
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from geojson_codec.base import GeoJSONObject, GeoJSONType, expect_array, freeze_items
from geojson_codec.errors import InvalidGeoJSONObjectError
from geojson_codec.json_value import JSONValue, is_number, json_type_name, normalize_number
from geojson_codec.registry import decode_object, register_type


@register_type
@dataclass(frozen=True)
class Point(GeoJSONObject):
    """A single position: longitude, latitude and an optional altitude."""

    coordinates: tuple[float, ...]

    type = GeoJSONType.POINT

    def __post_init__(self) -> None:
        coords = self.coordinates
        if isinstance(coords, (str, bytes, dict)) or not isinstance(coords, Iterable):
            raise InvalidGeoJSONObjectError(
                f"Point expects a sequence of numbers, got {type(coords).__name__}"
            )
        coords = tuple(coords)
        if len(coords) not in (2, 3):
            raise InvalidGeoJSONObjectError(
                f"Point has {len(coords)} coordinates, needs 2 or 3"
            )

        values = []
        for c in coords:
            if not is_number(c):
                raise InvalidGeoJSONObjectError(f"Point coordinate {c!r} is not a number")
            try:
                value = float(c)
            except OverflowError:
                value = math.inf
            if not math.isfinite(value):
                raise InvalidGeoJSONObjectError(f"Point coordinate {c!r} is not finite")
            values.append(value)

        object.__setattr__(self, "coordinates", tuple(values))

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]

    @property
    def altitude(self) -> float | None:
        return self.coordinates[2] if len(self.coordinates) == 3 else None

    def encode(self) -> JSONValue:
        return [normalize_number(c) for c in self.coordinates]

    @classmethod
    def decode(cls, value: Any, path: str = "$") -> "Point":
        items = expect_array(value, path, "numbers")
        for i, item in enumerate(items):
            if not is_number(item):
                raise InvalidGeoJSONObjectError(
                    f"Expected a number, got {json_type_name(item)}", f"{path}[{i}]"
                )
        return cls._construct(path, items)


@register_type
@dataclass(frozen=True)
class LineString(GeoJSONObject):
    """
    An ordered sequence of at least two points.

    Behaves as a read-only sequence of its points.
    """

    points: tuple[Point, ...]

    type = GeoJSONType.LINE_STRING
    min_points: ClassVar[int] = 2

    def __post_init__(self) -> None:
        points = freeze_items(self.points, Point, type(self).__name__)
        if len(points) < self.min_points:
            raise InvalidGeoJSONObjectError(
                f"{type(self).__name__} has {len(points)} points, "
                f"needs at least {self.min_points}"
            )
        object.__setattr__(self, "points", points)

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def encode(self) -> JSONValue:
        return [p.encode() for p in self.points]

    @classmethod
    def decode(cls, value: Any, path: str = "$") -> "LineString":
        items = expect_array(value, path, "positions")
        points = [Point.decode(item, f"{path}[{i}]") for i, item in enumerate(items)]
        return cls._construct(path, points)


@dataclass(frozen=True)
class LinearRing(LineString):
    """A closed LineString of at least four points, used as a Polygon boundary."""

    min_points: ClassVar[int] = 4

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.points[0] != self.points[-1]:
            raise InvalidGeoJSONObjectError(
                "LinearRing is not closed: first and last points differ"
            )


def _as_line_string(geometry: Any) -> Any:
    """Outside a Polygon a ring is stored as the LineString it encodes as."""
    if isinstance(geometry, LinearRing):
        return LineString(geometry.points)
    return geometry


@register_type
@dataclass(frozen=True)
class Polygon(GeoJSONObject):
    """
    A surface bounded by linear rings.

    The first ring is the exterior boundary and any others are holes.
    Rings may be given as LineStrings; they are checked and stored as
    LinearRings.
    """

    rings: tuple[LinearRing, ...]

    type = GeoJSONType.POLYGON

    def __post_init__(self) -> None:
        rings = []
        for i, ring in enumerate(freeze_items(self.rings, LineString, "Polygon")):
            if isinstance(ring, LinearRing):
                rings.append(ring)
                continue
            try:
                rings.append(LinearRing(ring.points))
            except InvalidGeoJSONObjectError as e:
                raise InvalidGeoJSONObjectError(f"Polygon ring {i}: {e.message}") from None
        object.__setattr__(self, "rings", tuple(rings))

    @property
    def exterior(self) -> LinearRing | None:
        return self.rings[0] if self.rings else None

    @property
    def holes(self) -> tuple[LinearRing, ...]:
        return self.rings[1:]

    def encode(self) -> JSONValue:
        return [ring.encode() for ring in self.rings]

    @classmethod
    def decode(cls, value: Any, path: str = "$") -> "Polygon":
        items = expect_array(value, path, "linear rings")
        rings = [LinearRing.decode(item, f"{path}[{i}]") for i, item in enumerate(items)]
        return cls._construct(path, rings)


@register_type
@dataclass(frozen=True)
class MultiPoint(GeoJSONObject):
    """A possibly empty sequence of points."""

    points: tuple[Point, ...] = ()

    type = GeoJSONType.MULTI_POINT

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", freeze_items(self.points, Point, "MultiPoint"))

    def encode(self) -> JSONValue:
        return [p.encode() for p in self.points]

    @classmethod
    def decode(cls, value: Any, path: str = "$") -> "MultiPoint":
        items = expect_array(value, path, "positions")
        return cls._construct(
            path, [Point.decode(item, f"{path}[{i}]") for i, item in enumerate(items)]
        )


@register_type
@dataclass(frozen=True)
class MultiLineString(GeoJSONObject):
    """A possibly empty sequence of line strings."""

    line_strings: tuple[LineString, ...] = ()

    type = GeoJSONType.MULTI_LINE_STRING

    def __post_init__(self) -> None:
        line_strings = freeze_items(self.line_strings, LineString, "MultiLineString")
        object.__setattr__(
            self, "line_strings", tuple(_as_line_string(line) for line in line_strings)
        )

    def encode(self) -> JSONValue:
        return [line.encode() for line in self.line_strings]

    @classmethod
    def decode(cls, value: Any, path: str = "$") -> "MultiLineString":
        items = expect_array(value, path, "line strings")
        return cls._construct(
            path, [LineString.decode(item, f"{path}[{i}]") for i, item in enumerate(items)]
        )


@register_type
@dataclass(frozen=True)
class MultiPolygon(GeoJSONObject):
    """A possibly empty sequence of polygons."""

    polygons: tuple[Polygon, ...] = ()

    type = GeoJSONType.MULTI_POLYGON

    def __post_init__(self) -> None:
        object.__setattr__(self, "polygons", freeze_items(self.polygons, Polygon, "MultiPolygon"))

    def encode(self) -> JSONValue:
        return [polygon.encode() for polygon in self.polygons]

    @classmethod
    def decode(cls, value: Any, path: str = "$") -> "MultiPolygon":
        items = expect_array(value, path, "polygons")
        return cls._construct(
            path, [Polygon.decode(item, f"{path}[{i}]") for i, item in enumerate(items)]
        )


@register_type
@dataclass(frozen=True)
class GeometryCollection(GeoJSONObject):
    """
    A possibly empty sequence of geometries of any type.

    Collections may nest. Features are not geometries and are rejected.
    """

    geometries: tuple["Geometry", ...] = ()

    type = GeoJSONType.GEOMETRY_COLLECTION
    prefix = "geometries"

    def __post_init__(self) -> None:
        geometries = freeze_items(self.geometries, GeoJSONObject, "GeometryCollection")
        for i, geometry in enumerate(geometries):
            if not geometry.is_geometry():
                raise InvalidGeoJSONObjectError(
                    f"GeometryCollection item {i} is a {geometry.type.value}, not a geometry"
                )
        object.__setattr__(self, "geometries", tuple(_as_line_string(g) for g in geometries))

    def encode(self) -> JSONValue:
        return [geometry.to_dict() for geometry in self.geometries]

    @classmethod
    def decode(cls, value: Any, path: str = "$") -> "GeometryCollection":
        items = expect_array(value, path, "geometries")
        geometries = [
            decode_object(item, f"{path}[{i}]", geometry_only=True)
            for i, item in enumerate(items)
        ]
        return cls._construct(path, geometries)


Geometry = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
]

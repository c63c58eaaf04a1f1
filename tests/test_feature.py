"""Tests for Feature and FeatureCollection."""

import pytest

from geojson_codec import (
    ErrorCode,
    Feature,
    FeatureCollection,
    GeometryCollection,
    InvalidGeoJSONObjectError,
    LineString,
    Point,
    dumps,
    loads,
)


class TestFeature:
    """Test Feature construction, decoding and encoding."""

    def test_defaults(self) -> None:
        """Test a feature needs neither geometry, properties nor id."""
        feature = Feature()
        assert feature.geometry is None
        assert feature.properties is None
        assert feature.id is None

    def test_to_dict(self) -> None:
        """Test the encoded members."""
        feature = Feature(Point([1, 2]), {"name": "Test"}, id="f1")
        assert feature.to_dict() == {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [1, 2]},
            "properties": {"name": "Test"},
            "id": "f1",
        }

    def test_to_dict_without_geometry(self) -> None:
        """Test null geometry and properties are written, id is omitted."""
        assert Feature().to_dict() == {"type": "Feature", "geometry": None, "properties": None}

    def test_properties_are_copied(self) -> None:
        """Test changing the input dict does not change the feature."""
        props = {"tags": ["a"]}
        feature = Feature(properties=props)
        props["tags"].append("b")
        assert feature.properties == {"tags": ["a"]}

        encoded = feature.to_dict()
        encoded["properties"]["tags"].append("c")
        assert feature.properties == {"tags": ["a"]}

    def test_rejects_feature_geometry(self) -> None:
        """Test the geometry must be a geometry type."""
        with pytest.raises(InvalidGeoJSONObjectError):
            Feature(geometry=Feature())  # type: ignore[arg-type]

    @pytest.mark.parametrize("feature_id", [True, [1], {"a": 1}])
    def test_rejects_invalid_id(self, feature_id: object) -> None:
        with pytest.raises(InvalidGeoJSONObjectError):
            Feature(id=feature_id)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "feature_id, encoded",
        [(1.0, 1), (2.5, 2.5), (7, 7), ("f1", "f1")],
    )
    def test_numeric_id_is_minimal(self, feature_id: object, encoded: object) -> None:
        """Test numeric ids follow the same number presentation as coordinates."""
        result = Feature(id=feature_id).to_dict()["id"]  # type: ignore[arg-type]
        assert result == encoded
        assert type(result) is type(encoded)

    def test_integral_id_text(self) -> None:
        text = dumps(Feature(id=1.0))
        assert text == '{"type":"Feature","geometry":null,"properties":null,"id":1}'

    def test_hashable_with_properties(self) -> None:
        """Test features hash even though their properties are a dict."""
        feature = Feature(Point([0, 0]), {"a": 1}, id="f1")
        same = Feature(Point([0, 0]), {"a": 1}, id="f1")
        assert hash(feature) == hash(same)
        assert len({feature, same, Feature(Point([0, 0]), {"a": 2}, id="f1")}) == 2
        assert hash(FeatureCollection([feature])) == hash(FeatureCollection([same]))

    def test_prefix_and_not_geometry(self) -> None:
        """Test Feature is not a geometry."""
        assert Feature.prefix == "geometry"
        assert not Feature.is_geometry()

    def test_decode(self) -> None:
        """Test decoding a Feature document."""
        geojson = loads(
            '{"type": "Feature", "id": 7,'
            ' "geometry": {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},'
            ' "properties": {"name": "road", "lanes": 2, "nested": {"ok": true}}}'
        )

        feature = geojson.feature
        assert feature is not None
        assert feature.id == 7
        assert feature.geometry == LineString([Point([0, 0]), Point([1, 1])])
        assert feature.properties == {"name": "road", "lanes": 2, "nested": {"ok": True}}
        assert not geojson.is_geometry()

    @pytest.mark.parametrize(
        "text",
        [
            '{"type": "Feature"}',
            '{"type": "Feature", "geometry": null}',
            '{"type": "Feature", "geometry": null, "properties": null}',
        ],
    )
    def test_decode_without_geometry(self, text: str) -> None:
        """Test absent or null geometry is not an error."""
        geojson = loads(text)
        assert geojson.error is None
        assert geojson.feature == Feature()

    def test_properties_are_not_validated(self) -> None:
        """Test properties pass through whatever their shape."""
        geojson = loads('{"type": "Feature", "geometry": null, "properties": [1, "two"]}')
        assert geojson.feature is not None
        assert geojson.feature.properties == [1, "two"]

    @pytest.mark.parametrize(
        "text",
        [
            '{"type": "Feature", "geometry": {"type": "Point"}}',
            '{"type": "Feature", "geometry": {"type": "Point", "coordinates": [0]}}',
            '{"type": "Feature", "geometry": {"type": "Feature"}}',
            '{"type": "Feature", "geometry": [0, 0]}',
            '{"type": "Feature", "geometry": null, "id": true}',
            '{"type": "Feature", "geometry": null, "id": {"x": 1}}',
        ],
        ids=["no-coordinates", "short-point", "nested-feature", "array", "bool-id", "object-id"],
    )
    def test_decode_invalid(self, text: str) -> None:
        """Test invalid features fail with an invalid-object error."""
        geojson = loads(text)
        assert geojson.error is not None
        assert geojson.error.code == ErrorCode.INVALID_GEOJSON_OBJECT
        assert geojson.feature is None

    def test_round_trip(self) -> None:
        """Test a feature with a collection geometry survives encode/decode."""
        feature = Feature(
            GeometryCollection([Point([1.5, 2, 3]), LineString([Point([0, 0]), Point([1, 1])])]),
            {"name": "x"},
            id=3.5,
        )
        assert loads(dumps(feature)).feature == feature


class TestFeatureCollection:
    """Test FeatureCollection."""

    def test_empty(self) -> None:
        """Test an empty collection."""
        collection = FeatureCollection([])
        assert collection.prefix == "features"
        assert dumps(collection) == '{"type":"FeatureCollection","features":[]}'

    def test_rejects_non_features(self) -> None:
        with pytest.raises(InvalidGeoJSONObjectError):
            FeatureCollection([Point([0, 0])])  # type: ignore[list-item]

    def test_decode(self) -> None:
        """Test decoding features in order."""
        geojson = loads(
            '{"type": "FeatureCollection", "features": ['
            '{"type": "Feature", "geometry": {"type": "Point", "coordinates": [0, 0]},'
            ' "properties": {"n": 1}},'
            '{"type": "Feature", "geometry": null, "properties": {"n": 2}}]}'
        )

        collection = geojson.feature_collection
        assert collection is not None
        assert [f.properties["n"] for f in collection.features] == [1, 2]
        assert collection.features[0].geometry == Point([0, 0])
        assert collection.features[1].geometry is None
        assert not geojson.is_geometry()

    @pytest.mark.parametrize(
        "features",
        [
            '[{"type": "Point", "coordinates": [0, 0]}]',
            '[{"type": "Feature", "geometry": {"type": "LineString", "coordinates": [[0, 0]]}}]',
            "[1]",
            "{}",
        ],
        ids=["geometry-member", "bad-geometry", "number", "object"],
    )
    def test_decode_invalid(self, features: str) -> None:
        """Test any bad member fails the whole collection."""
        geojson = loads(f'{{"type": "FeatureCollection", "features": {features}}}')
        assert geojson.error is not None
        assert geojson.error.code == ErrorCode.INVALID_GEOJSON_OBJECT
        assert geojson.feature_collection is None

    def test_missing_features(self) -> None:
        geojson = loads('{"type": "FeatureCollection"}')
        assert geojson.error is not None
        assert "features" in geojson.error.message

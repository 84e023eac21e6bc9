"""Pydantic models for the GeoJSON output document (RFC 7946).

The document has one fixed shape::

    {"type": "FeatureCollection",
     "features": [
        {"type": "Feature",
         "properties": {"id": 1},
         "geometry": {"type": "Point", "coordinates": [lon, lat]}},
        ...
     ]}

Each level is an explicit model with a literal ``type`` tag, so the
encoder emits keys in this order. Decoding is strict: unknown keys,
other geometry types and numbers written as strings are rejected.
Coordinates must be finite; NaN and infinity have no JSON encoding.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat

from csv_geojson.models.feature import PointFeature
from csv_geojson.models.point import CoordinatePoint

_WIRE_CONFIG = ConfigDict(extra="forbid", strict=True)


class FeatureProperties(BaseModel):
    """Properties of a point feature: the 1-based sequential id."""

    id: int

    model_config = _WIRE_CONFIG


class PointGeometry(BaseModel):
    """GeoJSON Point geometry.

    Attributes:
        type: Always ``"Point"``.
        coordinates: ``[longitude, latitude]`` in decimal degrees.
    """

    type: Literal["Point"] = "Point"
    coordinates: tuple[FiniteFloat, FiniteFloat]

    model_config = _WIRE_CONFIG


class GeoJsonFeature(BaseModel):
    """A GeoJSON Feature wrapping one Point geometry."""

    type: Literal["Feature"] = "Feature"
    properties: FeatureProperties
    geometry: PointGeometry

    model_config = _WIRE_CONFIG

    @classmethod
    def from_point_feature(cls, feature: PointFeature) -> GeoJsonFeature:
        """Build the wire model from a mapped ``PointFeature``."""
        return cls(
            properties=FeatureProperties(id=feature.feature_id),
            geometry=PointGeometry(type=feature.geometry_type, coordinates=feature.coordinates),
        )

    def to_point(self) -> CoordinatePoint:
        """Recover the source ``CoordinatePoint`` (latitude-first)."""
        longitude, latitude = self.geometry.coordinates
        return CoordinatePoint(latitude=latitude, longitude=longitude)


class FeatureCollectionDocument(BaseModel):
    """Top-level GeoJSON document: one per conversion run.

    Attributes:
        type: Always ``"FeatureCollection"``.
        features: Features in input row order.
    """

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[GeoJsonFeature] = Field(default_factory=list)

    model_config = _WIRE_CONFIG

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialise to a JSON string (compact unless ``indent`` is given)."""
        return self.model_dump_json(indent=indent)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict."""
        return self.model_dump()  # type: ignore[return-value]

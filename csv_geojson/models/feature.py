"""Data model for a mapped point feature.

A PointFeature is derived from exactly one CoordinatePoint and carries
the sequential identifier assigned by its position in the input.
"""

from __future__ import annotations

from dataclasses import dataclass

from csv_geojson.core.constants import POINT_TYPE


@dataclass(frozen=True, slots=True)
class PointFeature:
    """A single Point feature ready for serialization.

    Attributes:
        feature_id: 1-based position of the source row.
        coordinates: ``(longitude, latitude)`` in GeoJSON x-then-y order.
        geometry_type: Always ``"Point"``.
    """

    feature_id: int
    coordinates: tuple[float, float]
    geometry_type: str = POINT_TYPE

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]

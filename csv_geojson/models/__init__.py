"""Data models and schemas.

Defines the data structures used throughout the pipeline:
- CoordinatePoint: One parsed ``latitude,longitude`` row
- PointFeature: One mapped Point feature with its sequential id
- FeatureCollectionDocument: The GeoJSON document written to disk
"""

from csv_geojson.models.document import (
    FeatureCollectionDocument,
    FeatureProperties,
    GeoJsonFeature,
    PointGeometry,
)
from csv_geojson.models.feature import PointFeature
from csv_geojson.models.point import CoordinatePoint

__all__ = [
    "CoordinatePoint",
    "FeatureCollectionDocument",
    "FeatureProperties",
    "GeoJsonFeature",
    "PointFeature",
    "PointGeometry",
]

"""Map features stage: coordinate records to Point features.

Pure transformation with no I/O and no failure modes. The record at
position ``i`` becomes the feature with id ``i + 1``; its coordinates are
emitted longitude first, reversing the source's latitude-first order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from csv_geojson.models.feature import PointFeature

if TYPE_CHECKING:
    from collections.abc import Iterable

    from csv_geojson.models.point import CoordinatePoint

logger = logging.getLogger("csv_geojson.activities.map_features")


def map_features(points: Iterable[CoordinatePoint]) -> list[PointFeature]:
    """Convert coordinate records to features, preserving order.

    Args:
        points: Coordinate records in input row order.

    Returns:
        One ``PointFeature`` per record, ids starting at 1. Empty input
        yields an empty list.
    """
    features = [to_feature(point, index + 1) for index, point in enumerate(points)]
    logger.debug("Mapped %d feature(s)", len(features))
    return features


def to_feature(point: CoordinatePoint, feature_id: int) -> PointFeature:
    """Map one record to a Point feature with ``[longitude, latitude]`` coordinates."""
    return PointFeature(feature_id=feature_id, coordinates=point.as_lon_lat())

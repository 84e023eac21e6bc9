"""Shared conversion constants: single source of truth.

Centralises GeoJSON type names, default file locations and coordinate
bounds used by the reader, mapper, serializer and configuration.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# GeoJSON literals (RFC 7946)
# ---------------------------------------------------------------------------

FEATURE_COLLECTION_TYPE: str = "FeatureCollection"
FEATURE_TYPE: str = "Feature"
POINT_TYPE: str = "Point"

# ---------------------------------------------------------------------------
# Default locations and input dialect
# ---------------------------------------------------------------------------

DEFAULT_INPUT_PATH: str = "points.csv"
"""Default delimited text source."""

DEFAULT_OUTPUT_PATH: str = "points.geojson"
"""Default GeoJSON destination."""

DEFAULT_DELIMITER: str = ","
DEFAULT_ENCODING: str = "utf-8"

# Field positions within a row; latitude comes first in the source.
LATITUDE_FIELD: int = 0
LONGITUDE_FIELD: int = 1
MIN_FIELDS_PER_ROW: int = 2

FIELD_NAMES: dict[int, str] = {
    LATITUDE_FIELD: "latitude",
    LONGITUDE_FIELD: "longitude",
}

# ---------------------------------------------------------------------------
# WGS 84 coordinate bounds (only enforced when range validation is enabled)
# ---------------------------------------------------------------------------

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

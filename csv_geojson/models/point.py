"""Data model for a parsed coordinate record.

A CoordinatePoint is one ``latitude,longitude`` row read from the source
file. This is the output of the read_points stage and the input to
map_features.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CoordinatePoint:
    """A single geographic coordinate in source (latitude-first) order.

    Attributes:
        latitude: Latitude in decimal degrees. Finite; range is not checked.
        longitude: Longitude in decimal degrees. Finite; range is not checked.
    """

    latitude: float
    longitude: float

    def as_lon_lat(self) -> tuple[float, float]:
        """Return the GeoJSON ``(longitude, latitude)`` ordering."""
        return (self.longitude, self.latitude)

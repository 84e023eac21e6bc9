"""Conversion pipeline.

Coordinates the stages for one input file:

1. Read points: parse ``latitude,longitude`` rows
2. Map features: assign ids, reorder coordinates to ``[lon, lat]``
3. Serialize document: encode the FeatureCollection
4. Write document: store the bytes at the output path

Stages run strictly in sequence. The first error aborts the run and
propagates to the caller; the output file is only touched once the
document has been fully encoded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from csv_geojson.activities.map_features import map_features
from csv_geojson.activities.read_points import read_points
from csv_geojson.activities.serialize_document import serialize_features
from csv_geojson.activities.write_document import write_document

if TYPE_CHECKING:
    from collections.abc import Iterable

    from csv_geojson.core.config import ConverterConfig
    from csv_geojson.models.point import CoordinatePoint

logger = logging.getLogger("csv_geojson.orchestrators.convert_pipeline")


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Summary of a completed conversion run."""

    input_path: str
    output_path: str
    feature_count: int
    bytes_written: int

    def to_dict(self) -> dict[str, object]:
        return {
            "input_path": self.input_path,
            "output_path": self.output_path,
            "feature_count": self.feature_count,
            "bytes_written": self.bytes_written,
        }


def convert(config: ConverterConfig) -> ConversionResult:
    """Convert ``config.input_path`` to GeoJSON at ``config.output_path``.

    Raises:
        SourceReadError: If the input cannot be read.
        RecordFormatError: If a row has fewer than two fields.
        RecordParseError: If a coordinate field is not a valid number.
        CoordinateRangeError: If range validation is enabled and fails.
        SerializationError: If the document cannot be encoded.
        DocumentWriteError: If the output cannot be written.
    """
    logger.info(
        "Conversion started | input=%s | output=%s",
        config.input_path,
        config.output_path,
    )

    points = read_points(
        config.input_path,
        delimiter=config.delimiter,
        encoding=config.encoding,
        skip_header=config.skip_header,
        validate_range=config.validate_range,
    )
    payload = convert_points(points, indent=config.indent)
    written = write_document(payload, config.output_path)

    result = ConversionResult(
        input_path=config.input_path,
        output_path=config.output_path,
        feature_count=len(points),
        bytes_written=written,
    )
    logger.info(
        "Conversion complete | features=%d | output=%s | bytes=%d",
        result.feature_count,
        result.output_path,
        result.bytes_written,
    )
    return result


def convert_points(points: Iterable[CoordinatePoint], *, indent: int | None = None) -> bytes:
    """Map and serialize coordinate records without touching the filesystem."""
    return serialize_features(map_features(points), indent=indent)

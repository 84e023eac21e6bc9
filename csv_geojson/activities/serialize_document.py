"""Serialize document stage: wrap features in a FeatureCollection and encode.

Produces the UTF-8 GeoJSON bytes for a sequence of ``PointFeature``.
Writing the bytes anywhere is the caller's job (see ``write_document``).

Encoding failures are not expected for the fixed numeric/string data
model, but when one happens it is raised as ``SerializationError``.
The decode helpers here read a produced document back into coordinate
records.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from csv_geojson.core.exceptions import SerializationError
from csv_geojson.models.document import FeatureCollectionDocument, GeoJsonFeature

if TYPE_CHECKING:
    from collections.abc import Iterable

    from csv_geojson.models.feature import PointFeature
    from csv_geojson.models.point import CoordinatePoint

logger = logging.getLogger("csv_geojson.activities.serialize_document")


def build_document(features: Iterable[PointFeature]) -> FeatureCollectionDocument:
    """Wrap features in the FeatureCollection envelope.

    Raises:
        SerializationError: If a feature cannot be represented (for
            example a non-finite coordinate).
    """
    try:
        return FeatureCollectionDocument(
            features=[GeoJsonFeature.from_point_feature(f) for f in features]
        )
    except PydanticValidationError as exc:
        msg = f"Cannot build GeoJSON document: {exc}"
        raise SerializationError(msg) from exc


def serialize_features(
    features: Iterable[PointFeature],
    *,
    indent: int | None = None,
) -> bytes:
    """Encode features as a GeoJSON FeatureCollection.

    Args:
        features: Mapped features in output order.
        indent: JSON indentation. ``None`` (default) writes compact JSON.

    Returns:
        UTF-8 encoded GeoJSON document.

    Raises:
        SerializationError: If the document cannot be built or encoded.
    """
    document = build_document(features)
    try:
        payload = document.to_json(indent=indent).encode("utf-8")
    except (PydanticSerializationError, ValueError, MemoryError) as exc:
        msg = f"Cannot encode GeoJSON document: {exc!r}"
        raise SerializationError(msg) from exc

    logger.info(
        "Document serialized | features=%d | bytes=%d",
        len(document.features),
        len(payload),
    )
    return payload


def deserialize_document(data: bytes | str) -> FeatureCollectionDocument:
    """Decode a GeoJSON document produced by ``serialize_features``.

    Raises:
        SerializationError: If ``data`` is not a point FeatureCollection.
    """
    try:
        return FeatureCollectionDocument.model_validate_json(data)
    except PydanticValidationError as exc:
        msg = f"Not a point FeatureCollection: {exc}"
        raise SerializationError(
            msg, stage="deserialize_document", code="DOCUMENT_DECODE_FAILED"
        ) from exc


def extract_points(document: FeatureCollectionDocument) -> list[CoordinatePoint]:
    """Recover the latitude-first coordinate records from a document."""
    return [feature.to_point() for feature in document.features]

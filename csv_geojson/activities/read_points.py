"""Read points stage: parse delimited ``latitude,longitude`` rows.

Reads a delimited text source and produces one ``CoordinatePoint`` per
row, in row order. The first error aborts the whole read: no partial
result is returned and no bad row is skipped.

Row contract:
- No header unless ``skip_header`` is set.
- Field 0 is latitude text, field 1 is longitude text, each a base-10
  floating-point literal with a finite value.
- Fields beyond the second are ignored.
- Blank lines are not rows and are skipped.
"""

from __future__ import annotations

import csv
import logging
import math
import re
from pathlib import Path
from typing import TYPE_CHECKING

from csv_geojson.core.constants import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    FIELD_NAMES,
    LATITUDE_FIELD,
    LONGITUDE_FIELD,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_FIELDS_PER_ROW,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from csv_geojson.core.exceptions import ResourceError, ValidationError
from csv_geojson.models.point import CoordinatePoint

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

logger = logging.getLogger("csv_geojson.activities.read_points")

# Decimal literal: optional sign, digits with optional fraction (or a bare
# fraction), optional exponent. Rejects nan/inf, hex and underscore forms
# that float() would otherwise accept, and non-ASCII digits.
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SourceReadError(ResourceError):
    """Raised when the source file cannot be opened, read or decoded."""

    default_stage = "read_points"
    default_code = "SOURCE_READ_FAILED"


class RecordFormatError(ValidationError):
    """Raised when a row has fewer than two fields."""

    default_stage = "read_points"
    default_code = "RECORD_FORMAT_INVALID"

    def __init__(self, message: str, *, row: int, field_count: int) -> None:
        self.row = row
        self.field_count = field_count
        super().__init__(message)

    def context(self) -> dict[str, object]:
        return {"row": self.row, "field_count": self.field_count}


class RecordParseError(ValidationError):
    """Raised when a latitude or longitude field is not a valid number."""

    default_stage = "read_points"
    default_code = "RECORD_PARSE_FAILED"

    def __init__(self, message: str, *, row: int, field: int, text: str) -> None:
        self.row = row
        self.field = field
        self.text = text
        super().__init__(message)

    @property
    def field_name(self) -> str:
        return FIELD_NAMES.get(self.field, f"field {self.field}")

    def context(self) -> dict[str, object]:
        return {
            "row": self.row,
            "field": self.field,
            "field_name": self.field_name,
            "text": self.text,
        }


class CoordinateRangeError(ValidationError):
    """Raised when range validation is enabled and a value is outside WGS 84."""

    default_stage = "read_points"
    default_code = "COORDINATE_OUT_OF_RANGE"

    def __init__(self, message: str, *, row: int, field: int, value: float) -> None:
        self.row = row
        self.field = field
        self.value = value
        super().__init__(message)

    def context(self) -> dict[str, object]:
        return {
            "row": self.row,
            "field": self.field,
            "field_name": FIELD_NAMES[self.field],
            "value": self.value,
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def read_points(
    path: Path | str,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
    skip_header: bool = False,
    validate_range: bool = False,
) -> list[CoordinatePoint]:
    """Read a delimited text file into coordinate records.

    Args:
        path: Filesystem path to the source file.
        delimiter: Single-character field delimiter.
        encoding: Text encoding of the file.
        skip_header: Discard the first non-blank row.
        validate_range: Reject latitudes outside [-90, 90] and longitudes
            outside [-180, 180].

    Returns:
        One ``CoordinatePoint`` per data row, in file order. Empty list
        for a file with no data rows.

    Raises:
        SourceReadError: If the file cannot be opened, read or decoded.
        RecordFormatError: If a row has fewer than two fields.
        RecordParseError: If a field is not a finite decimal number.
        CoordinateRangeError: If ``validate_range`` is set and a value is
            out of bounds.
    """
    path = Path(path)
    logger.info("Reading points | path=%s | delimiter=%r", path, delimiter)

    try:
        with path.open(newline="", encoding=encoding) as source:
            reader = csv.reader(source, delimiter=delimiter)
            points = parse_rows(
                _checked_rows(reader),
                skip_header=skip_header,
                validate_range=validate_range,
            )
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        msg = f"Cannot read source file {path}: {exc}"
        raise SourceReadError(msg, path=str(path)) from exc

    logger.info("Read %d point(s) from %s", len(points), path)
    return points


def read_points_text(
    text: str,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    skip_header: bool = False,
    validate_range: bool = False,
) -> list[CoordinatePoint]:
    """Parse delimited text already held in memory.

    Same row contract and errors as ``read_points`` (minus file access).
    """
    reader = csv.reader(text.splitlines(), delimiter=delimiter)
    return parse_rows(
        _checked_rows(reader),
        skip_header=skip_header,
        validate_range=validate_range,
    )


def parse_rows(
    rows: Iterable[Sequence[str]],
    *,
    skip_header: bool = False,
    validate_range: bool = False,
) -> list[CoordinatePoint]:
    """Convert split rows into coordinate records.

    Rows are numbered from 1 in iteration order, blank rows included,
    so for a file the row number is its line number.

    Raises:
        RecordFormatError: If a non-blank row has fewer than two fields.
        RecordParseError: If a field is not a finite decimal number.
        CoordinateRangeError: If ``validate_range`` is set and a value is
            out of bounds.
    """
    points: list[CoordinatePoint] = []
    header_pending = skip_header
    wide_rows = 0

    for row_number, row in enumerate(rows, start=1):
        if _is_blank(row):
            continue

        if header_pending:
            header_pending = False
            logger.warning("Skipping header row | row=%d | fields=%s", row_number, list(row))
            continue

        if len(row) < MIN_FIELDS_PER_ROW:
            msg = (
                f"Row {row_number} has {len(row)} field(s), "
                f"expected at least {MIN_FIELDS_PER_ROW} (latitude, longitude)"
            )
            raise RecordFormatError(msg, row=row_number, field_count=len(row))

        if len(row) > MIN_FIELDS_PER_ROW:
            wide_rows += 1

        latitude = _parse_field(row, LATITUDE_FIELD, row_number)
        longitude = _parse_field(row, LONGITUDE_FIELD, row_number)

        if validate_range:
            _check_range(latitude, longitude, row_number)

        points.append(CoordinatePoint(latitude=latitude, longitude=longitude))

    if wide_rows:
        logger.warning(
            "Ignored extra columns | rows=%d | only the first %d fields are used",
            wide_rows,
            MIN_FIELDS_PER_ROW,
        )

    return points


def parse_coordinate(text: str) -> float:
    """Parse a single decimal coordinate literal.

    Surrounding whitespace is tolerated.

    Raises:
        ValueError: If ``text`` is not a decimal literal or its value is
            not finite (e.g. ``1e999``).
    """
    candidate = text.strip()
    if not _DECIMAL_LITERAL.fullmatch(candidate):
        msg = f"not a decimal number: {text!r}"
        raise ValueError(msg)
    value = float(candidate)
    if not math.isfinite(value):
        msg = f"value is not finite: {text!r}"
        raise ValueError(msg)
    return value


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _checked_rows(reader: Iterable[list[str]]) -> Iterable[list[str]]:
    """Yield rows from a csv reader, converting ``csv.Error`` to a format error."""
    iterator = iter(reader)
    row_number = 0
    while True:
        row_number += 1
        try:
            row = next(iterator)
        except StopIteration:
            return
        except csv.Error as exc:
            msg = f"Row {row_number} is not valid delimited text: {exc}"
            raise RecordFormatError(msg, row=row_number, field_count=0) from exc
        yield row


def _is_blank(row: Sequence[str]) -> bool:
    return not row or (len(row) == 1 and not row[0].strip())


def _parse_field(row: Sequence[str], field: int, row_number: int) -> float:
    text = row[field]
    try:
        return parse_coordinate(text)
    except ValueError as exc:
        msg = f"Row {row_number} field {field} ({FIELD_NAMES[field]}): {exc}"
        raise RecordParseError(msg, row=row_number, field=field, text=text) from exc


def _check_range(latitude: float, longitude: float, row_number: int) -> None:
    if not (MIN_LATITUDE <= latitude <= MAX_LATITUDE):
        msg = (
            f"Row {row_number}: latitude {latitude} out of WGS 84 range "
            f"[{MIN_LATITUDE}, {MAX_LATITUDE}]"
        )
        raise CoordinateRangeError(msg, row=row_number, field=LATITUDE_FIELD, value=latitude)
    if not (MIN_LONGITUDE <= longitude <= MAX_LONGITUDE):
        msg = (
            f"Row {row_number}: longitude {longitude} out of WGS 84 range "
            f"[{MIN_LONGITUDE}, {MAX_LONGITUDE}]"
        )
        raise CoordinateRangeError(msg, row=row_number, field=LONGITUDE_FIELD, value=longitude)

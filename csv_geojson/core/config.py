"""Converter configuration loaded from environment variables.

All configuration values have defaults matching the historical behaviour
of the converter (``points.csv`` in, ``points.geojson`` out, comma
delimited, no header, permissive coordinate ranges).

Fail-fast validation:
    ``from_env()`` and ``with_overrides()`` raise ``ConfigValidationError``
    if any value is out of its valid range, so bad configuration is
    caught before the input file is opened.
"""

from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass, replace

from csv_geojson.core.constants import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_PATH,
)
from csv_geojson.core.exceptions import ConversionError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigValidationError(ConversionError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")

    @property
    def category(self) -> str:
        return "config"

    def context(self) -> dict[str, object]:
        return {"key": self.key}


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Immutable converter configuration.

    Loaded once by the command-line entry point and passed to the pipeline.

    Attributes:
        input_path: Delimited text source of ``latitude,longitude`` rows.
        output_path: Destination for the GeoJSON document.
        delimiter: Single-character field delimiter.
        encoding: Text encoding of the source file.
        skip_header: Discard the first non-blank row as a header.
        validate_range: Reject coordinates outside WGS 84 bounds.
        indent: JSON indentation; ``None`` writes compact output.
        log_level: Root logging level name.
    """

    input_path: str = DEFAULT_INPUT_PATH
    output_path: str = DEFAULT_OUTPUT_PATH
    delimiter: str = DEFAULT_DELIMITER
    encoding: str = DEFAULT_ENCODING
    skip_header: bool = False
    validate_range: bool = False
    indent: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> ConverterConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or cannot
                be interpreted (e.g. ``CSV_GEOJSON_INDENT=abc``).
        """
        config = cls(
            input_path=os.getenv("CSV_GEOJSON_INPUT_PATH", DEFAULT_INPUT_PATH),
            output_path=os.getenv("CSV_GEOJSON_OUTPUT_PATH", DEFAULT_OUTPUT_PATH),
            delimiter=os.getenv("CSV_GEOJSON_DELIMITER", DEFAULT_DELIMITER),
            encoding=os.getenv("CSV_GEOJSON_ENCODING", DEFAULT_ENCODING),
            skip_header=_parse_bool(
                "CSV_GEOJSON_SKIP_HEADER", os.getenv("CSV_GEOJSON_SKIP_HEADER", "")
            ),
            validate_range=_parse_bool(
                "CSV_GEOJSON_VALIDATE_RANGE", os.getenv("CSV_GEOJSON_VALIDATE_RANGE", "")
            ),
            indent=_parse_indent(os.getenv("CSV_GEOJSON_INDENT", "")),
            log_level=os.getenv("CSV_GEOJSON_LOG_LEVEL", "INFO").upper(),
        )
        _validate(config)
        return config

    def with_overrides(self, **overrides: object) -> ConverterConfig:
        """Return a validated copy with non-``None`` overrides applied.

        Used by the CLI, where an omitted option leaves the environment
        value in place.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "log_level" in changes:
            changes["log_level"] = str(changes["log_level"]).upper()
        config = replace(self, **changes)  # type: ignore[arg-type]
        _validate(config)
        return config

    @property
    def log_level_value(self) -> int:
        """Numeric ``logging`` level for ``log_level``."""
        return logging.getLevelName(self.log_level)  # type: ignore[no-any-return]


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be one of true/false/yes/no/1/0")


def _parse_indent(raw: str) -> int | None:
    if not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigValidationError("CSV_GEOJSON_INDENT", raw, "must be an integer") from exc


def _validate(config: ConverterConfig) -> None:
    """Validate configuration values.  Raises ``ConfigValidationError``."""
    if not config.input_path:
        raise ConfigValidationError(
            "CSV_GEOJSON_INPUT_PATH",
            config.input_path,
            "must not be empty",
        )

    if not config.output_path:
        raise ConfigValidationError(
            "CSV_GEOJSON_OUTPUT_PATH",
            config.output_path,
            "must not be empty",
        )

    if len(config.delimiter) != 1 or config.delimiter in ('"', "\r", "\n"):
        raise ConfigValidationError(
            "CSV_GEOJSON_DELIMITER",
            config.delimiter,
            "must be a single character other than a quote or line break",
        )

    try:
        codec = codecs.lookup(config.encoding)
    except LookupError as exc:
        raise ConfigValidationError(
            "CSV_GEOJSON_ENCODING",
            config.encoding,
            "must be a known text encoding",
        ) from exc

    # Binary transforms such as base64 or rot13 cannot back a text file.
    if not getattr(codec, "_is_text_encoding", True):
        raise ConfigValidationError(
            "CSV_GEOJSON_ENCODING",
            config.encoding,
            "must be a known text encoding",
        )

    if config.indent is not None and config.indent < 0:
        raise ConfigValidationError(
            "CSV_GEOJSON_INDENT",
            config.indent,
            "must be >= 0",
        )

    if config.log_level not in _LOG_LEVELS:
        raise ConfigValidationError(
            "CSV_GEOJSON_LOG_LEVEL",
            config.log_level,
            f"must be one of {', '.join(_LOG_LEVELS)}",
        )

"""Conversion error taxonomy.

Every error raised by the pipeline inherits from ``ConversionError`` and
carries structured context fields so the process boundary can report a
consistent message and exit status.

Taxonomy categories
-------------------
- ``ValidationError``: input rows that violate the record contract
  (too few fields, unparseable or out-of-range numbers).
- ``ResourceError``: the source or destination cannot be opened,
  read or written.
- ``SerializationError``: the output document cannot be encoded
  (or a produced document cannot be decoded).

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for all conversion errors.

    Attributes:
        message: Human-readable error description.
        stage: Pipeline stage where the error occurred
            (e.g. ``"read_points"``, ``"serialize_features"``).
        code: Machine-readable error code (e.g. ``"RECORD_PARSE_FAILED"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, ResourceError):
            return "io"
        if isinstance(self, SerializationError):
            return "serialization"
        return "conversion"

    def context(self) -> dict[str, object]:
        """Extra structured fields for subclasses that locate the failure."""
        return {}

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        payload: dict[str, object] = {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }
        payload.update(self.context())
        return payload


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(ConversionError):
    """An input record violates the two-numeric-field contract."""


class ResourceError(ConversionError):
    """The source or destination file is inaccessible."""

    def __init__(self, message: str = "", *, path: str = "", **kwargs: str) -> None:
        self.path = path
        super().__init__(message, **kwargs)

    def context(self) -> dict[str, object]:
        return {"path": self.path}


class SerializationError(ConversionError):
    """Encoding the output document failed."""

    default_stage = "serialize_features"
    default_code = "SERIALIZATION_FAILED"

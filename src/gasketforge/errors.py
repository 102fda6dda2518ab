from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_PARAMETER = "MissingParameter"
    ORDERING_VIOLATION = "OrderingViolation"
    NON_POSITIVE_DIMENSION = "NonPositiveDimension"
    INVALID_HOLE_CONFIGURATION = "InvalidHoleConfiguration"
    INVALID_CHORD = "InvalidChord"
    HOLE_DIAMETER_TOO_LARGE = "HoleDiameterTooLarge"
    DEGENERATE_CROSS_SECTION = "DegenerateCrossSection"
    DEGENERATE_SPACING = "DegenerateSpacing"
    UNAUTHORIZED = "Unauthorized"


class GeometryError(ValueError):
    """Validation or layout failure; ``kind`` tells callers which rule broke."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    def to_dict(self) -> dict:
        return {"error": self.kind.value, "message": str(self)}

from __future__ import annotations

"""Gasket input parameters and their fail-fast validation."""

from dataclasses import asdict, dataclass
from enum import Enum
import math
from typing import Mapping

from .errors import ErrorKind, GeometryError


class HoleConfiguration(str, Enum):
    CENTERED = "centered"
    STRADDLED = "straddled"


_LENGTH_FIELDS = ("A", "B", "C", "D", "E", "F", "I", "H")
_FIELD_ALIASES = {
    "hole_diameter": ("hole_diameter", "holeDiameter"),
    "hole_configuration": ("hole_configuration", "holeConfiguration"),
}


@dataclass(frozen=True)
class GeometryParams:
    A: float
    B: float
    C: float
    D: float
    E: float
    F: float
    I: float  # noqa: E741
    H: float
    hole_diameter: float
    hole_configuration: HoleConfiguration

    @staticmethod
    def from_mapping(data: Mapping) -> "GeometryParams":
        # 字段缺失/非数值优先报错，避免 NaN 进入 asin
        values = {name: _number(data, (name,)) for name in _LENGTH_FIELDS}
        values["hole_diameter"] = _number(data, _FIELD_ALIASES["hole_diameter"])
        values["hole_configuration"] = _hole_configuration(data)
        params = GeometryParams(**values)
        params.validate()
        return params

    def validate(self) -> None:
        for name in (*_LENGTH_FIELDS, "hole_diameter"):
            if getattr(self, name) <= 0:
                raise GeometryError(
                    ErrorKind.NON_POSITIVE_DIMENSION, f"{name} must be > 0"
                )
        ordering = (
            (self.B >= self.A, "B must be < A"),
            (self.H >= self.A, "H must be < A"),
            (self.H >= self.B, "H must be < B"),
            (self.D > self.C, "D must be <= C"),
            (self.C > self.A, "C must be <= A"),
            (self.D > self.B, "D must be <= B"),
        )
        for broken, message in ordering:
            if broken:
                raise GeometryError(ErrorKind.ORDERING_VIOLATION, message)
        if self.B / 2.0 - self.H <= 0:
            raise GeometryError(
                ErrorKind.DEGENERATE_CROSS_SECTION,
                "inner contour radius B/2 - H must be > 0",
            )
        if self.E > self.D:
            raise GeometryError(ErrorKind.INVALID_CHORD, "E must be <= D")
        if self.I > self.D:
            raise GeometryError(ErrorKind.INVALID_CHORD, "I must be <= D")
        self.check_hole_diameter()

    def check_hole_diameter(self) -> None:
        limit = min(self.E, self.F, self.I)
        if self.hole_diameter > limit:
            raise GeometryError(
                ErrorKind.HOLE_DIAMETER_TOO_LARGE,
                f"hole_diameter {self.hole_diameter:g} exceeds min(E, F, I) = {limit:g}",
            )

    @property
    def hole_radius(self) -> float:
        return self.hole_diameter / 2.0

    def to_dict(self) -> dict:
        data = asdict(self)
        data["hole_configuration"] = self.hole_configuration.value
        return data


def _lookup(data: Mapping, names: tuple[str, ...]):
    for name in names:
        if name in data:
            return data[name]
    return None


def _number(data: Mapping, names: tuple[str, ...]) -> float:
    label = names[-1]
    raw = _lookup(data, names)
    if raw is None or isinstance(raw, bool) or (isinstance(raw, str) and not raw.strip()):
        raise GeometryError(ErrorKind.MISSING_PARAMETER, f"{label} is required")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise GeometryError(
            ErrorKind.MISSING_PARAMETER, f"{label} must be numeric, got {raw!r}"
        ) from None
    if not math.isfinite(value):
        raise GeometryError(ErrorKind.MISSING_PARAMETER, f"{label} must be finite")
    return value


def _hole_configuration(data: Mapping) -> HoleConfiguration:
    raw = _lookup(data, _FIELD_ALIASES["hole_configuration"])
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise GeometryError(ErrorKind.MISSING_PARAMETER, "holeConfiguration is required")
    if isinstance(raw, HoleConfiguration):
        return raw
    try:
        return HoleConfiguration(str(raw).strip().lower())
    except ValueError:
        raise GeometryError(
            ErrorKind.INVALID_HOLE_CONFIGURATION,
            "holeConfiguration must be centered or straddled",
        ) from None

from __future__ import annotations

"""Bolt hole layout along the stadium-shaped bolt path.

Only the upper-left quadrant is laid out explicitly: the ring walks the left
end cap from its extreme point up to the top tangent point, the run fills the
top straight from the transition x to the vertical axis. The remaining three
quadrants come from mirroring, which makes the pattern symmetric by
construction.
"""

from dataclasses import dataclass
import logging
import math

import numpy as np

from ..errors import ErrorKind, GeometryError
from ..params import GeometryParams, HoleConfiguration

logger = logging.getLogger(__name__)

HALF_PI = math.pi / 2.0
ANGLE_EPS = 1e-9
COORD_DECIMALS = 9
MAX_HOLE_COUNT = 10000


@dataclass(frozen=True)
class HoleCenter:
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class BoltPath:
    cap_offset: float
    radius: float

    @staticmethod
    def from_params(params: GeometryParams) -> "BoltPath":
        return BoltPath(cap_offset=params.C / 2.0 - params.D / 2.0, radius=params.D / 2.0)

    @property
    def extreme_x(self) -> float:
        return self.cap_offset + self.radius


def chord_angle(chord: float, diameter: float, name: str = "chord") -> float:
    if chord > diameter:
        raise GeometryError(
            ErrorKind.INVALID_CHORD,
            f"{name} {chord:g} is longer than the bolt circle diameter {diameter:g}",
        )
    return 2.0 * math.asin(chord / diameter)


class HoleRing:
    """Angular hole positions on the near (left) end cap."""

    def __init__(
        self,
        path: BoltPath,
        spacing: float,
        transition_spacing: float,
        configuration: HoleConfiguration,
        max_holes: int = MAX_HOLE_COUNT,
    ) -> None:
        diameter = path.radius * 2.0
        self.path = path
        self.configuration = configuration
        self.alpha = chord_angle(spacing, diameter, "E")
        self.alpha_transition = chord_angle(transition_spacing, diameter, "I")
        self.transition_spacing = transition_spacing
        self._max_holes = max_holes

    @property
    def seed_angle(self) -> float:
        if self.configuration is HoleConfiguration.CENTERED:
            return math.pi
        return math.pi - self.alpha / 2.0

    def angles(self) -> np.ndarray:
        # theta0 - k*alpha >= pi/2 gives k <= (theta0 - pi/2) / alpha; the seed is always kept
        theta0 = self.seed_angle
        steps = _bounded_steps(theta0 - HALF_PI, self.alpha, self._max_holes - 1, "end cap")
        count = int(math.floor(steps + ANGLE_EPS)) + 1
        angles = theta0 - self.alpha * np.arange(count, dtype=float)
        return np.maximum(angles, HALF_PI)

    def centers(self) -> np.ndarray:
        angles = self.angles()
        cx = -self.path.cap_offset
        r = self.path.radius
        return np.column_stack((cx + r * np.cos(angles), r * np.sin(angles)))

    def transition_x(self) -> float:
        """X of the first run hole, at chord distance ``I`` from the last ring hole.

        When the last ring hole sits more than ``I`` below the run line no point
        of the run is that close, and the run starts one transition step further
        around the cap, projected onto the run line.
        """
        cx = -self.path.cap_offset
        r = self.path.radius
        last = float(self.angles()[-1])
        x_last = cx + r * math.cos(last)
        drop = r - r * math.sin(last)
        spacing = self.transition_spacing
        if drop <= spacing:
            return max(x_last + math.sqrt(spacing * spacing - drop * drop), cx)
        return cx + r * max(math.cos(last - self.alpha_transition), 0.0)


class HoleRun:
    """Evenly stepped holes along a straight run."""

    def __init__(self, spacing: float, max_holes: int = MAX_HOLE_COUNT) -> None:
        if spacing <= 0:
            raise GeometryError(ErrorKind.NON_POSITIVE_DIMENSION, "F must be > 0")
        self.spacing = spacing
        self._max_holes = max_holes

    def fill(self, start: float, end: float) -> np.ndarray:
        """X positions from ``start`` to ``end``; the last step is shortened to land on ``end``."""
        span = end - start
        if span < -ANGLE_EPS:
            return np.empty(0, dtype=float)
        if span <= ANGLE_EPS:
            return np.array([start], dtype=float)
        ratio = _bounded_steps(span, self.spacing, self._max_holes - 1, "straight run")
        steps = int(math.ceil(ratio - ANGLE_EPS))
        xs = start + self.spacing * np.arange(steps + 1, dtype=float)
        xs[-1] = end
        return xs


@dataclass(frozen=True)
class HolePattern:
    holes: tuple[HoleCenter, ...]
    ring_angles: tuple[float, ...]
    transition_x: float
    run_x: tuple[float, ...]

    @property
    def hole_count(self) -> int:
        return len(self.holes)

    def as_array(self) -> np.ndarray:
        return np.array([(h.x, h.y) for h in self.holes], dtype=float).reshape(-1, 2)


class HolePatternAssembler:
    def __init__(self, params: GeometryParams, max_holes: int = MAX_HOLE_COUNT) -> None:
        self._params = params
        self._max_holes = max_holes
        self.path = BoltPath.from_params(params)

    def assemble(self) -> HolePattern:
        params = self._params
        params.check_hole_diameter()
        ring = HoleRing(
            self.path,
            params.E,
            params.I,
            params.hole_configuration,
            max_holes=self._max_holes,
        )
        ring_points = ring.centers()
        x0 = ring.transition_x()
        run_x = self._run_positions(x0)
        run_points = np.column_stack((run_x, np.full(run_x.shape, self.path.radius)))

        quadrant = np.vstack((ring_points, run_points))
        points = _mirror_dedupe(quadrant)
        if len(points) > self._max_holes:
            raise GeometryError(
                ErrorKind.DEGENERATE_SPACING,
                f"pattern has {len(points)} holes, more than the limit of {self._max_holes}",
            )
        radius = params.hole_radius
        holes = tuple(HoleCenter(float(x), float(y), radius) for x, y in points)
        logger.info(
            "Hole pattern: config=%s alpha=%.4f deg ring=%s run=%s total=%s",
            params.hole_configuration.value,
            math.degrees(ring.alpha),
            len(ring_points),
            len(run_x),
            len(holes),
        )
        return HolePattern(
            holes=holes,
            ring_angles=tuple(float(a) for a in ring.angles()),
            transition_x=x0,
            run_x=tuple(float(x) for x in run_x),
        )

    def _run_positions(self, x0: float) -> np.ndarray:
        spacing = self._params.F
        xs = HoleRun(spacing, max_holes=self._max_holes).fill(x0, 0.0)
        # 轴上孔距过近时去掉，镜像后的间距 2g 仍不超过 F
        if len(xs) >= 2 and xs[-1] - xs[-2] <= spacing / 2.0 + ANGLE_EPS:
            xs = xs[:-1]
        return xs


def _bounded_steps(length: float, step: float, limit: int, label: str) -> float:
    # ratio stays a float until it is known to be finite and small enough for int()
    ratio = length / step if step > 0 else math.inf
    if not math.isfinite(ratio) or ratio > limit:
        raise GeometryError(
            ErrorKind.DEGENERATE_SPACING,
            f"{label} spacing {step:g} needs more than the limit of {limit + 1} holes",
        )
    return ratio


def _mirror_dedupe(quadrant: np.ndarray) -> np.ndarray:
    flips = np.array([(1.0, 1.0), (1.0, -1.0), (-1.0, 1.0), (-1.0, -1.0)])
    points = np.vstack([quadrant * flip for flip in flips])
    points = np.round(points, COORD_DECIMALS) + 0.0  # drop negative zeros
    points = np.unique(points, axis=0)
    order = np.argsort(np.mod(np.arctan2(points[:, 1], points[:, 0]), 2.0 * math.pi), kind="stable")
    return points[order]

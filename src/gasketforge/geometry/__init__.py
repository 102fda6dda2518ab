"""几何子模块导出集合。"""

from .contour import Arc, Contour, ContourBuilder, Line
from .holes import BoltPath, HoleCenter, HolePattern, HolePatternAssembler, HoleRing, HoleRun

__all__ = [
    "Arc",
    "BoltPath",
    "Contour",
    "ContourBuilder",
    "HoleCenter",
    "HolePattern",
    "HolePatternAssembler",
    "HoleRing",
    "HoleRun",
    "Line",
]

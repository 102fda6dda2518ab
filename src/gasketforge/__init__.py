"""Stadium gasket geometry and DXF generation."""

from .errors import ErrorKind, GeometryError
from .params import GeometryParams, HoleConfiguration

__all__ = ["ErrorKind", "GeometryError", "GeometryParams", "HoleConfiguration"]
__version__ = "0.1.0"

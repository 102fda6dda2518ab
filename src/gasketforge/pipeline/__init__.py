from .core import GasketResult, emit_drawing, generate_gasket, suggested_file_name
from .sink import DrawingSink, DxfDrawingSink

__all__ = [
    "DrawingSink",
    "DxfDrawingSink",
    "GasketResult",
    "emit_drawing",
    "generate_gasket",
    "suggested_file_name",
]

"""
Data models and value types.
"""

from .coordinates import (
    CanonicalCoordinate,
    CellBounds,
    ConversionResult,
    GeographicCoordinate,
    GridCell,
    Hemisphere,
    InputKind,
    UtmCoordinate,
)

__all__ = [
    "CanonicalCoordinate",
    "CellBounds",
    "ConversionResult",
    "GeographicCoordinate",
    "GridCell",
    "Hemisphere",
    "InputKind",
    "UtmCoordinate",
]

"""Value objects - immutable data with validation."""

from .geometry import (
    Point,
    Vector,
    Circle,
    Segment,
    Box,
    Path,
    Polygon,
    Shape,
    ORIGIN,
    ZERO_VECTOR,
    BASIS_X,
    BASIS_Y,
)
from .config import EncodingStyle, EncodingOptions, DEFAULT_OPTIONS

__all__ = [
    'Point',
    'Vector',
    'Circle',
    'Segment',
    'Box',
    'Path',
    'Polygon',
    'Shape',
    'ORIGIN',
    'ZERO_VECTOR',
    'BASIS_X',
    'BASIS_Y',
    'EncodingStyle',
    'EncodingOptions',
    'DEFAULT_OPTIONS',
]

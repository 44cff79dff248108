"""Domain layer - value objects and pure algorithms."""

from .services.intercept import time_intercept
from .value_objects.config import EncodingStyle, EncodingOptions, DEFAULT_OPTIONS
from .value_objects.geometry import (
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

__all__ = [
    # Value Objects
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
    # Services
    'time_intercept',
]

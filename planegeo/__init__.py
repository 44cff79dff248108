"""planegeo - immutable 2D geometry values with JSON and PostgreSQL encodings."""

__version__ = "1.0.0"

from .domain import (
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
    EncodingStyle,
    EncodingOptions,
    DEFAULT_OPTIONS,
    time_intercept,
)
from .adapters import JsonFormat, PostgresWire
from .adapters.postgres import expect_floats
from .exceptions import (
    GeometryError,
    ArityError,
    TypeMismatchError,
    EncodingNotImplementedError,
    DecodeError,
    ConfigurationError,
)
from .utils import format_float, setup_logging

__all__ = [
    '__version__',
    # Values
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
    # Solver
    'time_intercept',
    # Encodings
    'EncodingStyle',
    'EncodingOptions',
    'DEFAULT_OPTIONS',
    'JsonFormat',
    'PostgresWire',
    'expect_floats',
    'format_float',
    'setup_logging',
    # Exceptions
    'GeometryError',
    'ArityError',
    'TypeMismatchError',
    'EncodingNotImplementedError',
    'DecodeError',
    'ConfigurationError',
]

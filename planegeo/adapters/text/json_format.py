"""Structured text adapter - implements GeometryCodec with JSON layouts."""

from __future__ import annotations

import json
import logging
from typing import Any

from ...application.ports.codec import G, Geometry, GeometryCodec
from ...domain.value_objects.config import DEFAULT_OPTIONS, EncodingOptions, EncodingStyle
from ...domain.value_objects.geometry import (
    Box,
    Circle,
    Path,
    Point,
    Polygon,
    Segment,
    Vector,
)
from ...exceptions import (
    ArityError,
    DecodeError,
    EncodingNotImplementedError,
    TypeMismatchError,
)
from ...utils.numbers import format_float

logger = logging.getLogger(__name__)

_PAIR_FIELDS = ("x", "y")
_CORNER_FIELDS = ("0", "1")
_CIRCLE_FIELDS = ("c", "r")


class JsonFormat(GeometryCodec):
    """Configurable JSON encoding.

    Each type is rendered in the layout its EncodingOptions entry selects:

        array     [1,2]            [1,2,3,4]
        object    {"x":1,"y":2}    {"0":{"x":1,"y":2},"1":{"x":3,"y":4}}
        compound                   [[1,2],[3,4]]  (points in the point style)

    Decoding accepts every layout regardless of the options.
    """

    def __init__(self, options: EncodingOptions | None = None):
        self._options = options or DEFAULT_OPTIONS

    @property
    def name(self) -> str:
        return "json"

    @property
    def options(self) -> EncodingOptions:
        return self._options

    # ----- encoding -----

    def encode(self, value: Geometry) -> str:
        """Render a geometry value as JSON text."""
        if isinstance(value, (Path, Polygon)):
            raise EncodingNotImplementedError(
                f"{type(value).__name__} encoding not yet implemented",
                type_name=type(value).__name__
            )

        if isinstance(value, (Point, Vector)):
            return _pair(value, self._options.style_for(type(value)))
        if isinstance(value, (Segment, Box)):
            p1, p2 = value
            return self._two_points(p1, p2, self._options.style_for(type(value)))
        if isinstance(value, Circle):
            return self._circle(value)

        raise TypeMismatchError(
            f"Only geometry values can be encoded, got {type(value).__name__}",
            observed=type(value).__name__
        )

    def _two_points(self, p1: Point, p2: Point, style: EncodingStyle) -> str:
        if style == EncodingStyle.ARRAY:
            return _array(p1.x, p1.y, p2.x, p2.y)
        if style == EncodingStyle.OBJECT:
            return (
                f'{{"0":{_pair(p1, EncodingStyle.OBJECT)},'
                f'"1":{_pair(p2, EncodingStyle.OBJECT)}}}'
            )
        point_style = self._options.point
        return f"[{_pair(p1, point_style)},{_pair(p2, point_style)}]"

    def _circle(self, c: Circle) -> str:
        style = self._options.circle
        if style == EncodingStyle.ARRAY:
            return _array(c.center.x, c.center.y, c.radius)
        if style == EncodingStyle.OBJECT:
            return (
                f'{{"c":{_pair(c.center, EncodingStyle.OBJECT)},'
                f'"r":{format_float(c.radius)}}}'
            )
        return f"[{_pair(c.center, self._options.point)},{format_float(c.radius)}]"

    # ----- decoding -----

    def decode(self, text: str | bytes, kind: type[G]) -> G:
        """Parse JSON text into a value of the given geometry class.

        Raises:
            DecodeError: Text is not valid JSON
            ArityError: Wrong number of components
            TypeMismatchError: Components are not numbers or have the wrong shape
        """
        _check_kind(kind)
        if not isinstance(text, (str, bytes, bytearray)):
            raise TypeMismatchError(
                f"Expected JSON text, got {type(text).__name__} instead",
                observed=type(text).__name__
            )
        try:
            data = json.loads(text)
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError, integer digit limit
            logger.debug(f"Invalid JSON for {kind.__name__}: {e}")
            raise DecodeError(f"Invalid JSON for {kind.__name__}: {e}", text=str(text)) from e
        return self.from_data(data, kind)

    def from_data(self, data: Any, kind: type[G]) -> G:
        """Build a value from already-parsed JSON data."""
        _check_kind(kind)
        if kind is Point or kind is Vector:
            return kind(*_read_pair(data))
        if kind is Segment or kind is Box:
            p1, p2 = _read_two_points(data)
            return kind(p1, p2)
        if kind is Circle:
            return _read_circle(data)
        raise TypeMismatchError(
            f"Cannot decode into {kind.__name__}", observed=kind.__name__
        )


def _check_kind(kind: type) -> None:
    if kind is Path or kind is Polygon:
        raise EncodingNotImplementedError(
            f"{kind.__name__} decoding not yet implemented",
            type_name=kind.__name__
        )


def _array(*values: float) -> str:
    return "[" + ",".join(format_float(v) for v in values) + "]"


def _pair(p: Point | Vector, style: EncodingStyle) -> str:
    if style == EncodingStyle.OBJECT:
        return f'{{"x":{format_float(p.x)},"y":{format_float(p.y)}}}'
    return _array(p.x, p.y)


def _type_name(data: Any) -> str:
    if data is None:
        return "null"
    if isinstance(data, dict):
        return "object"
    if isinstance(data, list):
        return "array"
    return type(data).__name__


def _read_number(data: Any) -> float:
    # bool is an int subclass but never a coordinate
    if isinstance(data, bool) or not isinstance(data, (int, float)):
        logger.debug(f"Expected a number, got {_type_name(data)}")
        raise TypeMismatchError(
            f"Expected a number, got {_type_name(data)}", observed=_type_name(data)
        )
    try:
        return float(data)
    except OverflowError as e:
        raise TypeMismatchError(
            f"Integer of {data.bit_length()} bits is too large for a float",
            observed="int"
        ) from e


def _read_numbers(data: list, expected: int) -> list[float]:
    if len(data) != expected:
        logger.debug(f"Expected {expected} numbers, got {len(data)}")
        raise ArityError(
            f"Expected {expected} numbers, but got {len(data)} instead",
            expected=expected,
            actual=len(data)
        )
    return [_read_number(v) for v in data]


def _read_fields(data: dict, fields: tuple[str, ...]) -> list[Any]:
    if len(data) != len(fields) or any(f not in data for f in fields):
        logger.debug(f"Expected fields {fields}, got {tuple(data)}")
        raise ArityError(
            f"Expected fields {', '.join(fields)}, but got "
            f"{', '.join(data) or 'none'} instead",
            expected=len(fields),
            actual=len(data)
        )
    return [data[f] for f in fields]


def _read_pair(data: Any) -> tuple[float, float]:
    if isinstance(data, list):
        x, y = _read_numbers(data, 2)
    elif isinstance(data, dict):
        x, y = (_read_number(v) for v in _read_fields(data, _PAIR_FIELDS))
    else:
        raise TypeMismatchError(
            f"Expected an array or object for a coordinate pair, got {_type_name(data)}",
            observed=_type_name(data)
        )
    return x, y


def _is_nested(data: list) -> bool:
    return bool(data) and all(isinstance(v, (list, dict)) for v in data)


def _read_two_points(data: Any) -> tuple[Point, Point]:
    if isinstance(data, dict):
        first, second = _read_fields(data, _CORNER_FIELDS)
        return Point(*_read_pair(first)), Point(*_read_pair(second))

    if not isinstance(data, list):
        raise TypeMismatchError(
            f"Expected an array or object for a pair of points, got {_type_name(data)}",
            observed=_type_name(data)
        )

    if _is_nested(data):
        if len(data) != 2:
            raise ArityError(
                f"Expected 2 points, but got {len(data)} instead",
                expected=2,
                actual=len(data)
            )
        return Point(*_read_pair(data[0])), Point(*_read_pair(data[1]))

    x1, y1, x2, y2 = _read_numbers(data, 4)
    return Point(x1, y1), Point(x2, y2)


def _read_circle(data: Any) -> Circle:
    if isinstance(data, dict):
        center, radius = _read_fields(data, _CIRCLE_FIELDS)
        return Circle(Point(*_read_pair(center)), _read_number(radius))

    if not isinstance(data, list):
        raise TypeMismatchError(
            f"Expected an array or object for a circle, got {_type_name(data)}",
            observed=_type_name(data)
        )

    if data and isinstance(data[0], (list, dict)):
        if len(data) != 2:
            raise ArityError(
                f"Expected a center and a radius, but got {len(data)} items instead",
                expected=2,
                actual=len(data)
            )
        return Circle(Point(*_read_pair(data[0])), _read_number(data[1]))

    x, y, r = _read_numbers(data, 3)
    return Circle(Point(x, y), r)


def encode(value: Geometry, options: EncodingOptions | None = None) -> str:
    """Render a value with the given (or default) options."""
    return JsonFormat(options).encode(value)


def decode(text: str | bytes, kind: type[G], options: EncodingOptions | None = None) -> G:
    """Parse text into a value of the given geometry class."""
    return JsonFormat(options).decode(text, kind)

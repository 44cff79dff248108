"""PostgreSQL adapter - native geometric column text syntax.

Info from https://www.postgresql.org/docs/current/datatype-geometric.html
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from ...application.ports.codec import G, Geometry, GeometryCodec
from ...config import (
    PG_BOX_TEMPLATE,
    PG_CIRCLE_TEMPLATE,
    PG_POINT_TEMPLATE,
    PG_SEGMENT_TEMPLATE,
    WIRE_ARITY,
)
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

_NUMBER = r"[-+]?(?:(?:\d+\.?\d*|\.\d+)(?:e[-+]?\d+)?|nan|infinity|inf)"
_TOKEN_RE = re.compile(rf"\s*(?:(?P<num>{_NUMBER})|(?P<sep>[()\[\]<>,]))", re.IGNORECASE)

# Separator layout of each type, numbers shown as "n": "(n,n)", "<(n,n),n>"
_LAYOUTS: dict[str, str] = {
    name: re.sub(r"\{\w+\}", "n", template)
    for name, template in (
        ("Point", PG_POINT_TEMPLATE),
        ("Vector", PG_POINT_TEMPLATE),
        ("Segment", PG_SEGMENT_TEMPLATE),
        ("Box", PG_BOX_TEMPLATE),
        ("Circle", PG_CIRCLE_TEMPLATE),
    )
}


def expect_floats(src: Any, expected: int | None = None) -> list[float]:
    """Check that the driver delivered the right number of floats.

    Args:
        src: One-dimensional sequence of real numbers (list, tuple, ndarray)
        expected: Exact count if positive; if negative, the count must be a
            positive multiple of its absolute value; 0 or None accepts any

    Returns:
        The values as a list of floats

    Raises:
        TypeMismatchError: src is not a flat sequence of real numbers
        ArityError: The count does not match ``expected``
    """
    observed = type(src).__name__
    if (
        isinstance(src, (str, bytes, bytearray, Mapping))
        or not isinstance(src, (Sequence, np.ndarray))
        or (not isinstance(src, np.ndarray) and any(isinstance(v, bool) for v in src))
    ):
        raise TypeMismatchError(
            f"Expected a sequence of floats from driver, got {observed} instead",
            observed=observed
        )

    try:
        arr = np.asarray(src)
    except ValueError as e:
        # ragged nesting
        raise TypeMismatchError(
            f"Expected a sequence of floats from driver, got nested {observed} instead",
            observed=observed
        ) from e

    if arr.ndim != 1 or (arr.size and arr.dtype.kind not in "fiu"):
        raise TypeMismatchError(
            f"Expected a sequence of floats from driver, got {observed} of {arr.dtype} instead",
            observed=f"{observed}[{arr.dtype}]"
        )

    floats = [float(v) for v in arr.tolist()]
    count = len(floats)

    if expected and expected > 0:
        if count != expected:
            raise ArityError(
                f"Expected {expected} floats while parsing geometry, but got {count} instead",
                expected=expected,
                actual=count
            )
    elif expected and expected < 0:
        multiple = -expected
        if count == 0 or count % multiple:
            raise ArityError(
                f"Expected a multiple of {multiple} floats while parsing geometry, "
                f"but got {count} instead",
                expected=multiple,
                actual=count,
                multiple=True
            )

    return floats


def _tokenize(text: str) -> tuple[list[float], str]:
    """Split column text into its numbers and separator layout."""
    numbers: list[float] = []
    layout: list[str] = []
    text = text.rstrip()
    pos = 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            raise DecodeError(
                f"Unexpected text {text[pos:pos + 10].strip()!r} at position {pos}",
                text=text
            )
        if m.group("num"):
            numbers.append(float(m.group("num")))
            layout.append("n")
        else:
            layout.append(m.group("sep"))
        pos = m.end()
    return numbers, "".join(layout)


class PostgresWire(GeometryCodec):
    """Adapter for PostgreSQL's point, lseg, box and circle columns.

    Rendering produces the literal text PostgreSQL accepts. Parsing takes
    the floats a driver has already extracted from a column value.
    """

    @property
    def name(self) -> str:
        return "postgres"

    def render(self, value: Geometry) -> str:
        """Render a value in PostgreSQL's geometric text syntax."""
        f = format_float
        if isinstance(value, (Point, Vector)):
            return PG_POINT_TEMPLATE.format(x=f(value.x), y=f(value.y))
        if isinstance(value, Segment):
            s, e = value
            return PG_SEGMENT_TEMPLATE.format(x1=f(s.x), y1=f(s.y), x2=f(e.x), y2=f(e.y))
        if isinstance(value, Box):
            lo, hi = value
            return PG_BOX_TEMPLATE.format(x1=f(lo.x), y1=f(lo.y), x2=f(hi.x), y2=f(hi.y))
        if isinstance(value, Circle):
            c = value.center
            return PG_CIRCLE_TEMPLATE.format(x=f(c.x), y=f(c.y), r=f(value.radius))
        if isinstance(value, (Path, Polygon)):
            raise EncodingNotImplementedError(
                f"{type(value).__name__} encoding not yet implemented",
                type_name=type(value).__name__
            )

        raise TypeMismatchError(
            f"Only geometry values can be encoded. Not supported: {type(value).__name__}",
            observed=type(value).__name__
        )

    def parse(self, numbers: Any, kind: type[G]) -> G:
        """Build a value from the floats of a column, assigned positionally.

        Raises:
            ArityError: Wrong number of floats for the type
            TypeMismatchError: numbers is not a flat sequence of floats
        """
        type_name = kind.__name__
        if kind is Path or kind is Polygon:
            raise EncodingNotImplementedError(
                f"{type_name} decoding not yet implemented", type_name=type_name
            )
        if type_name not in WIRE_ARITY:
            raise TypeMismatchError(
                f"Cannot decode into {type_name}", observed=type_name
            )

        try:
            floats = expect_floats(numbers, WIRE_ARITY[type_name])
        except ArityError as e:
            logger.debug(f"Arity mismatch for {type_name}: {e.message}")
            raise ArityError(
                f"Error while parsing data for {type_name}: {e.message}",
                expected=e.expected,
                actual=e.actual,
                multiple=e.multiple
            ) from e
        except TypeMismatchError as e:
            logger.debug(f"Type mismatch for {type_name}: {e.message}")
            raise TypeMismatchError(
                f"Error while parsing data for {type_name}: {e.message}",
                observed=e.observed
            ) from e

        if kind is Point or kind is Vector:
            return kind(floats[0], floats[1])
        if kind is Segment or kind is Box:
            return kind(Point(floats[0], floats[1]), Point(floats[2], floats[3]))
        return Circle(Point(floats[0], floats[1]), floats[2])

    def parse_text(self, text: str | bytes, kind: type[G]) -> G:
        """Parse PostgreSQL's text output, e.g. ``<(1,2),3>``.

        Raises:
            DecodeError: Text is not in the layout of the requested type
            ArityError: Wrong number of numbers for the type
            TypeMismatchError: text is not str or bytes
        """
        if isinstance(text, (bytes, bytearray)):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeError(f"Column text is not UTF-8: {e}") from e
        if not isinstance(text, str):
            raise TypeMismatchError(
                f"Expected column text, got {type(text).__name__} instead",
                observed=type(text).__name__
            )
        numbers, layout = _tokenize(text)
        value = self.parse(numbers, kind)
        if layout != _LAYOUTS[kind.__name__]:
            logger.debug(f"Layout {layout!r} does not match {kind.__name__}")
            raise DecodeError(
                f"Error while parsing data for {kind.__name__}: expected layout "
                f"{_LAYOUTS[kind.__name__]!r}, got {layout!r}",
                text=text
            )
        return value

    def encode(self, value: Geometry) -> str:
        return self.render(value)

    def decode(self, text: str, kind: type[G]) -> G:
        return self.parse_text(text, kind)


_WIRE = PostgresWire()


def render(value: Geometry) -> str:
    """Render a value in PostgreSQL's geometric text syntax."""
    return _WIRE.render(value)


def parse(numbers: Any, kind: type[G]) -> G:
    """Build a value from pre-parsed column floats."""
    return _WIRE.parse(numbers, kind)

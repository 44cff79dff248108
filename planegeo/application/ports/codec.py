"""Codec port - interface for text encodings of geometry values."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from ...domain.value_objects.geometry import Box, Circle, Point, Segment, Vector

Geometry = Point | Vector | Segment | Box | Circle
G = TypeVar("G", Point, Vector, Segment, Box, Circle)


@runtime_checkable
class GeometryCodec(Protocol):
    """Port for text encodings of geometry values.

    Implementations: JsonFormat, PostgresWire.
    """

    @property
    def name(self) -> str:
        """Encoding name."""
        ...

    def encode(self, value: Geometry) -> str:
        """Render a value as text.

        Args:
            value: Geometry value to render

        Returns:
            Encoded text
        """
        ...

    def decode(self, text: str, kind: type[G]) -> G:
        """Parse text produced by encode().

        Args:
            text: Encoded text
            kind: Geometry class to build

        Returns:
            Value equal to the one that was encoded
        """
        ...

"""Ports - interfaces for external encodings (Dependency Inversion)."""

from .codec import GeometryCodec, Geometry

__all__ = [
    'GeometryCodec',
    'Geometry',
]

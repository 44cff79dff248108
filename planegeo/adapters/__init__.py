"""Adapters - implementations of the GeometryCodec port."""

from .text import JsonFormat
from .postgres import PostgresWire

__all__ = ['JsonFormat', 'PostgresWire']

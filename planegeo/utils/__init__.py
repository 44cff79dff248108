"""Shared helpers."""

from .log import setup_logging
from .numbers import format_float

__all__ = ['setup_logging', 'format_float']

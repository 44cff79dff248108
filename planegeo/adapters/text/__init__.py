"""Structured text adapters."""

from .json_format import JsonFormat, encode, decode

__all__ = ['JsonFormat', 'encode', 'decode']

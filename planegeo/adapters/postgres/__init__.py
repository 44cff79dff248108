"""PostgreSQL wire adapters."""

from .wire import PostgresWire, expect_floats, render, parse

__all__ = ['PostgresWire', 'expect_floats', 'render', 'parse']

"""Encoding configuration value objects with validation."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from ...exceptions import ConfigurationError


class EncodingStyle(str, Enum):
    """Structured text layouts."""
    ARRAY = "array"
    OBJECT = "object"
    COMPOUND = "compound"


class EncodingOptions(BaseModel):
    """Per-type layout selection for the structured text format.

    Instances are immutable; hold one per encoder instead of mutating
    shared state.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    point: EncodingStyle = EncodingStyle.ARRAY
    vector: EncodingStyle = EncodingStyle.ARRAY
    segment: EncodingStyle = EncodingStyle.ARRAY
    box: EncodingStyle = EncodingStyle.ARRAY
    circle: EncodingStyle = EncodingStyle.ARRAY

    @field_validator("point", "vector")
    @classmethod
    def reject_compound(cls, v: EncodingStyle, info: Any) -> EncodingStyle:
        """Points and vectors have no sub-components to nest."""
        if v == EncodingStyle.COMPOUND:
            raise ValueError(
                f"'{EncodingStyle.COMPOUND.value}' style is not valid for {info.field_name}"
            )
        return v

    @classmethod
    def build(cls, **styles: Any) -> EncodingOptions:
        """Create options, reporting bad values as ConfigurationError."""
        try:
            return cls(**styles)
        except ValidationError as e:
            errors = e.errors()
            key = str(errors[0]["loc"][0]) if errors and errors[0]["loc"] else None
            raise ConfigurationError(
                f"Invalid encoding options: {errors[0]['msg'] if errors else e}",
                config_key=key
            ) from e

    def style_for(self, kind: type) -> EncodingStyle:
        """Look up the style configured for a geometry class."""
        key = kind.__name__.lower()
        if key not in type(self).model_fields:
            raise ConfigurationError(
                f"No encoding style for type {kind.__name__}", config_key=key
            )
        return getattr(self, key)


DEFAULT_OPTIONS = EncodingOptions()


__all__ = [
    'EncodingStyle',
    'EncodingOptions',
    'DEFAULT_OPTIONS',
]

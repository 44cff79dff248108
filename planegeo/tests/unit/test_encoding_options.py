"""Unit tests for encoding options."""

import pytest
from pydantic import ValidationError

from planegeo.domain.value_objects.config import (
    EncodingOptions, EncodingStyle, DEFAULT_OPTIONS
)
from planegeo.domain.value_objects.geometry import Box, Circle, Path, Point, Segment
from planegeo.exceptions import ConfigurationError


class TestEncodingOptions:
    """Tests for EncodingOptions."""

    def test_default_values(self):
        options = EncodingOptions()
        assert options.point == EncodingStyle.ARRAY
        assert options.vector == EncodingStyle.ARRAY
        assert options.segment == EncodingStyle.ARRAY
        assert options.box == EncodingStyle.ARRAY
        assert options.circle == EncodingStyle.ARRAY
        assert DEFAULT_OPTIONS == options

    def test_custom_values_from_strings(self):
        options = EncodingOptions(point="object", segment="compound", circle="object")
        assert options.point == EncodingStyle.OBJECT
        assert options.segment == EncodingStyle.COMPOUND
        assert options.circle == EncodingStyle.OBJECT

    @pytest.mark.parametrize("field", ["point", "vector"])
    def test_compound_rejected_for_pairs(self, field):
        with pytest.raises(ValidationError):
            EncodingOptions(**{field: "compound"})

    def test_unknown_style_rejected(self):
        with pytest.raises(ValidationError):
            EncodingOptions(box="matrix")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            EncodingOptions(polygon="array")

    def test_frozen(self):
        options = EncodingOptions()
        with pytest.raises(ValidationError):
            options.point = EncodingStyle.OBJECT

    def test_build_reports_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            EncodingOptions.build(point="compound")
        assert exc_info.value.config_key == "point"
        assert exc_info.value.error_code == "CONFIG_ERROR"

    def test_build_valid(self):
        assert EncodingOptions.build(box="object").box == EncodingStyle.OBJECT

    def test_style_for(self):
        options = EncodingOptions(segment="object", box="compound")
        assert options.style_for(Segment) == EncodingStyle.OBJECT
        assert options.style_for(Box) == EncodingStyle.COMPOUND
        assert options.style_for(Point) == EncodingStyle.ARRAY
        assert options.style_for(Circle) == EncodingStyle.ARRAY

    def test_style_for_unknown_type(self):
        with pytest.raises(ConfigurationError):
            EncodingOptions().style_for(Path)


class TestEncodingStyle:
    """Tests for EncodingStyle enum."""

    def test_string_values(self):
        assert EncodingStyle.ARRAY.value == "array"
        assert EncodingStyle.OBJECT.value == "object"
        assert EncodingStyle.COMPOUND.value == "compound"

    def test_from_string(self):
        assert EncodingStyle("object") == EncodingStyle.OBJECT

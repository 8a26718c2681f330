"""Tests for configuration dataclasses and validation."""

from __future__ import annotations

import pytest

from prepkit import InvalidConfigError, PickerConfig, QuartileMethod, ScalerConfig


class TestQuartileMethod:
    """Tests for QuartileMethod enum."""

    def test_linear_value(self):
        """QuartileMethod.LINEAR has numpy's method name."""
        assert QuartileMethod.LINEAR.value == "linear"

    def test_parse_string(self):
        """Can parse a method from its string value."""
        assert QuartileMethod.parse("nearest") == QuartileMethod.NEAREST

    def test_parse_member(self):
        """Parsing a member returns it unchanged."""
        assert QuartileMethod.parse(QuartileMethod.HAZEN) is QuartileMethod.HAZEN

    def test_parse_invalid(self):
        """Unknown method raises InvalidConfigError."""
        with pytest.raises(InvalidConfigError, match="unknown quartile method"):
            QuartileMethod.parse("exclusive")


class TestScalerConfig:
    """Tests for ScalerConfig dataclass."""

    def test_defaults(self):
        """Default values are set correctly."""
        config = ScalerConfig()
        assert config.center is True
        assert config.scale is True
        assert config.method == QuartileMethod.LINEAR

    def test_method_string_coerced(self):
        """String method is coerced to the enum."""
        config = ScalerConfig(method="midpoint")
        assert config.method == QuartileMethod.MIDPOINT

    def test_invalid_center(self):
        """Non-bool center raises InvalidConfigError."""
        with pytest.raises(InvalidConfigError):
            ScalerConfig(center="yes")

    def test_invalid_scale(self):
        """Non-bool scale raises InvalidConfigError."""
        with pytest.raises(InvalidConfigError):
            ScalerConfig(scale=1)


class TestPickerConfig:
    """Tests for PickerConfig dataclass."""

    def test_default_seed(self):
        """Seed defaults to None."""
        assert PickerConfig().random_seed is None

    def test_custom_seed(self):
        """Can set a seed."""
        assert PickerConfig(random_seed=123).random_seed == 123

    def test_negative_seed(self):
        """Negative seed raises InvalidConfigError."""
        with pytest.raises(InvalidConfigError):
            PickerConfig(random_seed=-1)

    def test_non_int_seed(self):
        """Non-integer seed raises InvalidConfigError."""
        with pytest.raises(InvalidConfigError):
            PickerConfig(random_seed=1.5)

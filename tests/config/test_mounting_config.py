# File: tests/config/test_mounting_config.py
"""Unit tests for mounting configuration."""

import pytest

from src.solar_mounting.config.mounting import (
    CANTILEVER_LIMIT,
    EDGE_CLEARANCE,
    SPAN_LIMIT,
    ConfigurationError,
    JointTolerances,
    MountingConfig,
    StructuralLimits,
)


class TestMountingConfig:
    """Tests for MountingConfig dataclass."""

    def test_default_values(self):
        config = MountingConfig()
        assert config.rafter_spacing == 16
        assert config.first_rafter_x == 0
        assert config.panel_width == 44.7
        assert config.panel_height == 71.1
        assert config.limits.edge_clearance == EDGE_CLEARANCE
        assert config.limits.cantilever_limit == CANTILEVER_LIMIT
        assert config.limits.span_limit == SPAN_LIMIT
        assert config.tolerances.max_gap == 1.0
        assert config.tolerances.corner_proximity == 0.5

    def test_default_is_valid(self):
        assert MountingConfig().validate() == []

    @pytest.mark.parametrize("spacing", [0, -16, "16", None, True])
    def test_invalid_rafter_spacing(self, spacing):
        with pytest.raises(ConfigurationError, match="rafter_spacing"):
            MountingConfig(rafter_spacing=spacing).validate()

    @pytest.mark.parametrize("first_x", ["0", None, False])
    def test_non_numeric_first_rafter(self, first_x):
        with pytest.raises(ConfigurationError, match="first_rafter_x"):
            MountingConfig(first_rafter_x=first_x).validate()

    def test_negative_first_rafter_allowed(self):
        MountingConfig(first_rafter_x=-8.5).validate()

    def test_errors_are_collected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            MountingConfig(rafter_spacing=0, panel_width=-1).validate()
        message = str(exc_info.value)
        assert "rafter_spacing" in message
        assert "panel_width" in message

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)

    def test_invalid_limits(self):
        config = MountingConfig(limits=StructuralLimits(span_limit=0))
        with pytest.raises(ConfigurationError, match="span_limit"):
            config.validate()

    def test_invalid_tolerances(self):
        config = MountingConfig(tolerances=JointTolerances(corner_proximity=-0.5))
        with pytest.raises(ConfigurationError, match="corner_proximity"):
            config.validate()

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rafter_grid(self, value):
        with pytest.raises(ConfigurationError, match="rafter_spacing must be finite"):
            MountingConfig(rafter_spacing=value).validate()
        with pytest.raises(ConfigurationError, match="first_rafter_x must be finite"):
            MountingConfig(first_rafter_x=value).validate()

    def test_non_finite_limits_and_tolerances(self):
        config = MountingConfig(
            panel_width=float("inf"),
            limits=StructuralLimits(span_limit=float("nan")),
            tolerances=JointTolerances(max_gap=float("inf")),
        )
        with pytest.raises(ConfigurationError) as exc_info:
            config.validate()
        message = str(exc_info.value)
        assert "panel_width" in message
        assert "span_limit" in message
        assert "max_gap" in message

    def test_dict_round_trip(self):
        config = MountingConfig(
            rafter_spacing=24,
            first_rafter_x=4,
            limits=StructuralLimits(edge_clearance=3),
        )
        restored = MountingConfig.from_dict(config.to_dict())
        assert restored == config

    def test_from_dict_defaults(self):
        config = MountingConfig.from_dict({"rafter_spacing": 12})
        assert config.rafter_spacing == 12
        assert config.first_rafter_x == 0
        assert config.limits == StructuralLimits()

    def test_for_24_oc(self):
        assert MountingConfig.for_24_oc().rafter_spacing == 24

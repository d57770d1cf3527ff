"""Tests for FleetConfig and policy validation."""

import pytest

from gasfleet.config import (
    AllocationPolicy,
    FitScorePolicy,
    FleetConfig,
    SchedulingPolicy,
    WeightDefaults,
)
from gasfleet.exceptions import ConfigurationError


class TestDefaults:
    """Tests for default policy values."""

    def test_default_config(self):
        """Test defaults match the standard operating values."""
        config = FleetConfig()
        assert config.weights.full_cylinder_kg == 27.0
        assert config.weights.empty_cylinder_kg == 14.0
        assert config.weights.tare_kg == 10.0
        assert config.fit_score.target_utilization_pct == 75
        assert config.fit_score.penalty_threshold_pct == 85
        assert config.loading.high_utilization_warning_pct == 90
        assert config.allocation.many_orders_warning_count == 15
        assert config.scheduling.km_per_stop == 25
        assert config.scheduling.usable_tank_fraction == 0.8


class TestPolicyValidation:
    """Tests for __post_init__ checks."""

    def test_negative_weight(self):
        """Test default weights cannot be negative."""
        with pytest.raises(ValueError, match="full_cylinder_kg"):
            WeightDefaults(full_cylinder_kg=-1)

    def test_threshold_below_target(self):
        """Test the penalty threshold may not sit below the target."""
        with pytest.raises(ValueError, match="penalty_threshold_pct"):
            FitScorePolicy(target_utilization_pct=80, penalty_threshold_pct=70)

    def test_target_out_of_range(self):
        """Test the target must be a percentage."""
        with pytest.raises(ValueError):
            FitScorePolicy(target_utilization_pct=0)

    def test_average_cylinder_weight(self):
        """Test the average cylinder weight must be positive."""
        with pytest.raises(ValueError):
            AllocationPolicy(average_cylinder_weight_kg=0)

    def test_tank_fraction(self):
        """Test the usable tank fraction is within (0, 1]."""
        with pytest.raises(ValueError):
            SchedulingPolicy(usable_tank_fraction=1.5)


class TestFromDict:
    """Tests for FleetConfig.from_dict."""

    def test_partial_override(self):
        """Test absent sections and keys keep their defaults."""
        config = FleetConfig.from_dict({
            "fit_score": {"target_utilization_pct": 70},
            "weights": {"full_cylinder_kg": 28.0},
        })

        assert config.fit_score.target_utilization_pct == 70
        assert config.fit_score.penalty_threshold_pct == 85
        assert config.weights.full_cylinder_kg == 28.0
        assert config.weights.empty_cylinder_kg == 14.0
        assert config.scheduling == SchedulingPolicy()

    def test_empty_mapping(self):
        """Test an empty mapping gives the default config."""
        assert FleetConfig.from_dict({}) == FleetConfig()

    def test_unknown_section(self):
        """Test unknown sections are rejected with the known ones listed."""
        with pytest.raises(ConfigurationError) as exc_info:
            FleetConfig.from_dict({"routing": {}})
        assert "routing" in exc_info.value.message
        assert "fit_score" in exc_info.value.context["known_sections"]

    def test_unknown_key(self):
        """Test unknown keys are rejected."""
        with pytest.raises(ConfigurationError, match="target_utilisation"):
            FleetConfig.from_dict({"fit_score": {"target_utilisation": 70}})

    def test_invalid_value(self):
        """Test policy validation errors surface as ConfigurationError."""
        with pytest.raises(ConfigurationError, match="scheduling"):
            FleetConfig.from_dict({"scheduling": {"usable_tank_fraction": 0}})

    def test_section_must_be_mapping(self):
        """Test a scalar section value is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            FleetConfig.from_dict({"fit_score": 5})
        assert exc_info.value.context == {"received": "int"}

    def test_recommendation_and_route_sections(self):
        """Test recommendation bands and the route model can be overridden."""
        config = FleetConfig.from_dict({
            "recommendations": {"excellent_score": 90},
            "route": {"extra_stop_km": 10},
        })
        assert config.recommendations.excellent_score == 90
        assert config.recommendations.good_score == 60
        assert config.route.extra_stop_km == 10
        assert config.route.first_stop_km == 20

    def test_error_message_includes_context(self):
        """Test the formatted message lists the context."""
        with pytest.raises(ConfigurationError) as exc_info:
            FleetConfig.from_dict({"nope": {}})
        assert "Context:" in str(exc_info.value)
        assert "known_sections" in str(exc_info.value)

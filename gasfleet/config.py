"""Overridable policy for capacity allocation.

Each policy is a plain dataclass validated in ``__post_init__``. Defaults come
from ``gasfleet.constants`` so the numbers have one home.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping

from gasfleet import constants
from gasfleet.exceptions import ConfigurationError


@dataclass(frozen=True)
class WeightDefaults:
    """Fallback weights used when product or inventory data is missing.

    Attributes:
        full_cylinder_kg: Weight per full cylinder with no better information
        empty_cylinder_kg: Weight per empty cylinder with no better information
        tare_kg: Tare assumed for a product with capacity but no tare weight
    """
    full_cylinder_kg: float = constants.DEFAULT_FULL_CYLINDER_WEIGHT_KG
    empty_cylinder_kg: float = constants.DEFAULT_EMPTY_CYLINDER_WEIGHT_KG
    tare_kg: float = constants.DEFAULT_TARE_WEIGHT_KG

    def __post_init__(self):
        for name in ("full_cylinder_kg", "empty_cylinder_kg", "tare_kg"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")


@dataclass(frozen=True)
class FitScorePolicy:
    """Parameters of the truck fit-score heuristic.

    Attributes:
        target_utilization_pct: Utilization after loading that scores highest
        penalty_threshold_pct: Above this utilization the flat penalty applies
        penalty_score: Score for trucks pushed above the threshold
        max_score: Score at exactly the target utilization
        routing_bonus_cap: Bonus for an empty truck, reduced by one per order
    """
    target_utilization_pct: float = constants.TARGET_UTILIZATION_PCT
    penalty_threshold_pct: float = constants.PENALTY_THRESHOLD_PCT
    penalty_score: float = constants.PENALTY_SCORE
    max_score: float = constants.MAX_FIT_SCORE
    routing_bonus_cap: int = constants.ROUTING_BONUS_CAP

    def __post_init__(self):
        if not 0 < self.target_utilization_pct <= 100:
            raise ValueError(
                f"target_utilization_pct ({self.target_utilization_pct}) must be in (0, 100]"
            )
        if self.penalty_threshold_pct < self.target_utilization_pct:
            raise ValueError(
                f"penalty_threshold_pct ({self.penalty_threshold_pct}) must not be "
                f"below target_utilization_pct ({self.target_utilization_pct})"
            )
        if self.penalty_score <= 0:
            raise ValueError("penalty_score must be positive")
        if self.routing_bonus_cap < 0:
            raise ValueError("routing_bonus_cap must be non-negative")


@dataclass(frozen=True)
class LoadingPolicy:
    """Thresholds for the loading validator."""
    high_utilization_warning_pct: float = constants.HIGH_UTILIZATION_WARNING_PCT


@dataclass(frozen=True)
class AllocationPolicy:
    """Thresholds for validating a single planned allocation."""
    high_utilization_warning_pct: float = constants.HIGH_UTILIZATION_WARNING_PCT
    many_orders_warning_count: int = constants.MANY_ORDERS_WARNING_COUNT
    average_cylinder_weight_kg: float = constants.AVERAGE_CYLINDER_WEIGHT_KG

    def __post_init__(self):
        if self.average_cylinder_weight_kg <= 0:
            raise ValueError("average_cylinder_weight_kg must be positive")


@dataclass(frozen=True)
class SchedulingPolicy:
    """Rough distance and fuel model for the daily schedule.

    Attributes:
        km_per_stop: Distance driven per delivery stop
        default_consumption_l_per_100km: Used when a truck has no recorded consumption
        usable_tank_fraction: Share of the tank a day's deliveries may use
    """
    km_per_stop: float = constants.KM_PER_DELIVERY_STOP
    default_consumption_l_per_100km: float = constants.DEFAULT_FUEL_CONSUMPTION_L_PER_100KM
    usable_tank_fraction: float = constants.USABLE_TANK_FRACTION

    def __post_init__(self):
        if not 0 < self.usable_tank_fraction <= 1:
            raise ValueError(
                f"usable_tank_fraction ({self.usable_tank_fraction}) must be in (0, 1]"
            )
        if self.km_per_stop < 0:
            raise ValueError("km_per_stop must be non-negative")


@dataclass(frozen=True)
class RecommendationPolicy:
    """Score bands and thresholds for dispatcher recommendations."""
    excellent_score: float = constants.EXCELLENT_FIT_SCORE
    good_score: float = constants.GOOD_FIT_SCORE
    acceptable_score: float = constants.ACCEPTABLE_FIT_SCORE
    high_utilization_pct: float = constants.HIGH_UTILIZATION_WARNING_PCT
    many_stops_count: int = constants.MANY_STOPS_COUNT

    def __post_init__(self):
        if not self.excellent_score >= self.good_score >= self.acceptable_score:
            raise ValueError("score bands must satisfy excellent >= good >= acceptable")


@dataclass(frozen=True)
class RoutePolicy:
    """Rough route model used by the route efficiency estimate.

    Attributes:
        first_stop_km: Distance to the first stop
        extra_stop_km: Distance added by each further stop
        first_stop_minutes: Time for the first stop
        extra_stop_minutes: Time added by each further stop
        medium_efficiency_stops: More stops than this is medium efficiency
        low_efficiency_stops: More stops than this is low efficiency
    """
    first_stop_km: float = constants.FIRST_STOP_KM
    extra_stop_km: float = constants.EXTRA_STOP_KM
    first_stop_minutes: float = constants.FIRST_STOP_MINUTES
    extra_stop_minutes: float = constants.EXTRA_STOP_MINUTES
    medium_efficiency_stops: int = constants.MEDIUM_EFFICIENCY_STOPS
    low_efficiency_stops: int = constants.LOW_EFFICIENCY_STOPS

    def __post_init__(self):
        if self.low_efficiency_stops < self.medium_efficiency_stops:
            raise ValueError(
                f"low_efficiency_stops ({self.low_efficiency_stops}) must not be "
                f"below medium_efficiency_stops ({self.medium_efficiency_stops})"
            )


@dataclass(frozen=True)
class FleetConfig:
    """Complete configuration for the capacity core."""
    weights: WeightDefaults = field(default_factory=WeightDefaults)
    fit_score: FitScorePolicy = field(default_factory=FitScorePolicy)
    loading: LoadingPolicy = field(default_factory=LoadingPolicy)
    allocation: AllocationPolicy = field(default_factory=AllocationPolicy)
    scheduling: SchedulingPolicy = field(default_factory=SchedulingPolicy)
    recommendations: RecommendationPolicy = field(default_factory=RecommendationPolicy)
    route: RoutePolicy = field(default_factory=RoutePolicy)

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, Any]]) -> "FleetConfig":
        """Build a config from a nested mapping.

        Sections and keys that are absent keep their defaults.

        Args:
            data: e.g. ``{"fit_score": {"target_utilization_pct": 70}}``

        Returns:
            FleetConfig

        Raises:
            ConfigurationError: On unknown sections or keys, or values the
                policies reject
        """
        sections: Dict[str, Any] = {}
        section_types = {f.name: f.default_factory for f in fields(cls)}

        for section, values in data.items():
            if section not in section_types:
                raise ConfigurationError(
                    f"Unknown configuration section '{section}'",
                    {"known_sections": sorted(section_types)},
                )
            if not isinstance(values, Mapping):
                raise ConfigurationError(
                    f"Section '{section}' must be a mapping of keys to values",
                    {"received": type(values).__name__},
                )
            policy_type = section_types[section]
            known_keys = {f.name for f in fields(policy_type)}
            unknown = set(values) - known_keys
            if unknown:
                raise ConfigurationError(
                    f"Unknown keys in section '{section}': {sorted(unknown)}",
                    {"known_keys": sorted(known_keys)},
                )
            try:
                sections[section] = policy_type(**values)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"Invalid values in section '{section}': {e}"
                ) from e

        return cls(**sections)

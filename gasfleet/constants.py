"""Centralized constants for fleet capacity calculations.

All default cylinder weights used across the weight estimator, capacity
calculator and loading validator live here. Overridable copies are carried by
``gasfleet.config.WeightDefaults``; nothing else should hardcode these numbers.
"""

from types import MappingProxyType


# ============================================================================
# CYLINDER WEIGHT DEFAULTS (kg)
# ============================================================================

#: Weight of a full cylinder when nothing else is known (13 kg class: 13 gas + 14 tare)
DEFAULT_FULL_CYLINDER_WEIGHT_KG = 27.0

#: Weight of an empty cylinder when nothing else is known (13 kg class tare)
DEFAULT_EMPTY_CYLINDER_WEIGHT_KG = 14.0

#: Tare weight assumed for a product with known capacity but no recorded tare
DEFAULT_TARE_WEIGHT_KG = 10.0

#: Average per-cylinder weight used to turn an order weight into a slot estimate
AVERAGE_CYLINDER_WEIGHT_KG = 20.0


# ============================================================================
# STANDARD CYLINDER WEIGHT CLASSES
# ============================================================================

#: Nominal capacity (kg) -> (full weight, empty weight, net content weight)
STANDARD_CYLINDER_WEIGHTS = MappingProxyType({
    6.0: (16.0, 10.0, 6.0),
    13.0: (27.0, 14.0, 13.0),
    48.0: (98.0, 50.0, 48.0),
    90.0: (180.0, 90.0, 90.0),
})


# ============================================================================
# FIT SCORE POLICY DEFAULTS
# ============================================================================

#: Utilization (%) at which a truck scores highest for a new order
TARGET_UTILIZATION_PCT = 75.0

#: Utilization (%) above which the flat penalty score applies
PENALTY_THRESHOLD_PCT = 85.0

#: Score given to any truck pushed above the penalty threshold
PENALTY_SCORE = 20.0

#: Score at exactly the target utilization
MAX_FIT_SCORE = 100.0

#: Routing simplicity bonus for an empty truck (minus one per existing order)
ROUTING_BONUS_CAP = 10


# ============================================================================
# WARNING THRESHOLDS
# ============================================================================

#: Utilization (%) above which loading or allocating raises an advisory warning
HIGH_UTILIZATION_WARNING_PCT = 90.0

#: Existing orders on a truck at which allocation raises an advisory warning
MANY_ORDERS_WARNING_COUNT = 15


# ============================================================================
# FUEL ESTIMATION
# ============================================================================

#: Average road distance per delivery stop (km)
KM_PER_DELIVERY_STOP = 25.0

#: Consumption assumed when a truck has none recorded (L/100 km)
DEFAULT_FUEL_CONSUMPTION_L_PER_100KM = 12.0

#: Fraction of the tank a day's deliveries may use
USABLE_TANK_FRACTION = 0.8


# ============================================================================
# DISPATCHER RECOMMENDATIONS
# ============================================================================

#: Fit score at or above which an allocation is rated excellent
EXCELLENT_FIT_SCORE = 80.0

#: Fit score at or above which an allocation is rated good
GOOD_FIT_SCORE = 60.0

#: Fit score at or above which an allocation is rated acceptable
ACCEPTABLE_FIT_SCORE = 40.0

#: Existing stops on a truck at which route optimization is suggested
MANY_STOPS_COUNT = 6


# ============================================================================
# ROUTE ESTIMATION
# ============================================================================

#: Distance to the first stop (km)
FIRST_STOP_KM = 20.0

#: Distance added by each further stop (km)
EXTRA_STOP_KM = 15.0

#: Driving and service time for the first stop (minutes)
FIRST_STOP_MINUTES = 60.0

#: Time added by each further stop (minutes)
EXTRA_STOP_MINUTES = 30.0

#: Routes with more stops than this are medium efficiency
MEDIUM_EFFICIENCY_STOPS = 5

#: Routes with more stops than this are low efficiency
LOW_EFFICIENCY_STOPS = 8

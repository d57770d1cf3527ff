"""Fleet capacity allocation for gas-cylinder distribution.

Pure, synchronous functions that estimate order weights, compute truck
capacity, validate loads and plan orders onto trucks for a delivery date.
"""

import logging

from gasfleet.config import FleetConfig
from gasfleet.api import (
    estimate_order_weight,
    compute_truck_capacity,
    validate_loading,
    validate_allocation,
    select_best_truck,
    optimize_allocations,
    plan_from_snapshot,
    build_daily_schedule,
    compute_fleet_utilization,
)

__version__ = "0.1.0"


def configure_logging(level: int = logging.INFO) -> None:
    """Send gasfleet log records to stderr, for scripts and notebooks."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


__all__ = [
    "FleetConfig",
    "configure_logging",
    "estimate_order_weight",
    "compute_truck_capacity",
    "validate_loading",
    "validate_allocation",
    "select_best_truck",
    "optimize_allocations",
    "plan_from_snapshot",
    "build_daily_schedule",
    "compute_fleet_utilization",
]

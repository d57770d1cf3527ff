"""Distribution planning module.

This module estimates order weights, computes truck capacity and assigns
orders to trucks for a delivery date.

Key components:
- WeightEstimator: Converts order lines into estimated cylinder weight
- calculate_truck_capacity: Capacity snapshot of a truck for a date
- TruckSelector: Ranks trucks for one order by fit score
- AllocationOptimizer: First-fit-decreasing batch allocation
- FleetScheduler: Daily per-truck schedules and fleet rollup
"""

from .weight_estimator import WeightEstimator, WeightEstimate, OrderWeightEstimate, default_item_weight
from .capacity_calculator import calculate_truck_capacity, inventory_weight_kg, inventory_cylinder_count
from .truck_selector import TruckSelector, TruckSelection, TruckRecommendation, recommendations
from .fleet_scheduler import FleetScheduler, RouteEfficiency, estimate_route_efficiency
from .allocation_optimizer import (
    AllocationOptimizer,
    AllocationProposal,
    OptimizationResult,
    OptimizationSummary,
)

__all__ = [
    "WeightEstimator",
    "WeightEstimate",
    "OrderWeightEstimate",
    "default_item_weight",
    "calculate_truck_capacity",
    "inventory_weight_kg",
    "inventory_cylinder_count",
    "TruckSelector",
    "TruckSelection",
    "TruckRecommendation",
    "recommendations",
    "FleetScheduler",
    "RouteEfficiency",
    "estimate_route_efficiency",
    "AllocationOptimizer",
    "AllocationProposal",
    "OptimizationResult",
    "OptimizationSummary",
]

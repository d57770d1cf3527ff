"""Operations exposed to the request-handling layer.

Thin functions over the distribution and validation components. Each takes an
optional FleetConfig; all are pure and return results inline.
"""

from datetime import date as Date
from typing import Iterable, List, Mapping, Optional

from gasfleet.config import FleetConfig
from gasfleet.distribution.allocation_optimizer import AllocationOptimizer, OptimizationResult
from gasfleet.distribution.capacity_calculator import calculate_truck_capacity
from gasfleet.distribution.fleet_scheduler import FleetScheduler
from gasfleet.distribution.truck_selector import TruckSelection, TruckSelector
from gasfleet.distribution.weight_estimator import OrderWeightEstimate, WeightEstimator
from gasfleet.models import (
    Allocation,
    CapacityInfo,
    CylinderWeightTable,
    DailySchedule,
    FleetSnapshot,
    FleetUtilizationSummary,
    LoadingItem,
    Order,
    OrderLine,
    Product,
    Truck,
)
from gasfleet.validation.allocation_validator import AllocationValidationResult
from gasfleet.validation.allocation_validator import validate_allocation as _validate_allocation
from gasfleet.validation.loading_validator import LoadingValidationResult, LoadingValidator


def _config(config: Optional[FleetConfig]) -> FleetConfig:
    return config or FleetConfig()


def _optimizer(config: FleetConfig) -> AllocationOptimizer:
    return AllocationOptimizer(
        selector=TruckSelector(config.fit_score, config.weights),
        scheduler=FleetScheduler(config.scheduling, config.weights),
    )


def estimate_order_weight(
    order_lines: Iterable[OrderLine],
    products: Iterable[Product],
    weight_table: Optional[CylinderWeightTable] = None,
    config: Optional[FleetConfig] = None,
) -> OrderWeightEstimate:
    """Estimated total weight and per-line breakdown of an order."""
    estimator = WeightEstimator(weight_table, _config(config).weights)
    return estimator.estimate_order_weight(order_lines, products)


def compute_truck_capacity(
    truck: Truck,
    allocations: Iterable[Allocation],
    target_date: Date,
    config: Optional[FleetConfig] = None,
) -> CapacityInfo:
    """Capacity snapshot of a truck for a date."""
    return calculate_truck_capacity(truck, allocations, target_date, _config(config).weights)


def validate_loading(
    truck: Truck,
    items: Iterable[LoadingItem],
    loading_date: Optional[Date] = None,
    config: Optional[FleetConfig] = None,
) -> LoadingValidationResult:
    """Authoritative check of a proposed load against both capacity limits."""
    config = _config(config)
    return LoadingValidator(config.loading, config.weights).validate(truck, items, loading_date)


def validate_allocation(
    truck: Truck,
    order_weight: float,
    allocations: Iterable[Allocation],
    target_date: Date,
    force: bool = False,
    config: Optional[FleetConfig] = None,
) -> AllocationValidationResult:
    """Advisory check of a single planned allocation."""
    config = _config(config)
    return _validate_allocation(
        truck, order_weight, allocations, target_date,
        force=force, policy=config.allocation, defaults=config.weights,
    )


def select_best_truck(
    order: Order,
    order_weight: float,
    trucks: Iterable[Truck],
    allocations: Iterable[Allocation],
    target_date: Date,
    config: Optional[FleetConfig] = None,
) -> TruckSelection:
    """Ranked trucks for one order plus the best one that fits."""
    config = _config(config)
    selector = TruckSelector(config.fit_score, config.weights)
    return selector.select(order, order_weight, trucks, allocations, target_date)


def optimize_allocations(
    orders: Iterable[Order],
    order_weights: Mapping[str, float],
    trucks: Iterable[Truck],
    target_date: Date,
    config: Optional[FleetConfig] = None,
) -> OptimizationResult:
    """Advisory batch allocation of orders to trucks."""
    return _optimizer(_config(config)).optimize(orders, order_weights, trucks, target_date)


def plan_from_snapshot(
    snapshot: FleetSnapshot,
    orders: Iterable[Order],
    order_weights: Mapping[str, float],
    target_date: Date,
    config: Optional[FleetConfig] = None,
) -> OptimizationResult:
    """
    Run the optimizer against the trucks of a fleet snapshot.

    Allocations already in the snapshot count against capacity. The caller
    should commit the planned allocations only if the stored state is still at
    ``snapshot.version``, and re-plan otherwise.
    """
    return _optimizer(_config(config)).optimize(
        orders, order_weights, snapshot.trucks, target_date,
        existing_allocations=snapshot.allocations,
    )


def build_daily_schedule(
    trucks: Iterable[Truck],
    allocations: Iterable[Allocation],
    target_date: Date,
    config: Optional[FleetConfig] = None,
) -> List[DailySchedule]:
    """One schedule per truck for a date."""
    config = _config(config)
    return FleetScheduler(config.scheduling, config.weights).build_daily_schedule(
        trucks, allocations, target_date
    )


def compute_fleet_utilization(
    schedules: Iterable[DailySchedule],
    config: Optional[FleetConfig] = None,
) -> FleetUtilizationSummary:
    """Fleet-wide rollup over available trucks."""
    config = _config(config)
    return FleetScheduler(config.scheduling, config.weights).compute_fleet_utilization(schedules)

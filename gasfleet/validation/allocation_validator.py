"""Validation of a single planned allocation before it is saved.

Advisory planning check, weaker than the loading gate: the cylinder count is
estimated from weight because an order's exact cylinder mix is not known yet.
"""

from dataclasses import dataclass, field
from datetime import date as Date
from typing import Iterable, List, Optional
import math

from gasfleet.config import AllocationPolicy, WeightDefaults
from gasfleet.distribution.capacity_calculator import calculate_truck_capacity, inventory_cylinder_count
from gasfleet.models.allocation import Allocation
from gasfleet.models.capacity import CapacityInfo
from gasfleet.models.truck import Truck
from gasfleet.validation.loading_validator import truck_status_errors


@dataclass
class AllocationValidationResult:
    """Verdict on a planned allocation."""
    capacity_info: CapacityInfo
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0


def validate_allocation(
    truck: Truck,
    order_weight: float,
    allocations: Iterable[Allocation],
    target_date: Date,
    force: bool = False,
    policy: Optional[AllocationPolicy] = None,
    defaults: Optional[WeightDefaults] = None,
) -> AllocationValidationResult:
    """
    Check whether an order of a given weight may be allocated to a truck.

    Args:
        truck: Truck to allocate to
        order_weight: Estimated order weight in kg
        allocations: Existing allocations
        target_date: Allocation date
        force: Downgrade the weight check to a warning (dispatcher override)
        policy: Warning thresholds (standard policy if None)
        defaults: Fallback weights for on-board inventory

    Returns:
        AllocationValidationResult
    """
    policy = policy or AllocationPolicy()
    errors: List[str] = truck_status_errors(truck)
    warnings: List[str] = []

    capacity_info = calculate_truck_capacity(truck, allocations, target_date, defaults)

    if order_weight > capacity_info.available_weight_kg:
        message = (
            f"Order weight ({order_weight:.1f}kg) exceeds available weight capacity "
            f"({capacity_info.available_weight_kg:.1f}kg)"
        )
        if force:
            warnings.append(message)
        else:
            errors.append(message)

    estimated_cylinders = math.ceil(order_weight / policy.average_cylinder_weight_kg)
    free_slots = truck.capacity_cylinders - inventory_cylinder_count(truck)
    if estimated_cylinders > free_slots:
        errors.append(
            f"Order requires approximately {estimated_cylinders} cylinders "
            f"but only {max(0, free_slots)} slots available"
        )

    if capacity_info.is_overallocated:
        warnings.append("Truck is already overallocated")

    utilization_after = capacity_info.utilization_after(order_weight)
    if utilization_after > policy.high_utilization_warning_pct:
        warnings.append(f"High utilization after allocation: {utilization_after:.1f}%")

    if capacity_info.orders_count >= policy.many_orders_warning_count:
        warnings.append(
            f"Many orders already allocated ({capacity_info.orders_count}), "
            f"may affect delivery efficiency"
        )

    if truck.is_maintenance_due(target_date):
        warnings.append("Truck maintenance is due around this date")

    return AllocationValidationResult(
        capacity_info=capacity_info,
        errors=errors,
        warnings=warnings,
    )

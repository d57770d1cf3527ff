"""Capacity snapshot of a truck for a date.

The allocated weight is the larger of what is planned (non-cancelled
allocations) and what is physically on board, so a truck is never reported
with more free capacity than it really has.
"""

from datetime import date as Date
from typing import Iterable, List, Optional

from gasfleet.config import WeightDefaults
from gasfleet.distribution.weight_estimator import default_item_weight
from gasfleet.models.allocation import Allocation
from gasfleet.models.capacity import CapacityInfo
from gasfleet.models.truck import Truck


def inventory_weight_kg(truck: Truck, defaults: Optional[WeightDefaults] = None) -> float:
    """Weight of the cylinders currently on board a truck."""
    return sum(
        default_item_weight(item.qty_full, item.qty_empty, item.weight_kg, defaults)
        for item in truck.inventory
    )


def inventory_cylinder_count(truck: Truck) -> int:
    """Cylinder slots currently taken on a truck."""
    return sum(item.cylinder_count for item in truck.inventory)


def allocations_for(
    truck_id: str,
    allocations: Iterable[Allocation],
    target_date: Date,
) -> List[Allocation]:
    """Non-cancelled allocations of one truck on one date."""
    return [
        a for a in allocations
        if a.truck_id == truck_id and a.allocation_date == target_date and a.is_active()
    ]


def calculate_truck_capacity(
    truck: Truck,
    allocations: Iterable[Allocation],
    target_date: Date,
    defaults: Optional[WeightDefaults] = None,
) -> CapacityInfo:
    """
    Calculate capacity usage of a truck on a date.

    Pure function of its inputs. A truck without weight capacity reports 0%
    utilization rather than dividing by zero.

    Args:
        truck: Truck with its on-board inventory
        allocations: Allocations for any trucks and dates
        target_date: Date to evaluate

    Returns:
        CapacityInfo for the truck and date
    """
    date_allocations = allocations_for(truck.id, allocations, target_date)

    allocation_weight = sum(a.estimated_weight_kg for a in date_allocations)
    on_board_weight = inventory_weight_kg(truck, defaults)
    allocated_weight = max(allocation_weight, on_board_weight)

    total_capacity = truck.capacity_kg or 0.0
    available_weight = max(0.0, total_capacity - allocated_weight)
    utilization = (allocated_weight / total_capacity) * 100 if total_capacity > 0 else 0.0

    return CapacityInfo(
        truck_id=truck.id,
        total_capacity_kg=total_capacity,
        allocated_weight_kg=allocated_weight,
        available_weight_kg=available_weight,
        utilization_percentage=utilization,
        orders_count=len(date_allocations),
        is_overallocated=allocated_weight > total_capacity,
        allocation_weight_kg=allocation_weight,
        inventory_weight_kg=on_board_weight,
    )

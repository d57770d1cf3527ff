"""Derived capacity snapshot for a truck on one date.

CapacityInfo is recomputed on every query and never stored.
"""

from dataclasses import dataclass


@dataclass
class CapacityInfo:
    """
    Capacity usage of a truck on one date.

    Attributes:
        truck_id: Truck the snapshot describes
        total_capacity_kg: Truck weight capacity (0 if not recorded)
        allocated_weight_kg: max(allocation_weight_kg, inventory_weight_kg)
        available_weight_kg: max(0, total_capacity_kg - allocated_weight_kg)
        utilization_percentage: allocated / total × 100 (0 without capacity)
        orders_count: Non-cancelled allocations on the date
        is_overallocated: allocated_weight_kg > total_capacity_kg
        allocation_weight_kg: Sum of non-cancelled planned allocation weights
        inventory_weight_kg: Weight of cylinders physically on board
    """
    truck_id: str
    total_capacity_kg: float
    allocated_weight_kg: float
    available_weight_kg: float
    utilization_percentage: float
    orders_count: int
    is_overallocated: bool
    allocation_weight_kg: float = 0.0
    inventory_weight_kg: float = 0.0

    def utilization_after(self, additional_weight_kg: float) -> float:
        """Utilization (%) if additional weight were allocated, 0 without capacity."""
        if self.total_capacity_kg <= 0:
            return 0.0
        return (self.allocated_weight_kg + additional_weight_kg) / self.total_capacity_kg * 100

    def __str__(self) -> str:
        """String representation."""
        flag = " OVERALLOCATED" if self.is_overallocated else ""
        return (
            f"{self.truck_id}: {self.allocated_weight_kg:.0f}kg / {self.total_capacity_kg:.0f}kg "
            f"({self.utilization_percentage:.1f}%), {self.orders_count} orders{flag}"
        )

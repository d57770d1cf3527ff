"""Daily schedule and fleet utilization aggregates."""

from dataclasses import dataclass, field
from datetime import date as Date
from typing import List

from gasfleet.models.allocation import Allocation
from gasfleet.models.capacity import CapacityInfo
from gasfleet.models.truck import Truck


@dataclass
class DailySchedule:
    """
    One truck's plan for one date.

    Attributes:
        date: Schedule date
        truck_id: Truck ID
        truck: The truck itself
        capacity_info: Capacity snapshot for the truck and date
        allocations: Allocations for this truck on the date
        maintenance_due: Whether maintenance falls due on or before the date
        fuel_sufficient: Whether the usable tank covers the estimated distance
        estimated_distance_km: Rough distance from the number of stops
        fuel_needed_liters: Fuel for the estimated distance
    """
    date: Date
    truck_id: str
    truck: Truck
    capacity_info: CapacityInfo
    allocations: List[Allocation] = field(default_factory=list)
    maintenance_due: bool = False
    fuel_sufficient: bool = True
    estimated_distance_km: float = 0.0
    fuel_needed_liters: float = 0.0

    def __str__(self) -> str:
        """String representation."""
        flags = []
        if self.maintenance_due:
            flags.append("maintenance due")
        if not self.fuel_sufficient:
            flags.append("fuel short")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        return f"{self.date} {self.capacity_info}{suffix}"


@dataclass
class FleetUtilizationSummary:
    """
    Fleet-wide rollup over available trucks.

    Attributes:
        total_capacity_kg: Summed weight capacity
        total_allocated_kg: Summed allocated weight
        overall_utilization: total_allocated / total_capacity × 100
        average_utilization: Mean of per-truck utilization percentages
        active_trucks: Trucks included in the rollup
        overallocated_trucks: Included trucks whose allocation exceeds capacity
        maintenance_due_trucks: Included trucks with maintenance due
        idle_trucks: Included trucks with no orders
    """
    total_capacity_kg: float = 0.0
    total_allocated_kg: float = 0.0
    overall_utilization: float = 0.0
    average_utilization: float = 0.0
    active_trucks: int = 0
    overallocated_trucks: int = 0
    maintenance_due_trucks: int = 0
    idle_trucks: int = 0

    def __str__(self) -> str:
        """String representation."""
        return (
            f"Fleet: {self.active_trucks} trucks, {self.total_allocated_kg:.0f}/"
            f"{self.total_capacity_kg:.0f}kg ({self.overall_utilization:.1f}%), "
            f"{self.overallocated_trucks} overallocated, "
            f"{self.maintenance_due_trucks} maintenance due"
        )

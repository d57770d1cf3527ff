"""Daily per-truck schedules and fleet-wide utilization."""

from dataclasses import dataclass
from datetime import date as Date
from typing import Iterable, List, Optional
import logging

from gasfleet.config import RoutePolicy, SchedulingPolicy, WeightDefaults
from gasfleet.distribution.capacity_calculator import allocations_for, calculate_truck_capacity
from gasfleet.models.allocation import Allocation
from gasfleet.models.schedule import DailySchedule, FleetUtilizationSummary
from gasfleet.models.truck import Truck

logger = logging.getLogger(__name__)


@dataclass
class RouteEfficiency:
    """Rough route estimate from the number of stops."""
    total_stops: int
    estimated_distance_km: float
    estimated_duration_minutes: float
    efficiency: str  # 'high', 'medium', 'low'


class FleetScheduler:
    """
    Builds daily schedules for the fleet and rolls them up.

    Example:
        scheduler = FleetScheduler()
        schedules = scheduler.build_daily_schedule(trucks, allocations, date(2025, 7, 1))
        summary = scheduler.compute_fleet_utilization(schedules)
        print(summary)
    """

    def __init__(
        self,
        policy: Optional[SchedulingPolicy] = None,
        defaults: Optional[WeightDefaults] = None,
    ):
        """
        Initialize scheduler.

        Args:
            policy: Distance and fuel model (standard policy if None)
            defaults: Fallback weights for on-board inventory
        """
        self.policy = policy or SchedulingPolicy()
        self.defaults = defaults or WeightDefaults()

    def build_daily_schedule(
        self,
        trucks: Iterable[Truck],
        allocations: Iterable[Allocation],
        target_date: Date,
    ) -> List[DailySchedule]:
        """
        Build one schedule per truck for a date.

        Args:
            trucks: Trucks to schedule, in roster order
            allocations: Allocations for all trucks
            target_date: Schedule date

        Returns:
            List of DailySchedule, one per truck
        """
        allocations = list(allocations)
        schedules = []

        for truck in trucks:
            truck_allocations = allocations_for(truck.id, allocations, target_date)
            capacity_info = calculate_truck_capacity(truck, allocations, target_date, self.defaults)

            distance_km = len(truck_allocations) * self.policy.km_per_stop
            fuel_needed = self.fuel_needed(truck, distance_km)

            schedules.append(DailySchedule(
                date=target_date,
                truck_id=truck.id,
                truck=truck,
                capacity_info=capacity_info,
                allocations=truck_allocations,
                maintenance_due=truck.is_maintenance_due(target_date),
                fuel_sufficient=self.is_fuel_sufficient(truck, fuel_needed),
                estimated_distance_km=distance_km,
                fuel_needed_liters=fuel_needed,
            ))

            if capacity_info.is_overallocated:
                logger.warning(
                    f"Truck {truck.id} is overallocated on {target_date}: "
                    f"{capacity_info.allocated_weight_kg:.1f}kg of {capacity_info.total_capacity_kg:.1f}kg"
                )

        logger.info(f"Built {len(schedules)} truck schedules for {target_date}")
        return schedules

    def fuel_needed(self, truck: Truck, distance_km: float) -> float:
        """Liters needed to drive a distance at the truck's consumption."""
        consumption = truck.avg_fuel_consumption or self.policy.default_consumption_l_per_100km
        return distance_km / 100 * consumption

    def is_fuel_sufficient(self, truck: Truck, fuel_needed: float) -> bool:
        """A truck with no recorded tank size is assumed to have enough fuel."""
        if not truck.fuel_capacity_liters:
            return True
        return fuel_needed <= truck.fuel_capacity_liters * self.policy.usable_tank_fraction

    def compute_fleet_utilization(self, schedules: Iterable[DailySchedule]) -> FleetUtilizationSummary:
        """
        Roll up schedules of available (active, non-maintenance) trucks.

        Args:
            schedules: Daily schedules, typically from build_daily_schedule

        Returns:
            FleetUtilizationSummary (all zeros for an empty fleet)
        """
        available = [s for s in schedules if s.truck.is_available()]
        if not available:
            return FleetUtilizationSummary()

        total_capacity = sum(s.capacity_info.total_capacity_kg for s in available)
        total_allocated = sum(s.capacity_info.allocated_weight_kg for s in available)

        return FleetUtilizationSummary(
            total_capacity_kg=total_capacity,
            total_allocated_kg=total_allocated,
            overall_utilization=(total_allocated / total_capacity) * 100 if total_capacity > 0 else 0.0,
            average_utilization=sum(s.capacity_info.utilization_percentage for s in available) / len(available),
            active_trucks=len(available),
            overallocated_trucks=sum(1 for s in available if s.capacity_info.is_overallocated),
            maintenance_due_trucks=sum(1 for s in available if s.maintenance_due),
            idle_trucks=sum(1 for s in available if s.capacity_info.orders_count == 0),
        )


def estimate_route_efficiency(
    allocations: List[Allocation],
    policy: Optional[RoutePolicy] = None,
) -> RouteEfficiency:
    """
    Rough distance and duration for a truck's stops.

    With the standard policy the first stop is 20 km / 60 min away and each
    further stop adds 15 km / 30 min. More than 5 stops is medium efficiency,
    more than 8 low.

    Args:
        allocations: One truck's allocations for a day
        policy: Route model (standard policy if None)

    Returns:
        RouteEfficiency estimate
    """
    policy = policy or RoutePolicy()
    stops = len(allocations)
    if stops == 0:
        return RouteEfficiency(0, 0.0, 0.0, "high")

    if stops > policy.low_efficiency_stops:
        efficiency = "low"
    elif stops > policy.medium_efficiency_stops:
        efficiency = "medium"
    else:
        efficiency = "high"

    return RouteEfficiency(
        total_stops=stops,
        estimated_distance_km=policy.first_stop_km + (stops - 1) * policy.extra_stop_km,
        estimated_duration_minutes=policy.first_stop_minutes + (stops - 1) * policy.extra_stop_minutes,
        efficiency=efficiency,
    )

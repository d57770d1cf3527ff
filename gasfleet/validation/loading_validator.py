"""Loading validation - the final gate before a truck load is confirmed.

A load is rejected if the cylinder count exceeds the truck's slots OR the
weight exceeds its weight capacity. The two axes are checked independently;
passing one never offsets failing the other.

Problems are returned, never raised, so a loading screen can show all of them
at once. Warnings are advisory and never block.
"""

from dataclasses import dataclass, field
from datetime import date as Date
from typing import Iterable, List, Optional
import logging

from gasfleet.config import LoadingPolicy, WeightDefaults
from gasfleet.distribution.capacity_calculator import inventory_cylinder_count, inventory_weight_kg
from gasfleet.distribution.weight_estimator import default_item_weight
from gasfleet.models.truck import LoadingItem, Truck, TruckStatus

logger = logging.getLogger(__name__)


def truck_status_errors(truck: Truck) -> List[str]:
    """Errors for a truck that may not be loaded or allocated at all."""
    errors = []
    if not truck.active:
        errors.append("Truck is inactive")
    if truck.status == TruckStatus.MAINTENANCE:
        errors.append("Truck is scheduled for maintenance")
    if truck.status == TruckStatus.INACTIVE:
        errors.append("Truck status is inactive")
    return errors


@dataclass
class CapacityCheck:
    """Every figure behind a loading decision, for audit."""
    current_cylinders: int
    cylinders_to_add: int
    total_cylinders_after: int
    cylinder_capacity: int
    cylinder_overflow: int
    current_weight_kg: float
    weight_to_add_kg: float
    total_weight_after_kg: float
    weight_capacity_kg: float
    weight_overflow_kg: float

    @property
    def cylinder_utilization(self) -> float:
        """Cylinder slot utilization (%) after loading."""
        if self.cylinder_capacity <= 0:
            return 0.0
        return self.total_cylinders_after / self.cylinder_capacity * 100

    @property
    def weight_utilization(self) -> float:
        """Weight utilization (%) after loading."""
        if self.weight_capacity_kg <= 0:
            return 0.0
        return self.total_weight_after_kg / self.weight_capacity_kg * 100


@dataclass
class LoadingValidationResult:
    """
    Verdict on a proposed load.

    Attributes:
        errors: Hard violations; any error blocks confirmation
        warnings: Advisory notes; never block
        capacity_check: Intermediate figures
    """
    capacity_check: CapacityCheck
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Valid iff there are no errors."""
        return len(self.errors) == 0


class LoadingValidator:
    """
    Validates a proposed load against a truck's dual capacity.

    Example:
        validator = LoadingValidator()
        result = validator.validate(truck, [LoadingItem(product_id="P13-F", qty_full=3)])
        if not result.is_valid:
            for error in result.errors:
                print(error)
    """

    def __init__(
        self,
        policy: Optional[LoadingPolicy] = None,
        defaults: Optional[WeightDefaults] = None,
    ):
        """
        Initialize validator.

        Args:
            policy: Warning thresholds (standard policy if None)
            defaults: Fallback weights for inventory and items without a weight
        """
        self.policy = policy or LoadingPolicy()
        self.defaults = defaults or WeightDefaults()

    def validate(
        self,
        truck: Truck,
        items: Iterable[LoadingItem],
        loading_date: Optional[Date] = None,
    ) -> LoadingValidationResult:
        """
        Validate loading items onto a truck.

        Args:
            truck: Truck with current on-board inventory
            items: Items proposed to be loaded
            loading_date: Date of loading, enables the maintenance-due warning

        Returns:
            LoadingValidationResult
        """
        items = list(items)
        errors: List[str] = []
        warnings: List[str] = []

        errors.extend(truck_status_errors(truck))

        current_cylinders = inventory_cylinder_count(truck)
        current_weight = inventory_weight_kg(truck, self.defaults)

        cylinders_to_add = sum(item.cylinder_count for item in items)
        weight_to_add = sum(
            default_item_weight(item.qty_full, item.qty_empty, item.weight_kg, self.defaults)
            for item in items
        )

        total_cylinders_after = current_cylinders + cylinders_to_add
        total_weight_after = current_weight + weight_to_add

        cylinder_capacity = truck.capacity_cylinders
        # Missing weight capacity is rebuilt from the slot count, never treated as unlimited
        weight_capacity = truck.capacity_kg or cylinder_capacity * self.defaults.full_cylinder_kg

        check = CapacityCheck(
            current_cylinders=current_cylinders,
            cylinders_to_add=cylinders_to_add,
            total_cylinders_after=total_cylinders_after,
            cylinder_capacity=cylinder_capacity,
            cylinder_overflow=total_cylinders_after - cylinder_capacity,
            current_weight_kg=current_weight,
            weight_to_add_kg=weight_to_add,
            total_weight_after_kg=total_weight_after,
            weight_capacity_kg=weight_capacity,
            weight_overflow_kg=total_weight_after - weight_capacity,
        )

        if check.cylinder_overflow > 0:
            errors.append(
                f"Cylinder capacity exceeded: trying to load {cylinders_to_add} cylinders but only "
                f"{max(0, cylinder_capacity - current_cylinders)} slots available "
                f"({total_cylinders_after}/{cylinder_capacity} total, "
                f"{check.cylinder_overflow} over capacity)"
            )

        if check.weight_overflow_kg > 0:
            errors.append(
                f"Weight capacity exceeded: trying to load {weight_to_add:.1f}kg but only "
                f"{max(0.0, weight_capacity - current_weight):.1f}kg capacity available "
                f"({total_weight_after:.1f}/{weight_capacity:.1f}kg total, "
                f"{check.weight_overflow_kg:.1f}kg over capacity)"
            )

        threshold = self.policy.high_utilization_warning_pct
        if check.cylinder_utilization > threshold and check.cylinder_overflow <= 0:
            warnings.append(
                f"High cylinder utilization after loading: {check.cylinder_utilization:.1f}% "
                f"({total_cylinders_after}/{cylinder_capacity})"
            )
        if check.weight_utilization > threshold and check.weight_overflow_kg <= 0:
            warnings.append(
                f"High weight utilization after loading: {check.weight_utilization:.1f}% "
                f"({total_weight_after:.1f}/{weight_capacity:.1f}kg)"
            )

        if loading_date is not None and truck.is_maintenance_due(loading_date):
            warnings.append(f"Truck maintenance is due ({truck.next_maintenance_due})")

        result = LoadingValidationResult(capacity_check=check, errors=errors, warnings=warnings)
        if not result.is_valid:
            logger.warning(f"Loading rejected for truck {truck.id}: {'; '.join(errors)}")
        return result


def validate_truck_loading(
    truck: Truck,
    items: Iterable[LoadingItem],
    loading_date: Optional[Date] = None,
) -> LoadingValidationResult:
    """Convenience function to validate a load with the standard policy.

    Args:
        truck: Truck with current on-board inventory
        items: Items proposed to be loaded
        loading_date: Optional loading date

    Returns:
        LoadingValidationResult
    """
    return LoadingValidator().validate(truck, items, loading_date)

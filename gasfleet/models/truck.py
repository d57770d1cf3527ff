"""Truck data model with on-board inventory and dual capacity limits."""

from enum import Enum
from datetime import date as Date
from typing import List, Optional
from pydantic import BaseModel, Field


class TruckStatus(str, Enum):
    """Operational status of a truck."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"


class TruckInventoryItem(BaseModel):
    """
    Cylinders of one product physically on a truck.

    Attributes:
        product_id: Product on board
        product_name: Product name for display
        qty_full: Full cylinders on board
        qty_empty: Empty cylinders on board
        weight_kg: Pre-computed weight of this line (None to use default weights)
    """
    product_id: str = Field(..., description="Product ID")
    product_name: str = Field(default="", description="Product name")
    qty_full: int = Field(default=0, description="Full cylinders", ge=0)
    qty_empty: int = Field(default=0, description="Empty cylinders", ge=0)
    weight_kg: Optional[float] = Field(None, description="Pre-computed weight in kg", ge=0)

    @property
    def cylinder_count(self) -> int:
        """Slots taken by this line (full and empty cylinders alike)."""
        return self.qty_full + self.qty_empty


class LoadingItem(BaseModel):
    """Cylinders proposed to be loaded onto a truck."""
    product_id: str = Field(..., description="Product ID")
    qty_full: int = Field(default=0, description="Full cylinders to load", ge=0)
    qty_empty: int = Field(default=0, description="Empty cylinders to load", ge=0)
    weight_kg: Optional[float] = Field(None, description="Explicit weight in kg", ge=0)

    @property
    def cylinder_count(self) -> int:
        """Slots this item needs."""
        return self.qty_full + self.qty_empty


class Truck(BaseModel):
    """
    Represents a delivery truck.

    Capacity is limited on two independent axes: cylinder slots and mass.
    Neither axis compensates for the other.

    Attributes:
        id: Unique truck identifier
        fleet_number: Fleet number for display
        license_plate: License plate
        active: Whether the truck is in service at all
        status: Operational status (active, inactive, maintenance)
        capacity_cylinders: Maximum cylinders the truck can carry
        capacity_kg: Maximum load in kg (None if not recorded)
        next_maintenance_due: Date the next maintenance falls due
        fuel_capacity_liters: Fuel tank size
        avg_fuel_consumption: Average consumption in L/100 km
        inventory: Cylinders currently on board
    """
    id: str = Field(..., description="Unique truck identifier")
    fleet_number: str = Field(default="", description="Fleet number")
    license_plate: str = Field(default="", description="License plate")
    active: bool = Field(default=True, description="Truck in service")
    status: TruckStatus = Field(default=TruckStatus.ACTIVE, description="Operational status")
    capacity_cylinders: int = Field(..., description="Cylinder slot capacity", ge=0)
    capacity_kg: Optional[float] = Field(None, description="Weight capacity in kg", ge=0)
    next_maintenance_due: Optional[Date] = Field(None, description="Next maintenance date")
    fuel_capacity_liters: Optional[float] = Field(None, description="Fuel tank size in liters", ge=0)
    avg_fuel_consumption: Optional[float] = Field(
        None,
        description="Average fuel consumption (L/100 km)",
        ge=0
    )
    inventory: List[TruckInventoryItem] = Field(
        default_factory=list,
        description="Cylinders currently on board"
    )

    def is_available(self) -> bool:
        """Check if the truck can take new work (active and not in maintenance)."""
        return self.active and self.status == TruckStatus.ACTIVE

    def is_maintenance_due(self, on_date: Date) -> bool:
        """
        Check if maintenance falls due on or before a date.

        Args:
            on_date: Date to check

        Returns:
            True if next_maintenance_due is set and not after on_date
        """
        return self.next_maintenance_due is not None and self.next_maintenance_due <= on_date

    def __str__(self) -> str:
        """String representation."""
        name = self.fleet_number or self.id
        weight = f"{self.capacity_kg:.0f}kg" if self.capacity_kg else "no weight limit set"
        return f"Truck {name} ({self.status.value}): {self.capacity_cylinders} cylinders, {weight}"

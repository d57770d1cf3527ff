"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date

from gasfleet.models import (
    Allocation,
    AllocationStatus,
    Order,
    Product,
    Truck,
    TruckInventoryItem,
    TruckStatus,
)


@pytest.fixture
def delivery_date():
    """Fixture for the planning date."""
    return date(2025, 7, 15)


@pytest.fixture
def cylinder_products():
    """Fixture for 13 kg and 48 kg parents with full/empty variants."""
    return [
        Product(id="LPG13", name="LPG 13kg", sku="LPG-13", capacity_kg=13, tare_weight_kg=14),
        Product(
            id="LPG13-F", name="LPG 13kg Full", sku="LPG-13-F",
            is_variant=True, variant_name="full", parent_product_id="LPG13",
        ),
        Product(
            id="LPG13-E", name="LPG 13kg Empty", sku="LPG-13-E",
            is_variant=True, variant_name="empty", parent_product_id="LPG13",
        ),
        Product(id="LPG48", name="LPG 48kg", sku="LPG-48", capacity_kg=48, tare_weight_kg=50),
        Product(
            id="LPG48-F", name="LPG 48kg Full", sku="LPG-48-F",
            is_variant=True, variant_name="full", parent_product_id="LPG48",
        ),
    ]


@pytest.fixture
def empty_truck():
    """Fixture for an empty 1000 kg / 40 cylinder truck."""
    return Truck(
        id="T1",
        fleet_number="FL-01",
        license_plate="KAA 001A",
        capacity_cylinders=40,
        capacity_kg=1000.0,
    )


@pytest.fixture
def loaded_truck():
    """Fixture for a truck with 38 cylinders on board."""
    return Truck(
        id="T2",
        fleet_number="FL-02",
        capacity_cylinders=40,
        capacity_kg=2000.0,
        inventory=[
            TruckInventoryItem(product_id="LPG13-F", qty_full=30, qty_empty=0),
            TruckInventoryItem(product_id="LPG13-E", qty_full=0, qty_empty=8),
        ],
    )


@pytest.fixture
def maintenance_truck():
    """Fixture for a truck in the workshop."""
    return Truck(
        id="T9",
        fleet_number="FL-09",
        status=TruckStatus.MAINTENANCE,
        capacity_cylinders=60,
        capacity_kg=3000.0,
    )


@pytest.fixture
def make_order():
    """Factory fixture for orders."""
    def _make(order_id: str, customer_id: str = "C1") -> Order:
        return Order(id=order_id, customer_id=customer_id)
    return _make


@pytest.fixture
def make_allocation(delivery_date):
    """Factory fixture for allocations on the planning date."""
    def _make(
        order_id: str,
        truck_id: str,
        weight: float,
        status: AllocationStatus = AllocationStatus.PLANNED,
        allocation_date: date = None,
    ) -> Allocation:
        return Allocation(
            id=f"{order_id}-{truck_id}",
            truck_id=truck_id,
            order_id=order_id,
            allocation_date=allocation_date or delivery_date,
            estimated_weight_kg=weight,
            status=status,
        )
    return _make

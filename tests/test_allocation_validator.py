"""Tests for single-allocation validation."""

import pytest
from datetime import date

from gasfleet.config import AllocationPolicy
from gasfleet.models import Truck, TruckInventoryItem
from gasfleet.validation import validate_allocation


class TestAllocationValidation:
    """Tests for validate_allocation."""

    def test_fitting_order_is_valid(self, empty_truck, delivery_date):
        """Test an order within both limits passes without warnings."""
        result = validate_allocation(empty_truck, 500.0, [], delivery_date)

        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []
        assert result.capacity_info.available_weight_kg == 1000.0

    def test_overweight_order_rejected(self, empty_truck, delivery_date, make_allocation):
        """Test an order heavier than the free weight is an error."""
        result = validate_allocation(
            empty_truck, 300.0, [make_allocation("O1", "T1", 800)], delivery_date
        )

        assert not result.is_valid
        assert result.errors == [
            "Order weight (300.0kg) exceeds available weight capacity (200.0kg)"
        ]

    def test_force_downgrades_weight_error(self, empty_truck, delivery_date, make_allocation):
        """Test a forced allocation turns the weight error into a warning."""
        result = validate_allocation(
            empty_truck, 300.0, [make_allocation("O1", "T1", 800)], delivery_date, force=True
        )

        assert result.is_valid
        assert "Order weight (300.0kg) exceeds available weight capacity (200.0kg)" in result.warnings
        assert "High utilization after allocation: 110.0%" in result.warnings

    def test_estimated_cylinders_exceed_slots(self, loaded_truck, delivery_date):
        """Test the slot estimate uses 20 kg per cylinder against free slots."""
        result = validate_allocation(loaded_truck, 41.0, [], delivery_date)

        assert not result.is_valid
        assert result.errors == [
            "Order requires approximately 3 cylinders but only 2 slots available"
        ]

    def test_force_does_not_bypass_slot_check(self, loaded_truck, delivery_date):
        """Test the slot check is not affected by force."""
        result = validate_allocation(loaded_truck, 100.0, [], delivery_date, force=True)
        assert not result.is_valid

    def test_unavailable_truck_rejected(self, maintenance_truck, delivery_date):
        """Test a truck in maintenance cannot be allocated to."""
        result = validate_allocation(maintenance_truck, 10.0, [], delivery_date)
        assert result.errors == ["Truck is scheduled for maintenance"]

    def test_overallocated_and_busy_warnings(self, delivery_date, make_allocation):
        """Test overallocation and order-count warnings."""
        truck = Truck(id="T1", capacity_cylinders=100, capacity_kg=100.0)
        allocations = [make_allocation(f"O{i}", "T1", 10) for i in range(15)]

        result = validate_allocation(truck, 0.0, allocations, delivery_date)

        assert result.is_valid
        assert "Truck is already overallocated" in result.warnings
        assert "Many orders already allocated (15), may affect delivery efficiency" in result.warnings

    def test_maintenance_due_warning(self, empty_truck, delivery_date):
        """Test maintenance due on the date is a warning."""
        truck = empty_truck.model_copy(update={"next_maintenance_due": delivery_date})
        result = validate_allocation(truck, 10.0, [], delivery_date)

        assert result.is_valid
        assert result.warnings == ["Truck maintenance is due around this date"]

    def test_custom_policy(self, delivery_date):
        """Test the cylinder estimate follows the configured average weight."""
        truck = Truck(
            id="T1", capacity_cylinders=10, capacity_kg=1000.0,
            inventory=[TruckInventoryItem(product_id="X", qty_full=5)],
        )
        policy = AllocationPolicy(average_cylinder_weight_kg=50.0)

        assert validate_allocation(truck, 250.0, [], delivery_date, policy=policy).is_valid
        assert not validate_allocation(truck, 251.0, [], delivery_date, policy=policy).is_valid

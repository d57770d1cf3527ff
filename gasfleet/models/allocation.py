"""Planned allocation of an order to a truck for one date."""

from enum import Enum
from datetime import date as Date, datetime
from typing import Dict, FrozenSet, Optional
from pydantic import BaseModel, Field

from gasfleet.exceptions import AllocationStateError


class AllocationStatus(str, Enum):
    """Lifecycle status of an allocation."""
    PLANNED = "planned"
    LOADED = "loaded"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


ALLOWED_TRANSITIONS: Dict[AllocationStatus, FrozenSet[AllocationStatus]] = {
    AllocationStatus.PLANNED: frozenset({AllocationStatus.LOADED, AllocationStatus.CANCELLED}),
    AllocationStatus.LOADED: frozenset({AllocationStatus.DELIVERED, AllocationStatus.CANCELLED}),
    AllocationStatus.DELIVERED: frozenset(),
    AllocationStatus.CANCELLED: frozenset(),
}


class Allocation(BaseModel):
    """
    Planned assignment of one order's weight to one truck for one date.

    Allocations are proposals until loaded. Every non-cancelled allocation for a
    date counts towards the truck's allocated weight.

    Attributes:
        id: Unique allocation identifier
        truck_id: Truck the order is assigned to
        order_id: Order being carried
        allocation_date: Delivery date of the allocation
        estimated_weight_kg: Estimated weight of the order
        status: Lifecycle status
        stop_sequence: Position in the truck's stops, if sequenced
        created_at: When the allocation was made
    """
    id: str = Field(..., description="Unique allocation identifier")
    truck_id: str = Field(..., description="Truck ID")
    order_id: str = Field(..., description="Order ID")
    allocation_date: Date = Field(..., description="Allocation date")
    estimated_weight_kg: float = Field(..., description="Estimated order weight", ge=0)
    status: AllocationStatus = Field(default=AllocationStatus.PLANNED, description="Lifecycle status")
    stop_sequence: Optional[int] = Field(None, description="Stop sequence", ge=1)
    created_at: datetime = Field(default_factory=datetime.now, description="Creation timestamp")

    def is_active(self) -> bool:
        """Check if the allocation still consumes capacity."""
        return self.status != AllocationStatus.CANCELLED

    def can_modify(self) -> bool:
        """Only planned allocations may be edited or reassigned."""
        return self.status == AllocationStatus.PLANNED

    def is_overdue(self, today: Date) -> bool:
        """Check if the date has passed without delivery or cancellation."""
        return self.allocation_date < today and self.status in (
            AllocationStatus.PLANNED,
            AllocationStatus.LOADED,
        )

    def transition_to(self, status: AllocationStatus) -> "Allocation":
        """
        Return a copy of this allocation moved to a new status.

        Args:
            status: Target status

        Returns:
            New Allocation with the target status

        Raises:
            AllocationStateError: If the lifecycle does not allow the move
        """
        status = AllocationStatus(status)
        if status not in ALLOWED_TRANSITIONS[self.status]:
            raise AllocationStateError(
                f"Cannot move allocation {self.id} from {self.status.value} to {status.value}",
                {"order_id": self.order_id, "truck_id": self.truck_id},
            )
        return self.model_copy(update={"status": status})

    def __str__(self) -> str:
        """String representation."""
        return (
            f"Allocation {self.id}: order {self.order_id} → truck {self.truck_id} "
            f"on {self.allocation_date}, {self.estimated_weight_kg:.1f}kg [{self.status.value}]"
        )

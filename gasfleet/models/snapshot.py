"""Versioned fleet snapshot passed into the capacity functions."""

from datetime import datetime
from typing import Iterable, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from gasfleet.models.allocation import Allocation
from gasfleet.models.truck import Truck


class FleetSnapshot(BaseModel):
    """
    Read-only view of the fleet at one moment.

    The persistence layer builds a snapshot, the core computes against it, and
    the caller compares ``version`` before committing so two requests racing on
    the same truck can detect each other.

    Attributes:
        version: Monotonic version of the allocation state the snapshot was read at
        taken_at: When the snapshot was read
        trucks: Trucks with their on-board inventory
        allocations: Allocations for all trucks

    Trucks and allocations are held as tuples, so the contents are as fixed
    as the version.
    """
    model_config = ConfigDict(frozen=True)

    version: int = Field(default=0, description="Snapshot version", ge=0)
    taken_at: datetime = Field(default_factory=datetime.now, description="Read timestamp")
    trucks: Tuple[Truck, ...] = Field(default=(), description="Truck roster")
    allocations: Tuple[Allocation, ...] = Field(default=(), description="Allocations")

    def get_truck(self, truck_id: str) -> Optional[Truck]:
        """Look up a truck by ID."""
        for truck in self.trucks:
            if truck.id == truck_id:
                return truck
        return None

    def with_allocations(self, new_allocations: Iterable[Allocation]) -> "FleetSnapshot":
        """
        Return the next version of this snapshot with allocations appended.

        Args:
            new_allocations: Allocations to add

        Returns:
            New FleetSnapshot with version + 1
        """
        return FleetSnapshot(
            version=self.version + 1,
            taken_at=datetime.now(),
            trucks=self.trucks,
            allocations=self.allocations + tuple(new_allocations),
        )

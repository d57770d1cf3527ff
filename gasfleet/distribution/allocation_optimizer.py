"""Batch allocation of orders to trucks for one date.

Greedy first-fit-decreasing pass:
1. Sort orders by estimated weight, heaviest first
2. For each order, rank trucks against the allocations made so far in this pass
3. Plan the order on the best truck, or report it unallocated

The result is advisory. Nothing is committed; the caller persists the proposals
and runs the loading validator before any physical load.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date as Date, datetime
from typing import Iterable, List, Mapping, Optional
import logging

from gasfleet.distribution.fleet_scheduler import FleetScheduler
from gasfleet.distribution.truck_selector import TruckSelector
from gasfleet.exceptions import InvalidInputError
from gasfleet.models.allocation import Allocation, AllocationStatus
from gasfleet.models.order import Order
from gasfleet.models.truck import Truck

logger = logging.getLogger(__name__)


@dataclass
class AllocationProposal:
    """
    Proposed assignment of an order to a truck.

    Attributes:
        order_id: Order being assigned
        truck_id: Truck chosen for it
        estimated_weight_kg: Order weight
        fit_score: Score the truck had when chosen
    """
    order_id: str
    truck_id: str
    estimated_weight_kg: float
    fit_score: float


@dataclass
class OptimizationSummary:
    """Totals for an optimization pass."""
    total_orders: int = 0
    allocated_orders: int = 0
    fleet_utilization: float = 0.0


@dataclass
class OptimizationResult:
    """
    Outcome of an optimization pass.

    Attributes:
        optimized_allocations: Proposals in the order they were made
        unallocated_orders: IDs of orders no truck could take
        summary: Totals and final fleet utilization
        planned_allocations: Allocation records matching the proposals
    """
    optimized_allocations: List[AllocationProposal] = field(default_factory=list)
    unallocated_orders: List[str] = field(default_factory=list)
    summary: OptimizationSummary = field(default_factory=OptimizationSummary)
    planned_allocations: List[Allocation] = field(default_factory=list)

    def is_complete(self) -> bool:
        """Check if every order was placed."""
        return len(self.unallocated_orders) == 0

    def __str__(self) -> str:
        """String representation."""
        status = "COMPLETE" if self.is_complete() else f"{len(self.unallocated_orders)} unallocated"
        return (
            f"OptimizationResult: {self.summary.allocated_orders}/{self.summary.total_orders} orders, "
            f"fleet utilization {self.summary.fleet_utilization:.1f}% - {status}"
        )


class AllocationOptimizer:
    """
    Assigns a batch of orders to trucks for one date.

    Example:
        optimizer = AllocationOptimizer()
        result = optimizer.optimize(orders, {"O1": 400.0, "O2": 300.0}, trucks, date(2025, 7, 1))
        for proposal in result.optimized_allocations:
            print(proposal.order_id, "->", proposal.truck_id)
    """

    def __init__(
        self,
        selector: Optional[TruckSelector] = None,
        scheduler: Optional[FleetScheduler] = None,
    ):
        """
        Initialize optimizer.

        Args:
            selector: Truck selector used per order (standard policy if None)
            scheduler: Scheduler used for the final utilization rollup
        """
        self.selector = selector or TruckSelector()
        self.scheduler = scheduler or FleetScheduler(defaults=self.selector.defaults)

    def optimize(
        self,
        orders: Iterable[Order],
        order_weights: Mapping[str, float],
        trucks: Iterable[Truck],
        target_date: Date,
        existing_allocations: Optional[Iterable[Allocation]] = None,
    ) -> OptimizationResult:
        """
        Plan orders onto trucks, heaviest first.

        Args:
            orders: Orders to place
            order_weights: Estimated weight per order ID
            trucks: Truck roster (only available trucks are used)
            target_date: Delivery date
            existing_allocations: Allocations already committed, counted against
                capacity but not returned (none by default)

        Returns:
            OptimizationResult with proposals, unallocated orders and summary

        Raises:
            InvalidInputError: If order_weights is not a mapping, holds a
                negative weight, or an order ID appears more than once
        """
        if not isinstance(order_weights, Mapping):
            raise InvalidInputError(
                "order_weights must map order IDs to weights",
                {"received": type(order_weights).__name__},
            )
        negative = {oid: w for oid, w in order_weights.items() if w < 0}
        if negative:
            raise InvalidInputError("Order weights must be non-negative", {"orders": negative})

        orders = list(orders)
        duplicates = sorted(oid for oid, count in Counter(o.id for o in orders).items() if count > 1)
        if duplicates:
            raise InvalidInputError("Order IDs must be unique", {"orders": duplicates})

        result = OptimizationResult()
        existing_allocations = list(existing_allocations or [])
        if not orders and not existing_allocations:
            logger.info(f"No orders to optimize for {target_date}")
            return result

        active_trucks = [t for t in trucks if t.is_available()]
        running: List[Allocation] = list(existing_allocations)
        planned: List[Allocation] = []

        weighted = [o for o in orders if o.id in order_weights]
        for order in orders:
            if order.id not in order_weights:
                logger.warning(f"Order {order.id} has no weight estimate, leaving it unallocated")
                result.unallocated_orders.append(order.id)

        # sorted() is stable, so equal weights keep input order
        weighted.sort(key=lambda o: order_weights[o.id], reverse=True)

        logger.info(
            f"Optimizing {len(weighted)} orders onto {len(active_trucks)} trucks for {target_date}"
        )

        for order in weighted:
            weight = order_weights[order.id]
            selection = self.selector.select(order, weight, active_trucks, running, target_date)

            if selection.best is None:
                result.unallocated_orders.append(order.id)
                continue

            truck_id = selection.best.truck_id
            allocation = Allocation(
                id=f"{order.id}-{truck_id}",
                truck_id=truck_id,
                order_id=order.id,
                allocation_date=target_date,
                estimated_weight_kg=weight,
                status=AllocationStatus.PLANNED,
                created_at=datetime.now(),
            )
            running.append(allocation)
            planned.append(allocation)
            result.optimized_allocations.append(AllocationProposal(
                order_id=order.id,
                truck_id=truck_id,
                estimated_weight_kg=weight,
                fit_score=selection.best.fit_score,
            ))

        schedules = self.scheduler.build_daily_schedule(active_trucks, running, target_date)
        utilization = self.scheduler.compute_fleet_utilization(schedules)

        result.planned_allocations = planned
        result.summary = OptimizationSummary(
            total_orders=len(orders),
            allocated_orders=len(result.optimized_allocations),
            fleet_utilization=utilization.overall_utilization,
        )

        if result.unallocated_orders:
            logger.warning(
                f"{len(result.unallocated_orders)} orders could not be allocated on {target_date}: "
                f"{result.unallocated_orders}"
            )
        logger.info(str(result))
        return result

"""Truck ranking for a single order.

Scores every available truck by how well the order fits it:

- utilization_after ≤ penalty threshold (85%): max_score - |utilization_after - target (75%)|
- utilization_after above the threshold: flat penalty score (20)
- plus a routing bonus of max(0, cap - orders_count)

Trucks that cannot take the order score 0 and are never chosen as best.
"""

from dataclasses import dataclass, field
from datetime import date as Date
from typing import Iterable, List, Optional
import logging

from gasfleet.config import FitScorePolicy, RecommendationPolicy, WeightDefaults
from gasfleet.distribution.capacity_calculator import calculate_truck_capacity
from gasfleet.models.allocation import Allocation
from gasfleet.models.capacity import CapacityInfo
from gasfleet.models.order import Order
from gasfleet.models.truck import Truck

logger = logging.getLogger(__name__)


@dataclass
class TruckRecommendation:
    """
    A candidate truck for an order.

    Attributes:
        truck: Candidate truck
        capacity_info: Capacity snapshot before adding the order
        fit_score: Heuristic score (higher is better, 0 if it cannot fit)
        can_accommodate: Whether the available weight covers the order
        utilization_after: Utilization (%) if the order were added
    """
    truck: Truck
    capacity_info: CapacityInfo
    fit_score: float
    can_accommodate: bool
    utilization_after: float = 0.0

    @property
    def truck_id(self) -> str:
        return self.truck.id


@dataclass
class TruckSelection:
    """
    Ranked candidates for one order.

    Attributes:
        order_id: Order the ranking was made for
        order_weight_kg: Weight the ranking was made for
        ranked: All available trucks, best fit first
        best: Highest ranked truck that can take the order, if any
    """
    order_id: str
    order_weight_kg: float
    ranked: List[TruckRecommendation] = field(default_factory=list)
    best: Optional[TruckRecommendation] = None

    @property
    def best_truck(self) -> Optional[Truck]:
        """The best truck, or None if no truck can take the order."""
        return self.best.truck if self.best else None

    def alternatives(self) -> List[TruckRecommendation]:
        """Other trucks that could also take the order."""
        return [
            r for r in self.ranked
            if r.can_accommodate and (self.best is None or r.truck_id != self.best.truck_id)
        ]


class TruckSelector:
    """
    Ranks trucks as candidates for an order on a date.

    Example:
        selector = TruckSelector()
        selection = selector.select(order, 450.0, trucks, allocations, date(2025, 7, 1))
        if selection.best_truck:
            print(f"Load on {selection.best_truck.id}")
    """

    def __init__(
        self,
        policy: Optional[FitScorePolicy] = None,
        defaults: Optional[WeightDefaults] = None,
    ):
        """
        Initialize selector.

        Args:
            policy: Fit-score parameters (standard policy if None)
            defaults: Fallback weights for on-board inventory
        """
        self.policy = policy or FitScorePolicy()
        self.defaults = defaults or WeightDefaults()

    def select(
        self,
        order: Order,
        order_weight: float,
        trucks: Iterable[Truck],
        allocations: Iterable[Allocation],
        target_date: Date,
    ) -> TruckSelection:
        """
        Rank available trucks for an order.

        Args:
            order: Order being placed
            order_weight: Estimated order weight in kg
            trucks: Candidate trucks (inactive and maintenance trucks are skipped)
            allocations: Current allocations for all trucks
            target_date: Delivery date

        Returns:
            TruckSelection with the ranked list and best truck
        """
        allocations = list(allocations)
        candidates = [
            self.evaluate(truck, order_weight, allocations, target_date)
            for truck in trucks
            if truck.is_available()
        ]

        # sorted() is stable, so equal scores keep roster order
        ranked = sorted(candidates, key=lambda r: r.fit_score, reverse=True)
        best = next((r for r in ranked if r.can_accommodate), None)

        if best:
            logger.debug(
                f"Order {order.id} ({order_weight:.1f}kg): best truck {best.truck_id} "
                f"score {best.fit_score:.1f} of {len(ranked)} candidates"
            )
        else:
            logger.debug(
                f"Order {order.id} ({order_weight:.1f}kg): no truck among "
                f"{len(ranked)} candidates can accommodate it"
            )

        return TruckSelection(
            order_id=order.id,
            order_weight_kg=order_weight,
            ranked=ranked,
            best=best,
        )

    def evaluate(
        self,
        truck: Truck,
        order_weight: float,
        allocations: List[Allocation],
        target_date: Date,
    ) -> TruckRecommendation:
        """Score a single truck for an order."""
        capacity_info = calculate_truck_capacity(truck, allocations, target_date, self.defaults)
        can_accommodate = (
            capacity_info.total_capacity_kg > 0
            and capacity_info.available_weight_kg >= order_weight
        )
        utilization_after = capacity_info.utilization_after(order_weight)

        fit_score = 0.0
        if can_accommodate:
            fit_score = self.fit_score(utilization_after, capacity_info.orders_count)

        return TruckRecommendation(
            truck=truck,
            capacity_info=capacity_info,
            fit_score=fit_score,
            can_accommodate=can_accommodate,
            utilization_after=utilization_after,
        )

    def fit_score(self, utilization_after: float, orders_count: int) -> float:
        """
        Fit score for a truck that can take the order.

        Args:
            utilization_after: Utilization (%) once the order is added
            orders_count: Orders already on the truck for the date

        Returns:
            Score, peaking at the target utilization
        """
        policy = self.policy
        if utilization_after <= policy.penalty_threshold_pct:
            score = policy.max_score - abs(utilization_after - policy.target_utilization_pct)
        else:
            score = policy.penalty_score

        return score + max(0, policy.routing_bonus_cap - orders_count)


def recommendations(
    selection: TruckSelection,
    policy: Optional[RecommendationPolicy] = None,
) -> List[str]:
    """
    Advisory notes on a selection for the dispatcher.

    Args:
        selection: Result of TruckSelector.select
        policy: Score bands and thresholds (standard policy if None)

    Returns:
        Human readable recommendations
    """
    policy = policy or RecommendationPolicy()
    notes: List[str] = []
    best = selection.best

    if best is None:
        notes.append("No suitable truck found. Consider splitting the order or using multiple trucks.")
        return notes

    if best.fit_score >= policy.excellent_score:
        notes.append("Excellent allocation - optimal capacity utilization and efficiency.")
    elif best.fit_score >= policy.good_score:
        notes.append("Good allocation - reasonable capacity utilization.")
    elif best.fit_score >= policy.acceptable_score:
        notes.append("Acceptable allocation - monitor capacity closely.")
    else:
        notes.append("Suboptimal allocation - consider alternatives.")

    if best.utilization_after > policy.high_utilization_pct:
        notes.append("High capacity utilization - consider reducing other allocations.")

    if best.capacity_info.orders_count >= policy.many_stops_count:
        notes.append("Many stops already planned - consider route optimization.")

    alternatives = selection.alternatives()
    if alternatives:
        notes.append(f"{len(alternatives)} alternative truck(s) available.")

    return notes

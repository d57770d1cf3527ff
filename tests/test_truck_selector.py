"""Tests for ranking trucks for a single order."""

import pytest

from gasfleet.config import FitScorePolicy, RecommendationPolicy
from gasfleet.distribution import TruckSelector, recommendations
from gasfleet.models import Truck


def truck(truck_id: str, capacity_kg=1000.0, capacity_cylinders: int = 40) -> Truck:
    """Helper to create an active truck."""
    return Truck(id=truck_id, capacity_cylinders=capacity_cylinders, capacity_kg=capacity_kg)


class TestFitScore:
    """Tests for the fit score heuristic."""

    def test_peak_at_target(self):
        """Test 75% utilization on an empty truck scores 100 + 10 bonus."""
        assert TruckSelector().fit_score(75.0, 0) == 110.0

    def test_distance_from_target(self):
        """Test the score falls by one point per percent from the target."""
        selector = TruckSelector()
        assert selector.fit_score(30.0, 0) == pytest.approx(65.0)
        assert selector.fit_score(85.0, 0) == pytest.approx(100.0)

    def test_penalty_above_threshold(self):
        """Test utilization above 85% gets the flat penalty score."""
        assert TruckSelector().fit_score(85.1, 0) == 30.0

    def test_routing_bonus_shrinks_with_orders(self):
        """Test each planned order reduces the routing bonus, floored at zero."""
        selector = TruckSelector()
        assert selector.fit_score(75.0, 4) == 106.0
        assert selector.fit_score(75.0, 10) == 100.0
        assert selector.fit_score(75.0, 25) == 100.0

    def test_custom_policy(self):
        """Test target and bonus come from the policy."""
        policy = FitScorePolicy(target_utilization_pct=60, penalty_threshold_pct=70, routing_bonus_cap=0)
        assert TruckSelector(policy).fit_score(60.0, 0) == 100.0
        assert TruckSelector(policy).fit_score(75.0, 0) == 20.0


class TestSelection:
    """Tests for TruckSelector.select."""

    def test_picks_best_fit(self, make_order, delivery_date):
        """Test the truck landing closest to 75% wins."""
        trucks = [truck("SMALL", 500.0), truck("MEDIUM", 1000.0), truck("LARGE", 3000.0)]
        selection = TruckSelector().select(make_order("O1"), 750.0, trucks, [], delivery_date)

        assert selection.best_truck.id == "MEDIUM"
        assert [r.truck_id for r in selection.ranked] == ["MEDIUM", "LARGE", "SMALL"]
        assert selection.best.utilization_after == pytest.approx(75.0)
        assert selection.best.fit_score == pytest.approx(110.0)

    def test_no_truck_can_accommodate(self, empty_truck, make_order, delivery_date):
        """Test 1001 kg on a 1000 kg truck yields no best truck."""
        selection = TruckSelector().select(make_order("O1"), 1001.0, [empty_truck], [], delivery_date)

        assert selection.best is None
        assert selection.best_truck is None
        assert len(selection.ranked) == 1
        assert not selection.ranked[0].can_accommodate
        assert selection.ranked[0].fit_score == 0.0

    def test_exact_fit_is_accepted(self, empty_truck, make_order, delivery_date):
        """Test an order equal to the available weight fits."""
        selection = TruckSelector().select(make_order("O1"), 1000.0, [empty_truck], [], delivery_date)
        assert selection.best_truck is empty_truck

    def test_ties_keep_roster_order(self, make_order, delivery_date):
        """Test equal scores are ranked in the order the trucks were given."""
        trucks = [truck("A"), truck("B"), truck("C")]
        selection = TruckSelector().select(make_order("O1"), 500.0, trucks, [], delivery_date)

        assert [r.truck_id for r in selection.ranked] == ["A", "B", "C"]
        assert selection.best_truck.id == "A"

    def test_unavailable_trucks_skipped(self, empty_truck, maintenance_truck, make_order, delivery_date):
        """Test inactive and maintenance trucks are not candidates."""
        inactive = truck("OFF").model_copy(update={"active": False})
        selection = TruckSelector().select(
            make_order("O1"), 100.0, [maintenance_truck, inactive, empty_truck], [], delivery_date
        )
        assert [r.truck_id for r in selection.ranked] == ["T1"]

    def test_truck_without_weight_capacity_never_chosen(self, make_order, delivery_date):
        """Test a truck with no weight capacity cannot take any order."""
        selection = TruckSelector().select(
            make_order("O1"), 0.0, [truck("NOCAP", capacity_kg=None)], [], delivery_date
        )
        assert selection.best is None

    def test_existing_allocations_reduce_fit(self, make_order, make_allocation, delivery_date):
        """Test allocations already on a truck change its ranking."""
        trucks = [truck("A"), truck("B")]
        allocations = [make_allocation("X", "A", 700)]
        selection = TruckSelector().select(make_order("O1"), 200.0, trucks, allocations, delivery_date)

        # A lands at 90% (penalty), B at 20%
        assert selection.best_truck.id == "B"
        assert selection.ranked[1].truck_id == "A"
        assert selection.ranked[1].fit_score == pytest.approx(29.0)

    def test_alternatives(self, make_order, delivery_date):
        """Test alternatives are the other trucks that can take the order."""
        trucks = [truck("A"), truck("B"), truck("TINY", 100.0)]
        selection = TruckSelector().select(make_order("O1"), 500.0, trucks, [], delivery_date)
        assert [r.truck_id for r in selection.alternatives()] == ["B"]


class TestRecommendations:
    """Tests for dispatcher recommendations."""

    def test_no_truck(self, empty_truck, make_order, delivery_date):
        """Test the split suggestion when nothing fits."""
        selection = TruckSelector().select(make_order("O1"), 5000.0, [empty_truck], [], delivery_date)
        assert recommendations(selection) == [
            "No suitable truck found. Consider splitting the order or using multiple trucks."
        ]

    def test_excellent_with_alternative(self, make_order, delivery_date):
        """Test a high score is excellent and alternatives are counted."""
        selection = TruckSelector().select(make_order("O1"), 750.0, [truck("A"), truck("B")], [], delivery_date)
        assert recommendations(selection) == [
            "Excellent allocation - optimal capacity utilization and efficiency.",
            "1 alternative truck(s) available.",
        ]

    def test_high_utilization_and_many_stops(self, make_order, make_allocation, delivery_date):
        """Test a nearly full, busy truck gets both notes."""
        allocations = [make_allocation(f"X{i}", "A", 100) for i in range(6)]
        selection = TruckSelector().select(make_order("O1"), 350.0, [truck("A")], allocations, delivery_date)

        notes = recommendations(selection)
        assert notes[0] == "Suboptimal allocation - consider alternatives."
        assert "High capacity utilization - consider reducing other allocations." in notes
        assert "Many stops already planned - consider route optimization." in notes

    def test_custom_bands(self, make_order, delivery_date):
        """Test score bands come from the recommendation policy."""
        selection = TruckSelector().select(make_order("O1"), 750.0, [truck("A")], [], delivery_date)
        strict = RecommendationPolicy(excellent_score=120, good_score=100, acceptable_score=50)
        assert recommendations(selection, strict) == [
            "Good allocation - reasonable capacity utilization.",
        ]

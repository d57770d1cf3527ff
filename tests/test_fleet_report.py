"""Tests for fleet report DataFrames and Excel export."""

import pandas as pd
import pytest

from gasfleet.analysis import export_schedules_to_excel, schedules_to_dataframe, selection_to_dataframe
from gasfleet.analysis.fleet_report import SCHEDULE_COLUMNS
from gasfleet.config import RoutePolicy
from gasfleet.distribution import FleetScheduler, TruckSelector
from gasfleet.models import Truck


@pytest.fixture
def schedules(empty_truck, maintenance_truck, delivery_date, make_allocation):
    """Fixture for a two-truck schedule with one order on T1."""
    return FleetScheduler().build_daily_schedule(
        [empty_truck, maintenance_truck],
        [make_allocation("O1", "T1", 450.0)],
        delivery_date,
    )


class TestScheduleReport:
    """Tests for schedules_to_dataframe."""

    def test_columns_and_rows(self, schedules, delivery_date):
        """Test one row per truck with the report columns."""
        df = schedules_to_dataframe(schedules)

        assert list(df.columns) == SCHEDULE_COLUMNS
        assert len(df) == 2
        row = df.iloc[0]
        assert row['Truck'] == "FL-01"
        assert row['Date'] == delivery_date
        assert row['Orders'] == 1
        assert row['Allocated (kg)'] == 450.0
        assert row['Utilization %'] == 45.0
        assert row['Est. Distance (km)'] == 20.0
        assert row['Route Efficiency'] == "high"

    def test_route_policy(self, schedules):
        """Test the distance column follows the given route model."""
        df = schedules_to_dataframe(schedules, RoutePolicy(first_stop_km=35))
        assert df.iloc[0]['Est. Distance (km)'] == 35.0

    def test_empty(self):
        """Test no schedules gives an empty frame with headers."""
        df = schedules_to_dataframe([])
        assert df.empty
        assert list(df.columns) == SCHEDULE_COLUMNS

    def test_excel_export(self, schedules, tmp_path):
        """Test the report is written to an Excel sheet."""
        output = tmp_path / "fleet.xlsx"
        export_schedules_to_excel(schedules, str(output))

        assert output.exists()
        df = pd.read_excel(output, sheet_name='Fleet Schedule')
        assert list(df.columns) == SCHEDULE_COLUMNS
        assert list(df['Truck']) == ["FL-01", "FL-09"]


class TestSelectionReport:
    """Tests for selection_to_dataframe."""

    def test_candidates(self, make_order, delivery_date):
        """Test candidates are listed best first with the best flagged."""
        trucks = [
            Truck(id="A", capacity_cylinders=40, capacity_kg=500.0),
            Truck(id="B", capacity_cylinders=40, capacity_kg=1000.0),
        ]
        selection = TruckSelector().select(make_order("O1"), 750.0, trucks, [], delivery_date)
        df = selection_to_dataframe(selection)

        assert list(df['Truck']) == ["B", "A"]
        assert list(df['Best']) == [True, False]
        assert list(df['Can Accommodate']) == [True, False]
        assert df.iloc[0]['Fit Score'] == 110.0

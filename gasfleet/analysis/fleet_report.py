"""Tabular fleet reports for the back office.

Turns schedules and truck rankings into pandas DataFrames for display and
Excel export.
"""

from typing import Dict, List, Optional
import pandas as pd

from gasfleet.config import RoutePolicy
from gasfleet.distribution.fleet_scheduler import estimate_route_efficiency
from gasfleet.distribution.truck_selector import TruckSelection
from gasfleet.models.schedule import DailySchedule


SCHEDULE_COLUMNS = [
    'Date',
    'Truck',
    'Orders',
    'Capacity (kg)',
    'Allocated (kg)',
    'Available (kg)',
    'Utilization %',
    'Overallocated',
    'Maintenance Due',
    'Fuel Sufficient',
    'Est. Distance (km)',
    'Route Efficiency',
]


def schedule_row(schedule: DailySchedule, route_policy: Optional[RoutePolicy] = None) -> Dict:
    """Convert a schedule to a report row."""
    info = schedule.capacity_info
    route = estimate_route_efficiency(schedule.allocations, route_policy)
    return {
        'Date': schedule.date,
        'Truck': schedule.truck.fleet_number or schedule.truck_id,
        'Orders': info.orders_count,
        'Capacity (kg)': round(info.total_capacity_kg, 1),
        'Allocated (kg)': round(info.allocated_weight_kg, 1),
        'Available (kg)': round(info.available_weight_kg, 1),
        'Utilization %': round(info.utilization_percentage, 1),
        'Overallocated': info.is_overallocated,
        'Maintenance Due': schedule.maintenance_due,
        'Fuel Sufficient': schedule.fuel_sufficient,
        'Est. Distance (km)': route.estimated_distance_km,
        'Route Efficiency': route.efficiency,
    }


def schedules_to_dataframe(
    schedules: List[DailySchedule],
    route_policy: Optional[RoutePolicy] = None,
) -> pd.DataFrame:
    """
    Build the daily fleet report.

    Args:
        schedules: Daily schedules, one per truck
        route_policy: Route model for the distance columns (standard if None)

    Returns:
        DataFrame with one row per truck (empty with headers if no schedules)
    """
    return pd.DataFrame([schedule_row(s, route_policy) for s in schedules], columns=SCHEDULE_COLUMNS)


def selection_to_dataframe(selection: TruckSelection) -> pd.DataFrame:
    """
    Build the candidate table shown when allocating one order.

    Args:
        selection: Result of TruckSelector.select

    Returns:
        DataFrame of candidates, best fit first
    """
    best_id = selection.best.truck_id if selection.best else None
    rows = [
        {
            'Truck': r.truck.fleet_number or r.truck_id,
            'Fit Score': round(r.fit_score, 1),
            'Can Accommodate': r.can_accommodate,
            'Available (kg)': round(r.capacity_info.available_weight_kg, 1),
            'Utilization After %': round(r.utilization_after, 1),
            'Orders': r.capacity_info.orders_count,
            'Best': r.truck_id == best_id,
        }
        for r in selection.ranked
    ]
    return pd.DataFrame(rows, columns=[
        'Truck', 'Fit Score', 'Can Accommodate', 'Available (kg)',
        'Utilization After %', 'Orders', 'Best',
    ])


def export_schedules_to_excel(schedules: List[DailySchedule], output_path: str):
    """Export the daily fleet report to Excel.

    Args:
        schedules: Daily schedules
        output_path: Path to output Excel file
    """
    df = schedules_to_dataframe(schedules)
    df.to_excel(output_path, index=False, sheet_name='Fleet Schedule')

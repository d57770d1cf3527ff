"""Data models for fleet capacity allocation."""

from .product import Product, CylinderWeightClass, CylinderWeightTable
from .order import Order, OrderLine
from .truck import Truck, TruckStatus, TruckInventoryItem, LoadingItem
from .allocation import Allocation, AllocationStatus
from .capacity import CapacityInfo
from .snapshot import FleetSnapshot
from .schedule import DailySchedule, FleetUtilizationSummary

__all__ = [
    # Reference data
    "Product",
    "CylinderWeightClass",
    "CylinderWeightTable",
    # Orders
    "Order",
    "OrderLine",
    # Fleet
    "Truck",
    "TruckStatus",
    "TruckInventoryItem",
    "LoadingItem",
    "FleetSnapshot",
    # Planning
    "Allocation",
    "AllocationStatus",
    "CapacityInfo",
    "DailySchedule",
    "FleetUtilizationSummary",
]

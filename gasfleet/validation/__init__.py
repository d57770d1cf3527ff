"""Capacity validation for loading and allocation."""

from .loading_validator import (
    LoadingValidator,
    LoadingValidationResult,
    CapacityCheck,
    truck_status_errors,
    validate_truck_loading,
)
from .allocation_validator import AllocationValidationResult, validate_allocation

__all__ = [
    "LoadingValidator",
    "LoadingValidationResult",
    "CapacityCheck",
    "truck_status_errors",
    "validate_truck_loading",
    "AllocationValidationResult",
    "validate_allocation",
]

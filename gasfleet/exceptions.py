"""Exceptions raised by the fleet capacity core.

Expected conditions (an overflowing load, an inactive truck) are never raised;
they come back as ``errors``/``warnings`` on a validation result. These
exceptions are reserved for malformed input and programming errors.
"""

from typing import Any, Dict, Optional


class FleetCapacityError(Exception):
    """Base exception carrying optional context for the caller."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with context."""
        msg = self.message
        if self.context:
            msg += "\n\nContext:"
            for key, value in self.context.items():
                msg += f"\n  {key}: {value}"
        return msg


class InvalidInputError(FleetCapacityError):
    """Input does not have the shape the core expects."""


class AllocationStateError(FleetCapacityError):
    """An allocation was moved through an illegal lifecycle transition."""


class ConfigurationError(FleetCapacityError):
    """A configuration mapping could not be turned into a FleetConfig."""

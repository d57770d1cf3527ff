"""Product and cylinder weight reference data."""

from typing import Dict, Iterable, Optional
from pydantic import BaseModel, ConfigDict, Field

from gasfleet.constants import STANDARD_CYLINDER_WEIGHTS


class Product(BaseModel):
    """
    Represents a cylinder product or one of its full/empty variants.

    A parent product carries the nominal capacity; its variants point back to it
    through ``parent_product_id`` and are told apart by ``variant_name``.

    Attributes:
        id: Unique product identifier
        name: Product name
        sku: Stock keeping unit code
        is_variant: Whether this product is a variant of a parent product
        variant_name: Variant state, typically "full" or "empty"
        parent_product_id: Parent product ID for variants
        capacity_kg: Nominal gas content in kg (e.g. 13 for a 13 kg cylinder)
        tare_weight_kg: Weight of the empty vessel in kg
    """
    id: str = Field(..., description="Unique product identifier")
    name: str = Field(..., description="Product name")
    sku: str = Field(default="", description="SKU code")
    is_variant: bool = Field(default=False, description="Variant of a parent product")
    variant_name: Optional[str] = Field(None, description="Variant name ('full', 'empty')")
    parent_product_id: Optional[str] = Field(None, description="Parent product ID")
    capacity_kg: Optional[float] = Field(None, description="Nominal content in kg", ge=0)
    tare_weight_kg: Optional[float] = Field(None, description="Empty vessel weight in kg", ge=0)

    def is_full_variant(self) -> bool:
        """Check if this is the 'full' variant of a parent cylinder."""
        return self.is_variant and self.variant_name == "full"

    def is_empty_variant(self) -> bool:
        """Check if this is the 'empty' variant of a parent cylinder."""
        return self.is_variant and self.variant_name == "empty"

    def __str__(self) -> str:
        """String representation."""
        variant = f" [{self.variant_name}]" if self.variant_name else ""
        return f"{self.name} ({self.sku}){variant}"


class CylinderWeightClass(BaseModel):
    """Physical weights of one nominal cylinder size."""
    model_config = ConfigDict(frozen=True)

    capacity_kg: float = Field(..., description="Nominal capacity in kg", gt=0)
    full_weight_kg: float = Field(..., description="Weight when full", ge=0)
    empty_weight_kg: float = Field(..., description="Weight when empty (tare)", ge=0)
    net_weight_kg: float = Field(..., description="Weight of gas contents", ge=0)


class CylinderWeightTable:
    """
    Immutable lookup of cylinder weight classes keyed by nominal capacity.

    Passed into the weight estimator so tests and deployments can use their own
    weights without touching process state.

    Example:
        table = CylinderWeightTable.standard()
        table.get(13).full_weight_kg  # 27.0
    """

    def __init__(self, classes: Iterable[CylinderWeightClass]):
        self._classes: Dict[float, CylinderWeightClass] = {}
        for weight_class in classes:
            self._classes[float(weight_class.capacity_kg)] = weight_class

    @classmethod
    def standard(cls) -> "CylinderWeightTable":
        """Build the table of standard 6/13/48/90 kg cylinders."""
        return cls(
            CylinderWeightClass(
                capacity_kg=capacity,
                full_weight_kg=full,
                empty_weight_kg=empty,
                net_weight_kg=net,
            )
            for capacity, (full, empty, net) in STANDARD_CYLINDER_WEIGHTS.items()
        )

    def get(self, capacity_kg: Optional[float]) -> Optional[CylinderWeightClass]:
        """Return the weight class for a nominal capacity, or None if unknown."""
        if capacity_kg is None:
            return None
        return self._classes.get(float(capacity_kg))

    def capacities(self):
        """Sorted nominal capacities present in the table."""
        return sorted(self._classes)

    def __contains__(self, capacity_kg) -> bool:
        return self.get(capacity_kg) is not None

    def __len__(self) -> int:
        return len(self._classes)

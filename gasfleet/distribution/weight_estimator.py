"""Order and inventory weight estimation.

Turns order lines into an estimated physical weight using the cylinder weight
table and product metadata. Estimates feed a heuristic, so missing reference
data degrades to documented defaults instead of raising:

- Variant line (full/empty of a parent with known class): table weight × quantity
- Non-variant with capacity: (capacity + tare, default 10 kg) × quantity
- Anything else: 27 kg (13 kg class full cylinder) × quantity
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
import logging

from gasfleet.config import WeightDefaults
from gasfleet.models.order import OrderLine
from gasfleet.models.product import CylinderWeightTable, Product
from gasfleet.models.truck import TruckInventoryItem

logger = logging.getLogger(__name__)


def default_item_weight(
    qty_full: int,
    qty_empty: int,
    weight_kg: Optional[float] = None,
    defaults: Optional[WeightDefaults] = None,
) -> float:
    """
    Weight of a batch of cylinders using the shared fallback rule.

    A recorded weight wins; otherwise full and empty cylinders are counted at
    the default 27 kg / 14 kg.

    Args:
        qty_full: Full cylinders
        qty_empty: Empty cylinders
        weight_kg: Pre-computed weight, used when set and non-zero
        defaults: Fallback weights (standard defaults if None)

    Returns:
        Weight in kg
    """
    if weight_kg:
        return float(weight_kg)
    defaults = defaults or WeightDefaults()
    return qty_full * defaults.full_cylinder_kg + qty_empty * defaults.empty_cylinder_kg


@dataclass
class WeightEstimate:
    """Estimated weight of one order line."""
    product_id: str
    product_name: str
    quantity: float
    estimated_weight_kg: float
    variant_name: Optional[str] = None


@dataclass
class OrderWeightEstimate:
    """
    Estimated weight of a whole order.

    Attributes:
        total_weight_kg: Sum of line estimates
        line_estimates: Per-line breakdown (lines with unknown products are skipped)
    """
    total_weight_kg: float = 0.0
    line_estimates: List[WeightEstimate] = field(default_factory=list)


class WeightEstimator:
    """
    Estimates cylinder weights for orders and on-board inventory.

    Example:
        estimator = WeightEstimator()
        estimate = estimator.estimate_order_weight(order_lines, products)
        print(f"{estimate.total_weight_kg:.0f}kg")
    """

    def __init__(
        self,
        weight_table: Optional[CylinderWeightTable] = None,
        defaults: Optional[WeightDefaults] = None,
    ):
        """
        Initialize estimator.

        Args:
            weight_table: Cylinder weight classes (standard table if None)
            defaults: Fallback weights (standard defaults if None)
        """
        self.weight_table = weight_table or CylinderWeightTable.standard()
        self.defaults = defaults or WeightDefaults()

    def estimate_order_weight(
        self,
        order_lines: Iterable[OrderLine],
        products: Iterable[Product],
    ) -> OrderWeightEstimate:
        """
        Estimate the weight of an order from its lines.

        Args:
            order_lines: Lines of the order
            products: Products referenced by the lines, including variant parents

        Returns:
            OrderWeightEstimate with total and per-line breakdown
        """
        products_by_id = {p.id: p for p in products}
        result = OrderWeightEstimate()

        for line in order_lines:
            product = products_by_id.get(line.product_id)
            if product is None:
                logger.debug(f"Skipping line {line.id}: product {line.product_id} unknown")
                continue

            line_weight = self._unit_weight(product, products_by_id) * line.quantity
            result.line_estimates.append(WeightEstimate(
                product_id=line.product_id,
                product_name=product.name,
                quantity=line.quantity,
                estimated_weight_kg=line_weight,
                variant_name=product.variant_name,
            ))
            result.total_weight_kg += line_weight

        return result

    def _unit_weight(self, product: Product, products_by_id: Dict[str, Product]) -> float:
        """Estimated weight of one unit of a product."""
        if product.is_variant and product.variant_name:
            parent = products_by_id.get(product.parent_product_id)
            weight_class = self.weight_table.get(parent.capacity_kg) if parent else None
            if weight_class is not None:
                if product.variant_name == "full":
                    return weight_class.full_weight_kg
                if product.variant_name == "empty":
                    return weight_class.empty_weight_kg
            logger.debug(
                f"No weight class for variant {product.id} ({product.variant_name}), "
                f"using {self.defaults.full_cylinder_kg}kg default"
            )
            return self.defaults.full_cylinder_kg

        if product.capacity_kg:
            tare = product.tare_weight_kg or self.defaults.tare_kg
            return product.capacity_kg + tare

        return self.defaults.full_cylinder_kg

    def inventory_item_weight(
        self,
        item: TruckInventoryItem,
        product: Optional[Product] = None,
    ) -> float:
        """
        Weight of an on-board inventory line from product data.

        Full cylinders weigh capacity + tare and empties weigh the tare when the
        product records both; otherwise the 27/14 kg defaults apply.

        Args:
            item: Inventory line
            product: Product of the line, if known

        Returns:
            Weight in kg
        """
        if product is not None and product.capacity_kg and product.tare_weight_kg:
            return (
                item.qty_full * (product.capacity_kg + product.tare_weight_kg)
                + item.qty_empty * product.tare_weight_kg
            )
        return default_item_weight(item.qty_full, item.qty_empty, defaults=self.defaults)

    def with_computed_weights(
        self,
        items: Iterable[TruckInventoryItem],
        products: Iterable[Product],
    ) -> List[TruckInventoryItem]:
        """
        Return copies of inventory lines with ``weight_kg`` filled from product data.

        Args:
            items: Inventory lines as stored
            products: Products referenced by the lines

        Returns:
            New inventory items with weights set
        """
        products_by_id = {p.id: p for p in products}
        weighted = []
        for item in items:
            product = products_by_id.get(item.product_id)
            weighted.append(item.model_copy(update={
                "weight_kg": self.inventory_item_weight(item, product),
                "product_name": item.product_name or (product.name if product else "Unknown Product"),
            }))
        return weighted

"""Order data models, read-only for the capacity core."""

from datetime import date as Date
from typing import Optional
from pydantic import BaseModel, Field


class OrderLine(BaseModel):
    """A product and quantity on an order."""
    id: str = Field(..., description="Order line identifier")
    order_id: str = Field(..., description="Owning order ID")
    product_id: str = Field(..., description="Product ID")
    quantity: float = Field(..., description="Quantity of units", ge=0)
    unit_price: float = Field(default=0.0, description="Price per unit", ge=0)


class Order(BaseModel):
    """
    Customer order.

    The capacity core only reads the id, customer and status; weight comes from
    the order's lines through the weight estimator.
    """
    id: str = Field(..., description="Unique order identifier")
    customer_id: str = Field(..., description="Customer ID")
    status: str = Field(default="confirmed", description="Order status")
    delivery_date: Optional[Date] = Field(None, description="Requested delivery date")
    total_amount: float = Field(default=0.0, description="Order total", ge=0)

    def __str__(self) -> str:
        """String representation."""
        return f"Order {self.id} for {self.customer_id} ({self.status})"

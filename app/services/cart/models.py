"""Cart models."""
from typing import List
from pydantic import BaseModel, Field


class CustomizationRef(BaseModel):
    """Identifies a customization; only the id takes part in cart keys."""

    id: str


class CartCustomization(CustomizationRef):
    """A chosen customization (topping, side, size...)."""

    name: str
    price: float = 0.0
    type: str = ""


class CartItem(BaseModel):
    """A cart line: one menu item with one exact set of customizations."""

    id: str  # Menu item id
    name: str
    price: float  # Unit price before customizations
    image_url: str = ""
    quantity: int = Field(default=1, ge=1)
    customizations: List[CartCustomization] = []

    @property
    def unit_total(self) -> float:
        """Unit price including customizations."""
        return self.price + sum(c.price for c in self.customizations)

    @property
    def line_total(self) -> float:
        return self.quantity * self.unit_total

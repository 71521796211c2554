"""Client-side cart store."""
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from app.services.cart.models import CartItem, CustomizationRef

logger = logging.getLogger(__name__)

CartKey = Tuple[str, Tuple[str, ...]]


def customization_key(customizations: Optional[Sequence[CustomizationRef]]) -> Tuple[str, ...]:
    """Stable key for a customization set; selection order does not matter."""
    if not customizations:
        return ()
    return tuple(sorted(c.id for c in customizations))


def cart_key(item_id: str, customizations: Optional[Sequence[CustomizationRef]]) -> CartKey:
    """Identity of a cart line."""
    return item_id, customization_key(customizations)


class CartStore:
    """Ordered cart lines keyed by menu item id and customization set.

    Dicts keep insertion order, so lines display in the order they were
    first added.
    """

    def __init__(self):
        self._lines: Dict[CartKey, CartItem] = {}

    @property
    def items(self) -> List[CartItem]:
        """Snapshot of the cart lines in display order."""
        return [line.model_copy(deep=True) for line in self._lines.values()]

    def add_item(self, item: CartItem) -> None:
        """Add an item, merging into an existing line with the same key."""
        key = cart_key(item.id, item.customizations)
        existing = self._lines.get(key)
        if existing is not None:
            existing.quantity += item.quantity
        else:
            self._lines[key] = item.model_copy(deep=True)
        logger.debug(f"Added {item.quantity}x {item.name} to cart")

    def remove_item(self, item_id: str, customizations: Optional[Sequence[CustomizationRef]] = None) -> None:
        """Remove a line regardless of its quantity."""
        self._lines.pop(cart_key(item_id, customizations), None)

    def increase_qty(self, item_id: str, customizations: Optional[Sequence[CustomizationRef]] = None) -> None:
        """Increase the quantity of a line by one."""
        line = self._lines.get(cart_key(item_id, customizations))
        if line is not None:
            line.quantity += 1

    def decrease_qty(self, item_id: str, customizations: Optional[Sequence[CustomizationRef]] = None) -> None:
        """Decrease the quantity of a line by one, removing it at zero."""
        key = cart_key(item_id, customizations)
        line = self._lines.get(key)
        if line is None:
            return
        if line.quantity <= 1:
            del self._lines[key]
        else:
            line.quantity -= 1

    def clear_cart(self) -> None:
        """Empty the cart."""
        self._lines.clear()

    def get_total_items(self) -> int:
        """Sum of quantities across lines."""
        return sum(line.quantity for line in self._lines.values())

    def get_total_price(self) -> float:
        """Sum of quantity times unit price plus customizations."""
        return sum(line.line_total for line in self._lines.values())

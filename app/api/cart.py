"""Cart API endpoints."""
import logging
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import List

from app.core.dependencies import get_cart_store
from app.services.cart.models import CartItem, CustomizationRef
from app.services.cart.store import CartStore

router = APIRouter()
logger = logging.getLogger(__name__)


class CartLineRef(BaseModel):
    """Identifies a cart line."""
    id: str
    customizations: List[CustomizationRef] = []


class CartResponse(BaseModel):
    """Cart contents and totals."""
    items: List[CartItem]
    total_items: int
    total_price: float


def _cart_response(cart: CartStore) -> CartResponse:
    return CartResponse(
        items=cart.items,
        total_items=cart.get_total_items(),
        total_price=round(cart.get_total_price(), 2),
    )


@router.get("/api/cart", response_model=CartResponse)
async def get_cart(cart: CartStore = Depends(get_cart_store)):
    """Get the cart."""
    return _cart_response(cart)


@router.post("/api/cart/items", response_model=CartResponse)
async def add_item(item: CartItem, cart: CartStore = Depends(get_cart_store)):
    """Add an item to the cart."""
    logger.info(f"[CART] Add {item.quantity}x {item.id}")
    cart.add_item(item)
    return _cart_response(cart)


@router.delete("/api/cart/items", response_model=CartResponse)
async def remove_item(line: CartLineRef, cart: CartStore = Depends(get_cart_store)):
    """Remove a line from the cart."""
    logger.info(f"[CART] Remove {line.id}")
    cart.remove_item(line.id, line.customizations)
    return _cart_response(cart)


@router.post("/api/cart/items/increase", response_model=CartResponse)
async def increase_qty(line: CartLineRef, cart: CartStore = Depends(get_cart_store)):
    """Increase the quantity of a line."""
    cart.increase_qty(line.id, line.customizations)
    return _cart_response(cart)


@router.post("/api/cart/items/decrease", response_model=CartResponse)
async def decrease_qty(line: CartLineRef, cart: CartStore = Depends(get_cart_store)):
    """Decrease the quantity of a line."""
    cart.decrease_qty(line.id, line.customizations)
    return _cart_response(cart)


@router.delete("/api/cart", response_model=CartResponse)
async def clear_cart(cart: CartStore = Depends(get_cart_store)):
    """Empty the cart."""
    logger.info("[CART] Cleared")
    cart.clear_cart()
    return _cart_response(cart)

"""Health check endpoint."""
import logging
from fastapi import APIRouter, Depends, Request

from app.core.container import ClientContainer
from app.core.dependencies import get_container

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(request: Request, container: ClientContainer = Depends(get_container)):
    """Health check with the auth and cart state at a glance."""
    logger.debug(
        f"[HEALTH] Health check requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    return {
        "status": "healthy",
        "auth": container.auth.status.value,
        "cart_items": container.cart.get_total_items(),
    }

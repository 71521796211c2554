"""Menu API endpoints."""
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from typing import List, Optional

from app.core.dependencies import get_menu_repository, get_navigation_state
from app.services.menu.base import CatalogError, Category, MenuItem
from app.services.menu.repository import MenuRepository
from app.services.navigation.state import NavigationState

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/api/menu", response_model=List[MenuItem])
async def get_menu(
    request: Request,
    category: Optional[str] = None,
    query: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=1),
    menu_repository: MenuRepository = Depends(get_menu_repository),
    navigation: NavigationState = Depends(get_navigation_state),
):
    """Get menu items; without an explicit query the committed search query is used."""
    logger.info(
        f"[MENU] Request received - Client: {request.client.host if request.client else 'unknown'}"
    )
    try:
        if query is None:
            items = await menu_repository.get_menu_for_navigation(
                navigation, category=category, limit=limit
            )
        else:
            items = await menu_repository.get_menu(category=category, query=query, limit=limit)
    except CatalogError as e:
        logger.error(f"[MENU] Error fetching menu - {e}")
        raise HTTPException(status_code=502, detail=f"Error fetching menu: {e}")

    logger.info(f"[MENU] Menu loaded - {len(items)} items")
    return items


@router.get("/api/categories", response_model=List[Category])
async def get_categories(menu_repository: MenuRepository = Depends(get_menu_repository)):
    """Get all categories."""
    try:
        return await menu_repository.get_categories()
    except CatalogError as e:
        logger.error(f"[MENU] Error fetching categories - {e}")
        raise HTTPException(status_code=502, detail=f"Error fetching categories: {e}")

"""Menu repository."""
from typing import List, Optional
from app.services.menu.base import Category, MenuItem, MenuProvider
from app.services.navigation.state import NavigationState


class MenuRepository:
    """Repository for menu operations."""

    def __init__(self, provider: MenuProvider):
        self.provider = provider

    async def get_menu(
        self,
        category: Optional[str] = None,
        query: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[MenuItem]:
        """Get menu items."""
        return await self.provider.get_menu(category=category, query=query, limit=limit)

    async def get_categories(self) -> List[Category]:
        """Get categories."""
        return await self.provider.get_categories()

    async def get_menu_for_navigation(
        self,
        navigation: NavigationState,
        category: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[MenuItem]:
        """Get menu items for the query currently committed to navigation state."""
        return await self.get_menu(
            category=category or navigation.get("category"),
            query=navigation.get("query"),
            limit=limit,
        )

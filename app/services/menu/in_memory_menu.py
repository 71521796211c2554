"""In-memory menu provider."""
import yaml
from pathlib import Path
from typing import List, Optional
from app.services.menu.base import Category, MenuItem, MenuProvider


class InMemoryMenuProvider(MenuProvider):
    """In-memory menu provider using YAML configuration."""

    def __init__(self, menu_file: Optional[str] = None):
        """Initialize with optional menu file path."""
        if menu_file is None:
            menu_file = Path(__file__).parent / "data" / "menu.yaml"
        self.menu_file = Path(menu_file)
        self._items: Optional[List[MenuItem]] = None
        self._categories: Optional[List[Category]] = None

    async def _load_menu(self) -> None:
        """Load menu from YAML file."""
        if self._items is not None:
            return
        if not self.menu_file.exists():
            # Default menu if file doesn't exist
            self._categories = [
                Category(id="burgers", name="Burgers", description="Grilled burgers"),
                Category(id="sides", name="Sides", description="Things on the side"),
            ]
            self._items = [
                MenuItem(
                    id="classic-cheeseburger",
                    name="Classic Cheeseburger",
                    price=25.99,
                    description="Beef patty with cheese and lettuce",
                    calories=550,
                    protein=25,
                    rating=4.5,
                    type="burgers",
                    category="burgers",
                ),
                MenuItem(
                    id="loaded-fries",
                    name="Loaded Fries",
                    price=9.99,
                    description="Fries with cheese and bacon",
                    calories=480,
                    protein=12,
                    rating=4.2,
                    type="sides",
                    category="sides",
                ),
            ]
        else:
            with open(self.menu_file, "r") as f:
                data = yaml.safe_load(f) or {}
            self._categories = [Category(**cat) for cat in data.get("categories", [])]
            self._items = [MenuItem(**item) for item in data.get("items", [])]

    async def get_menu(
        self,
        category: Optional[str] = None,
        query: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[MenuItem]:
        """Get menu items matching the category and name query."""
        await self._load_menu()
        items = self._items
        if category:
            items = [item for item in items if item.category == category]
        if query:
            query_lower = query.lower().strip()
            items = [item for item in items if query_lower in item.name.lower()]
        if limit:
            items = items[:limit]
        return list(items)

    async def get_categories(self) -> List[Category]:
        """Get all categories."""
        await self._load_menu()
        return list(self._categories)

"""Menu provider backed by the backend tables API."""
import logging
from typing import Any, Dict, List, Optional

from app.core.config import Settings
from app.services.backend.client import BackendClient, BackendError
from app.services.backend.queries import Query
from app.services.menu.base import CatalogError, Category, MenuItem, MenuProvider

logger = logging.getLogger(__name__)


def resolve_image_url(image_url: str, endpoint: str, bucket_id: str, project_id: str) -> str:
    """Turn a stored file id into a public view URL; full URLs pass through."""
    if not image_url or image_url.startswith("http"):
        return image_url
    base = endpoint.rstrip("/")
    if base.endswith("/v1"):
        base = base[: -len("/v1")]
    return f"{base}/storage/buckets/{bucket_id}/files/{image_url}/view?project={project_id}"


class BackendMenuProvider(MenuProvider):
    """Fetches menu rows and categories from the backend."""

    def __init__(self, client: BackendClient, settings: Settings):
        self.client = client
        self.settings = settings

    def _menu_item_from_row(self, row: Dict[str, Any]) -> MenuItem:
        category = row.get("categories")
        if isinstance(category, dict):
            category = category.get("$id")
        return MenuItem(
            id=row["$id"],
            name=row["name"],
            price=row["price"],
            image_url=resolve_image_url(
                row.get("image_url", ""),
                self.settings.appwrite_endpoint,
                self.settings.appwrite_bucket_id,
                self.settings.appwrite_project_id,
            ),
            description=row.get("description"),
            calories=row.get("calories"),
            protein=row.get("protein"),
            rating=row.get("rating"),
            type=row.get("type"),
            category=category,
        )

    async def get_menu(
        self,
        category: Optional[str] = None,
        query: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[MenuItem]:
        """Get menu items from the menu table."""
        queries = []
        if category:
            queries.append(Query.equal("categories", category))
        if query:
            queries.append(Query.search("name", query))
        if limit:
            queries.append(Query.limit(limit))

        try:
            result = await self.client.list_rows(self.settings.menu_table_id, queries=queries)
        except BackendError as e:
            logger.error(f"Error fetching menu: {e}", exc_info=True)
            raise CatalogError(e.message or "Failed to fetch menu") from e

        return [self._menu_item_from_row(row) for row in result.get("rows", [])]

    async def get_categories(self) -> List[Category]:
        """Get all rows of the categories table."""
        try:
            result = await self.client.list_rows(self.settings.categories_table_id)
        except BackendError as e:
            logger.error(f"Error fetching categories: {e}", exc_info=True)
            raise CatalogError(e.message or "Failed to fetch categories") from e

        return [
            Category(
                id=row["$id"],
                name=row["name"],
                description=row.get("description"),
            )
            for row in result.get("rows", [])
        ]

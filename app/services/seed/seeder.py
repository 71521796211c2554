"""Backend seeding with sample data."""
import asyncio
import logging
from pathlib import Path
from typing import Dict, List, Optional

import httpx
import yaml
from pydantic import BaseModel

from app.core.config import Settings
from app.services.backend.client import BackendClient, BackendError

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).parent / "data" / "seed.yaml"


class SeedError(Exception):
    """Raised when seeding fails."""


class SeedCategory(BaseModel):
    name: str
    description: str = ""


class SeedCustomization(BaseModel):
    name: str
    price: float
    type: str  # topping, side, size, crust...


class SeedMenuItem(BaseModel):
    name: str
    description: str = ""
    image_url: str
    price: float
    rating: float = 0.0
    calories: int = 0
    protein: int = 0
    category_name: str
    customizations: List[str] = []


class SeedData(BaseModel):
    """Sample data to load into the backend."""

    categories: List[SeedCategory] = []
    customizations: List[SeedCustomization] = []
    menu: List[SeedMenuItem] = []


class SeedSummary(BaseModel):
    categories: int
    customizations: int
    menu_items: int


def load_seed_data(path: Optional[str] = None) -> SeedData:
    """Load seed data from YAML."""
    seed_file = Path(path) if path else DEFAULT_SEED_FILE
    with open(seed_file, "r") as f:
        data = yaml.safe_load(f) or {}
    return SeedData(**data)


class Seeder:
    """Clears and repopulates the catalog tables and image bucket.

    Calls are strictly sequential, with fixed pauses between them to stay
    under the backend's rate limits.
    """

    def __init__(
        self,
        client: BackendClient,
        settings: Settings,
        downloader: Optional[httpx.AsyncClient] = None,
    ):
        self.client = client
        self.settings = settings
        self.downloader = downloader

    async def _wait(self, seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)

    async def clear_table(self, table_id: str, table_name: str) -> int:
        """Delete every row of a table."""
        logger.info(f"Clearing {table_name} table...")
        try:
            result = await self.client.list_rows(table_id, queries=[])
            rows = result.get("rows", [])
            logger.info(f"Found {len(rows)} rows to delete in {table_name}")
            for row in rows:
                await self.client.delete_row(table_id, row["$id"])
                logger.debug(f"Deleted {table_name} row: {row['$id']}")
                await self._wait(self.settings.seed_delete_delay)
        except BackendError as e:
            logger.error(f"Failed to clear {table_name}: {e}", exc_info=True)
            raise
        logger.info(f"{table_name} cleared")
        return len(rows)

    async def clear_storage(self) -> int:
        """Delete every file of the bucket."""
        logger.info("Clearing storage bucket...")
        result = await self.client.list_files()
        files = result.get("files", [])
        for file in files:
            await self.client.delete_file(file["$id"])
            logger.debug(f"Deleted file: {file['$id']}")
            await self._wait(self.settings.seed_delete_delay)
        logger.info("Storage cleared")
        return len(files)

    async def upload_image(self, image_url: str) -> str:
        """Download an image and re-upload it to the bucket; return its view URL."""
        file_name = image_url.rstrip("/").split("/")[-1] or "image.png"
        try:
            if self.downloader is not None:
                response = await self.downloader.get(image_url, follow_redirects=True)
            else:
                async with httpx.AsyncClient() as downloader:
                    response = await downloader.get(image_url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise SeedError(f"Failed to download {image_url}: {e}") from e

        content_type = response.headers.get("content-type", "image/png").split(";")[0]
        uploaded = await self.client.create_file(file_name, response.content, content_type)
        logger.info(f"Uploaded file with ID: {uploaded['$id']}")
        return self.client.file_view_url(uploaded["$id"])

    async def seed(self, data: SeedData, clear: bool = True) -> SeedSummary:
        """Run the full seeding sequence."""
        s = self.settings
        try:
            logger.info("Starting seeding process...")
            logger.info(
                f"Data check: {len(data.categories)} categories, "
                f"{len(data.customizations)} customizations, {len(data.menu)} menu items"
            )

            if clear:
                logger.info("Step 1: Clearing all tables + storage...")
                await self.clear_table(s.menu_customizations_table_id, "menu_customizations")
                await self.clear_table(s.menu_table_id, "menu")
                await self.clear_table(s.customizations_table_id, "customizations")
                await self.clear_table(s.categories_table_id, "categories")
                await self.clear_storage()

            logger.info("Step 2: Creating categories...")
            category_map: Dict[str, str] = {}
            for cat in data.categories:
                row = await self.client.create_row(
                    s.categories_table_id,
                    data={"name": cat.name, "description": cat.description},
                )
                category_map[cat.name] = row["$id"]
                logger.info(f"Created category: {cat.name}")
                await self._wait(s.seed_create_delay)

            logger.info("Step 3: Creating customizations...")
            customization_map: Dict[str, str] = {}
            for cus in data.customizations:
                row = await self.client.create_row(
                    s.customizations_table_id,
                    data={"name": cus.name, "price": cus.price, "type": cus.type},
                )
                customization_map[cus.name] = row["$id"]
                logger.info(f"Created customization: {cus.name}")
                await self._wait(s.seed_create_delay)

            logger.info("Step 4: Creating menu items...")
            menu_map: Dict[str, str] = {}
            for item in data.menu:
                logger.info(f"Creating menu item: {item.name}")
                uploaded_image_url = await self.upload_image(item.image_url)

                row = await self.client.create_row(
                    s.menu_table_id,
                    data={
                        "name": item.name,
                        "description": item.description,
                        "image_url": uploaded_image_url,
                        "price": item.price,
                        "rating": item.rating,
                        "calories": item.calories,
                        "protein": item.protein,
                        "categories": category_map.get(item.category_name),
                    },
                )
                menu_map[item.name] = row["$id"]
                logger.info(f"Created menu item: {item.name}")

                for cus_name in item.customizations:
                    customization_id = customization_map.get(cus_name)
                    if customization_id is None:
                        logger.warning(f"Customization '{cus_name}' not found for {item.name}")
                        continue
                    await self.client.create_row(
                        s.menu_customizations_table_id,
                        data={"menu": row["$id"], "customizations": customization_id},
                    )
                    logger.info(f"Linked {item.name} with {cus_name}")
                    await self._wait(s.seed_link_delay)

                await self._wait(s.seed_item_delay)

            summary = SeedSummary(
                categories=len(category_map),
                customizations=len(customization_map),
                menu_items=len(menu_map),
            )
            logger.info(f"Seeding completed successfully: {summary.model_dump()}")
            return summary
        except (BackendError, SeedError) as e:
            logger.error(f"Seeding failed: {e}", exc_info=True)
            raise

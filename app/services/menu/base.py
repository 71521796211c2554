"""Menu provider interface."""
from abc import ABC, abstractmethod
from typing import List, Optional
from pydantic import BaseModel


class MenuItem(BaseModel):
    """Menu item model."""

    id: str
    name: str
    price: float
    image_url: str = ""
    description: Optional[str] = None
    calories: Optional[int] = None
    protein: Optional[int] = None
    rating: Optional[float] = None
    type: Optional[str] = None
    category: Optional[str] = None  # Category row id


class Category(BaseModel):
    """Category model."""

    id: str
    name: str
    description: Optional[str] = None


class CatalogError(Exception):
    """Raised when the catalog cannot be fetched."""


class MenuProvider(ABC):
    """Abstract base class for menu providers."""

    @abstractmethod
    async def get_menu(
        self,
        category: Optional[str] = None,
        query: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[MenuItem]:
        """Get menu items, optionally filtered by category and name query."""
        pass

    @abstractmethod
    async def get_categories(self) -> List[Category]:
        """Get all categories."""
        pass

"""Application configuration."""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Backend (Appwrite)
    appwrite_endpoint: str = "https://cloud.appwrite.io/v1"
    appwrite_project_id: str = ""
    appwrite_platform: str = "com.dev.food"
    appwrite_database_id: str = "68bdbcdf000ac963ba46"
    appwrite_bucket_id: str = "68c59ae80039d1cacf51"

    # Tables
    user_table_id: str = "user"
    categories_table_id: str = "categories"
    menu_table_id: str = "menu"
    customizations_table_id: str = "customizations"
    menu_customizations_table_id: str = "menu_customizations"

    # Catalog
    menu_source: str = "backend"  # backend or yaml
    menu_file: Optional[str] = None

    # Search
    search_debounce_seconds: float = 1.0

    # Seeding (seconds between backend calls)
    seed_data_file: Optional[str] = None
    seed_delete_delay: float = 0.1
    seed_create_delay: float = 0.2
    seed_link_delay: float = 0.1
    seed_item_delay: float = 0.3

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()

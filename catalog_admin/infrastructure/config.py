"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Authentication
    admin_api_key: str = "dev-admin-key-change-in-production"

    # Catalog defaults for newly created categories
    default_category_page_size: int = 6
    default_category_page_size_options: str = "6, 3, 9"

    # Admin grids
    default_grid_page_size: int = 15
    grid_page_sizes: str = "7, 15, 20, 50, 100"

    # Demo data loaded into the in-memory store on startup
    seed_demo_data: bool = True

    # Logging
    log_level: str = "INFO"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()

from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Widget Table API"
    app_env: str = "development"
    frontend_url: str = "http://localhost:3000"

    # Database (SQLite via aiosqlite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./widget_table_dev.db",
        alias="DATABASE_URL",
    )

    # Widget tables
    widget_per_page: int = Field(default=10, ge=1, alias="WIDGET_PER_PAGE")
    widget_max_per_page: int = Field(
        default=200, ge=1, le=1_000_000, alias="WIDGET_MAX_PER_PAGE",
    )  # upper bound for a widget's own per_page option

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()

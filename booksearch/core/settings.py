"""
Purpose:
- Centralized configuration using pydantic-settings.
- Reads from environment variables and optional .env file.
- Keeps the book file location and host/port tunable without code changes.
"""

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API host/port
    host: str = Field(default="0.0.0.0", description="Bind address for FastAPI/Uvicorn")
    port: int = Field(default=8000, description="Port for FastAPI/Uvicorn")

    app_title: str = Field(default="Book Search", description="Shown in the OpenAPI docs and the page <title>")
    log_level: str = Field(default="INFO", description="Level for the 'booksearch' logger")

    # Static record store: {"<title>": {"author": ..., "cover_url": ...}, ...}
    books_file: Path = Field(
        default=PACKAGE_DIR / "data" / "books.json",
        description="JSON file holding the searchable books (read on every request)"
    )

    # where the Jinja2 templates live
    templates_dir: Path = Field(default=PACKAGE_DIR / "templates")

settings = Settings()

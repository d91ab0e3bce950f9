from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Flat-file REST API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["*"]

    # JSON collections (relative to the working directory)
    data_dir: str = "data"
    users_file: str = "users.json"
    products_file: str = "products.json"
    seed_empty_collections: bool = True

    # Placeholder images
    max_image_dimension: int = 4096

    # Error envelope stack traces; None means "only in development"
    include_stack_trace: bool | None = None

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_storage: str = "INFO"          # JSON collection store
    log_level_access: str = "INFO"           # per-request access log

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"

    @property
    def show_stack_trace(self) -> bool:
        """Whether error responses carry the formatted traceback."""
        if self.include_stack_trace is None:
            return self.is_development
        return self.include_stack_trace


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()

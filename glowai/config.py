from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""
    database_url: str = "sqlite+aiosqlite:///./glowai.db"
    # "memory" serves the bundled sample catalog, "database" reads from database_url
    catalog_backend: str = "memory"
    log_level: str = "INFO"

    # How many ranked products a premium routine draws from
    routine_size: int = 8

    scan_max_image_mb: int = 6

    class Config:
        env_file = '.env'


@lru_cache
def get_settings() -> Settings:
    return Settings()

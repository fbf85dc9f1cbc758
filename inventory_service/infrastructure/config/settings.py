"""Application settings"""
from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Inventory Service API"
    APP_VERSION: str = "1.0.0"
    DESCRIPTION: str = "Simple inventory system for registering items."

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 3000

    # Storage
    CACHE_DIR: str = "cache"
    INVENTORY_FILE: str = "inventory.json"

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def cache_path(self) -> Path:
        """Cache directory holding the JSON store and uploaded photos"""
        return Path(self.CACHE_DIR)

    @property
    def inventory_path(self) -> Path:
        """Path of the JSON store file"""
        return self.cache_path / self.INVENTORY_FILE


settings = Settings()

"""
Centralized configuration management for the capability registry.
Loads environment variables and provides default configurations.
"""

import os
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Settings:
    """Application settings and configuration."""

    # Registry
    REGISTRY_MODE: str = os.getenv("REGISTRY_MODE", "strict")  # 'strict' or 'permissive'
    # Comma separated 'capability:discriminator' pairs that are never wired
    DISABLED_PROVIDERS: str = os.getenv("DISABLED_PROVIDERS", "")

    # Default discriminators used by the call-site services
    DEFAULT_RECORD_STORE: str = os.getenv("DEFAULT_RECORD_STORE", "memory")
    DEFAULT_LOG_SINK: str = os.getenv("DEFAULT_LOG_SINK", "console")
    DEFAULT_PRINTER: str = os.getenv("DEFAULT_PRINTER", "console")
    DEFAULT_SCANNER: str = os.getenv("DEFAULT_SCANNER", "flatbed")

    # File Paths
    RECORD_STORE_PATH: str = os.getenv("RECORD_STORE_PATH", "data/records.json")
    LOG_FILE_PATH: str = os.getenv("LOG_FILE_PATH", "logs/messages.log")

    # In-memory record store
    CACHE_TTL: int = int(os.getenv("CACHE_TTL", "86400"))  # 24 hours
    CACHE_MAXSIZE: int = int(os.getenv("CACHE_MAXSIZE", "1000"))

    # Redis Configuration
    REDIS_HOST: str = os.getenv("REDIS_HOST", "localhost")
    REDIS_PORT: int = int(os.getenv("REDIS_PORT", "6379"))
    REDIS_DB: int = int(os.getenv("REDIS_DB", "0"))
    REDIS_PASSWORD: Optional[str] = os.getenv("REDIS_PASSWORD")

    # Authentication
    AUTH_TOKENS: str = os.getenv("AUTH_TOKENS", "")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'

    @staticmethod
    def split_list(value: Optional[str]) -> List[str]:
        """Split a comma separated setting into trimmed, non-empty items."""
        if not value:
            return []
        return [item.strip() for item in value.split(",") if item.strip()]

    @classmethod
    def validate(cls) -> None:
        """Validate that configured values are usable."""
        if cls.REGISTRY_MODE.lower() not in ("strict", "permissive"):
            raise ValueError(f"Invalid REGISTRY_MODE: {cls.REGISTRY_MODE} (expected 'strict' or 'permissive')")

        malformed = [item for item in cls.split_list(cls.DISABLED_PROVIDERS) if item.count(":") != 1]
        if malformed:
            raise ValueError(f"Malformed DISABLED_PROVIDERS entries: {', '.join(malformed)}")

# Global settings instance
settings = Settings()

"""
Configuration settings for the User API
"""

import os
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Environment configuration
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

API_PREFIX = "/api/v1"

# The database port is not configurable
DB_PORT = 5432

REQUIRED_DB_VARIABLES = ("DB_HOST", "DB_USER", "DB_PASSWORD", "DB_NAME")


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection parameters for the users database"""
    host: str
    user: str
    password: str
    database: str
    port: int = DB_PORT

    @classmethod
    def from_env(cls) -> "DatabaseSettings":
        """Read and validate the DB_* environment variables"""
        missing = [name for name in REQUIRED_DB_VARIABLES if not os.getenv(name)]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")

        settings = cls(
            host=os.getenv("DB_HOST"),
            user=os.getenv("DB_USER"),
            password=os.getenv("DB_PASSWORD"),
            database=os.getenv("DB_NAME"),
        )
        logger.info(f"Database config - Host: {settings.host}:{settings.port}, Database: {settings.database}")
        return settings

    def __repr__(self) -> str:
        return (
            f"DatabaseSettings(host={self.host!r}, user={self.user!r}, "
            f"password='***', database={self.database!r}, port={self.port})"
        )

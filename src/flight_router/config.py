"""
Configuration module for the Flight Router.

Loads environment variables (optionally from a .env file) and provides
centralized configuration for the HTTP surface and logging.
"""

import logging
import os
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Config:
    """
    Application configuration class.

    Attributes:
        LOG_LEVEL: Root logging level name.
        CORS_ORIGINS: Origins allowed to call the HTTP API.
    """

    LOG_LEVEL: str = os.getenv("FLIGHT_ROUTER_LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS: List[str] = _split_origins(
        os.getenv("FLIGHT_ROUTER_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    )

    @classmethod
    def log_level(cls) -> int:
        """
        Numeric logging level.

        Raises:
            ValueError: If LOG_LEVEL is not a known level name.
        """
        level = logging.getLevelName(cls.LOG_LEVEL)
        if not isinstance(level, int):
            raise ValueError(
                f"Unknown log level '{cls.LOG_LEVEL}'. Check FLIGHT_ROUTER_LOG_LEVEL."
            )
        return level


def configure_logging() -> None:
    """Configure root logging from Config (entry points only)."""
    logging.basicConfig(
        level=Config.log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
